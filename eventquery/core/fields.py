"""Declaration field types used by event configurations."""

from enum import Enum, unique


@unique
class FieldType(Enum):
    """Form field types an event configuration may declare."""

    TEXT = "TEXT"
    NAME = "NAME"
    NUMBER = "NUMBER"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    ID = "ID"
    DATE = "DATE"
    DATE_RANGE = "DATE_RANGE"
    ADDRESS = "ADDRESS"
    LOCATION = "LOCATION"
    FACILITY = "FACILITY"
    OFFICE = "OFFICE"
    ADMINISTRATIVE_AREA = "ADMINISTRATIVE_AREA"
    SELECT = "SELECT"
    RADIO_GROUP = "RADIO_GROUP"
    CHECKBOX = "CHECKBOX"
    FILE = "FILE"
    SIGNATURE = "SIGNATURE"
    PARAGRAPH = "PARAGRAPH"
    DIVIDER = "DIVIDER"


def is_name_type(field_type: FieldType | str) -> bool:
    """Check whether a field type marks a person's name."""
    if isinstance(field_type, FieldType):
        return field_type is FieldType.NAME
    return field_type == FieldType.NAME.value
