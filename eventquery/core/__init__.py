"""Event catalog models consumed by the search compiler."""

from .fields import FieldType, is_name_type
from .models import (
    ActionConfig,
    DeclarationFormConfig,
    EventConfig,
    FieldConfig,
    PageConfig,
    get_all_unique_fields,
)

__all__ = [
    "ActionConfig",
    "DeclarationFormConfig",
    "EventConfig",
    "FieldConfig",
    "FieldType",
    "PageConfig",
    "get_all_unique_fields",
    "is_name_type",
]
