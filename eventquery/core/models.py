"""Event configuration models.

An event configuration describes one civil-registration event type
(birth, death, ...) and the form fields collected for it. The search
compiler only reads these models: it never creates or mutates them.

Key components:
- FieldConfig: a single declaration field with its id and type
- PageConfig: an ordered group of fields on the declaration form
- ActionConfig: an event action that may carry additional fields
- EventConfig: the full configuration for one event type
"""

from collections.abc import Iterator
from typing import Any

import msgspec

from .fields import FieldType


class FieldConfig(msgspec.Struct, frozen=True, kw_only=True):
    """A single declaration field."""

    id: str
    type: FieldType
    label: str | None = None
    required: bool = False


class PageConfig(msgspec.Struct, frozen=True, kw_only=True):
    """One page of the declaration form."""

    id: str
    title: str | None = None
    fields: tuple[FieldConfig, ...] = ()


class DeclarationFormConfig(msgspec.Struct, frozen=True, kw_only=True):
    """The declaration form of an event."""

    pages: tuple[PageConfig, ...] = ()


class ActionConfig(msgspec.Struct, frozen=True, kw_only=True):
    """An action on an event, such as REGISTER or PRINT_CERTIFICATE."""

    type: str
    label: str | None = None
    fields: tuple[FieldConfig, ...] = ()


class EventConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Configuration of one event type.

    Collections are tuples so that configurations are hashable and can
    be used as cache keys by the field classifier.
    """

    id: str
    label: str | None = None
    declaration: DeclarationFormConfig = msgspec.field(
        default_factory=DeclarationFormConfig
    )
    actions: tuple[ActionConfig, ...] = ()

    def iter_fields(self) -> Iterator[FieldConfig]:
        """Yield every field of the event, declaration pages first."""
        for page in self.declaration.pages:
            yield from page.fields
        for action in self.actions:
            yield from action.fields

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventConfig":
        """Create EventConfig from its dictionary representation."""
        return msgspec.convert(data, cls)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        data = msgspec.to_builtins(self)
        return {k: v for k, v in data.items() if v is not None}


def get_all_unique_fields(event_config: EventConfig) -> list[FieldConfig]:
    """Get the fields of an event, unique by id.

    When a field id appears more than once the first occurrence wins.

    Args:
        event_config: Event configuration to read.

    Returns:
        Fields in declaration order.
    """
    seen: set[str] = set()
    unique = []

    for field in event_config.iter_fields():
        if field.id in seen:
            continue
        seen.add(field.id)
        unique.append(field)

    return unique
