"""Search criteria as msgspec tagged unions.

Every criterion is encoded as an object whose ``type`` key selects the
variant, e.g. ``{"type": "exact", "term": "Jon"}`` or
``{"type": "range", "gte": "2024-01-01", "lte": "2024-12-31"}``.
"""

from typing import Any, TypeAlias

import msgspec


class Exact(msgspec.Struct, frozen=True, tag="exact"):
    """Equality test."""

    term: str


class Fuzzy(msgspec.Struct, frozen=True, tag="fuzzy"):
    """Approximate equality with automatic edit tolerance."""

    term: str


class AnyOf(msgspec.Struct, frozen=True, tag="anyOf"):
    """Set-membership test."""

    terms: tuple[str, ...]


class Range(msgspec.Struct, frozen=True, tag="range"):
    """Inclusive bounded range."""

    gte: str
    lte: str


class Proximity(msgspec.Struct, frozen=True, tag="within"):
    """Geo-radius containment around a location."""

    location: str


FieldCriterion: TypeAlias = Exact | Fuzzy | AnyOf | Range
StatusCriterion: TypeAlias = Exact | AnyOf
LocationCriterion: TypeAlias = Exact | Proximity
RegisteredLocationCriterion: TypeAlias = Exact | Proximity | Range
TemporalCriterion: TypeAlias = Exact | Range
DataCriteria: TypeAlias = dict[str, FieldCriterion]

FIELD_CRITERIA: tuple[type[msgspec.Struct], ...] = (Exact, Fuzzy, AnyOf, Range)


def tag_of(criterion: Any) -> Any:
    """Get the type tag of a criterion.

    Works for criterion structs as well as raw mappings that have not
    been converted yet. Unknown objects report their class name.
    """
    if isinstance(criterion, msgspec.Struct):
        return criterion.__struct_config__.tag
    if isinstance(criterion, dict):
        return criterion.get("type")
    return type(criterion).__name__


def supported_tags(variants: tuple[type[msgspec.Struct], ...]) -> tuple[str, ...]:
    """Get the wire tags of a tuple of criterion classes."""
    return tuple(variant.__struct_config__.tag for variant in variants)
