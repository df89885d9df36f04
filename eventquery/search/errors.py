"""Exceptions raised while turning search payloads into queries."""

from rapidfuzz import fuzz, process


class SearchError(Exception):
    """Base exception for search-related errors."""


class QueryError(SearchError):
    """Error during search payload parsing or query compilation."""


class UnsupportedCriterionType(QueryError):
    """A declaration field carries a criterion of an unknown type.

    This aborts compilation of the whole query; no partial document is
    produced.

    Attributes:
        field_id: Declaration field id the criterion was given for
        tag: The offending criterion type tag
        suggestion: Closest supported tag, if one is similar enough
    """

    def __init__(self, field_id: str, tag: object, supported: tuple[str, ...] = ()):
        self.field_id = field_id
        self.tag = tag
        self.suggestion = suggest_tag(tag, supported)

        message = f"Unsupported query type: {tag!r} for field {field_id!r}"
        if self.suggestion:
            message += f" (did you mean {self.suggestion!r}?)"
        super().__init__(message)


def suggest_tag(tag: object, supported: tuple[str, ...]) -> str | None:
    """Suggest the supported tag closest to a misspelt one."""
    if not isinstance(tag, str) or not supported or tag in supported:
        return None

    match = process.extractOne(tag, supported, scorer=fuzz.ratio, score_cutoff=60)
    return match[0] if match else None
