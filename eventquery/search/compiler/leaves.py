"""Builders for leaf conditions of the boolean query DSL."""

from typing import Any, TypeAlias

QueryDocument: TypeAlias = dict[str, Any]

AUTO_FUZZINESS = "AUTO"
PROXIMITY_DISTANCE = "10km"
LOCATION_PATH = "location"


def term(path: str, value: Any) -> QueryDocument:
    """Equality test."""
    return {"term": {path: value}}


def terms(path: str, values: tuple[str, ...] | list[str]) -> QueryDocument:
    """Set-membership test."""
    return {"terms": {path: list(values)}}


def fuzzy_match(
    path: str, value: str, fuzziness: str = AUTO_FUZZINESS
) -> QueryDocument:
    """Approximate match with edit tolerance."""
    return {"match": {path: {"query": value, "fuzziness": fuzziness}}}


def inclusive_range(path: str, gte: Any, lte: Any) -> QueryDocument:
    """Range including both endpoints."""
    return {"range": {path: {"gte": gte, "lte": lte}}}


def within(location: str) -> QueryDocument:
    """Geo-radius test with the fixed search radius."""
    return {"geo_distance": {"distance": PROXIMITY_DISTANCE, LOCATION_PATH: location}}


def all_of(leaves: list[QueryDocument]) -> QueryDocument:
    """Conjunction."""
    return {"bool": {"must": leaves}}


def any_of(queries: list[QueryDocument]) -> QueryDocument:
    """Disjunction."""
    return {"bool": {"should": queries}}


def match_none() -> QueryDocument:
    """Query that matches no document."""
    return {"bool": {"must_not": {"match_all": {}}}}
