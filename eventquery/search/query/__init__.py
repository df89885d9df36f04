"""Search query models and payload parsing."""

from .criteria import (
    AnyOf,
    DataCriteria,
    Exact,
    FieldCriterion,
    Fuzzy,
    LocationCriterion,
    Proximity,
    Range,
    RegisteredLocationCriterion,
    StatusCriterion,
    TemporalCriterion,
)
from .expression import Operator, QueryExpression, QueryType
from .parser import SearchPayloadParser, parse_catalog, parse_query

__all__ = [
    "AnyOf",
    "DataCriteria",
    "Exact",
    "FieldCriterion",
    "Fuzzy",
    "LocationCriterion",
    "Proximity",
    "Range",
    "RegisteredLocationCriterion",
    "StatusCriterion",
    "TemporalCriterion",
    "Operator",
    "QueryExpression",
    "QueryType",
    "SearchPayloadParser",
    "parse_catalog",
    "parse_query",
]
