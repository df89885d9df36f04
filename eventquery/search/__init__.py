"""Search query compilation for registration events.

This module turns structured record searches into boolean query
documents for the search engine. It does not execute queries.

Main components:
- SearchPayloadParser: Payload decoding into typed queries
- QueryAssembler: Top-level AND/OR assembly
- ClauseCompiler: Record-level criteria of one clause
- DataFieldCompiler: Declaration-field criteria
- NameFieldClassifier: Name-field detection from the event catalog
"""

from .compiler import (
    ClauseCompiler,
    DataFieldCompiler,
    NameFieldClassifier,
    QueryAssembler,
    QueryDocument,
    compile_query,
    create_assembler,
    decode_field_id,
    encode_document,
    encode_field_id,
    name_field_ids,
)
from .errors import QueryError, SearchError, UnsupportedCriterionType
from .query import (
    AnyOf,
    Exact,
    Fuzzy,
    Operator,
    Proximity,
    QueryExpression,
    QueryType,
    Range,
    SearchPayloadParser,
    parse_catalog,
    parse_query,
)

__all__ = [
    # Compilation
    "compile_query",
    "create_assembler",
    "encode_document",
    "QueryAssembler",
    "ClauseCompiler",
    "DataFieldCompiler",
    "NameFieldClassifier",
    "QueryDocument",
    "name_field_ids",
    "encode_field_id",
    "decode_field_id",
    # Query models
    "Operator",
    "QueryType",
    "QueryExpression",
    "Exact",
    "Fuzzy",
    "AnyOf",
    "Range",
    "Proximity",
    # Parsing
    "SearchPayloadParser",
    "parse_query",
    "parse_catalog",
    # Errors
    "SearchError",
    "QueryError",
    "UnsupportedCriterionType",
]
