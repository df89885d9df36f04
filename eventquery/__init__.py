"""Compiler from structured event searches to search engine queries."""

from eventquery.search import compile_query, parse_catalog, parse_query

__all__ = ["compile_query", "parse_catalog", "parse_query"]

__version__ = "1.0.0"
