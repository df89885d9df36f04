"""Compilation of structured searches into boolean query documents."""

from .assembler import (
    QueryAssembler,
    compile_query,
    create_assembler,
    encode_document,
)
from .classifier import NameFieldClassifier, name_field_ids
from .clause import ClauseCompiler
from .data import DataFieldCompiler
from .encoding import decode_field_id, encode_field_id
from .leaves import QueryDocument

__all__ = [
    "ClauseCompiler",
    "DataFieldCompiler",
    "NameFieldClassifier",
    "QueryAssembler",
    "QueryDocument",
    "compile_query",
    "create_assembler",
    "decode_field_id",
    "encode_document",
    "encode_field_id",
    "name_field_ids",
]
