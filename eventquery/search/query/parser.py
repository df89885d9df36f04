"""Parser for search payloads and event catalogs.

Payloads may be JSON (``bytes``/``str``) or builtins that were already
decoded by a web framework. Declaration-field criteria are checked one
by one so that an unknown criterion type is reported as
:class:`UnsupportedCriterionType` naming the field, rather than as a
generic validation failure.
"""

import logging
from collections.abc import Iterable
from typing import Any

import msgspec

from eventquery.core.models import EventConfig

from ..errors import QueryError, UnsupportedCriterionType
from .criteria import FIELD_CRITERIA, FieldCriterion, supported_tags, tag_of
from .expression import QueryExpression, QueryType

logger = logging.getLogger(__name__)

DATA_TAGS = supported_tags(FIELD_CRITERIA)


class SearchPayloadParser:
    """Parser turning raw search payloads into typed queries."""

    def __init__(self):
        self._json_decoder = msgspec.json.Decoder()

    def parse(self, payload: bytes | str | dict[str, Any]) -> QueryType:
        """Parse a search payload.

        Args:
            payload: JSON document or decoded mapping with ``type`` and
                ``clauses`` keys

        Returns:
            Typed QueryType

        Raises:
            UnsupportedCriterionType: If a data criterion has an unknown type
            QueryError: If the payload is otherwise malformed
        """
        raw = self._load(payload)
        if not isinstance(raw, dict):
            raise QueryError("Search payload must be an object")

        clauses = raw.get("clauses", [])
        if not isinstance(clauses, list):
            raise QueryError("Search payload 'clauses' must be an array")

        try:
            operator = msgspec.convert(raw.get("type"), str)
        except msgspec.ValidationError as e:
            raise QueryError(f"Invalid search operator: {e}") from e

        parsed = tuple(
            self.parse_clause(clause, index) for index, clause in enumerate(clauses)
        )
        logger.debug(f"Parsed {operator!r} search with {len(parsed)} clause(s)")
        return QueryType(type=operator, clauses=parsed)

    def parse_clause(self, raw: Any, index: int = 0) -> QueryExpression:
        """Parse a single clause mapping."""
        if not isinstance(raw, dict):
            raise QueryError(f"Clause {index} must be an object")

        clause_fields = dict(raw)
        raw_data = clause_fields.pop("data", None)

        try:
            clause = msgspec.convert(clause_fields, QueryExpression)
        except msgspec.ValidationError as e:
            raise QueryError(f"Invalid clause {index}: {e}") from e

        if raw_data is None:
            return clause

        return msgspec.structs.replace(clause, data=self.parse_data(raw_data))

    def parse_data(self, raw: Any) -> dict[str, FieldCriterion]:
        """Parse declaration-field criteria keyed by field id."""
        if not isinstance(raw, dict):
            raise QueryError("Clause 'data' must be an object")

        data = {}
        for field_id, criterion in raw.items():
            data[field_id] = self.parse_criterion(field_id, criterion)
        return data

    def parse_criterion(self, field_id: str, raw: Any) -> FieldCriterion:
        """Parse one declaration-field criterion."""
        tag = tag_of(raw)
        if tag not in DATA_TAGS:
            raise UnsupportedCriterionType(field_id, tag, DATA_TAGS)

        try:
            return msgspec.convert(raw, FieldCriterion)
        except msgspec.ValidationError as e:
            raise QueryError(f"Invalid criterion for field {field_id!r}: {e}") from e

    def _load(self, payload: bytes | str | dict[str, Any]) -> Any:
        if isinstance(payload, (bytes, str)):
            try:
                return self._json_decoder.decode(payload)
            except msgspec.DecodeError as e:
                raise QueryError(f"Invalid JSON in search payload: {e}") from e
        return payload


def parse_query(payload: bytes | str | dict[str, Any]) -> QueryType:
    """Parse a search payload into a QueryType."""
    return SearchPayloadParser().parse(payload)


def parse_catalog(
    payload: bytes | str | Iterable[dict[str, Any]],
) -> tuple[EventConfig, ...]:
    """Parse a list of event configurations.

    Raises:
        QueryError: If the catalog is malformed
    """
    try:
        if isinstance(payload, (bytes, str)):
            return msgspec.json.decode(payload, type=tuple[EventConfig, ...])
        return msgspec.convert(list(payload), tuple[EventConfig, ...])
    except (msgspec.ValidationError, msgspec.DecodeError) as e:
        raise QueryError(f"Invalid event catalog: {e}") from e
