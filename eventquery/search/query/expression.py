"""Structured search queries over registration events."""

from enum import Enum

import msgspec

from .criteria import (
    DataCriteria,
    Exact,
    LocationCriterion,
    RegisteredLocationCriterion,
    StatusCriterion,
    TemporalCriterion,
)


class Operator(str, Enum):
    """Top-level operators combining clauses."""

    AND = "and"
    OR = "or"


class QueryExpression(msgspec.Struct, frozen=True, kw_only=True, omit_defaults=True):
    """One search clause.

    Every member is optional and ``None`` means "not searched on". All
    present members are combined with a logical AND. Wire names follow
    the search payload, including the ``createAtLocation`` spelling.
    """

    event_type: str | None = msgspec.field(default=None, name="eventType")
    status: StatusCriterion | None = None
    tracking_id: Exact | None = msgspec.field(default=None, name="trackingId")
    registered_at: TemporalCriterion | None = msgspec.field(
        default=None, name="legalStatus.REGISTERED.createdAt"
    )
    # Only Exact is compiled; see ClauseCompiler
    registered_at_location: RegisteredLocationCriterion | None = msgspec.field(
        default=None, name="legalStatus.REGISTERED.createdAtLocation"
    )
    registration_number: Exact | None = msgspec.field(
        default=None, name="registrationNumber"
    )
    created_at: TemporalCriterion | None = msgspec.field(default=None, name="createdAt")
    updated_at: TemporalCriterion | None = msgspec.field(default=None, name="updatedAt")
    created_at_location: LocationCriterion | None = msgspec.field(
        default=None, name="createAtLocation"
    )
    updated_at_location: LocationCriterion | None = msgspec.field(
        default=None, name="updatedAtLocation"
    )
    data: DataCriteria | None = None

    @property
    def is_empty(self) -> bool:
        """Check if the clause searches on nothing."""
        return not any(
            getattr(self, name) is not None for name in self.__struct_fields__
        )


class QueryType(msgspec.Struct, frozen=True, kw_only=True):
    """A top-level search: an operator over an ordered list of clauses.

    ``type`` is kept as a plain string so that payloads with an unknown
    operator still decode; the assembler turns those into a query that
    matches nothing.
    """

    type: str
    clauses: tuple[QueryExpression, ...] = ()

    @classmethod
    def all_of(cls, *clauses: QueryExpression) -> "QueryType":
        """Build a conjunctive query."""
        return cls(type=Operator.AND.value, clauses=clauses)

    @classmethod
    def any_of(cls, *clauses: QueryExpression) -> "QueryType":
        """Build a disjunctive query."""
        return cls(type=Operator.OR.value, clauses=clauses)
