"""Compilation of a single search clause."""

import logging
from collections.abc import Sequence

from eventquery.core.models import EventConfig

from ..query.criteria import AnyOf, Exact, Proximity, Range
from ..query.expression import QueryExpression
from . import leaves
from .data import DataFieldCompiler

logger = logging.getLogger(__name__)

REGISTERED_AT = "legalStatuses.REGISTERED.createdAt"
REGISTERED_AT_LOCATION = "legalStatuses.REGISTERED.createdAtLocation"
REGISTRATION_NUMBER = "legalStatuses.REGISTERED.registrationNumber"


class ClauseCompiler:
    """Compiles one clause into the leaf conditions of its conjunction.

    Members are processed in a fixed order and each present member adds
    exactly one leaf, except ``data`` which adds one leaf per field.
    """

    def __init__(self, data_compiler: DataFieldCompiler | None = None):
        self.data_compiler = data_compiler or DataFieldCompiler()

    def compile(
        self, clause: QueryExpression, catalog: Sequence[EventConfig]
    ) -> list[leaves.QueryDocument]:
        """Compile a clause.

        Raises:
            UnsupportedCriterionType: From the declaration-field criteria
        """
        if clause.is_empty:
            logger.debug("Empty clause contributes no conditions")
            return []

        must: list[leaves.QueryDocument] = []

        if clause.event_type is not None:
            must.append(leaves.term("type", clause.event_type))

        if clause.status is not None:
            if isinstance(clause.status, AnyOf):
                must.append(leaves.terms("status", clause.status.terms))
            else:
                must.append(leaves.term("status", clause.status.term))

        if clause.tracking_id is not None:
            must.append(leaves.term("trackingId", clause.tracking_id.term))

        self._add_temporal(must, REGISTERED_AT, clause.registered_at)

        if clause.registered_at_location is not None:
            if isinstance(clause.registered_at_location, Exact):
                location = clause.registered_at_location.term
                must.append(leaves.term(REGISTERED_AT_LOCATION, location))
            else:
                logger.debug(
                    "Ignoring non-exact criterion on registration location: "
                    f"{clause.registered_at_location!r}"
                )

        if clause.registration_number is not None:
            must.append(
                leaves.term(REGISTRATION_NUMBER, clause.registration_number.term)
            )

        self._add_temporal(must, "createdAt", clause.created_at)
        self._add_temporal(must, "updatedAt", clause.updated_at)
        self._add_location(must, "createdAtLocation", clause.created_at_location)
        self._add_location(must, "updatedAtLocation", clause.updated_at_location)

        if clause.data is not None:
            must.extend(self.data_compiler.compile(clause.data, catalog))

        return must

    def _add_temporal(
        self,
        must: list[leaves.QueryDocument],
        path: str,
        criterion: Exact | Range | None,
    ) -> None:
        if criterion is None:
            return
        if isinstance(criterion, Exact):
            must.append(leaves.term(path, criterion.term))
        else:
            must.append(leaves.inclusive_range(path, criterion.gte, criterion.lte))

    def _add_location(
        self,
        must: list[leaves.QueryDocument],
        path: str,
        criterion: Exact | Proximity | None,
    ) -> None:
        if criterion is None:
            return
        if isinstance(criterion, Exact):
            must.append(leaves.term(path, criterion.term))
        else:
            must.append(leaves.within(criterion.location))
