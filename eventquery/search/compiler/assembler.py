"""Assembly of top-level search queries into boolean query documents."""

import logging
from collections.abc import Callable, Iterable

import msgspec

from eventquery.config import Settings
from eventquery.core.models import EventConfig, FieldConfig, get_all_unique_fields

from ..query.expression import Operator, QueryType
from . import leaves
from .classifier import NameFieldClassifier
from .clause import ClauseCompiler
from .data import DataFieldCompiler
from .encoding import encode_field_id as default_encoder

logger = logging.getLogger(__name__)


class QueryAssembler:
    """Combines compiled clauses under the top-level operator.

    For ``and`` the leaves of all clauses are flattened into a single
    conjunction, so clause boundaries disappear. For ``or`` every clause
    keeps its own conjunction and the conjunctions are combined in a
    disjunction. Any other operator yields a query matching nothing.
    """

    def __init__(self, clause_compiler: ClauseCompiler | None = None):
        self.clause_compiler = clause_compiler or ClauseCompiler()

    def compile(
        self, query: QueryType, catalog: Iterable[EventConfig]
    ) -> leaves.QueryDocument:
        """Compile a query into a boolean query document.

        Args:
            query: Operator and ordered clauses
            catalog: Event configurations for name-field classification

        Returns:
            Query document in the search engine's DSL

        Raises:
            UnsupportedCriterionType: If a declaration-field criterion
                has an unknown type
        """
        configs = tuple(catalog)

        if query.type == Operator.AND:
            must = [
                leaf
                for clause in query.clauses
                for leaf in self.clause_compiler.compile(clause, configs)
            ]
            logger.debug(
                f"Compiled AND query of {len(query.clauses)} clause(s) "
                f"into {len(must)} condition(s)"
            )
            return leaves.all_of(must)

        if query.type == Operator.OR:
            should = [
                leaves.all_of(self.clause_compiler.compile(clause, configs))
                for clause in query.clauses
            ]
            logger.debug(f"Compiled OR query of {len(should)} clause(s)")
            return leaves.any_of(should)

        logger.warning(f"Unknown search operator {query.type!r}, matching nothing")
        return leaves.match_none()


def create_assembler(
    settings: Settings | None = None,
    encode_field_id: Callable[[str], str] = default_encoder,
    fields_of: Callable[[EventConfig], Iterable[FieldConfig]] = get_all_unique_fields,
) -> QueryAssembler:
    """Create an assembler with its full compiler chain.

    Args:
        settings: Compiler settings, defaults if omitted
        encode_field_id: Encoder for declaration field ids
        fields_of: Lookup of the fields of one event configuration

    Returns:
        Configured QueryAssembler
    """
    settings = settings or Settings()
    classifier = NameFieldClassifier(fields_of, cache=settings.cache_name_fields)
    data_compiler = DataFieldCompiler(classifier, encode_field_id, settings)
    return QueryAssembler(ClauseCompiler(data_compiler))


_default_assembler: QueryAssembler | None = None


def compile_query(
    query: QueryType,
    catalog: Iterable[EventConfig],
    *,
    settings: Settings | None = None,
    encode_field_id: Callable[[str], str] | None = None,
) -> leaves.QueryDocument:
    """Compile a search query into a boolean query document.

    Without explicit settings or encoder a shared default assembler is
    used, so name-field classifications are memoized across calls.

    Configuration files and ``EVENTQUERY_*`` variables are not read
    here; pass ``settings=load_settings()`` to apply them.
    """
    global _default_assembler

    if settings is None and encode_field_id is None:
        if _default_assembler is None:
            _default_assembler = create_assembler()
        return _default_assembler.compile(query, catalog)

    assembler = create_assembler(settings, encode_field_id or default_encoder)
    return assembler.compile(query, catalog)


def encode_document(document: leaves.QueryDocument) -> bytes:
    """Serialize a query document to JSON for the search engine."""
    return msgspec.json.encode(document)
