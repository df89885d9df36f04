"""Compilation of declaration-field criteria."""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from eventquery.config import Settings
from eventquery.core.models import EventConfig

from ..errors import UnsupportedCriterionType
from ..query.criteria import (
    FIELD_CRITERIA,
    AnyOf,
    Exact,
    Fuzzy,
    Range,
    supported_tags,
    tag_of,
)
from . import leaves
from .classifier import NameFieldClassifier
from .encoding import encode_field_id as default_encoder

logger = logging.getLogger(__name__)


class DataFieldCompiler:
    """Compiles a mapping of declaration-field criteria into leaf conditions.

    Fields are stored below the declaration namespace of the indexed
    document. Name fields additionally carry a full-name subfield which
    fuzzy searches target instead of the raw field.
    """

    def __init__(
        self,
        classifier: NameFieldClassifier | None = None,
        encode_field_id: Callable[[str], str] = default_encoder,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings()
        self.classifier = classifier or NameFieldClassifier(
            cache=self.settings.cache_name_fields
        )
        self.encode_field_id = encode_field_id

    def compile(
        self, data: Mapping[str, Any], catalog: Sequence[EventConfig]
    ) -> list[leaves.QueryDocument]:
        """Compile criteria into one leaf per field, in mapping order.

        Args:
            data: Criteria keyed by declaration field id
            catalog: Event configurations used for name classification

        Returns:
            Leaf conditions

        Raises:
            UnsupportedCriterionType: If a criterion is not a field criterion
        """
        name_fields = self.classifier.name_fields(catalog)
        return [
            self.compile_field(field_id, criterion, field_id in name_fields)
            for field_id, criterion in data.items()
        ]

    def compile_field(
        self, field_id: str, criterion: Any, is_name_field: bool = False
    ) -> leaves.QueryDocument:
        """Compile the criterion of a single declaration field."""
        path = self.field_path(field_id)

        if isinstance(criterion, Exact):
            return leaves.term(path, criterion.term)

        elif isinstance(criterion, Fuzzy):
            if is_name_field:
                path = f"{path}.{self.settings.fullname_subfield}"
            return leaves.fuzzy_match(path, criterion.term, self.settings.fuzziness)

        elif isinstance(criterion, AnyOf):
            return leaves.terms(path, criterion.terms)

        elif isinstance(criterion, Range):
            return leaves.inclusive_range(path, criterion.gte, criterion.lte)

        tag = tag_of(criterion)
        logger.debug(f"Rejecting criterion {tag!r} for field {field_id!r}")
        raise UnsupportedCriterionType(field_id, tag, supported_tags(FIELD_CRITERIA))

    def field_path(self, field_id: str) -> str:
        """Get the index path of a declaration field."""
        return f"{self.settings.declaration_namespace}.{self.encode_field_id(field_id)}"
