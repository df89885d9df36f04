"""Classification of declaration fields that hold person names."""

import logging
from collections.abc import Callable, Iterable
from functools import lru_cache

from eventquery.core.fields import is_name_type
from eventquery.core.models import EventConfig, FieldConfig, get_all_unique_fields

logger = logging.getLogger(__name__)

FieldLookup = Callable[[EventConfig], Iterable[FieldConfig]]


def name_field_ids(
    catalog: Iterable[EventConfig],
    fields_of: FieldLookup = get_all_unique_fields,
) -> frozenset[str]:
    """Get the ids of all name fields in a catalog.

    A field id counts as a name field if any event configuration
    declares it with the NAME type.

    Args:
        catalog: Event configurations to inspect
        fields_of: Lookup returning the fields of one configuration

    Returns:
        Ids of name fields; empty for an empty catalog
    """
    return frozenset(
        field.id
        for event_config in catalog
        for field in fields_of(event_config)
        if is_name_type(field.type)
    )


class NameFieldClassifier:
    """Answers whether a field id is a name field.

    The catalog is expected to stay the same for the lifetime of the
    process, so results can be memoized per catalog.
    """

    def __init__(
        self, fields_of: FieldLookup = get_all_unique_fields, cache: bool = True
    ):
        self.fields_of = fields_of
        self.cache = cache
        self._cached = lru_cache(maxsize=32)(self._classify)

    def name_fields(self, catalog: Iterable[EventConfig]) -> frozenset[str]:
        """Get the name field ids of a catalog."""
        configs = tuple(catalog)
        if self.cache:
            try:
                hash(configs)
            except TypeError:
                # Configurations built with list members cannot be keys
                logger.debug("Catalog is unhashable, classifying without cache")
            else:
                return self._cached(configs)
        return self._classify(configs)

    def is_name_field(self, field_id: str, catalog: Iterable[EventConfig]) -> bool:
        """Check whether a field id is a name field in the catalog."""
        return field_id in self.name_fields(catalog)

    def cache_info(self):
        """Get memoization statistics."""
        return self._cached.cache_info()

    def clear_cache(self) -> None:
        """Drop memoized classifications."""
        self._cached.cache_clear()

    def _classify(self, configs: tuple[EventConfig, ...]) -> frozenset[str]:
        ids = name_field_ids(configs, self.fields_of)
        logger.debug(f"Found {len(ids)} name field(s) across {len(configs)} event(s)")
        return ids
