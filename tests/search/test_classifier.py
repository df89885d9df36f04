"""Tests for name field classification."""

from unittest.mock import Mock

from eventquery.core.fields import FieldType
from eventquery.core.models import (
    DeclarationFormConfig,
    EventConfig,
    FieldConfig,
    PageConfig,
)
from eventquery.search.compiler.classifier import NameFieldClassifier, name_field_ids


class TestNameFieldIds:
    """Test name field id collection."""

    def test_collects_name_fields(self, birth_event):
        """Fields declared NAME are name fields."""
        assert name_field_ids([birth_event]) == frozenset({"child.name", "mother.name"})

    def test_empty_catalog(self):
        """Empty catalog has no name fields."""
        assert name_field_ids([]) == frozenset()

    def test_across_all_events(self, catalog):
        """A field is a name field if any event declares it so."""
        ids = name_field_ids(catalog)

        assert "informant.name" in ids
        assert ids == frozenset(
            {"child.name", "mother.name", "deceased.name", "informant.name"}
        )

    def test_duplicate_in_event_uses_first_declaration(self, birth_event):
        """Within one event the first declaration of an id decides."""
        assert "child.name" in name_field_ids([birth_event])

    def test_injected_field_lookup(self, birth_event):
        """Field lookup is taken from the caller."""
        fields_of = Mock(
            return_value=[
                FieldConfig(id="custom", type=FieldType.NAME),
                FieldConfig(id="other", type=FieldType.TEXT),
            ]
        )

        assert name_field_ids([birth_event], fields_of) == frozenset({"custom"})
        fields_of.assert_called_once_with(birth_event)


class TestNameFieldClassifier:
    """Test memoizing classifier."""

    def test_is_name_field(self, catalog):
        """Check single ids."""
        classifier = NameFieldClassifier()

        assert classifier.is_name_field("deceased.name", catalog)
        assert not classifier.is_name_field("deceased.age", catalog)

    def test_unknown_field_is_not_name_field(self, catalog):
        """Ids absent from the catalog are not name fields."""
        assert not NameFieldClassifier().is_name_field("unknownField", catalog)

    def test_memoizes_per_catalog(self, catalog):
        """Repeated lookups for an equal catalog hit the cache."""
        classifier = NameFieldClassifier()

        first = classifier.name_fields(catalog)
        second = classifier.name_fields(list(catalog))

        assert first is second
        assert classifier.cache_info().hits == 1
        assert classifier.cache_info().misses == 1

    def test_clear_cache(self, catalog):
        """Clearing drops memoized results."""
        classifier = NameFieldClassifier()
        classifier.name_fields(catalog)

        classifier.clear_cache()

        assert classifier.cache_info().currsize == 0

    def test_cache_disabled(self, catalog):
        """Without caching the lookup runs every time."""
        fields_of = Mock(return_value=[])
        classifier = NameFieldClassifier(fields_of, cache=False)

        classifier.name_fields(catalog)
        classifier.name_fields(catalog)

        assert fields_of.call_count == 4
        assert classifier.cache_info().currsize == 0

    def test_catalog_built_with_lists(self):
        """Configurations holding lists are classified without the cache."""
        event_config = EventConfig(
            id="birth",
            label="Birth",
            declaration=DeclarationFormConfig(
                pages=[
                    PageConfig(
                        id="p",
                        title="Child",
                        fields=[FieldConfig(id="name", type=FieldType.NAME)],
                    )
                ]
            ),
        )
        classifier = NameFieldClassifier()

        assert classifier.is_name_field("name", [event_config])
        assert classifier.cache_info().currsize == 0
