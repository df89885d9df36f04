"""Tests for search exceptions."""

import pytest

from eventquery.search.errors import (
    QueryError,
    SearchError,
    UnsupportedCriterionType,
    suggest_tag,
)

DATA_TAGS = ("exact", "fuzzy", "anyOf", "range")


class TestHierarchy:
    """Test exception hierarchy."""

    def test_query_error_is_search_error(self):
        """Query errors are search errors."""
        assert issubclass(QueryError, SearchError)

    def test_unsupported_criterion_is_query_error(self):
        """Unsupported criteria are query errors."""
        assert issubclass(UnsupportedCriterionType, QueryError)


class TestUnsupportedCriterionType:
    """Test unsupported criterion error."""

    def test_carries_field_and_tag(self):
        """Error identifies the field and the offending tag."""
        error = UnsupportedCriterionType("unknownField", "bogus", DATA_TAGS)

        assert error.field_id == "unknownField"
        assert error.tag == "bogus"
        assert error.suggestion is None
        assert "'bogus'" in str(error)
        assert "'unknownField'" in str(error)

    def test_message_with_suggestion(self):
        """Close misspellings are suggested."""
        error = UnsupportedCriterionType("child.name", "exct", DATA_TAGS)

        assert error.suggestion == "exact"
        assert "did you mean 'exact'?" in str(error)

    def test_without_supported_tags(self):
        """No suggestion without supported tags."""
        error = UnsupportedCriterionType("x", "exct")

        assert error.suggestion is None

    def test_can_be_raised(self):
        """Error is raised and caught as a query error."""
        with pytest.raises(QueryError, match="Unsupported query type"):
            raise UnsupportedCriterionType("x", "bogus", DATA_TAGS)


class TestSuggestTag:
    """Test tag suggestions."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("exct", "exact"),
            ("fuzy", "fuzzy"),
            ("rnage", "range"),
            ("anyof", "anyOf"),
            ("bogus", None),
        ],
    )
    def test_suggestions(self, tag, expected):
        """Suggest the closest supported tag."""
        assert suggest_tag(tag, DATA_TAGS) == expected

    def test_non_string_tag(self):
        """Missing or non-string tags get no suggestion."""
        assert suggest_tag(None, DATA_TAGS) is None
        assert suggest_tag(42, DATA_TAGS) is None

    def test_supported_tag_is_not_suggested(self):
        """A tag that is already supported gets no suggestion."""
        assert suggest_tag("exact", DATA_TAGS) is None

        error = UnsupportedCriterionType("child.name", "exact", DATA_TAGS)

        assert error.suggestion is None
        assert "did you mean" not in str(error)
