"""
Unit tests for the filter key grammar.
"""

import pytest

from querymapper.core.condition import Comparator, FilterCondition
from querymapper.core.exceptions import MalformedSegmentError
from querymapper.query.grammar import (
    POSTFIXES,
    PREFIXES,
    KeyParts,
    decompose_key,
    is_null_literal,
    parse_segment,
    resolve_comparator,
    split_query_string,
    split_segment,
)


class TestTables:
    """Tests for the prefix/postfix tables."""

    def test_prefixes(self):
        assert PREFIXES == ("not",)

    def test_postfix_order(self):
        """Postfixes are tried in this order."""
        assert [p for p, _ in POSTFIXES] == [
            "st", "gt", "min", "max", "lk", "not-lk", "in", "not-in", "not",
        ]

    def test_postfix_comparators(self):
        assert dict(POSTFIXES) == {
            "st": Comparator.LT,
            "gt": Comparator.GT,
            "min": Comparator.GTE,
            "max": Comparator.LTE,
            "lk": Comparator.LIKE,
            "not-lk": Comparator.NOT_LIKE,
            "in": Comparator.IN,
            "not-in": Comparator.NOT_IN,
            "not": Comparator.NE,
        }


class TestDecomposeKey:
    """Tests for decompose_key."""

    def test_plain_key(self):
        assert decompose_key("title") == KeyParts(None, "title", None)

    @pytest.mark.parametrize("postfix", [p for p, _ in POSTFIXES])
    def test_each_postfix(self, postfix):
        assert decompose_key(f"title-{postfix}") == KeyParts(None, "title", postfix)

    def test_prefix_only(self):
        assert decompose_key("not-title") == KeyParts("not", "title", None)

    def test_prefix_and_postfix(self):
        assert decompose_key("not-title-lk") == KeyParts("not", "title", "lk")

    def test_not_postfix(self):
        assert decompose_key("name-not") == KeyParts(None, "name", "not")

    def test_prefix_wins_over_postfix(self):
        """A leading 'not-' is always the prefix."""
        assert decompose_key("not-name") == KeyParts("not", "name", None)

    def test_not_lk_before_not(self):
        assert decompose_key("name-not-lk") == KeyParts(None, "name", "not-lk")

    def test_not_in_before_not(self):
        assert decompose_key("name-not-in") == KeyParts(None, "name", "not-in")

    def test_earliest_postfix_ends_base(self):
        """Text after the first matching postfix is dropped."""
        assert decompose_key("age-min-max") == KeyParts(None, "age", "min")
        assert decompose_key("title-lk-extra") == KeyParts(None, "title", "lk")

    def test_postfix_matches_as_prefix_of_token(self):
        """'-in' matches even when followed by more letters."""
        assert decompose_key("name-inside") == KeyParts(None, "name", "in")

    def test_hyphen_without_postfix(self):
        assert decompose_key("first-name") == KeyParts(None, "first-name", None)

    def test_bare_not(self):
        assert decompose_key("not") == KeyParts(None, "not", None)

    def test_prefix_then_postfix_token_as_base(self):
        assert decompose_key("not-lk") == KeyParts("not", "lk", None)

    def test_empty_base(self):
        assert decompose_key("-min") == KeyParts(None, "", "min")
        assert decompose_key("") == KeyParts(None, "", None)

    def test_case_sensitive(self):
        assert decompose_key("age-MIN") == KeyParts(None, "age-MIN", None)
        assert decompose_key("NOT-title") == KeyParts(None, "NOT-title", None)


class TestResolveComparator:
    """Tests for resolve_comparator."""

    def test_no_postfix(self):
        assert resolve_comparator(None, "foo") is Comparator.EQ

    def test_no_postfix_null(self):
        assert resolve_comparator(None, "null") is Comparator.NULL

    @pytest.mark.parametrize("value", ["NULL", "Null", "  null ", "\tnull\n", "\x0bnull\0", "\rnull"])
    def test_null_is_trimmed_and_case_insensitive(self, value):
        assert resolve_comparator(None, value) is Comparator.NULL

    @pytest.mark.parametrize("postfix", [p for p, _ in POSTFIXES])
    def test_null_overrides_every_postfix(self, postfix):
        assert resolve_comparator(postfix, "null") is Comparator.NOT_NULL

    def test_postfix_lookup(self):
        assert resolve_comparator("max", "10") is Comparator.LTE
        assert resolve_comparator("not", "x") is Comparator.NE

    @pytest.mark.parametrize("value", ["\u00a0null", "null\u00a0", "\u2003null", "null\u3000"])
    def test_unicode_whitespace_is_not_trimmed(self, value):
        """Only ASCII whitespace and NUL are trimmed around a null literal."""
        assert not is_null_literal(value)
        assert resolve_comparator(None, value) is Comparator.EQ
        assert resolve_comparator("not", value) is Comparator.NE

    def test_null_like_values_are_not_null(self):
        assert resolve_comparator(None, "nullable") is Comparator.EQ
        assert resolve_comparator(None, "") is Comparator.EQ

    def test_is_null_literal(self):
        assert is_null_literal(" NuLl ")
        assert not is_null_literal("none")


class TestSplitting:
    """Tests for query string and segment splitting."""

    def test_split_query_string(self):
        assert split_query_string("a=1&b=2") == ["a=1", "b=2"]

    def test_split_drops_empty_segments(self):
        assert split_query_string("&a=1&&b=2&") == ["a=1", "b=2"]

    def test_split_empty(self):
        assert split_query_string("") == []
        assert split_query_string(None) == []

    def test_split_segment(self):
        assert split_segment("age-min=18") == ("age-min", "18")

    def test_split_segment_empty_value(self):
        assert split_segment("name=") == ("name", "")

    @pytest.mark.parametrize("segment", ["name", "a=b=c", "=="])
    def test_split_segment_malformed(self, segment):
        with pytest.raises(MalformedSegmentError) as exc_info:
            split_segment(segment)
        assert exc_info.value.segment == segment


class TestParseSegment:
    """Tests for parse_segment."""

    def test_filter(self):
        condition = parse_segment("age-min=18")
        assert condition == FilterCondition("age", Comparator.GTE, "18")
        assert condition.raw_key == "age-min"

    def test_in_list_kept_raw(self):
        condition = parse_segment("id-in=1,2,3")
        assert condition.operator is Comparator.IN
        assert condition.value == "1,2,3"

    def test_null_value_stored_as_given(self):
        condition = parse_segment("status=NULL")
        assert condition.operator is Comparator.NULL
        assert condition.value == "NULL"

    def test_malformed(self):
        with pytest.raises(MalformedSegmentError):
            parse_segment("novalue")
