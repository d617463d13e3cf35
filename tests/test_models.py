"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from keyword_explorer.models.filters import (
    FilterState,
    Intent,
    NumericRange,
    RangeDimension,
    TextFilter,
    TextMatchMode,
)
from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.sorting import SortDirection, SortField, SortState


class TestKeywordRecord:
    def test_create_record(self):
        kw = KeywordRecord(
            keyword="best seo tool",
            intent="C,T",
            volume="12,100",
            difficulty=42,
            cost_per_click=3.25,
            traffic_potential=18000,
            parent_keyword="seo tools",
        )
        assert kw.volume_value == 12100
        assert kw.word_count == 3
        assert kw.parent_keyword == "seo tools"

    def test_defaults(self):
        kw = KeywordRecord()
        assert kw.keyword == ""
        assert kw.volume == ""
        assert kw.volume_value == 0
        assert kw.difficulty == 0
        assert kw.cost_per_click == 0.0
        assert kw.traffic_potential == 0

    def test_unparsable_numbers_default_to_zero(self):
        kw = KeywordRecord(difficulty="n/a", cost_per_click="free", traffic_potential=None)
        assert kw.difficulty == 0
        assert kw.cost_per_click == 0.0
        assert kw.traffic_potential == 0

    def test_numeric_strings_are_parsed(self):
        kw = KeywordRecord(difficulty="37", cost_per_click="1.5", traffic_potential="900")
        assert kw.difficulty == 37
        assert kw.cost_per_click == 1.5
        assert kw.traffic_potential == 900

    def test_difficulty_not_clamped(self):
        assert KeywordRecord(difficulty=140).difficulty == 140

    def test_word_count_ignores_extra_whitespace(self):
        assert KeywordRecord(keyword="  seo   audit  tool ").word_count == 3

    def test_empty_keyword_has_no_words(self):
        assert KeywordRecord(keyword="").word_count == 0

    def test_record_is_frozen(self):
        kw = KeywordRecord(keyword="seo")
        with pytest.raises(ValidationError):
            kw.keyword = "other"

    def test_metric_lookup(self):
        kw = KeywordRecord(keyword="seo audit", volume="1,000", difficulty=5)
        assert kw.metric("volume") == 1000
        assert kw.metric("word_count") == 2
        assert kw.metric("difficulty") == 5


class TestNumericRange:
    def test_unbounded_contains_everything(self):
        rng = NumericRange()
        assert rng.is_active is False
        assert rng.contains(-1_000_000)
        assert rng.contains(1_000_000)

    def test_bounds_are_inclusive(self):
        rng = NumericRange(min=10, max=20)
        assert rng.contains(10)
        assert rng.contains(20)
        assert not rng.contains(9)
        assert not rng.contains(21)

    def test_from_inputs_int(self):
        rng = NumericRange.from_inputs("100", "")
        assert rng.min == 100
        assert rng.max is None

    def test_from_inputs_unparsable_is_unbounded(self):
        rng = NumericRange.from_inputs("abc", "  ")
        assert rng.min is None
        assert rng.max is None
        assert rng.is_active is False

    def test_from_inputs_float(self):
        rng = NumericRange.from_inputs("0.5", "2.25", numeric=float)
        assert rng.min == 0.5
        assert rng.max == 2.25

    def test_from_inputs_zero_is_a_bound(self):
        rng = NumericRange.from_inputs("0", None)
        assert rng.min == 0
        assert rng.is_active is True


class TestTextFilter:
    def test_default_is_inactive_all(self):
        tf = TextFilter()
        assert tf.mode == TextMatchMode.all
        assert tf.is_active is False

    def test_with_term_trims_and_ignores_blank(self):
        tf = TextFilter().with_term("  seo ").with_term("   ")
        assert tf.terms == ("seo",)

    def test_internal_whitespace_kept(self):
        assert TextFilter().with_term(" free  trial ").terms == ("free  trial",)

    def test_without_term(self):
        tf = TextFilter(terms=("a", "b", "c")).without_term(1)
        assert tf.terms == ("a", "c")
        assert tf.without_term(5).terms == ("a", "c")

    def test_with_mode_accepts_string(self):
        assert TextFilter().with_mode("any").mode == TextMatchMode.any


class TestFilterState:
    def test_default_has_no_active_filters(self):
        assert FilterState().has_active_filters is False

    def test_with_range_returns_new_state(self):
        state = FilterState()
        updated = state.with_range(RangeDimension.volume, NumericRange(min=100))
        assert state.volume.is_active is False
        assert updated.volume.min == 100
        assert updated.has_active_filters is True

    def test_toggle_intent(self):
        state = FilterState().toggle_intent("I").toggle_intent(Intent.COMMERCIAL)
        assert state.selected_intents == frozenset({Intent.INFORMATIONAL, Intent.COMMERCIAL})
        state = state.toggle_intent("I")
        assert state.selected_intents == frozenset({Intent.COMMERCIAL})

    def test_invalid_intent_rejected(self):
        with pytest.raises(ValueError):
            FilterState().toggle_intent("X")

    def test_include_and_exclude_terms(self):
        state = (
            FilterState()
            .add_include_term("seo")
            .add_include_term("tool")
            .with_include_mode("any")
            .add_exclude_term("free")
        )
        assert state.include.terms == ("seo", "tool")
        assert state.include.mode == TextMatchMode.any
        assert state.exclude.terms == ("free",)
        assert state.exclude.mode == TextMatchMode.all

        state = state.remove_include_term(0).remove_exclude_term(0)
        assert state.include.terms == ("tool",)
        assert state.exclude.is_active is False

    def test_unknown_dimension_rejected(self):
        with pytest.raises(ValueError):
            FilterState().range_for("parent_keyword")


class TestSortState:
    def test_default_is_unset(self):
        state = SortState()
        assert state.field is None
        assert state.is_active is False

    def test_first_selection_is_descending(self):
        state = SortState().select(SortField.volume)
        assert state.field == SortField.volume
        assert state.direction == SortDirection.descending

    def test_same_field_toggles(self):
        state = SortState().select("volume").select("volume")
        assert state.direction == SortDirection.ascending
        assert state.select("volume").direction == SortDirection.descending

    def test_new_field_resets_to_descending(self):
        state = SortState().select("volume").select("volume").select("difficulty")
        assert state.field == SortField.difficulty
        assert state.direction == SortDirection.descending

    def test_invalid_field_rejected(self):
        with pytest.raises(ValueError):
            SortState().select("keyword")
