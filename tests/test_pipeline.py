"""Tests for aggregation and the filter/sort pipeline."""

import pytest
from pydantic import ValidationError

from keyword_explorer.core import pipeline
from keyword_explorer.core.aggregator import aggregate, round_half_up
from keyword_explorer.models.filters import FilterState, NumericRange
from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.results import KeywordStats
from keyword_explorer.models.sorting import SortState


@pytest.fixture
def records():
    return [
        KeywordRecord(keyword="seo audit", volume="1,000", difficulty=10),
        KeywordRecord(keyword="seo tool", volume="5,000", difficulty=15),
        KeywordRecord(keyword="keyword planner", volume="bad", difficulty=60),
        KeywordRecord(keyword="seo checklist", volume="2,500", difficulty=20),
    ]


class TestAggregate:
    def test_empty(self):
        stats = aggregate([])
        assert stats == KeywordStats(count=0, total_volume=0, average_difficulty=0)

    def test_rounds_half_up(self):
        stats = aggregate([KeywordRecord(difficulty=10), KeywordRecord(difficulty=15)])
        assert stats.average_difficulty == 13

    def test_rounds_down_below_half(self):
        stats = aggregate([KeywordRecord(difficulty=d) for d in (10, 10, 11)])
        assert stats.average_difficulty == 10

    def test_total_volume_parses_display_strings(self, records):
        stats = aggregate(records)
        assert stats.count == 4
        assert stats.total_volume == 8500

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [(25, 2, 13), (24, 2, 12), (7, 3, 2), (-5, 2, -2), (-7, 2, -3)],
    )
    def test_round_half_up(self, numerator, denominator, expected):
        assert round_half_up(numerator, denominator) == expected


class TestPipeline:
    def test_defaults_return_everything_in_order(self, records):
        result = pipeline.run(records)
        assert list(result.visible) == records
        assert result.stats.total_volume == 8500
        assert result.stats.average_difficulty == 26

    def test_filter_then_stats_then_sort(self, records):
        state = FilterState().add_include_term("seo")
        result = pipeline.run(records, state, SortState().select("volume"))

        assert [r.keyword for r in result.visible] == ["seo tool", "seo checklist", "seo audit"]
        assert result.stats.count == 3
        assert result.stats.total_volume == 8500
        assert result.stats.average_difficulty == 15

    def test_stats_do_not_depend_on_sort(self, records):
        state = FilterState().with_range("difficulty", NumericRange(max=20))
        unsorted = pipeline.run(records, state, SortState())
        ascending = pipeline.run(records, state, SortState().select("difficulty").select("difficulty"))
        assert unsorted.stats == ascending.stats
        assert [r.keyword for r in ascending.visible] == ["seo audit", "seo tool", "seo checklist"]

    def test_no_matches(self, records):
        state = FilterState().add_include_term("missing")
        result = pipeline.run(records, state)
        assert result.visible == ()
        assert result.stats == KeywordStats()

    def test_repeated_runs_are_identical(self, records):
        state = FilterState().with_range("volume", NumericRange(min=1)).add_exclude_term("tool")
        sort_state = SortState().select("difficulty")
        assert pipeline.run(records, state, sort_state) == pipeline.run(records, state, sort_state)

    def test_oversized_volume_does_not_raise(self):
        huge = KeywordRecord(keyword="seo", volume="9" * 5000, difficulty=10)
        result = pipeline.run([huge])
        assert list(result.visible) == [huge]
        assert result.stats.total_volume == 0

    def test_result_is_immutable(self, records):
        result = pipeline.run(records)
        with pytest.raises(ValidationError):
            result.visible = ()
