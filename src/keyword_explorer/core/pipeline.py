"""Filter, aggregate and sort keyword records in one pass."""

from typing import Sequence

from keyword_explorer.core.aggregator import aggregate
from keyword_explorer.core.filter_evaluator import filter_records
from keyword_explorer.core.sort_comparator import sort_records
from keyword_explorer.models.filters import FilterState
from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.results import PipelineResult
from keyword_explorer.models.sorting import SortState


def run(
    all_records: Sequence[KeywordRecord],
    filter_state: FilterState | None = None,
    sort_state: SortState | None = None,
) -> PipelineResult:
    """
    Recompute the visible rows and stats from scratch.

    Stats are computed over the filtered rows before sorting, so ordering
    never affects them.
    """
    if filter_state is None:
        filter_state = FilterState()
    if sort_state is None:
        sort_state = SortState()

    filtered = filter_records(all_records, filter_state)
    stats = aggregate(filtered)
    visible = sort_records(filtered, sort_state)

    return PipelineResult(visible=tuple(visible), stats=stats)
