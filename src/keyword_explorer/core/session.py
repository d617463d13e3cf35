"""Interactive keyword exploration session."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

from keyword_explorer.core import pipeline
from keyword_explorer.models.filters import (
    FilterState,
    Intent,
    NumericRange,
    RangeDimension,
    TextMatchMode,
)
from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.results import PipelineResult
from keyword_explorer.models.sorting import SortField, SortState
from keyword_explorer.services.ingestion import load_records
from keyword_explorer.utils.logging import LogContext, get_logger

logger = get_logger(__name__)


class FilterPanel(str, Enum):
    """Which filter panel a front end has open. Never affects results."""

    volume = "volume"
    difficulty = "difficulty"
    cost_per_click = "cost_per_click"
    word_count = "word_count"
    intent = "intent"
    include = "include"
    exclude = "exclude"
    traffic_potential = "traffic_potential"


class KeywordSession:
    """Holds the records, filter and sort state, and the latest pipeline result.

    Every mutation re-runs the pipeline exactly once, so ``result`` always
    reflects the current records and state.
    """

    def __init__(self, records: Iterable[KeywordRecord] = ()):
        self._records: tuple[KeywordRecord, ...] = tuple(records)
        self._filter_state = FilterState()
        self._sort_state = SortState()
        self.open_panel: FilterPanel | None = None
        self._result = pipeline.run(self._records, self._filter_state, self._sort_state)

    @property
    def records(self) -> tuple[KeywordRecord, ...]:
        return self._records

    @property
    def filter_state(self) -> FilterState:
        return self._filter_state

    @property
    def sort_state(self) -> SortState:
        return self._sort_state

    @property
    def result(self) -> PipelineResult:
        return self._result

    def _refresh(self) -> PipelineResult:
        self._result = pipeline.run(self._records, self._filter_state, self._sort_state)
        logger.debug(
            f"Pipeline re-run: {len(self._result.visible)}/{len(self._records)} keywords visible"
        )
        return self._result

    def _update(
        self,
        filter_state: FilterState | None = None,
        sort_state: SortState | None = None,
    ) -> PipelineResult:
        if filter_state is not None:
            self._filter_state = filter_state
        if sort_state is not None:
            self._sort_state = sort_state
        return self._refresh()

    # --- Records ---

    def replace_records(self, records: Iterable[KeywordRecord]) -> PipelineResult:
        """Swap in a complete new collection."""
        self._records = tuple(records)
        return self._refresh()

    def load(self, source: Path | str) -> PipelineResult:
        """Load a CSV export. On failure the previous records are kept."""
        with LogContext(logger, f"loading {source}"):
            records = load_records(source)
        return self.replace_records(records)

    # --- Filters ---

    def set_range(
        self,
        dimension: RangeDimension | str,
        value: NumericRange,
    ) -> PipelineResult:
        return self._update(filter_state=self._filter_state.with_range(dimension, value))

    def set_range_inputs(
        self,
        dimension: RangeDimension | str,
        min_text: str | None,
        max_text: str | None,
    ) -> PipelineResult:
        """Set a range from typed bound text."""
        dimension = RangeDimension(dimension)
        numeric = float if dimension == RangeDimension.cost_per_click else int
        value = NumericRange.from_inputs(min_text, max_text, numeric=numeric)
        return self.set_range(dimension, value)

    def toggle_intent(self, intent: Intent | str) -> PipelineResult:
        return self._update(filter_state=self._filter_state.toggle_intent(intent))

    def add_include_term(self, text: str) -> PipelineResult:
        return self._update(filter_state=self._filter_state.add_include_term(text))

    def remove_include_term(self, index: int) -> PipelineResult:
        return self._update(filter_state=self._filter_state.remove_include_term(index))

    def set_include_mode(self, mode: TextMatchMode | str) -> PipelineResult:
        return self._update(filter_state=self._filter_state.with_include_mode(mode))

    def add_exclude_term(self, text: str) -> PipelineResult:
        return self._update(filter_state=self._filter_state.add_exclude_term(text))

    def remove_exclude_term(self, index: int) -> PipelineResult:
        return self._update(filter_state=self._filter_state.remove_exclude_term(index))

    def set_exclude_mode(self, mode: TextMatchMode | str) -> PipelineResult:
        return self._update(filter_state=self._filter_state.with_exclude_mode(mode))

    def clear_filters(self) -> PipelineResult:
        return self._update(filter_state=FilterState())

    # --- Sorting ---

    def select_sort(self, field: SortField | str) -> PipelineResult:
        """Select a sort column; selecting it again flips the direction."""
        return self._update(sort_state=self._sort_state.select(field))

    # --- Panels ---

    def toggle_panel(self, panel: FilterPanel | str) -> FilterPanel | None:
        """Open a filter panel, or close it if it is already open."""
        panel = FilterPanel(panel)
        self.open_panel = None if self.open_panel == panel else panel
        return self.open_panel
