"""Pydantic data models."""

from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.filters import (
    FilterState,
    Intent,
    NumericRange,
    RangeDimension,
    TextFilter,
    TextMatchMode,
)
from keyword_explorer.models.sorting import SortDirection, SortField, SortState
from keyword_explorer.models.results import KeywordStats, PipelineResult

__all__ = [
    "KeywordRecord",
    "FilterState",
    "Intent",
    "NumericRange",
    "RangeDimension",
    "TextFilter",
    "TextMatchMode",
    "SortDirection",
    "SortField",
    "SortState",
    "KeywordStats",
    "PipelineResult",
]
