"""Ordering of keyword records by a selected metric."""

from functools import cmp_to_key
from typing import Iterable

from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.sorting import SortDirection, SortField, SortState

_SORT_VALUES = {
    SortField.volume: lambda record: record.volume_value,
    SortField.difficulty: lambda record: record.difficulty,
    SortField.cost_per_click: lambda record: record.cost_per_click,
    SortField.traffic_potential: lambda record: record.traffic_potential,
}


def sort_value(record: KeywordRecord, field: SortField) -> int | float:
    value_of = _SORT_VALUES.get(field)
    assert value_of is not None, f"Unsupported sort field: {field!r}"
    return value_of(record)


def compare(a: KeywordRecord, b: KeywordRecord, sort_state: SortState) -> int:
    """
    Compare two records under a sort state.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal
    """
    if sort_state.field is None:
        return 0

    diff = sort_value(a, sort_state.field) - sort_value(b, sort_state.field)
    comparison = (diff > 0) - (diff < 0)
    if sort_state.direction == SortDirection.descending:
        return -comparison
    return comparison


def sort_records(records: Iterable[KeywordRecord], sort_state: SortState) -> list[KeywordRecord]:
    """Stable sort; records that compare equal keep their relative order."""
    records = list(records)
    if sort_state.field is None:
        return records
    return sorted(records, key=cmp_to_key(lambda a, b: compare(a, b, sort_state)))
