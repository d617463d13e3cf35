"""Decide whether a keyword record passes the active filters."""

from keyword_explorer.models.filters import FilterState, RangeDimension, TextFilter, TextMatchMode
from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.utils.text_utils import contains_term


def _terms_match(keyword: str, text_filter: TextFilter) -> bool:
    """ALL/ANY substring test of the filter's terms against a keyword."""
    if text_filter.mode == TextMatchMode.all:
        return all(contains_term(keyword, term) for term in text_filter.terms)
    return any(contains_term(keyword, term) for term in text_filter.terms)


def matches_ranges(record: KeywordRecord, filter_state: FilterState) -> bool:
    return all(
        filter_state.range_for(dimension).contains(record.metric(dimension.value))
        for dimension in RangeDimension
    )


def matches_intents(record: KeywordRecord, filter_state: FilterState) -> bool:
    """Pass when no intent is selected or the record has any selected intent."""
    if not filter_state.selected_intents:
        return True
    return any(intent.value in record.intent for intent in filter_state.selected_intents)


def matches_include(record: KeywordRecord, filter_state: FilterState) -> bool:
    if not filter_state.include.is_active:
        return True
    return _terms_match(record.keyword, filter_state.include)


def matches_exclude(record: KeywordRecord, filter_state: FilterState) -> bool:
    """
    Reject the record when the exclude combination holds.

    With mode ``all`` a record is only rejected when every exclude term is
    present; a keyword containing some of the terms still passes.
    """
    if not filter_state.exclude.is_active:
        return True
    return not _terms_match(record.keyword, filter_state.exclude)


def evaluate(record: KeywordRecord, filter_state: FilterState) -> bool:
    """Check a record against every filter dimension."""
    return (
        matches_ranges(record, filter_state)
        and matches_intents(record, filter_state)
        and matches_include(record, filter_state)
        and matches_exclude(record, filter_state)
    )


def filter_records(
    records: list[KeywordRecord] | tuple[KeywordRecord, ...],
    filter_state: FilterState,
) -> list[KeywordRecord]:
    """Filter records, keeping their original order."""
    return [record for record in records if evaluate(record, filter_state)]
