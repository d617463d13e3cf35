"""Display formatting for keyword tables, stats and filter summaries."""

from keyword_explorer.models.filters import FilterState, Intent, NumericRange, RangeDimension
from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.results import KeywordStats
from keyword_explorer.models.sorting import SortDirection, SortField, SortState
from keyword_explorer.utils.text_utils import parse_volume

UNBOUNDED = "∞"


def format_number(value: int | float) -> str:
    """Format a number with thousands separators."""
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,}"
    return f"{int(value):,}"


def format_cpc(value: float, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{value:.2f}"


def format_difficulty(value: int) -> str:
    return f"{value}%"


def format_volume(volume: str) -> str:
    """Volume with thousands separators; unparsable text is shown as is."""
    value = parse_volume(volume, default=None)
    return volume if value is None else format_number(value)


def format_record(record: KeywordRecord, currency_symbol: str = "$") -> dict[str, str]:
    """Display strings for each column of a record."""
    return {
        "keyword": record.keyword,
        "intent": record.intent,
        "volume": format_volume(record.volume),
        "difficulty": format_difficulty(record.difficulty),
        "cost_per_click": format_cpc(record.cost_per_click, currency_symbol),
        "traffic_potential": format_number(record.traffic_potential),
        "parent_keyword": record.parent_keyword,
    }


def format_stats(stats: KeywordStats) -> dict[str, str]:
    return {
        "count": format_number(stats.count),
        "total_volume": format_number(stats.total_volume),
        "average_difficulty": format_difficulty(stats.average_difficulty),
    }


def _bound(value: int | float | None, placeholder: str) -> str:
    return placeholder if value is None else str(value)


def range_summary(
    dimension: RangeDimension | str,
    value: NumericRange,
    currency_symbol: str = "$",
) -> str | None:
    """
    Short label describing an active range filter.

    Returns:
        Label such as ``"1000 - ∞"`` or ``"0% - 40%"``, or None when inactive
    """
    if not value.is_active:
        return None

    dimension = RangeDimension(dimension)
    if dimension == RangeDimension.difficulty:
        return f"{_bound(value.min, '0')}% - {_bound(value.max, '100')}%"
    if dimension == RangeDimension.cost_per_click:
        return (
            f"{currency_symbol}{_bound(value.min, '0')} - "
            f"{currency_symbol}{_bound(value.max, UNBOUNDED)}"
        )
    return f"{_bound(value.min, '0')} - {_bound(value.max, UNBOUNDED)}"


def intent_summary(filter_state: FilterState) -> str | None:
    """Selected intent letters in I, T, C, N order."""
    if not filter_state.selected_intents:
        return None
    return ", ".join(intent.value for intent in Intent if intent in filter_state.selected_intents)


def filter_summaries(filter_state: FilterState, currency_symbol: str = "$") -> dict[str, str]:
    """Labels for every active filter, keyed by dimension name."""
    summaries = {}
    for dimension in RangeDimension:
        label = range_summary(dimension, filter_state.range_for(dimension), currency_symbol)
        if label:
            summaries[dimension.value] = label

    intents = intent_summary(filter_state)
    if intents:
        summaries["intent"] = intents

    for name, text_filter in (("include", filter_state.include), ("exclude", filter_state.exclude)):
        if text_filter.is_active:
            summaries[name] = f"{text_filter.mode.value.upper()}: {', '.join(text_filter.terms)}"

    return summaries


def sort_indicator(sort_state: SortState, field: SortField | str) -> str:
    """Arrow shown next to a sortable column header."""
    if sort_state.field != SortField(field):
        return "⇅"
    return "↑" if sort_state.direction == SortDirection.ascending else "↓"
