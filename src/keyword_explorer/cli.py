"""CLI commands for Keyword Explorer using Typer."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from keyword_explorer.config import get_settings
from keyword_explorer.core.session import KeywordSession
from keyword_explorer.models.filters import Intent, RangeDimension, TextMatchMode
from keyword_explorer.models.results import PipelineResult
from keyword_explorer.models.sorting import SortDirection, SortField
from keyword_explorer.services.ingestion import IngestionError
from keyword_explorer.utils.formatting import (
    filter_summaries,
    format_record,
    format_stats,
    sort_indicator,
)
from keyword_explorer.utils.logging import setup_logging


app = typer.Typer(
    name="keyword-explorer",
    help="Filter, sort and summarize keyword research exports",
    no_args_is_help=True,
)

console = Console()


# --- Shared options ---

CSV_ARGUMENT = typer.Argument(None, help="Keyword export CSV (defaults to KEYWORD_EXPLORER_DEFAULT_CSV)")
MIN_VOLUME = typer.Option(None, "--min-volume", help="Minimum search volume")
MAX_VOLUME = typer.Option(None, "--max-volume", help="Maximum search volume")
MIN_KD = typer.Option(None, "--min-kd", help="Minimum keyword difficulty")
MAX_KD = typer.Option(None, "--max-kd", help="Maximum keyword difficulty")
MIN_CPC = typer.Option(None, "--min-cpc", help="Minimum cost per click")
MAX_CPC = typer.Option(None, "--max-cpc", help="Maximum cost per click")
MIN_WORDS = typer.Option(None, "--min-words", help="Minimum word count")
MAX_WORDS = typer.Option(None, "--max-words", help="Maximum word count")
MIN_TRAFFIC = typer.Option(None, "--min-traffic", help="Minimum traffic potential")
MAX_TRAFFIC = typer.Option(None, "--max-traffic", help="Maximum traffic potential")
INTENTS = typer.Option(None, "--intent", "-i", help="Intent code (I/T/C/N), repeatable", case_sensitive=False)
INCLUDE = typer.Option(None, "--include", help="Term the keyword must contain, repeatable")
INCLUDE_MODE = typer.Option(TextMatchMode.all, "--include-mode", help="Require all or any include terms")
EXCLUDE = typer.Option(None, "--exclude", help="Term to exclude, repeatable")
EXCLUDE_MODE = typer.Option(TextMatchMode.all, "--exclude-mode", help="Exclude when all or any terms match")


def _build_session(
    csv_file: Optional[Path],
    ranges: dict[RangeDimension, tuple[Optional[str], Optional[str]]],
    intents: Optional[list[Intent]],
    include: Optional[list[str]],
    include_mode: TextMatchMode,
    exclude: Optional[list[str]],
    exclude_mode: TextMatchMode,
) -> KeywordSession:
    """Load the export and apply the filter options one by one."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    path = settings.resolve_csv(csv_file)
    if path is None:
        console.print("[red]No CSV file given and KEYWORD_EXPLORER_DEFAULT_CSV is not set[/red]")
        raise typer.Exit(1)

    session = KeywordSession()
    try:
        session.load(path)
    except IngestionError as exc:
        console.print("[red]Could not load keyword export.[/red]")
        console.print(f"[dim]{exc}[/dim]")
        raise typer.Exit(1)

    for dimension, (min_text, max_text) in ranges.items():
        if min_text is not None or max_text is not None:
            session.set_range_inputs(dimension, min_text, max_text)

    for intent in dict.fromkeys(intents or []):
        session.toggle_intent(intent)

    session.set_include_mode(include_mode)
    for term in include or []:
        session.add_include_term(term)

    session.set_exclude_mode(exclude_mode)
    for term in exclude or []:
        session.add_exclude_term(term)

    return session


def _display_stats(result: PipelineResult) -> None:
    stats = format_stats(result.stats)
    console.print(
        f"[bold]{stats['count']}[/bold] keywords  "
        f"Total volume: [bold]{stats['total_volume']}[/bold]  "
        f"Average KD: [bold]{stats['average_difficulty']}[/bold]"
    )


def _display_filters(session: KeywordSession, currency_symbol: str) -> None:
    summaries = filter_summaries(session.filter_state, currency_symbol)
    if summaries:
        console.print("[dim]Filters: " + "; ".join(f"{k}: {v}" for k, v in summaries.items()) + "[/dim]")


def _display_table(session: KeywordSession, limit: int, currency_symbol: str) -> None:
    visible = session.result.visible
    if not visible:
        console.print("[yellow]No keywords match the current filters[/yellow]")
        return

    sort_state = session.sort_state
    table = Table(title="Keywords")
    table.add_column("Keyword", style="cyan")
    table.add_column("Intent")
    table.add_column(f"Volume {sort_indicator(sort_state, SortField.volume)}", justify="right")
    table.add_column(f"KD% {sort_indicator(sort_state, SortField.difficulty)}", justify="right")
    table.add_column(f"CPC (USD) {sort_indicator(sort_state, SortField.cost_per_click)}", justify="right")
    table.add_column(
        f"Traffic Potential {sort_indicator(sort_state, SortField.traffic_potential)}",
        justify="right",
    )
    table.add_column("Parent Keyword", style="dim")

    for record in visible[:limit]:
        row = format_record(record, currency_symbol)
        table.add_row(
            row["keyword"],
            row["intent"],
            row["volume"],
            row["difficulty"],
            row["cost_per_click"],
            row["traffic_potential"],
            row["parent_keyword"],
        )

    console.print(table)
    if len(visible) > limit:
        console.print(f"  ... and {len(visible) - limit} more")


# --- Explore Command ---


@app.command()
def explore(
    csv_file: Optional[Path] = CSV_ARGUMENT,
    min_volume: Optional[str] = MIN_VOLUME,
    max_volume: Optional[str] = MAX_VOLUME,
    min_kd: Optional[str] = MIN_KD,
    max_kd: Optional[str] = MAX_KD,
    min_cpc: Optional[str] = MIN_CPC,
    max_cpc: Optional[str] = MAX_CPC,
    min_words: Optional[str] = MIN_WORDS,
    max_words: Optional[str] = MAX_WORDS,
    min_traffic: Optional[str] = MIN_TRAFFIC,
    max_traffic: Optional[str] = MAX_TRAFFIC,
    intent: Optional[list[Intent]] = INTENTS,
    include: Optional[list[str]] = INCLUDE,
    include_mode: TextMatchMode = INCLUDE_MODE,
    exclude: Optional[list[str]] = EXCLUDE,
    exclude_mode: TextMatchMode = EXCLUDE_MODE,
    sort: Optional[SortField] = typer.Option(None, "--sort", "-s", help="Metric to sort by"),
    ascending: bool = typer.Option(False, "--ascending", "-a", help="Sort ascending instead of descending"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum rows to display"),
    as_json: bool = typer.Option(False, "--json", help="Print visible rows and stats as JSON"),
):
    """Filter and sort a keyword export and show the matching keywords."""
    settings = get_settings()
    session = _build_session(
        csv_file,
        {
            RangeDimension.volume: (min_volume, max_volume),
            RangeDimension.difficulty: (min_kd, max_kd),
            RangeDimension.cost_per_click: (min_cpc, max_cpc),
            RangeDimension.word_count: (min_words, max_words),
            RangeDimension.traffic_potential: (min_traffic, max_traffic),
        },
        intent,
        include,
        include_mode,
        exclude,
        exclude_mode,
    )

    if sort is not None:
        session.select_sort(sort)
        if ascending and session.sort_state.direction != SortDirection.ascending:
            session.select_sort(sort)

    if as_json:
        console.print_json(data=session.result.model_dump(mode="json"))
        return

    _display_stats(session.result)
    _display_filters(session, settings.currency_symbol)
    if limit is None:
        limit = settings.table_row_limit
    _display_table(session, limit, settings.currency_symbol)


# --- Stats Command ---


@app.command()
def stats(
    csv_file: Optional[Path] = CSV_ARGUMENT,
    min_volume: Optional[str] = MIN_VOLUME,
    max_volume: Optional[str] = MAX_VOLUME,
    min_kd: Optional[str] = MIN_KD,
    max_kd: Optional[str] = MAX_KD,
    min_cpc: Optional[str] = MIN_CPC,
    max_cpc: Optional[str] = MAX_CPC,
    min_words: Optional[str] = MIN_WORDS,
    max_words: Optional[str] = MAX_WORDS,
    min_traffic: Optional[str] = MIN_TRAFFIC,
    max_traffic: Optional[str] = MAX_TRAFFIC,
    intent: Optional[list[Intent]] = INTENTS,
    include: Optional[list[str]] = INCLUDE,
    include_mode: TextMatchMode = INCLUDE_MODE,
    exclude: Optional[list[str]] = EXCLUDE,
    exclude_mode: TextMatchMode = EXCLUDE_MODE,
    as_json: bool = typer.Option(False, "--json", help="Print stats as JSON"),
):
    """Show keyword count, total volume and average difficulty."""
    settings = get_settings()
    session = _build_session(
        csv_file,
        {
            RangeDimension.volume: (min_volume, max_volume),
            RangeDimension.difficulty: (min_kd, max_kd),
            RangeDimension.cost_per_click: (min_cpc, max_cpc),
            RangeDimension.word_count: (min_words, max_words),
            RangeDimension.traffic_potential: (min_traffic, max_traffic),
        },
        intent,
        include,
        include_mode,
        exclude,
        exclude_mode,
    )

    if as_json:
        console.print_json(data=session.result.stats.model_dump(mode="json"))
        return

    _display_stats(session.result)
    _display_filters(session, settings.currency_symbol)


# --- Entry Point ---


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
