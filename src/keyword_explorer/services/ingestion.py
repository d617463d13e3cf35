"""Ingestion of keyword research CSV exports into keyword records."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.utils.logging import get_logger

logger = get_logger(__name__)

# Column order of the export: keyword, intent, volume, KD, CPC, traffic potential, parent keyword
COLUMNS = (
    "keyword",
    "intent",
    "volume",
    "difficulty",
    "cost_per_click",
    "traffic_potential",
    "parent_keyword",
)


class IngestionError(RuntimeError):
    """Raised when a keyword export cannot be read."""

    def __init__(self, message: str, *, source: Path | str | None = None) -> None:
        super().__init__(message)
        self.source = source


def record_from_row(row: Sequence[str | None]) -> KeywordRecord:
    """Map one positional row to a record. Missing cells fall back to defaults."""
    values = {}
    for index, name in enumerate(COLUMNS):
        cell = row[index] if index < len(row) else None
        # Empty cells count as missing, like a blank spreadsheet cell
        values[name] = cell if cell not in ("", None) else None
    return KeywordRecord(**values)


def records_from_rows(rows: Iterable[Sequence[str | None]]) -> list[KeywordRecord]:
    """
    Convert raw rows into records.

    The first row is the export header and is always skipped. Fully blank
    rows (such as a trailing newline in the file) are dropped.
    """
    records = []
    skipped = 0
    for line_number, row in enumerate(rows):
        if line_number == 0:
            continue
        if not any((cell or "").strip() for cell in row):
            skipped += 1
            continue
        records.append(record_from_row(row))

    if skipped:
        logger.debug(f"Skipped {skipped} blank rows")
    return records


def read_csv_rows(path: Path | str) -> list[list[str]]:
    """Read all rows of a comma-delimited UTF-8 file."""
    path = Path(path)
    try:
        with open(path, "r", newline="", encoding="utf-8-sig") as f:
            return list(csv.reader(f))
    except FileNotFoundError as exc:
        raise IngestionError(f"File '{path}' was not found", source=path) from exc
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise IngestionError(f"Could not read '{path}': {exc}", source=path) from exc


def load_records(path: Path | str) -> list[KeywordRecord]:
    """Read a keyword export and return its records."""
    rows = read_csv_rows(path)
    records = records_from_rows(rows)
    logger.info(f"Loaded {len(records)} keywords from {path}")
    return records
