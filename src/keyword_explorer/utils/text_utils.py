"""Text and number utilities for keyword records."""

import re

_LEADING_INT = re.compile(r"^[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_int(value: object, default: int | None = 0) -> int | None:
    """
    Parse the leading integer of a value.

    Mirrors how spreadsheet exports are usually read: surrounding whitespace is
    ignored and trailing junk after the digits is dropped, so ``"42%"`` gives 42
    and ``"3.7"`` gives 3.

    Args:
        value: Raw cell value (string, number or None)
        default: Returned when no leading integer is found

    Returns:
        Parsed integer or ``default``
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else default

    match = _LEADING_INT.match(str(value).strip())
    if not match:
        return default
    try:
        return int(match.group(0))
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit
        return default


def parse_float(value: object, default: float | None = 0.0) -> float | None:
    """
    Parse the leading decimal number of a value.

    Args:
        value: Raw cell value (string, number or None)
        default: Returned when no leading number is found

    Returns:
        Parsed float or ``default``
    """
    if value is None:
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        result = float(value)
        return result if result == result else default

    match = _LEADING_FLOAT.match(str(value).strip())
    if not match:
        return default
    return float(match.group(0))


def parse_volume(volume: str, default: int | None = 0) -> int | None:
    """Parse a search volume display string such as ``"12,100"``."""
    return parse_int(volume.replace(",", ""), default=default)


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens in trimmed text."""
    return len(text.split())


def contains_term(text: str, term: str) -> bool:
    """Case-insensitive substring check."""
    return term.lower() in text.lower()
