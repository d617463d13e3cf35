"""Summary statistics over filtered keyword records."""

from typing import Sequence

from keyword_explorer.models.keyword import KeywordRecord
from keyword_explorer.models.results import KeywordStats


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest integer, .5 going up."""
    # Exact integer form of floor(n / d + 0.5)
    return (2 * numerator + denominator) // (2 * denominator)


def aggregate(records: Sequence[KeywordRecord]) -> KeywordStats:
    """Total volume and average difficulty; zeros for an empty collection."""
    if not records:
        return KeywordStats()

    total_volume = sum(record.volume_value for record in records)
    total_difficulty = sum(record.difficulty for record in records)

    return KeywordStats(
        count=len(records),
        total_volume=total_volume,
        average_difficulty=round_half_up(total_difficulty, len(records)),
    )
