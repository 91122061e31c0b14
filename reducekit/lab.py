"""
Sample data and worked reductions from the lessons.

The battery exercise sums assembled battery batches; the monologue exercise
reduces lines of text into a histogram keyed by word count.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from reducekit.aggregation import reduce

BATTERY_BATCHES: Tuple[int, ...] = (4, 5, 3, 4, 4, 6, 5)

DRIVERS: Tuple[str, ...] = ("Bobby", "Sammy", "Sally", "Annette", "Sarah", "bobby")

DRIVER_RECORDS: Tuple[Dict[str, str], ...] = (
    {"name": "Bobby", "hometown": "Pittsburgh"},
    {"name": "Sammy", "hometown": "New York"},
    {"name": "Sally", "hometown": "Cleveland"},
    {"name": "Annette", "hometown": "Los Angeles"},
    {"name": "Bobby", "hometown": "Tampa Bay"},
)


def total_batteries(batches: Iterable[int] = BATTERY_BATCHES) -> int:
    """Total number of batteries across all assembled batches."""
    return reduce(batches, lambda total, batch: total + batch, 0)


def word_count_map(lines: Iterable[str]) -> Dict[int, int]:
    """
    Map each word count to the number of lines having that many words.

    Words are whitespace-separated; a blank line counts as zero words.
    """

    def _tally(counts: Dict[int, int], line: str) -> Dict[int, int]:
        words = len(line.split())
        # Build a new dict each step so the caller's accumulator stays untouched.
        return {**counts, words: counts.get(words, 0) + 1}

    return reduce(lines, _tally, {})


__all__ = [
    "BATTERY_BATCHES",
    "DRIVERS",
    "DRIVER_RECORDS",
    "total_batteries",
    "word_count_map",
]
