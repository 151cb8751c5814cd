"""Rendering of ranked ages into the output string form."""

from collections.abc import Iterable

from age_census.types import RankedEntry

# Position:Age=Total
OUTPUT_FORMAT = "{position}:{value}={count}"


def rank_entries(pairs: Iterable[tuple[int, int]]) -> list[RankedEntry]:
    """Number already-ordered (value, count) pairs from 1."""
    return [
        RankedEntry(position, value, count)
        for position, (value, count) in enumerate(pairs, start=1)
    ]


def format_entry(entry: RankedEntry) -> str:
    return OUTPUT_FORMAT.format(
        position=entry.position,
        value=entry.value,
        count=entry.count,
    )


def format_entries(entries: Iterable[RankedEntry]) -> list[str]:
    return [format_entry(entry) for entry in entries]
