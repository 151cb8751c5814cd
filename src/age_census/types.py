"""Shared type definitions for age aggregation."""

from collections import Counter
from dataclasses import dataclass

type RegionName = str | None
type AgeValue = int
type FrequencyMap = Counter[int]


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """One ranked age: 1-based position, the age, and how often it was seen."""

    position: int
    value: int
    count: int
