"""Frequency-map merging."""

from collections.abc import Mapping

from age_census.types import FrequencyMap


def merge_counts(target: FrequencyMap, partial: Mapping[int, int]) -> FrequencyMap:
    """
    Add every count in `partial` into `target` in place and return `target`.

    Summation is commutative, so the merged result does not depend on the
    order partial maps arrive in.
    """
    target.update(partial)
    return target
