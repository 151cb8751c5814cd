"""Top-K selection over frequency maps."""

import heapq
from collections.abc import Mapping

TOP_K = 3


def _rank_key(item: tuple[int, int]) -> tuple[int, int]:
    value, count = item
    return (-count, value)


def select_top(counts: Mapping[int, int], k: int = TOP_K) -> list[tuple[int, int]]:
    """
    Return up to `k` (value, count) pairs, highest count first.

    Equal counts are ordered by ascending value, so the result depends only
    on the map's contents and never on insertion order.
    """
    positive = ((value, count) for value, count in counts.items() if count > 0)
    return heapq.nsmallest(k, positive, key=_rank_key)


def select_top3(counts: Mapping[int, int]) -> list[tuple[int, int]]:
    return select_top(counts, TOP_K)
