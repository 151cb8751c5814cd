"""Contracts for the per-region age sources consumed by the aggregator."""

from collections.abc import Callable, Iterator
from typing import Protocol


class AgeSource(Protocol):
    """
    A finite, single-use stream of ages for one region.

    Iteration yields integers until exhausted. close() releases whatever the
    source opened and is called exactly once per successful open.
    """

    def __iter__(self) -> Iterator[int]: ...

    def __next__(self) -> int: ...

    def close(self) -> None: ...


type SourceFactory = Callable[[str], AgeSource]
