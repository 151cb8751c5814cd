"""Shared fixtures: in-memory age sources that record how they are used."""

import threading
import time
from collections.abc import Iterable

import pytest

from age_census.solver import execution


class FakeAgeSource:
    """Yields a fixed list of ages; can fail mid-stream or on close."""

    def __init__(
        self,
        ages: Iterable[int],
        fail_after: int | None = None,
        close_error: Exception | None = None,
        delay: float = 0.0,
    ):
        self._ages = iter(ages)
        self._fail_after = fail_after
        self._close_error = close_error
        self._delay = delay
        self._yielded = 0
        self.close_calls = 0

    def __iter__(self) -> "FakeAgeSource":
        return self

    def __next__(self) -> int:
        if self._fail_after is not None and self._yielded >= self._fail_after:
            raise OSError("stream interrupted")
        if self._delay:
            time.sleep(self._delay)
        age = next(self._ages)
        self._yielded += 1
        return age

    def close(self) -> None:
        self.close_calls += 1
        if self._close_error is not None:
            raise self._close_error


class FakeSourceFactory:
    """
    Maps region names to lists of ages.

    Unknown regions raise KeyError at open time. Regions listed in
    `scan_failures` break after that many values; regions in
    `release_failures` raise on close.
    """

    def __init__(
        self,
        data: dict[str, list[int]],
        scan_failures: dict[str, int] | None = None,
        release_failures: Iterable[str] = (),
        delay: float = 0.0,
    ):
        self.data = data
        self.scan_failures = scan_failures or {}
        self.release_failures = set(release_failures)
        self.delay = delay
        self.opened: list[str] = []
        self.sources: dict[str, list[FakeAgeSource]] = {}
        self._lock = threading.Lock()

    def __call__(self, region: str) -> FakeAgeSource:
        if region not in self.data:
            raise KeyError(region)
        source = FakeAgeSource(
            self.data[region],
            fail_after=self.scan_failures.get(region),
            close_error=OSError("close failed") if region in self.release_failures else None,
            delay=self.delay,
        )
        with self._lock:
            self.opened.append(region)
            self.sources.setdefault(region, []).append(source)
        return source

    def close_calls(self, region: str) -> int:
        return sum(source.close_calls for source in self.sources.get(region, []))


@pytest.fixture(autouse=True)
def clear_executor_override(monkeypatch) -> None:
    monkeypatch.delenv(execution.CENSUS_EXECUTOR_ENV, raising=False)


@pytest.fixture
def make_factory():
    return FakeSourceFactory
