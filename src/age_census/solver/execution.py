"""Execution policy and executor selection utilities."""

import os
import pickle
import sys
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor

from age_census.errors import InvalidArgumentError

type ExecutorClass = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable to override executor selection.
CENSUS_EXECUTOR_ENV = "CENSUS_EXECUTOR"

EXECUTOR_POLICIES = ("auto", "threads", "processes", "serial")

# Hardware concurrency, used only to size the worker pool.
AVAILABLE_CORES = os.cpu_count() or 1


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def is_picklable(obj: object) -> bool:
    """True if `obj` can be shipped to a worker process."""
    try:
        pickle.dumps(obj)
    except (pickle.PicklingError, TypeError, AttributeError):
        return False
    return True


def validate_policy(policy: str) -> str:
    normalized = policy.lower()
    if normalized not in EXECUTOR_POLICIES:
        raise InvalidArgumentError(
            f"executor policy must be one of {', '.join(EXECUTOR_POLICIES)}, got {policy!r}"
        )
    return normalized


def get_executor_class(policy: str = "auto", payload: object = None) -> ExecutorClass:
    """
    Select the appropriate executor class.

    Priority:
    1. CENSUS_EXECUTOR env var override ("threads", "processes", or "serial")
    2. The `policy` argument
    3. Auto-select based on GIL status (disabled -> threads, enabled -> processes)

    `payload` is whatever each task ships to a worker. It is only pickled
    when processes are in play: auto falls back to threads when it can't be
    pickled, and an explicit "processes" policy is rejected. "serial" runs in
    the calling thread - useful for debugging with breakpoints.
    """
    executor_override = os.environ.get(CENSUS_EXECUTOR_ENV, "")
    selected = validate_policy(executor_override or policy)

    if selected == "threads":
        return ThreadPoolExecutor
    if selected == "processes":
        if payload is not None and not is_picklable(payload):
            raise InvalidArgumentError(
                "executor policy 'processes' needs a picklable source factory"
            )
        return ProcessPoolExecutor
    if selected == "serial":
        return None

    if is_gil_enabled() and (payload is None or is_picklable(payload)):
        return ProcessPoolExecutor
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"
