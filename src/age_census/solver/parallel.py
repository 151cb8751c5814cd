import logging
import time
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import as_completed

from age_census.aggregate import aggregate_one, filter_regions, merge_counts
from age_census.solver.execution import (
    AVAILABLE_CORES,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)
from age_census.source.types import SourceFactory
from age_census.types import FrequencyMap, RegionName

logger = logging.getLogger(__name__)


def aggregate_many(
    regions: Sequence[RegionName],
    factory: SourceFactory,
    *,
    workers: int | None = None,
    executor: str = "auto",
) -> FrequencyMap:
    """
    Scan many regions in parallel and merge their counts.

    1. Drop None, empty and placeholder region names
    2. Scan each remaining region on a bounded pool, one private map per task
    3. Sum the partial maps centrally as tasks complete

    Fail-fast: the first failing region cancels scans that have not started,
    waits for in-flight scans, discards every partial result and re-raises.
    """
    total_start = time.perf_counter()
    kept = filter_regions(regions)

    skipped = len(regions) - len(kept)
    if skipped > 0:
        logger.warning("Skipping %d empty or placeholder region name(s)", skipped)

    counts: FrequencyMap = Counter()
    if not kept:
        logger.info("Result: no regions to scan")
        return counts

    executor_class = get_executor_class(executor, payload=factory)
    executor_name = describe_executor(executor_class)
    max_workers = min(workers or AVAILABLE_CORES, len(kept))

    logger.info(
        "Starting: regions=%d, workers=%d, executor=%s, GIL=%s",
        len(kept),
        max_workers,
        executor_name,
        "enabled" if is_gil_enabled() else "disabled",
    )

    if executor_class is None:
        for region in kept:
            try:
                partial = aggregate_one(region, factory)
            except Exception:
                logger.error("Aborting: region %s failed", region)
                raise
            merge_counts(counts, partial)
    else:
        with executor_class(max_workers=max_workers) as pool:
            futures = {pool.submit(aggregate_one, region, factory): region for region in kept}
            for future in as_completed(futures):
                region = futures[future]
                try:
                    partial = future.result()
                except Exception:
                    logger.error("Aborting: region %s failed, cancelling pending scans", region)
                    pool.shutdown(wait=True, cancel_futures=True)
                    raise
                merge_counts(counts, partial)
                logger.debug("Merged region %s", region)

    total_time = time.perf_counter() - total_start
    logger.info(
        "Result: %d regions, %d ages, %d distinct (total %.2fs)",
        len(kept),
        counts.total(),
        len(counts),
        total_time,
    )
    return counts
