"""Single-region scanning."""

import logging
from collections import Counter

from age_census.errors import SourceError, SourceScanError
from age_census.source.scope import open_source
from age_census.source.types import SourceFactory
from age_census.types import FrequencyMap

logger = logging.getLogger(__name__)


def aggregate_one(region: str, factory: SourceFactory) -> FrequencyMap:
    """
    Drain the source for one region into a fresh frequency map.

    Negative ages are invalid sentinels and are dropped without error. The
    source is released before this returns or raises; a failure while
    reading surfaces as SourceScanError naming the region.
    """
    counts: FrequencyMap = Counter()
    discarded = 0

    with open_source(region, factory) as source:
        try:
            for age in source:
                if age >= 0:
                    counts[age] += 1
                else:
                    discarded += 1
        except SourceError:
            raise
        except Exception as exc:
            raise SourceScanError(region, f"failed to scan age source: {exc}") from exc

    logger.debug(
        "Scanned region %s: %d valid, %d discarded, %d distinct",
        region,
        counts.total(),
        discarded,
        len(counts),
    )
    return counts
