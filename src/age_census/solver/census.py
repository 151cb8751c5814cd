import logging
from collections.abc import Sequence

from age_census.aggregate import aggregate_one
from age_census.errors import InvalidArgumentError
from age_census.ranking import format_entries, rank_entries, select_top3
from age_census.solver.execution import validate_policy
from age_census.solver.parallel import aggregate_many
from age_census.source.types import SourceFactory
from age_census.types import FrequencyMap, RegionName

logger = logging.getLogger(__name__)


def render_top3(counts: FrequencyMap) -> list[str]:
    """Select, rank and format the three most common ages."""
    return format_entries(rank_entries(select_top3(counts)))


class Census:
    """
    Computes the three most common ages for one or many regions.

    Holds only its configuration, so one instance can be shared across
    threads and called repeatedly with identical results.
    """

    def __init__(
        self,
        factory: SourceFactory,
        *,
        workers: int | None = None,
        executor: str = "auto",
    ):
        if workers is not None and workers < 1:
            raise InvalidArgumentError(f"workers must be positive, got {workers}")
        self._factory = factory
        self._workers = workers
        self._executor = validate_policy(executor)

    def top3_ages(self, region: RegionName) -> list[str]:
        """Top three ages for one region; a missing name yields no data."""
        if not region:
            return []
        return render_top3(aggregate_one(region, self._factory))

    def top3_ages_many(self, regions: Sequence[RegionName] | None) -> list[str]:
        """
        Top three ages across all `regions`.

        Raises InvalidArgumentError for a missing or empty sequence. Returns
        an empty list when no region produced a valid age.
        """
        if regions is None or isinstance(regions, str):
            raise InvalidArgumentError("regions must be a sequence of region names")
        names = list(regions)
        if not names:
            raise InvalidArgumentError("regions must not be empty")

        counts = aggregate_many(
            names,
            self._factory,
            workers=self._workers,
            executor=self._executor,
        )
        if not counts:
            return []
        return render_top3(counts)
