"""Per-region aggregation into frequency maps."""

from age_census.aggregate.merge import merge_counts
from age_census.aggregate.regions import filter_regions, is_skipped_region
from age_census.aggregate.scan import aggregate_one

__all__ = ["aggregate_one", "filter_regions", "is_skipped_region", "merge_counts"]
