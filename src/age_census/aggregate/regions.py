"""Region-name filtering for multi-region scans."""

from collections.abc import Iterable

from age_census.types import RegionName

# Placeholder region names that multi-region calls treat as no-op partitions.
SKIPPED_REGION_NAMES = frozenset({"empty", "invalid"})


def is_skipped_region(name: RegionName) -> bool:
    """True for None, "" and the placeholder names (case-insensitive)."""
    if not name:
        return True
    return name.lower() in SKIPPED_REGION_NAMES


def filter_regions(names: Iterable[RegionName]) -> list[str]:
    """Drop skipped regions, keeping the rest in their original order."""
    return [name for name in names if not is_skipped_region(name)]
