"""Top-K selection and output formatting."""

from age_census.ranking.format import OUTPUT_FORMAT, format_entries, format_entry, rank_entries
from age_census.ranking.select import TOP_K, select_top, select_top3

__all__ = [
    "OUTPUT_FORMAT",
    "TOP_K",
    "format_entries",
    "format_entry",
    "rank_entries",
    "select_top",
    "select_top3",
]
