"""Parallel scheduling and the public census entry point."""

from age_census.solver.census import Census, render_top3
from age_census.solver.parallel import aggregate_many

__all__ = ["Census", "aggregate_many", "render_top3"]
