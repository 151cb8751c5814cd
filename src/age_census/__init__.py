"""Age Census - find the most common ages across data regions."""

from age_census.errors import (
    CensusError,
    InvalidArgumentError,
    SourceError,
    SourceOpenError,
    SourceReleaseError,
    SourceScanError,
)
from age_census.ranking import OUTPUT_FORMAT
from age_census.solver import Census

__all__ = [
    "OUTPUT_FORMAT",
    "Census",
    "CensusError",
    "InvalidArgumentError",
    "SourceError",
    "SourceOpenError",
    "SourceReleaseError",
    "SourceScanError",
]
