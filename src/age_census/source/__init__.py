"""Age source contracts and implementations."""

from age_census.source.file import DirectorySourceFactory, FileAgeSource, parse_age_line
from age_census.source.scope import open_source
from age_census.source.types import AgeSource, SourceFactory

__all__ = [
    "AgeSource",
    "DirectorySourceFactory",
    "FileAgeSource",
    "SourceFactory",
    "open_source",
    "parse_age_line",
]
