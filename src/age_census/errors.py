"""Error taxonomy for census aggregation."""


class CensusError(Exception):
    """Base class for all census failures."""


class InvalidArgumentError(CensusError, ValueError):
    """Raised when a caller violates an input contract."""


class SourceError(CensusError):
    """
    Failure raised while opening, scanning or releasing a region's age source.

    Positional args are kept as (region, message) so instances survive
    pickling across a process pool.
    """

    def __init__(self, region: str, message: str):
        super().__init__(region, message)
        self.region = region
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (region={self.region!r})"


class SourceOpenError(SourceError):
    """The source factory failed to open a region."""


class SourceScanError(SourceError):
    """Reading values from an open source failed."""


class SourceReleaseError(SourceError):
    """Closing a source failed."""
