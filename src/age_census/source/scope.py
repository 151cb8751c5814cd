"""Scoped acquisition of age sources."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from age_census.errors import SourceError, SourceOpenError, SourceReleaseError
from age_census.source.types import AgeSource, SourceFactory

logger = logging.getLogger(__name__)


@contextmanager
def open_source(region: str, factory: SourceFactory) -> Iterator[AgeSource]:
    """
    Open the source for `region` and guarantee it is closed once on exit.

    Factory failures surface as SourceOpenError and close() failures as
    SourceReleaseError, both naming the region. A release failure replaces
    any error raised by the body; the body's error stays on __context__.
    """
    try:
        source = factory(region)
    except SourceError:
        raise
    except Exception as exc:
        raise SourceOpenError(region, f"failed to open age source: {exc}") from exc

    logger.debug("Opened source for region %s", region)
    try:
        yield source
    finally:
        release_error = _release(source)
        if release_error is not None:
            raise SourceReleaseError(
                region, f"failed to release age source: {release_error}"
            ) from release_error
        logger.debug("Released source for region %s", region)


def _release(source: AgeSource) -> Exception | None:
    try:
        source.close()
    except Exception as exc:
        return exc
    return None
