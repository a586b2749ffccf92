"""Cache-aware job preview service."""

import logging

from jobpreview.cache import DescriptionCache
from jobpreview.domain import JobPreview
from jobpreview.extraction import JobDescriptionFetcher, validate_url

logger = logging.getLogger(__name__)


class JobPreviewService:
    """Serves job descriptions, fetching only on cache misses.

    There is no de-duplication of in-flight fetches: concurrent misses for
    the same URL each fetch the page. A per-URL ``asyncio.Future`` that later
    callers await would close that gap if upstream load ever matters.
    """

    def __init__(self, fetcher: JobDescriptionFetcher, cache: DescriptionCache):
        self.fetcher = fetcher
        self.cache = cache

    async def preview(self, url: str) -> JobPreview:
        """Return the description for ``url``.

        Errors raised by the fetcher (InvalidInputError, FetchFailedError,
        ExtractionFailedError) propagate unchanged and nothing is cached.
        """
        validate_url(url)

        cached = await self.cache.get(url)
        if cached is not None:
            logger.debug("Cache hit for %s", url)
            return JobPreview(description=cached, cached=True)

        result = await self.fetcher.fetch(url)
        await self.cache.put(url, result.description)

        return JobPreview(
            description=result.description,
            cached=False,
            platform=result.platform,
        )
