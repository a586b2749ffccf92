"""Fetch a job page and run the strategy chain over it."""

from __future__ import annotations

import logging

import httpx

from jobpreview.config.settings import DEFAULT_USER_AGENT
from jobpreview.domain import (
    ExtractionFailedError,
    ExtractionResult,
    FetchFailedError,
    InvalidInputError,
    Platform,
    detect_platform,
)
from jobpreview.extraction.strategies import GenericStrategy, get_platform_strategy

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


def build_headers(user_agent: str, accept_language: str) -> dict[str, str]:
    """Browser-like request headers with the given identity and language."""
    return {
        **DEFAULT_HEADERS,
        "User-Agent": user_agent,
        "Accept-Language": accept_language,
    }


def validate_url(url: str) -> httpx.URL:
    """Parse ``url`` as an absolute http(s) URL or raise InvalidInputError."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidInputError(url) from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidInputError(url)
    return parsed


class JobDescriptionFetcher:
    """Downloads a job posting and extracts its description.

    One GET per call, redirects followed, no retries. The platform strategy
    for the URL runs first; when it yields nothing the generic strategy gets
    the page. No timeout is applied unless one is configured, so callers that
    need bounded latency must wrap ``fetch`` themselves.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        generic_strategy: GenericStrategy | None = None,
    ):
        self._client = client
        self._owns_client = client is None
        self._headers = dict(headers or DEFAULT_HEADERS)
        self._timeout = timeout
        self._generic = generic_strategy or GenericStrategy()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> JobDescriptionFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def fetch(self, url: str) -> ExtractionResult:
        """Fetch ``url`` and return its description with the detected platform.

        Raises
        ------
        InvalidInputError
            If ``url`` is not an absolute http(s) URL.
        FetchFailedError
            On a non-success status or a transport error.
        ExtractionFailedError
            If neither the platform nor the generic strategy found text.
        """
        validate_url(url)
        platform = detect_platform(url)

        html = await self._download(url)

        description = self.extract(html, platform)
        if not description:
            logger.info("No description found for %s (platform=%s)", url, platform.value)
            raise ExtractionFailedError(url, platform.value)

        logger.info(
            "Extracted %d chars from %s (platform=%s)",
            len(description), url, platform.value,
        )
        return ExtractionResult(description=description, platform=platform)

    def extract(self, html: str, platform: Platform) -> str | None:
        """Run the platform strategy, then the generic fallback."""
        strategy = get_platform_strategy(platform)
        if strategy is not None:
            description = strategy.extract(html)
            if description:
                return description
            logger.debug("%s strategy found nothing, trying generic", platform.value)

        return self._generic.extract(html)

    async def _download(self, url: str) -> str:
        client = await self._get_client()
        try:
            response = await client.get(
                url,
                headers=self._headers,
                follow_redirects=True,
            )
        except httpx.InvalidURL as e:
            raise InvalidInputError(url) from e
        except httpx.HTTPError as e:
            logger.warning("Fetching %s failed (%s): %s", url, type(e).__name__, e)
            raise FetchFailedError(url, cause=f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            logger.warning("Fetching %s returned status %d", url, response.status_code)
            raise FetchFailedError(url, status_code=response.status_code)

        return response.text
