"""FastAPI application with lifespan management."""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from functools import lru_cache

import httpx
from fastapi import FastAPI

from jobpreview import __version__
from jobpreview.api.exception_handlers import setup_exception_handlers
from jobpreview.cache import DescriptionCache
from jobpreview.config.settings import Settings, get_settings
from jobpreview.extraction import JobDescriptionFetcher, build_headers
from jobpreview.service import JobPreviewService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_logging(log_level_name: str = "INFO") -> None:
    """Configure logging for the job preview service."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    logging.getLogger("jobpreview").setLevel(log_level)

    # Quiet noisy third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _log_settings(settings: Settings) -> None:
    logger.info("=" * 60)
    logger.info("Job Preview Service Configuration")
    logger.info("=" * 60)
    logger.info("  Log level: %s", settings.log_level)
    logger.info("  Cache:")
    logger.info("    TTL: %s", settings.cache_ttl)
    logger.info("    Sweep interval: %s", settings.cache_sweep_interval)
    logger.info("  Fetch:")
    logger.info(
        "    Timeout: %s",
        "none" if settings.fetch_timeout is None else f"{settings.fetch_timeout:.1f}s",
    )
    logger.info("    Accept-Language: %s", settings.accept_language)
    logger.info("=" * 60)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create FastAPI application.

    ``transport`` replaces the network transport of the outbound client,
    which lets tests serve job pages without network access.
    """
    from jobpreview.api.routes import health, job_preview

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Start the cache sweep and HTTP client, tear both down on shutdown."""
        _log_settings(settings)

        headers = build_headers(settings.user_agent, settings.accept_language)
        client = httpx.AsyncClient(
            headers=headers,
            timeout=settings.fetch_timeout,
            follow_redirects=True,
            transport=transport,
        )
        fetcher = JobDescriptionFetcher(client, headers=headers)

        cache = DescriptionCache(
            ttl=settings.cache_ttl,
            sweep_interval=settings.cache_sweep_interval,
        )
        cache.start()

        app.state.preview_service = JobPreviewService(fetcher=fetcher, cache=cache)
        logger.info("Job preview service ready")
        yield

        logger.info("Shutting down")
        await cache.stop()
        await client.aclose()
        del app.state.preview_service

    app = FastAPI(
        title="Job Preview Service",
        description="Extracts plain-text job descriptions from posting URLs",
        version=__version__,
        lifespan=lifespan,
    )
    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(job_preview.router, prefix="/api/job-preview", tags=["job-preview"])

    return app
