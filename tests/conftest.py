"""Shared test fixtures for the job preview service."""

import httpx
import pytest

from tests.shared.fakes import FakeClock, RecordingHandler, article_page


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def handler() -> RecordingHandler:
    """Handler serving a generic article page with status 200."""
    return RecordingHandler(html=article_page())


@pytest.fixture
def client(handler: RecordingHandler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
