"""Fake pages, clocks and transports used across tests."""

import json
from typing import Any

import httpx

LONG_PARAGRAPH = (
    "We are looking for a backend engineer to design, build and operate the "
    "services that power our hiring platform across several regions."
)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def comeet_page(position_data: str | dict[str, Any], extra_head: str = "") -> str:
    """Build a Comeet-style page embedding ``position_data``."""
    if isinstance(position_data, dict):
        position_data = json.dumps(position_data)
    return (
        "<html><head>"
        f"{extra_head}"
        "<script>\n"
        f"POSITION_DATA = {position_data};\n"
        'var COMPANY_DATA = {"name": "Acme"};\n'
        '</script></head><body><div id="app"></div></body></html>'
    )


def article_page(text: str = LONG_PARAGRAPH) -> str:
    """A page with no platform markers whose article holds ``text``."""
    return f"<html><body><nav>Home</nav><article><p>{text}</p></article></body></html>"


class RecordingHandler:
    """MockTransport handler that serves a fixed response and records requests."""

    def __init__(self, html: str = "", status_code: int = 200):
        self.html = html
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.html)

    @property
    def calls(self) -> int:
        return len(self.requests)
