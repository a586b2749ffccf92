"""Extraction result value objects."""

from dataclasses import dataclass

from .platform import Platform


@dataclass(frozen=True)
class ExtractionResult:
    """Description extracted from a freshly fetched page."""

    description: str
    platform: Platform


@dataclass(frozen=True)
class JobPreview:
    """What the service hands back to its callers.

    ``platform`` is only known for fresh extractions; cache hits leave it
    as ``None``.
    """

    description: str
    cached: bool
    platform: Platform | None = None
