"""Extraction strategies, one per supported platform plus the generic fallback."""

from jobpreview.domain import Platform

from .base import ExtractionStrategy
from .comeet import ComeetStrategy
from .generic import GenericStrategy
from .greenhouse import GreenhouseStrategy
from .lever import LeverStrategy
from .linkedin import LinkedInStrategy

# GENERIC has no entry here; GenericStrategy runs as the fallback.
PLATFORM_STRATEGIES: dict[Platform, ExtractionStrategy] = {
    Platform.COMEET: ComeetStrategy(),
    Platform.LEVER: LeverStrategy(),
    Platform.GREENHOUSE: GreenhouseStrategy(),
    Platform.LINKEDIN: LinkedInStrategy(),
}


def get_platform_strategy(platform: Platform) -> ExtractionStrategy | None:
    """Return the platform-specific strategy, or None for GENERIC."""
    return PLATFORM_STRATEGIES.get(platform)


__all__ = [
    "PLATFORM_STRATEGIES",
    "ComeetStrategy",
    "ExtractionStrategy",
    "GenericStrategy",
    "GreenhouseStrategy",
    "LeverStrategy",
    "LinkedInStrategy",
    "get_platform_strategy",
]
