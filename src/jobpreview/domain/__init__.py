"""Domain types shared by the extraction engine and its callers."""

from .exceptions import (
    ErrorCode,
    ExtractionFailedError,
    FetchFailedError,
    InvalidInputError,
    JobPreviewError,
)
from .platform import Platform, detect_platform
from .result import ExtractionResult, JobPreview

__all__ = [
    "ErrorCode",
    "ExtractionFailedError",
    "ExtractionResult",
    "FetchFailedError",
    "InvalidInputError",
    "JobPreview",
    "JobPreviewError",
    "Platform",
    "detect_platform",
]
