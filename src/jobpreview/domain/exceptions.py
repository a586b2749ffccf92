"""Job preview exceptions and error codes.

Every error a caller can observe inherits from JobPreviewError and carries a
stable ErrorCode, so the presentation layer can branch on the kind instead of
parsing messages.

Strategy-internal failures (malformed embedded data, markup that does not
match) never surface here: strategies report them as "no result".
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients."""

    INVALID_INPUT = "INVALID_INPUT"
    FETCH_FAILED = "FETCH_FAILED"
    EXTRACTION_FAILED = "EXTRACTION_FAILED"


class JobPreviewError(Exception):  # NOQA: N818
    """Base exception for all job preview errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Structured context such as the URL, status code or cause
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class InvalidInputError(JobPreviewError):
    """Raised when the URL cannot be parsed as an http(s) URL."""

    def __init__(self, url: str | None, message: str = "Invalid URL"):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_INPUT,
            details={"url": url},
        )
        self.url = url


class FetchFailedError(JobPreviewError):
    """Raised when the job page could not be fetched.

    Either the upstream answered with a non-success status (``status_code``
    is set) or the transport failed (``cause`` is set). Not retried.
    """

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        cause: str | None = None,
    ):
        if status_code is not None:
            message = f"Failed to fetch job page: {status_code}"
        else:
            message = f"Failed to fetch job page: {cause or 'unknown error'}"
        details: dict[str, Any] = {"url": url}
        if status_code is not None:
            details["status_code"] = status_code
        if cause is not None:
            details["cause"] = cause
        super().__init__(message=message, code=ErrorCode.FETCH_FAILED, details=details)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class ExtractionFailedError(JobPreviewError):
    """Raised when the page was fetched but no strategy produced text."""

    def __init__(self, url: str, platform: str):
        super().__init__(
            message="Could not extract job description from page",
            code=ErrorCode.EXTRACTION_FAILED,
            details={"url": url, "platform": platform},
        )
        self.url = url
        self.platform = platform
