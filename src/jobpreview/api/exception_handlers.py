"""Map job preview exceptions to HTTP responses.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE",
        "status_code": 404          # only for upstream fetch failures
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from jobpreview.domain import ErrorCode, FetchFailedError, JobPreviewError

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    # The upstream job page is the failing gateway
    ErrorCode.FETCH_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.EXTRACTION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def _create_error_response(exc: JobPreviewError) -> JSONResponse:
    content: dict[str, object] = {
        "detail": exc.message,
        "code": exc.code.value,
    }
    if isinstance(exc, FetchFailedError) and exc.status_code is not None:
        content["status_code"] = exc.status_code

    return JSONResponse(
        status_code=ERROR_CODE_TO_STATUS.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=content,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the job preview exception handler on the application."""

    @app.exception_handler(JobPreviewError)
    async def job_preview_exception_handler(
        request: Request,
        exc: JobPreviewError,
    ) -> JSONResponse:
        logger.warning(
            "Job preview error on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _create_error_response(exc)
