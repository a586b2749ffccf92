"""Job description preview endpoint."""

import logging

from fastapi import APIRouter, Query

from jobpreview.api.dependencies import PreviewServiceDep
from jobpreview.api.schemas import ErrorResponse, JobPreviewResponse
from jobpreview.domain import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=JobPreviewResponse,
    response_model_exclude_none=True,
    summary="Extract a job description from a posting URL",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        422: {"model": ErrorResponse, "description": "No description found on the page"},
        502: {"model": ErrorResponse, "description": "The job page could not be fetched"},
    },
)
async def get_job_preview(
    service: PreviewServiceDep,
    url: str | None = Query(None, description="Job posting URL"),
) -> JobPreviewResponse:
    """
    Fetch a job posting and return its description as plain text.

    Results are cached per URL; cache hits report ``cached: true`` and omit
    the platform.
    """
    if not url:
        raise InvalidInputError(url, message="URL parameter is required")

    preview = await service.preview(url)

    return JobPreviewResponse(
        description=preview.description,
        platform=preview.platform,
        cached=preview.cached,
    )
