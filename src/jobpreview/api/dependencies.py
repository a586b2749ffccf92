"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from jobpreview.cache import DescriptionCache
from jobpreview.service import JobPreviewService


def get_preview_service(request: Request) -> JobPreviewService:
    return request.app.state.preview_service


def get_cache(request: Request) -> DescriptionCache:
    return request.app.state.preview_service.cache


PreviewServiceDep = Annotated[JobPreviewService, Depends(get_preview_service)]
CacheDep = Annotated[DescriptionCache, Depends(get_cache)]
