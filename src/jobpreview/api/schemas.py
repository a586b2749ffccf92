"""Request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from jobpreview.domain import Platform


class JobPreviewResponse(BaseModel):
    """Extracted job description.

    ``platform`` is only reported for fresh extractions, not cache hits.
    """

    description: str = Field(..., description="Plain-text job description")
    platform: Platform | None = Field(None, description="Detected hosting platform")
    cached: bool = Field(..., description="Whether the description came from the cache")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "**About the role**\nWe build tools.",
                "platform": "comeet",
                "cached": False,
            },
        },
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")
    status_code: int | None = Field(None, description="Upstream HTTP status, if any")


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Service version")
    cache_entries: int = Field(..., description="Number of cached descriptions")
    sweep_running: bool = Field(..., description="Whether the expiry sweep is active")
