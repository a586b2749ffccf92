"""API route handlers."""

from jobpreview.api.routes import health, job_preview

__all__ = ["health", "job_preview"]
