"""HTTP API for the job preview service."""
