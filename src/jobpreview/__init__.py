"""Job posting description extraction service."""

__version__ = "0.1.0"
