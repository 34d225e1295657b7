from __future__ import annotations

from typing import Optional


class FeedFetchError(Exception):
    """Raised when a feed document cannot be retrieved."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class OutputWriteError(Exception):
    """Raised when the curation artifact cannot be written to disk."""


class ConfigurationError(Exception):
    """Raised when configuration values are missing or invalid."""
