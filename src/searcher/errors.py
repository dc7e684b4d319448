"""Exceptions that end a run or mark a single target as failed."""

from __future__ import annotations

from typing import Optional


class ConfigError(RuntimeError):
    """Raised when required settings are missing before any network call."""


class GitHubAPIError(RuntimeError):
    """Non-success status or unusable body from a GHES endpoint."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, url: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


__all__ = ["ConfigError", "GitHubAPIError"]
