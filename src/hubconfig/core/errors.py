"""Errors raised at the hub fetch boundary."""

from __future__ import annotations


class HubClientError(Exception):
    """Base class for hub client failures."""


class DownloadError(HubClientError):
    """Bytes could not be obtained (bad URL or transport failure)."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(HubClientError):
    """Fetched bytes did not decode into a top-level JSON object."""
