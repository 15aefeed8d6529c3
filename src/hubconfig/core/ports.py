"""Core ports (interfaces) for hubconfig.

The hub core only needs one capability from the outside world: fetching the
bytes behind a URL. Transport details live in adapters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteFetcher(Protocol):
    """Retrieve raw bytes for a URL with a single GET."""

    async def fetch_bytes(self, url: str) -> bytes:
        """Return the response body; raise DownloadError on failure."""
