"""HTTP adapter: ByteFetcher backed by a requests.Session."""

from __future__ import annotations

import asyncio
import logging

import requests

from ..core.errors import DownloadError

logger = logging.getLogger(__name__)


class RequestsFetcher:
    """Fetch bytes with plain GET requests.

    The session is an explicit client object. When none is passed the fetcher
    creates one and closes it in close(); an injected session belongs to the
    caller. The blocking request runs in a worker thread so fetch_bytes can be
    awaited from an event loop.
    """

    def __init__(self, session: requests.Session | None = None):
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> RequestsFetcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _prepare(self, url: str) -> requests.PreparedRequest:
        # Raises MissingSchema/InvalidURL before any I/O happens
        try:
            return self._session.prepare_request(requests.Request("GET", url))
        except (requests.RequestException, ValueError) as e:
            logger.warning("Rejected malformed URL %r: %s", url, e)
            raise DownloadError(f"Malformed URL {url!r}: {e}", url=url) from e

    def _get(self, prepared: requests.PreparedRequest) -> bytes:
        settings = self._session.merge_environment_settings(prepared.url, {}, None, None, None)
        response = self._session.send(prepared, allow_redirects=True, **settings)
        response.raise_for_status()
        return response.content

    async def fetch_bytes(self, url: str) -> bytes:
        prepared = self._prepare(url)
        logger.debug("GET %s", prepared.url)
        try:
            return await asyncio.to_thread(self._get, prepared)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning("Download failed with HTTP %s: %s", status, url)
            raise DownloadError(f"HTTP {status} for {url}", url=url, status_code=status) from e
        except requests.RequestException as e:
            logger.warning("Download failed: %s (%s)", url, e)
            raise DownloadError(f"Download failed for {url}: {e}", url=url) from e
