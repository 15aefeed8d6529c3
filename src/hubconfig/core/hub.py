"""Hub client core: URL construction, download and decode of config files."""

from __future__ import annotations

import json
import logging

from .config_model import HubSettings
from .config_view import ConfigView
from .errors import ParseError
from .json_value import is_object
from .ports import ByteFetcher

logger = logging.getLogger(__name__)


class Hub:
    """Downloads JSON configuration files from a model hub.

    Usage:
        with RequestsFetcher() as fetcher:
            hub = Hub(fetcher)
            config = asyncio.run(hub.download_config("bert-base-uncased", "config.json"))
            config.hiddenSize.int_value  # 768
    """

    def __init__(self, fetcher: ByteFetcher, settings: HubSettings | None = None):
        self._fetcher = fetcher
        self._settings = settings if settings is not None else HubSettings()

    @property
    def settings(self) -> HubSettings:
        return self._settings

    def url_for(self, repo_id: str, filename: str) -> str:
        """Build ``<endpoint>/<repo_id>/resolve/<revision>/<filename>``.

        repo_id and filename are inserted verbatim.
        """
        endpoint = self._settings.endpoint.rstrip("/")
        return f"{endpoint}/{repo_id}/resolve/{self._settings.revision}/{filename}"

    async def download_config(self, repo_id: str, filename: str) -> ConfigView:
        """Download ``filename`` from ``repo_id`` and wrap it in a ConfigView.

        Raises:
            DownloadError: the bytes could not be fetched
            ParseError: the bytes are not a JSON object
        """
        url = self.url_for(repo_id, filename)
        logger.debug("Downloading config %s", url)
        data = await self._fetcher.fetch_bytes(url)
        logger.debug("Fetched %d bytes from %s", len(data), url)
        return self.decode_config(data)

    @staticmethod
    def decode_config(data: bytes) -> ConfigView:
        """Decode JSON bytes into a ConfigView over the top-level object.

        A UTF-8 BOM is accepted. Syntax errors, bad encodings, oversized
        integer literals and runaway nesting all raise ParseError.
        """
        try:
            parsed = json.loads(data)
        except (ValueError, RecursionError) as e:
            logger.warning("Config is not valid JSON: %s", e)
            raise ParseError(f"Invalid JSON: {e}") from e

        if not is_object(parsed):
            logger.warning("Config top level is %s, expected an object", type(parsed).__name__)
            raise ParseError(f"Expected a JSON object at top level, got {type(parsed).__name__}")
        return ConfigView(parsed)
