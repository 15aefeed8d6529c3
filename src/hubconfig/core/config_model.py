"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ENDPOINT = "https://huggingface.co"
DEFAULT_REVISION = "main"


@dataclass(frozen=True)
class HubSettings:
    endpoint: str = DEFAULT_ENDPOINT
    revision: str = DEFAULT_REVISION
