"""Env configuration adapter producing structured HubSettings."""

from __future__ import annotations

from ..config import config
from ..core.config_model import HubSettings


def load_hub_settings() -> HubSettings:
    return HubSettings(
        endpoint=config.HUB_ENDPOINT,
        revision=config.HUB_REVISION,
    )
