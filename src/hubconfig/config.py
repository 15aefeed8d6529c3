"""Configuration for hubconfig"""

import os

from dotenv import load_dotenv

from .core.config_model import DEFAULT_ENDPOINT, DEFAULT_REVISION

load_dotenv()


class Config:
    """Process-wide settings read from the environment (and .env)"""

    # Hub
    HUB_ENDPOINT = os.getenv("HUB_ENDPOINT", DEFAULT_ENDPOINT)
    HUB_REVISION = os.getenv("HUB_REVISION", DEFAULT_REVISION)

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()
