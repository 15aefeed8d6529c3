"""hubconfig - Fetch model-hub JSON configs and read them with casing-tolerant views"""

__version__ = "1.0.0"
__description__ = "Fetch model-hub JSON configs and read them with casing-tolerant views"

__all__ = [
    "ConfigView",
    "DownloadError",
    "Hub",
    "HubClientError",
    "ParseError",
    "RequestsFetcher",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import so the core can be used without loading requests or dotenv."""
    if name == "ConfigView":
        from .core.config_view import ConfigView

        return ConfigView
    if name == "Hub":
        from .core.hub import Hub

        return Hub
    if name in ("HubClientError", "DownloadError", "ParseError"):
        from .core import errors

        return getattr(errors, name)
    if name == "RequestsFetcher":
        from .adapters.http import RequestsFetcher

        return RequestsFetcher
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
