"""megaphone - Client for the Megaphone podcast hosting API."""

from megaphone.client import MegaphoneClient, PodcastScope
from megaphone.config import Config, load_config
from megaphone.connection import Connection, HttpMethod, Request
from megaphone.episodes import EpisodeCollectionResource, EpisodeResource
from megaphone.errors import (
    ConfigError,
    MegaphoneAPIError,
    MegaphoneConnectionError,
    MegaphoneError,
    MegaphoneHTTPError,
    MegaphoneResponseError,
    MegaphoneTimeoutError,
    MissingRequiredParameter,
)
from megaphone.models import EpisodeOptions

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigError",
    "Connection",
    "EpisodeCollectionResource",
    "EpisodeOptions",
    "EpisodeResource",
    "HttpMethod",
    "MegaphoneAPIError",
    "MegaphoneClient",
    "MegaphoneConnectionError",
    "MegaphoneError",
    "MegaphoneHTTPError",
    "MegaphoneResponseError",
    "MegaphoneTimeoutError",
    "MissingRequiredParameter",
    "PodcastScope",
    "Request",
    "load_config",
    "__version__",
]
