# kitsu/__init__.py
"""
Kitsu (kitsu.io edge API) client package.
"""

# Публичный API
from kitsu.api import KitsuClient
from kitsu.async_api import AsyncKitsuClient
from kitsu.config import ApiConfig, ConfigManager, NetworkConfig
from kitsu.endpoints import API_URL
from kitsu.errors import (
    BadRequestError,
    DeserializationError,
    InvalidResponseError,
    KitsuError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    ResponseError,
    UnauthorizedError,
    UrlError,
)
from kitsu.models import Anime, Character, Image, Manga, Producer, Response, User
from kitsu.net_client import NetClient
from kitsu.search import Search

__all__ = [
    # Public API
    "API_URL",
    "KitsuClient",
    "AsyncKitsuClient",
    "Search",
    # Config
    "ConfigManager",
    "NetworkConfig",
    "ApiConfig",
    "NetClient",
    # Domain models
    "Response",
    "Anime",
    "Manga",
    "Character",
    "Producer",
    "User",
    "Image",
    # Errors
    "KitsuError",
    "UrlError",
    "NetworkError",
    "NetworkTimeoutError",
    "NetworkConnectionError",
    "ResponseError",
    "BadRequestError",
    "UnauthorizedError",
    "InvalidResponseError",
    "DeserializationError",
]
