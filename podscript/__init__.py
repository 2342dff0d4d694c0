"""
PodScript Studio backend

Usage: uvicorn podscript:app --reload --port 3000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import FeedCache, FeedFetchError, FeedFetcher, normalize_feed
from .state import AppState

__all__ = [
    "app",
    "create_app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "AppState",
    "FeedCache",
    "FeedFetchError",
    "FeedFetcher",
    "normalize_feed",
]
