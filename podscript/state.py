"""Application state: feed cache, job store, and upstream clients."""

import logging
from typing import Optional

from fastapi import Request

from .config import ServerConfig
from .services import FeedCache, FeedFetcher, TranscriptionStore, YouTubeClient
from .services.feed_cache import Clock, FeedSource

logger = logging.getLogger(__name__)


class AppState:
    """
    Per-application state, built once in create_app and reached from routes
    through the get_state dependency.
    """

    def __init__(
        self,
        config: ServerConfig,
        fetcher: Optional[FeedSource] = None,
        youtube: Optional[YouTubeClient] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config

        # Upstream clients
        self.fetcher = fetcher or FeedFetcher(
            timeout=config.request_timeout,
            user_agent=config.user_agent,
        )
        self.youtube = youtube or YouTubeClient(
            noembed_url=config.noembed_url,
            timeout=config.request_timeout,
        )

        # Stores
        self.feed_cache = FeedCache(
            self.fetcher,
            ttl_ms=config.cache_ttl_ms,
            episode_limit=config.episode_limit,
            clock=clock,
        )
        self.transcriptions = TranscriptionStore()
        logger.info(
            "[state] feed cache ttl=%sms limit=%s",
            config.cache_ttl_ms,
            config.episode_limit,
        )


def get_state(request: Request) -> AppState:
    return request.app.state.studio
