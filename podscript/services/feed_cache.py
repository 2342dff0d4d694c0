"""
Feed Cache

Time-to-live cache in front of fetch + normalize, keyed by a hash of the
requested URL (exact string, no URL normalization).

Expiry is lazy: an entry is checked on read and replaced on the next miss.
There is no lock around read-then-write, so concurrent misses for one key
may both fetch; the last write wins. Entries are immutable, so this only
costs a duplicate fetch.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

from ..models.feed import NormalizedFeed, RawFeed
from ..utils import stable_hash
from .feed_normalizer import DEFAULT_EPISODE_LIMIT, normalize_feed

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 10 * 60 * 1000

Clock = Callable[[], float]


def wall_clock_ms() -> float:
    return time.time() * 1000


class FeedFetchError(Exception):
    """Fetching or parsing an upstream feed failed."""


class RawFeedSource(Protocol):
    def fetch(self, url: str) -> RawFeed:
        ...


class FeedSource(RawFeedSource, Protocol):
    """A RawFeedSource that can also return the upstream document untouched."""

    def fetch_xml(self, url: str) -> str:
        ...


@dataclass(frozen=True)
class CacheEntry:
    timestamp: float
    data: NormalizedFeed


class FeedCache:
    """
    Normalized-feed cache.

    Usage:
        cache = FeedCache(FeedFetcher(), ttl_ms=600_000, episode_limit=100)
        feed = await cache.get_feed("https://example.com/rss")
    """

    def __init__(
        self,
        fetcher: RawFeedSource,
        ttl_ms: float = DEFAULT_TTL_MS,
        episode_limit: int = DEFAULT_EPISODE_LIMIT,
        clock: Optional[Clock] = None,
    ):
        self._fetcher = fetcher
        self.ttl_ms = ttl_ms
        self.episode_limit = episode_limit
        self._clock = clock or wall_clock_ms
        self._entries: Dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get_cache_key(self, url: str) -> str:
        return stable_hash(url)

    def lookup(self, url: str) -> Optional[NormalizedFeed]:
        """Fresh cached feed for `url`, or None. Never fetches."""
        entry = self._entries.get(self.get_cache_key(url))
        if entry and self._clock() - entry.timestamp < self.ttl_ms:
            return entry.data
        return None

    async def get_feed(self, url: str) -> NormalizedFeed:
        """
        Return the normalized feed for `url`.

        Raises:
            FeedFetchError: upstream fetch or parse failed. Stale entries are
                never returned as a fallback.
        """
        key = self.get_cache_key(url)
        cached = self.lookup(url)
        if cached is not None:
            logger.debug("[feed_cache] hit key=%s", key)
            return cached

        logger.debug("[feed_cache] miss key=%s url=%s", key, url)
        try:
            raw = await asyncio.to_thread(self._fetcher.fetch, url)
            feed = normalize_feed(raw, self.episode_limit)
        except Exception as e:
            logger.error("[feed_cache] RSS parse error for %s: %s", url, e)
            raise FeedFetchError(f"Failed to parse RSS feed: {e}") from e

        self._entries[key] = CacheEntry(timestamp=self._clock(), data=feed)
        return feed
