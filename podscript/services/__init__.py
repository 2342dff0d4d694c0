"""Backing logic: feed fetch/normalize/cache, YouTube lookup, jobs, books."""

from .book_renderer import (
    SUPPORTED_FORMATS,
    UnsupportedFormatError,
    generate_html_book,
    generate_text_book,
    render_book,
)
from .feed_cache import CacheEntry, FeedCache, FeedFetchError
from .feed_fetcher import FeedFetcher, raw_feed_from_parsed
from .feed_normalizer import (
    format_duration,
    infer_kind,
    normalize_feed,
    normalize_item,
    pick_image_url,
    pick_media,
)
from .transcription_store import TranscriptionStore
from .youtube import (
    YouTubeClient,
    YouTubeLookupError,
    extract_playlist_id,
    extract_youtube_id,
    playlist_info,
)

__all__ = [
    "SUPPORTED_FORMATS",
    "UnsupportedFormatError",
    "generate_html_book",
    "generate_text_book",
    "render_book",
    "CacheEntry",
    "FeedCache",
    "FeedFetchError",
    "FeedFetcher",
    "raw_feed_from_parsed",
    "format_duration",
    "infer_kind",
    "normalize_feed",
    "normalize_item",
    "pick_image_url",
    "pick_media",
    "TranscriptionStore",
    "YouTubeClient",
    "YouTubeLookupError",
    "extract_playlist_id",
    "extract_youtube_id",
    "playlist_info",
]
