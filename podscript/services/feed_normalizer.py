"""
Feed normalization.

Turns a RawFeed (whatever the upstream parser produced) into a NormalizedFeed.
Pure: no I/O, never raises. Each field is resolved by an ordered chain of
extractors; the first one returning a non-empty value wins.
"""

import re
from typing import Callable, Iterable, List, Optional, Tuple

from ..models.feed import (
    FeedMeta,
    ImageAttributes,
    ImageHref,
    ImageUrl,
    ItunesImage,
    NormalizedEpisode,
    NormalizedFeed,
    RawFeed,
    RawFeedItem,
)
from ..utils import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    normalize_to_https,
    safe_truncate,
    stable_hash,
    strip_html,
)

DEFAULT_EPISODE_LIMIT = 100

HLS_MARKER = ".m3u8"
VIDEO_EXTENSION_PATTERN = re.compile(r"\.(mp4|webm|mov)(\?|$)")
SECONDS_PATTERN = re.compile(r"[0-9]+")

Extractor = Callable[[], Optional[str]]


def _first(extractors: Iterable[Extractor]) -> str:
    for extract in extractors:
        value = extract()
        if value:
            return value
    return ""


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------


def pick_media(item: RawFeedItem) -> Tuple[str, str]:
    """Return (url, type): enclosure, then first media:content, then the web link."""
    enclosure = item.enclosure
    if enclosure and enclosure.url:
        return enclosure.url, enclosure.type or ""

    if item.media_content:
        media = item.media_content[0]
        if media.url:
            return media.url, media.type or ""

    return item.link or "", ""


def infer_kind(media_url: Optional[str], media_type: Optional[str]) -> str:
    """'video' for video/* types, HLS manifests and video containers; else 'audio'."""
    url = (media_url or "").lower()
    mime = (media_type or "").lower()
    if mime.startswith("video/") or HLS_MARKER in url or VIDEO_EXTENSION_PATTERN.search(url):
        return "video"
    return "audio"


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------


def resolve_itunes_image(image: Optional[ItunesImage]) -> str:
    if image is None:
        return ""
    if isinstance(image, str):
        return image
    if isinstance(image, ImageHref):
        return image.href
    if isinstance(image, ImageUrl):
        return image.url
    if isinstance(image, ImageAttributes):
        return image.attrs.href
    return ""


def _thumbnail_url(item: RawFeedItem) -> Optional[str]:
    if item.media_thumbnail:
        return item.media_thumbnail[0].url
    return None


def pick_image_url(item: RawFeedItem, feed_image: str = "") -> str:
    """media:thumbnail, then itunes:image (any shape), then the feed image."""
    url = _first([
        lambda: _thumbnail_url(item),
        lambda: resolve_itunes_image(item.itunes_image),
        lambda: feed_image,
    ])
    return normalize_to_https(url)


def pick_feed_image(feed: RawFeed) -> str:
    url = _first([
        lambda: feed.image.url if feed.image else None,
        lambda: resolve_itunes_image(feed.itunes_image),
    ])
    return normalize_to_https(url)


# ---------------------------------------------------------------------------
# Text and duration
# ---------------------------------------------------------------------------


def pick_description(item: RawFeedItem) -> str:
    return _first([
        lambda: item.content_snippet,
        lambda: item.itunes_summary,
        lambda: strip_html(item.content_encoded),
        lambda: item.content,
    ])


def format_duration(duration) -> str:
    """
    Render a duration for display.

    Colon-formatted values pass through. A plain count of seconds (digits
    only) becomes H:MM:SS for an hour or more, M:SS otherwise. Anything else,
    negative numbers included, passes through unchanged.
    """
    if duration is None or duration == "":
        return ""
    text = str(duration)
    if ":" in text:
        return text
    if not SECONDS_PATTERN.fullmatch(text.strip()):
        return text
    seconds = int(text.strip())
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


# ---------------------------------------------------------------------------
# Items and feed
# ---------------------------------------------------------------------------


def normalize_item(item: RawFeedItem, index: int, feed_image: str = "") -> Optional[NormalizedEpisode]:
    """Normalize one item, or None when it has no media URL."""
    media_url, media_type = pick_media(item)
    if not media_url:
        return None

    return NormalizedEpisode(
        id=stable_hash(item.guid or item.link or media_url),
        index=index,
        title=safe_truncate(item.title, TITLE_MAX_LENGTH),
        description=safe_truncate(pick_description(item), DESCRIPTION_MAX_LENGTH),
        media_url=normalize_to_https(media_url),
        media_type=media_type,
        kind=infer_kind(media_url, media_type),
        image=pick_image_url(item, feed_image),
        pub_date=item.pub_date or item.iso_date or "",
        duration=format_duration(item.duration),
        season=item.season or "",
        episode=item.episode or "",
        link=item.link or "",
    )


def normalize_feed(feed: RawFeed, limit: int = DEFAULT_EPISODE_LIMIT) -> NormalizedFeed:
    """Normalize a whole feed. Items past `limit` are dropped before processing."""
    feed_image = pick_feed_image(feed)

    episodes: List[NormalizedEpisode] = []
    for index, item in enumerate((feed.items or [])[: max(limit, 0)]):
        episode = normalize_item(item, index, feed_image)
        if episode is not None:
            episodes.append(episode)

    meta = FeedMeta(
        title=feed.title or "Untitled",
        description=strip_html(feed.description),
        link=feed.link or "",
        image=feed_image,
        author=feed.itunes_author or feed.creator or "",
    )
    return NormalizedFeed(meta=meta, items=episodes)
