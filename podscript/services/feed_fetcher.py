"""
Feed fetching and parser adaptation.

Downloads a feed with requests, parses it with feedparser, and maps the
result onto RawFeed so the normalizer never touches feedparser objects.
"""

import logging
import time
from typing import Any, Dict, Optional

import feedparser
import requests

from ..models.feed import RawFeed
from ..utils import strip_html

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "PodScript-Studio/1.0"
DEFAULT_TIMEOUT_SECONDS = 30
RSS_ACCEPT = "application/rss+xml, application/xml, text/xml, */*"


def _plain(value: Any) -> Any:
    """FeedParserDict trees -> plain dicts/lists."""
    if isinstance(value, dict):
        return {key: _plain(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(val) for val in value]
    return value


def _iso_date(parsed_time: Optional[time.struct_time]) -> Optional[str]:
    if not parsed_time:
        return None
    return time.strftime("%Y-%m-%dT%H:%M:%S.000Z", parsed_time)


def _entry_to_item(entry: Dict[str, Any]) -> Dict[str, Any]:
    enclosure = None
    enclosures = entry.get("enclosures") or []
    if enclosures:
        first = enclosures[0]
        enclosure = {"url": first.get("href") or first.get("url"), "type": first.get("type")}

    content_blocks = entry.get("content") or []
    content_encoded = content_blocks[0].get("value") if content_blocks else None
    summary = entry.get("summary")

    return {
        "title": entry.get("title"),
        "link": entry.get("link"),
        "guid": entry.get("id"),
        "enclosure": enclosure,
        "media_content": _plain(entry.get("media_content")),
        "media_thumbnail": _plain(entry.get("media_thumbnail")),
        "itunes_image": _plain(entry.get("image")),
        "content_snippet": strip_html(summary) or None,
        "content_encoded": content_encoded,
        "content": summary,
        "duration": entry.get("itunes_duration"),
        "season": entry.get("itunes_season"),
        "episode": entry.get("itunes_episode"),
        "pub_date": entry.get("published"),
        "iso_date": _iso_date(entry.get("published_parsed")),
    }


def _creator(feed: Any) -> Optional[str]:
    """dc:creator; feedparser files it, like itunes:author, under `authors`."""
    for author in feed.get("authors") or []:
        if isinstance(author, dict) and author.get("name"):
            return author["name"]
    return feed.get("author")


def raw_feed_from_parsed(parsed: Any) -> RawFeed:
    """Map a feedparser result onto RawFeed."""
    feed = parsed.get("feed") or {}
    image = feed.get("image")
    image_url = (image.get("href") or image.get("url")) if isinstance(image, dict) else None

    return RawFeed.model_validate({
        "title": feed.get("title"),
        "description": feed.get("description") or feed.get("subtitle"),
        "link": feed.get("link"),
        "image": {"url": image_url} if image_url else None,
        "itunes_author": feed.get("author"),
        "creator": _creator(feed),
        "items": [_entry_to_item(entry) for entry in parsed.get("entries") or []],
    })


class FeedFetcher:
    """Fetches feeds over HTTP. Blocking; callers in async code run it in a thread."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self._session = session or requests.Session()

    def _get(self, url: str) -> requests.Response:
        response = self._session.get(
            url,
            headers={"User-Agent": self.user_agent, "Accept": RSS_ACCEPT},
            timeout=self.timeout,
        )
        if not response.ok:
            raise requests.HTTPError(f"HTTP {response.status_code}", response=response)
        return response

    def fetch_xml(self, url: str) -> str:
        """Raw feed body, for the CORS proxy."""
        return self._get(url).text

    def fetch(self, url: str) -> RawFeed:
        response = self._get(url)
        parsed = feedparser.parse(response.content)
        if parsed.get("bozo") and not parsed.get("entries") and not parsed.get("feed", {}).get("title"):
            raise ValueError(f"Invalid feed format: {parsed.get('bozo_exception')}")
        raw = raw_feed_from_parsed(parsed)
        logger.debug("[feed_fetcher] parsed %s items from %s", len(raw.items or []), url)
        return raw
