"""
Shared test fixtures.

Provides:
- FakeClock: millisecond clock advanced by hand
- FakeFetcher: canned RawFeeds / errors per URL, records every fetch
- FakeYouTube: canned noembed results
- A TestClient wired to an AppState built from the fakes
"""

from pathlib import Path
from typing import Dict, List, Union

import pytest
from fastapi.testclient import TestClient

from podscript.app import create_app
from podscript.config import ServerConfig
from podscript.models import RawFeed, VideoInfo
from podscript.services import YouTubeLookupError
from podscript.state import AppState

FEED_URL = "https://feeds.example.com/show.xml"


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FakeFetcher:
    def __init__(self):
        self.responses: Dict[str, Union[RawFeed, Exception]] = {}
        self.xml: Dict[str, Union[str, Exception]] = {}
        self.calls: List[str] = []

    def fetch(self, url: str) -> RawFeed:
        self.calls.append(url)
        result = self.responses[url]
        if isinstance(result, Exception):
            raise result
        return result

    def fetch_xml(self, url: str) -> str:
        result = self.xml[url]
        if isinstance(result, Exception):
            raise result
        return result


class FakeYouTube:
    def __init__(self, error: str = ""):
        self.error = error
        self.calls: List[str] = []

    def get_video_info(self, video_id: str) -> VideoInfo:
        self.calls.append(video_id)
        if self.error:
            raise YouTubeLookupError(self.error)
        return VideoInfo(
            id=video_id,
            title="Test Video",
            author="Test Channel",
            author_url="https://www.youtube.com/@test",
            thumbnail="https://i.ytimg.com/vi/abc/hqdefault.jpg",
            thumbnail_hq=f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg",
            url=f"https://www.youtube.com/watch?v={video_id}",
            embed_url=f"https://www.youtube.com/embed/{video_id}",
        )


def sample_raw_feed() -> RawFeed:
    """Two playable items (audio enclosure, video media:content) and one without media."""
    return RawFeed.model_validate({
        "title": "Test Show",
        "description": "<p>A show about <b>tests</b></p>",
        "link": "https://show.example.com",
        "image": {"url": "http://show.example.com/cover.jpg"},
        "itunesAuthor": "Jane Host",
        "items": [
            {
                "title": "Episode 1",
                "guid": "ep-1",
                "link": "https://show.example.com/1",
                "enclosure": {"url": "http://cdn.example.com/ep1.mp3", "type": "audio/mpeg"},
                "contentSnippet": "First episode",
                "duration": "3725",
                "pubDate": "Mon, 01 Jan 2024 12:00:00 GMT",
            },
            {
                "title": "Episode 2",
                "guid": "ep-2",
                "mediaContent": [{"$": {"url": "https://cdn.example.com/ep2.mp4", "type": "video/mp4"}}],
                "mediaThumbnail": [{"$": {"url": "http://cdn.example.com/ep2.jpg"}}],
                "duration": 125,
            },
            {"title": "Trailer without media"},
        ],
    })


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetcher() -> FakeFetcher:
    fake = FakeFetcher()
    fake.responses[FEED_URL] = sample_raw_feed()
    return fake


@pytest.fixture
def youtube() -> FakeYouTube:
    return FakeYouTube()


@pytest.fixture
def config(tmp_path: Path) -> ServerConfig:
    return ServerConfig(cache_ttl_ms=60_000, episode_limit=100, static_dir=tmp_path)


@pytest.fixture
def state(config, fetcher, youtube, clock) -> AppState:
    return AppState(config, fetcher=fetcher, youtube=youtube, clock=clock)


@pytest.fixture
def client(state) -> TestClient:
    return TestClient(create_app(state=state))
