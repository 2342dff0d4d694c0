"""
YouTube metadata lookup.

Video ids and playlist ids are pulled out of URLs locally; titles and authors
come from noembed.com (no API key needed).
"""

import logging
import re
from typing import Optional

import requests

from ..models.youtube import PlaylistInfo, VideoInfo

logger = logging.getLogger(__name__)

DEFAULT_NOEMBED_URL = "https://noembed.com/embed"

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/shorts/([^&\n?#]+)"),
    re.compile(r"youtube\.com/live/([^&\n?#]+)"),
]
PLAYLIST_ID_PATTERN = re.compile(r"[?&]list=([^&]+)")


class YouTubeLookupError(Exception):
    """noembed lookup failed or reported an error."""


def extract_youtube_id(url: str) -> Optional[str]:
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url or "")
        if match:
            return match.group(1)
    return None


def extract_playlist_id(url: str) -> Optional[str]:
    match = PLAYLIST_ID_PATTERN.search(url or "")
    return match.group(1) if match else None


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def max_res_thumbnail(video_id: str) -> str:
    return f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"


def playlist_info(playlist_id: str) -> PlaylistInfo:
    """Playlist pointers plus yt-dlp instructions (full extraction is not done here)."""
    playlist_url = f"https://www.youtube.com/playlist?list={playlist_id}"
    return PlaylistInfo(
        playlist_id=playlist_id,
        playlist_url=playlist_url,
        message="Full playlist extraction requires yt-dlp. Use: yt-dlp --flat-playlist -j 'PLAYLIST_URL'",
        download_command=f"yt-dlp -x --audio-format mp3 -o '%(title)s.%(ext)s' '{playlist_url}'",
    )


class YouTubeClient:
    """Resolves video metadata through noembed."""

    def __init__(
        self,
        noembed_url: str = DEFAULT_NOEMBED_URL,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.noembed_url = noembed_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def get_video_info(self, video_id: str) -> VideoInfo:
        """
        Look up one video.

        Raises:
            YouTubeLookupError: network failure or an error payload from noembed.
        """
        try:
            response = self._session.get(
                self.noembed_url,
                params={"url": watch_url(video_id)},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error("[youtube] noembed request failed for %s: %s", video_id, e)
            raise YouTubeLookupError(str(e)) from e

        if data.get("error"):
            raise YouTubeLookupError(data["error"])

        return VideoInfo(
            id=video_id,
            title=data.get("title") or "Unknown Title",
            author=data.get("author_name") or "Unknown",
            author_url=data.get("author_url") or "",
            thumbnail=data.get("thumbnail_url") or max_res_thumbnail(video_id),
            thumbnail_hq=max_res_thumbnail(video_id),
            url=watch_url(video_id),
            embed_url=f"https://www.youtube.com/embed/{video_id}",
        )
