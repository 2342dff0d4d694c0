"""YouTube endpoints: video info via noembed, playlist pointers."""

from fastapi import APIRouter, Depends, HTTPException, Query

from ..models import PlaylistInfo, VideoInfo
from ..services import (
    YouTubeLookupError,
    extract_playlist_id,
    extract_youtube_id,
    playlist_info,
)
from ..state import AppState, get_state

router = APIRouter()


@router.get("/info", response_model=VideoInfo)
def video_info(url: str = Query(None), state: AppState = Depends(get_state)):
    if not url:
        raise HTTPException(status_code=400, detail="Missing 'url' query parameter")
    video_id = extract_youtube_id(url)
    if not video_id:
        raise HTTPException(status_code=400, detail="Invalid YouTube URL")
    try:
        return state.youtube.get_video_info(video_id)
    except YouTubeLookupError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/playlist", response_model=PlaylistInfo)
def playlist(url: str = Query(None)):
    """Playlist id and yt-dlp instructions; items are not enumerated server-side."""
    if not url:
        raise HTTPException(status_code=400, detail="Missing 'url' query parameter")
    playlist_id = extract_playlist_id(url)
    if not playlist_id:
        raise HTTPException(status_code=400, detail="Invalid playlist URL")
    return playlist_info(playlist_id)
