"""Feed endpoints: normalized feed and raw XML proxy."""

import logging

import requests
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from ..models import NormalizedFeed
from ..services import FeedFetchError
from ..state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/feed", response_model=NormalizedFeed)
async def get_feed(url: str = Query(None), state: AppState = Depends(get_state)):
    """Fetch, normalize, and cache a podcast feed."""
    if not url:
        raise HTTPException(status_code=400, detail="Missing 'url' query parameter")
    try:
        return await state.feed_cache.get_feed(url)
    except FeedFetchError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/rss-proxy")
def rss_proxy(url: str = Query(None), state: AppState = Depends(get_state)):
    """Pass raw feed XML through for browsers blocked by CORS."""
    if not url:
        raise HTTPException(status_code=400, detail="Missing URL")
    try:
        text = state.fetcher.fetch_xml(url)
    except requests.exceptions.RequestException as e:
        logger.error("[rss_proxy] %s: %s", url, e)
        raise HTTPException(status_code=500, detail=str(e))
    return Response(content=text, media_type="application/xml")
