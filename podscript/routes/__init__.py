"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .root import router as root_router
from .feed import router as feed_router
from .youtube import router as youtube_router
from .transcription import router as transcription_router
from .book import router as book_router
from .static import router as static_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app. The static catch-all goes last."""
    app.include_router(root_router)
    app.include_router(feed_router, prefix="/api", tags=["feed"])
    app.include_router(youtube_router, prefix="/api/youtube", tags=["youtube"])
    app.include_router(transcription_router, prefix="/api/transcription", tags=["transcription"])
    app.include_router(book_router, prefix="/api/book", tags=["book"])
    app.include_router(static_router)
