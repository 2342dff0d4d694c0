"""Front-end serving: files from the static dir, index.html for everything else."""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from ..state import AppState, get_state

router = APIRouter()

INDEX_FILE = "index.html"


def _index(static_dir: Path) -> FileResponse:
    index = static_dir / INDEX_FILE
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Front end not found")
    return FileResponse(index)


@router.get("/", include_in_schema=False)
def index(state: AppState = Depends(get_state)):
    return _index(state.config.static_dir)


@router.get("/{path:path}", include_in_schema=False)
def spa_fallback(path: str, state: AppState = Depends(get_state)):
    """Serve a static file when one exists at `path`, else the SPA shell."""
    static_dir = state.config.static_dir.resolve()
    candidate = (static_dir / path).resolve()
    if candidate.is_file() and static_dir in candidate.parents:
        return FileResponse(candidate)
    return _index(static_dir)
