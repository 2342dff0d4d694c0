"""Health endpoint."""

import time

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok", "timestamp": int(time.time() * 1000)}
