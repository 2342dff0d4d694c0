"""Book generation endpoint."""

from fastapi import APIRouter, HTTPException

from ..models import GenerateBookRequest, GenerateBookResponse
from ..services import UnsupportedFormatError, render_book

router = APIRouter()


@router.post("/generate", response_model=GenerateBookResponse)
def generate_book(request: GenerateBookRequest):
    if request.chapters is None:
        raise HTTPException(status_code=400, detail="Missing chapters array")
    try:
        content = render_book(
            request.format,
            request.title,
            request.subtitle,
            request.author,
            request.chapters,
        )
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GenerateBookResponse(content=content, format=request.format)
