"""Transcription job endpoints (in-memory job tracking)."""

from fastapi import APIRouter, Depends, HTTPException

from ..models import (
    CreateTranscriptionRequest,
    CreateTranscriptionResponse,
    TranscriptionJob,
    UpdateTranscriptionRequest,
)
from ..state import AppState, get_state

router = APIRouter()


@router.post("/create", response_model=CreateTranscriptionResponse)
def create_job(request: CreateTranscriptionRequest, state: AppState = Depends(get_state)):
    if request.episodes is None:
        raise HTTPException(status_code=400, detail="Missing episodes array")
    job = state.transcriptions.create_job(request.episodes)
    return CreateTranscriptionResponse(job_id=job.id, total=job.total)


@router.get("/{job_id}", response_model=TranscriptionJob)
def get_job(job_id: str, state: AppState = Depends(get_state)):
    job = state.transcriptions.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("/{job_id}/update")
def update_job(
    job_id: str,
    request: UpdateTranscriptionRequest,
    state: AppState = Depends(get_state),
):
    job = state.transcriptions.update_episode(
        job_id,
        episode_id=request.episode_id,
        status=request.status,
        transcript=request.transcript,
        error=request.error,
    )
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return {"success": True}
