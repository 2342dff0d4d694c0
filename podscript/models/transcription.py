"""Transcription job Pydantic models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TranscriptionEpisode(BaseModel):
    """Episode as submitted by the client, plus per-episode progress fields."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    status: Optional[str] = "pending"
    transcript: Optional[str] = None
    # Client-supplied values are stored as sent until an update reports an error.
    error: Any = None


class TranscriptionJob(BaseModel):
    id: str
    created: int
    status: str = "pending"
    episodes: List[TranscriptionEpisode] = []
    completed: int = 0
    total: int = 0


class CreateTranscriptionRequest(BaseModel):
    episodes: Optional[List[Dict[str, Any]]] = None


class CreateTranscriptionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_id: str
    total: int


class UpdateTranscriptionRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    episode_id: Any = None
    status: Optional[str] = None
    transcript: Optional[str] = None
    error: Optional[str] = None
