"""
Transcription job store.

In-memory only: jobs live for the process lifetime. No locking; each update
touches one job.
"""

import time
import uuid
from typing import Any, Dict, List, Optional

from ..models.transcription import TranscriptionEpisode, TranscriptionJob

COMPLETED = "completed"
ERROR = "error"
PENDING = "pending"
PROCESSING = "processing"


class TranscriptionStore:
    def __init__(self):
        self._jobs: Dict[str, TranscriptionJob] = {}

    def __len__(self) -> int:
        return len(self._jobs)

    def create_job(self, episodes: List[Dict[str, Any]]) -> TranscriptionJob:
        """Register a job with every episode pending."""
        job = TranscriptionJob(
            id=uuid.uuid4().hex[:16],
            created=int(time.time() * 1000),
            status=PENDING,
            episodes=[
                TranscriptionEpisode(**{**ep, "status": PENDING, "transcript": None})
                for ep in episodes
            ],
            completed=0,
            total=len(episodes),
        )
        self._jobs[job.id] = job
        return job

    def get_job(self, job_id: str) -> Optional[TranscriptionJob]:
        return self._jobs.get(job_id)

    def update_episode(
        self,
        job_id: str,
        episode_id: Any,
        status: Optional[str],
        transcript: Optional[str] = None,
        error: Optional[str] = None,
    ) -> Optional[TranscriptionJob]:
        """
        Record progress for one episode and recompute the job status.

        Returns None when the job does not exist. Unknown episode ids leave
        the episodes untouched.
        """
        job = self._jobs.get(job_id)
        if job is None:
            return None

        episode = next((ep for ep in job.episodes if ep.id == episode_id), None)
        if episode is not None:
            was_completed = episode.status == COMPLETED
            episode.status = status
            if transcript:
                episode.transcript = transcript
            if status == COMPLETED and not was_completed:
                job.completed += 1
            if status == ERROR:
                episode.error = error

        job.status = COMPLETED if job.completed == job.total else PROCESSING
        return job
