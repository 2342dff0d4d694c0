"""Pydantic request/response models for the API."""

from .book import Chapter, GenerateBookRequest, GenerateBookResponse
from .feed import (
    Enclosure,
    FeedImage,
    FeedMeta,
    ImageAttributes,
    ImageHref,
    ImageUrl,
    ItunesImage,
    MediaAttributes,
    NormalizedEpisode,
    NormalizedFeed,
    RawFeed,
    RawFeedItem,
)
from .transcription import (
    CreateTranscriptionRequest,
    CreateTranscriptionResponse,
    TranscriptionEpisode,
    TranscriptionJob,
    UpdateTranscriptionRequest,
)
from .youtube import PlaylistInfo, VideoInfo

__all__ = [
    "Chapter",
    "GenerateBookRequest",
    "GenerateBookResponse",
    "Enclosure",
    "FeedImage",
    "FeedMeta",
    "ImageAttributes",
    "ImageHref",
    "ImageUrl",
    "ItunesImage",
    "MediaAttributes",
    "NormalizedEpisode",
    "NormalizedFeed",
    "RawFeed",
    "RawFeedItem",
    "CreateTranscriptionRequest",
    "CreateTranscriptionResponse",
    "TranscriptionEpisode",
    "TranscriptionJob",
    "UpdateTranscriptionRequest",
    "PlaylistInfo",
    "VideoInfo",
]
