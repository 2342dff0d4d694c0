"""YouTube lookup response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VideoInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str = "Unknown Title"
    author: str = "Unknown"
    author_url: str = ""
    thumbnail: str = ""
    thumbnail_hq: str = Field(default="", alias="thumbnailHQ")
    url: str
    embed_url: str
    provider: str = "YouTube"


class PlaylistInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    playlist_id: str
    playlist_url: str
    message: str
    download_command: str
