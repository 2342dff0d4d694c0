"""
Feed models — raw parser records in, normalized feed out.

Raw models describe the loosely-typed shapes an RSS parser can emit. Every
field is optional and a value matching none of its known shapes is treated
as absent, so building a raw record from parser output never fails.
Normalized models are immutable and serialize with camelCase keys.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class _RawModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _absent_on_mismatch(cls, value: Any, handler):
        try:
            return handler(value)
        except ValidationError:
            return None


# -- itunes:image shapes ------------------------------------------------------


class ImageHref(BaseModel):
    """`{"href": ...}`"""

    href: NonEmptyStr


class ImageUrl(BaseModel):
    """`{"url": ...}`"""

    url: NonEmptyStr


class ImageAttributes(BaseModel):
    """`{"$": {"href": ...}}` (attribute-bearing element)."""

    attrs: ImageHref = Field(alias="$")


ItunesImage = Union[str, ImageHref, ImageUrl, ImageAttributes]


# -- media shapes -------------------------------------------------------------


class Enclosure(_RawModel):
    url: Optional[str] = None
    type: Optional[str] = None


class MediaAttributes(_RawModel):
    """media:content / media:thumbnail entry, flat or wrapped in `$`."""

    url: Optional[str] = None
    type: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap_attributes(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("$"), dict):
            return data["$"]
        return data


class FeedImage(_RawModel):
    url: Optional[str] = None


def _as_list(value: Any) -> Any:
    """Wrap a single entry in a list; drop list entries that are not objects."""
    if isinstance(value, (dict, MediaAttributes)):
        return [value]
    if isinstance(value, list):
        return [entry for entry in value if isinstance(entry, (dict, MediaAttributes))]
    return value


class RawFeedItem(_RawModel):
    """One item as produced by the upstream parser."""

    title: Optional[str] = None
    link: Optional[str] = None
    guid: Optional[str] = None
    enclosure: Optional[Enclosure] = None
    media_content: Optional[List[MediaAttributes]] = None
    media_thumbnail: Optional[List[MediaAttributes]] = None
    itunes_image: Optional[ItunesImage] = Field(default=None, union_mode="left_to_right")
    content_snippet: Optional[str] = None
    itunes_summary: Optional[str] = None
    content_encoded: Optional[str] = None
    content: Optional[str] = None
    duration: Optional[Union[int, str]] = None
    season: Optional[str] = None
    episode: Optional[str] = None
    pub_date: Optional[str] = None
    iso_date: Optional[str] = None

    @field_validator("media_content", "media_thumbnail", mode="before")
    @classmethod
    def _single_to_list(cls, value: Any) -> Any:
        return _as_list(value)


class RawFeed(_RawModel):
    """Feed-level record plus its items."""

    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    image: Optional[FeedImage] = None
    itunes_image: Optional[ItunesImage] = Field(default=None, union_mode="left_to_right")
    itunes_author: Optional[str] = None
    creator: Optional[str] = None
    items: Optional[List[RawFeedItem]] = None

    @field_validator("items", mode="before")
    @classmethod
    def _drop_unusable_items(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return []
        return [item for item in value if isinstance(item, (dict, RawFeedItem))]


# -- normalized output --------------------------------------------------------


class _NormalizedModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class NormalizedEpisode(_NormalizedModel):
    id: str
    index: int
    title: str = ""
    description: str = ""
    media_url: str
    media_type: str = ""
    kind: Literal["audio", "video"] = "audio"
    image: str = ""
    pub_date: str = ""
    duration: str = ""
    season: str = ""
    episode: str = ""
    link: str = ""


class FeedMeta(_NormalizedModel):
    title: str = "Untitled"
    description: str = ""
    link: str = ""
    image: str = ""
    author: str = ""


class NormalizedFeed(_NormalizedModel):
    meta: FeedMeta
    items: List[NormalizedEpisode] = []
