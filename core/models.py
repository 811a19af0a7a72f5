"""Content models handed to the player by the extractor."""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Annotated, Literal


class InfoItemBase(BaseModel):
    """Common fields of every entry in a listing."""

    url: str
    name: str = ""
    service_id: int = 0
    thumbnail_url: str | None = None


class StreamInfoItem(InfoItemBase):
    """A playable stream (video or audio) in a listing."""

    info_type: Literal["stream"] = "stream"
    duration: int = Field(-1, description="Duration in seconds, -1 when unknown")
    uploader_name: str | None = None
    view_count: int = -1


class PlaylistInfoItem(InfoItemBase):
    """A playlist entry in a listing."""

    info_type: Literal["playlist"] = "playlist"
    stream_count: int = -1


class ChannelInfoItem(InfoItemBase):
    """A channel entry in a listing."""

    info_type: Literal["channel"] = "channel"
    subscriber_count: int = -1


InfoItem = Annotated[StreamInfoItem | PlaylistInfoItem | ChannelInfoItem, Field(discriminator="info_type")]


class StreamInfo(BaseModel):
    """Full description of the stream currently playing."""

    url: str
    name: str = ""
    service_id: int = 0
    next_video: StreamInfoItem | None = None
    related_streams: list[InfoItem] | None = None


class SubtitlesFormat(str, Enum):
    """Subtitle container formats an extractor can report."""

    VTT = "vtt"
    TTML = "ttml"
    SRV1 = "srv1"
    SRV2 = "srv2"
    SRV3 = "srv3"
    TRANSCRIPT1 = "json1"
    TRANSCRIPT2 = "json2"
    TRANSCRIPT3 = "json3"


class Subtitles(BaseModel):
    """A subtitle track of a stream."""

    url: str
    format: SubtitlesFormat
    language_code: str
    language_name: str = Field(description="Language display name in its own language, eg 'Deutsch'")
    auto_generated: bool = False


class MediaFormat(BaseModel):
    """Container/codec of a media stream."""

    name: str
    suffix: str = ""
    mime_type: str = ""


class VideoStream(BaseModel):
    """A video rendition of a stream."""

    url: str
    format: MediaFormat
    resolution: str
    video_only: bool = False


class AudioStream(BaseModel):
    """An audio rendition of a stream."""

    url: str
    format: MediaFormat
    average_bitrate: int = -1


class ResizeMode(int, Enum):
    """Aspect ratio modes of the video surface."""

    FIT = 0
    FIXED_WIDTH = 1
    FIXED_HEIGHT = 2
    FILL = 3
    ZOOM = 4


class MinimizeMode(int, Enum):
    """What the player does when the user leaves the app."""

    NONE = 0
    BACKGROUND = 1
    POPUP = 2


class SeekParameters(str, Enum):
    """Seek precision used by the playback engine."""

    EXACT = "exact"
    CLOSEST_SYNC = "closest_sync"
