"""Display strings for the player: times, rates, captions and resize modes.

Every helper is a pure function building a fresh string, so they can be
called from any thread.
"""

from core.models import AudioStream, ResizeMode, StreamInfo, Subtitles, SubtitlesFormat, VideoStream
from decimal import ROUND_HALF_EVEN, Decimal
import math

DEFAULT_STRINGS = {
    'caption_auto_generated': 'Auto-generated',
    'resize_fit': 'FIT',
    'resize_fill': 'FILL',
    'resize_zoom': 'ZOOM',
}

SUBTITLE_MIME_TYPES = {
    SubtitlesFormat.VTT: 'text/vtt',
    SubtitlesFormat.TTML: 'application/ttml+xml',
}

RESIZE_MODE_KEYS = {
    ResizeMode.FIT: 'resize_fit',
    ResizeMode.FILL: 'resize_fill',
    ResizeMode.ZOOM: 'resize_zoom',
}

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY


class UnsupportedVariantError(ValueError):
    """Raised when a lookup gets an enum value it has no mapping for."""


def get_time_string(milliseconds: int) -> str:
    """Format a playback position.

    Returns MM:SS, H:MM:SS once there are hours and D:HH:MM:SS once there are
    days. Each component wraps at its unit, days wrap at a week.

    Examples:
        >>> get_time_string(65000)
        '01:05'
        >>> get_time_string(3725000)
        '1:02:05'
    """
    milliseconds = max(int(milliseconds), 0)
    seconds = (milliseconds % MS_PER_MINUTE) // MS_PER_SECOND
    minutes = (milliseconds % MS_PER_HOUR) // MS_PER_MINUTE
    hours = (milliseconds % MS_PER_DAY) // MS_PER_HOUR
    days = (milliseconds % MS_PER_WEEK) // MS_PER_DAY

    if days > 0:
        return f"{days}:{hours:02d}:{minutes:02d}:{seconds:02d}"
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def _round_half_even(value: float, places: str) -> Decimal:
    return Decimal(str(value)).quantize(Decimal(places), rounding=ROUND_HALF_EVEN)


def format_speed(speed: float) -> str:
    """Format a playback speed, eg 1.25 -> '1.25x', 2.0 -> '2x'."""
    if not math.isfinite(speed):
        return f"{speed}x"
    text = f"{_round_half_even(speed, '0.01'):f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return f"{text}x"


def format_pitch(pitch: float) -> str:
    """Format a pitch ratio as a percentage, eg 1.0 -> '100%'."""
    if not math.isfinite(pitch):
        return f"{pitch}%"
    percent = _round_half_even(Decimal(str(pitch)) * 100, '1')
    return f"{int(percent)}%"


def mime_type_of(fmt: SubtitlesFormat) -> str:
    try:
        return SUBTITLE_MIME_TYPES[fmt]
    except KeyError:
        raise UnsupportedVariantError(f"Unsupported subtitles format: {fmt!r}") from None


def caption_language_of(subtitles: Subtitles, strings: dict[str, str] = DEFAULT_STRINGS) -> str:
    """Label of a subtitle track, marking auto-generated captions.

    Args:
        subtitles: Subtitle track
        strings: String resources, see DEFAULT_STRINGS

    Returns:
        eg 'English' or 'English (Auto-generated)'
    """
    if subtitles.auto_generated:
        return f"{subtitles.language_name} ({strings['caption_auto_generated']})"
    return subtitles.language_name


def resize_type_of(resize_mode: ResizeMode | int, strings: dict[str, str] = DEFAULT_STRINGS) -> str:
    """Label of a resize mode. Only FIT, FILL and ZOOM are offered to the user."""
    try:
        key = RESIZE_MODE_KEYS[ResizeMode(resize_mode)]
    except (KeyError, ValueError):
        raise UnsupportedVariantError(f"Unsupported resize mode: {resize_mode!r}") from None
    return strings[key]


def cache_key_of(info: StreamInfo, stream: VideoStream | AudioStream) -> str:
    """Key identifying a rendition of a stream in the media cache."""
    if isinstance(stream, VideoStream):
        return f"{info.url}{stream.resolution}{stream.format.name}"
    if isinstance(stream, AudioStream):
        return f"{info.url}{stream.average_bitrate}{stream.format.name}"
    raise UnsupportedVariantError(f"Unsupported stream type: {type(stream).__name__}")
