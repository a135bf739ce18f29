"""YouTube URL helpers."""

import re
from typing import Optional

VIDEO_ID_LENGTH = 11

_YOUTUBE_ID_RE = re.compile(
    r"^(?:(?:https?:)?//)?(?:www\.)?"
    r"(?:youtube\.com/(?:[^/\n\s]+/\S+/|(?:v|e(?:mbed)?)/|\S*?[?&]v=)|youtu\.be/)"
    r"([a-zA-Z0-9_-]{11})"
)


def export_youtube_id(url: str) -> Optional[str]:
    """Extract the video id from a YouTube URL.

    Handles ``watch?v=``, ``/embed/``, ``/v/``, ``/e/``, ``youtu.be/``
    and user/channel links.  Returns ``None`` if *url* is not a
    recognised YouTube link.
    """
    if not isinstance(url, str):
        return None
    match = _YOUTUBE_ID_RE.match(url)
    if match and len(match.group(1)) == VIDEO_ID_LENGTH:
        return match.group(1)
    return None


__all__ = ["export_youtube_id"]
