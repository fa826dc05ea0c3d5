"""Media lines — ``![alt](url)`` to an ``<img>`` or ``<video>`` tag."""

from __future__ import annotations

import logging
import posixpath
from urllib.parse import urlsplit

from .inline import escape_html
from .models import MEDIA_RE, VIDEO_EXTENSIONS

logger = logging.getLogger(__name__)

_VIDEO_TYPES = {
    ".webm": "webm",
    ".ogg": "ogg",
    ".mov": "quicktime",
}

_INDENT = " " * 12
_INNER_INDENT = " " * 16


def _extension(url: str) -> str:
    return posixpath.splitext(urlsplit(url).path)[1].lower()


def is_video(url: str) -> bool:
    return _extension(url) in VIDEO_EXTENSIONS


def video_type(url: str) -> str:
    """Return the ``video/<type>`` subtype for *url*, defaulting to ``mp4``."""
    return _VIDEO_TYPES.get(_extension(url), "mp4")


def media_tag(url: str, alt: str, style: str = "") -> str:
    """Build the indented tag for an already-extracted url/alt pair."""
    url = url.strip()
    src = escape_html(url)
    if is_video(url):
        return (
            f"{_INDENT}<video controls{style}>\n"
            f'{_INNER_INDENT}<source src="{src}" type="video/{video_type(url)}">\n'
            f"{_INNER_INDENT}{escape_html(alt)}\n"
            f"{_INDENT}</video>"
        )
    return f'{_INDENT}<img src="{src}" alt="{escape_html(alt)}"{style}>'


def resolve_media(content: str, style: str = "") -> str:
    """Render a raw ``![alt](url)`` media line.

    A line that does not have that shape renders as ``""``.
    """
    m = MEDIA_RE.search(content)
    if not m:
        logger.warning("Skipping malformed media line: %r", content)
        return ""
    alt, url = m.group(1), m.group(2)
    logger.debug("Media alt=%r url=%r video=%s", alt, url, is_video(url))
    return media_tag(url, alt, style)
