"""Inline emphasis — bold, italic and underline spans inside a line of text."""

from __future__ import annotations

import html
import re

# A run of three or more asterisks/underscores is never a delimiter, hence the
# lookarounds on both ends.  Spans never cross a line break.  Text is escaped
# before these run, so any ``<`` or ``>`` is a tag emitted by an earlier pass;
# later passes exclude them so a span never straddles such a tag.
_BOLD_RE = re.compile(r"(?<!\*)\*\*([^*\r\n]+)\*\*(?!\*)")
_UNDERLINE_RE = re.compile(r"(?<!_)__([^_\r\n<>]+)__(?!_)")
_STAR_ITALIC_RE = re.compile(r"(?<!\*)\*([^*\r\n<>]+)\*(?!\*)")
_UNDERSCORE_ITALIC_RE = re.compile(r"(?<!_)_([^_\r\n<>]+)_(?!_)")


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for use in element content or attribute values."""
    return html.escape(text, quote=True)


def format_inline(text: str) -> str:
    """Convert raw inline text to HTML-safe markup.

    Escaping happens first so author-typed ``<`` or ``>`` can never leak
    through as markup.  Bold is matched before italics, and underline before
    underscore italics, so double delimiters are never read as two singles.
    Unmatched delimiters stay literal.
    """
    result = escape_html(text)
    result = _BOLD_RE.sub(r"<strong>\1</strong>", result)
    result = _UNDERLINE_RE.sub(r"<u>\1</u>", result)
    result = _STAR_ITALIC_RE.sub(r"<em>\1</em>", result)
    result = _UNDERSCORE_ITALIC_RE.sub(r"<em>\1</em>", result)
    return result
