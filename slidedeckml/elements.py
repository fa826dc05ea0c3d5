"""Element renderer — one HTML fragment per line of a block."""

from __future__ import annotations

import logging
from typing import Callable

from .code_fence import parse_code_block
from .inline import format_inline
from .media import media_tag, resolve_media
from .models import (
    Block,
    CodeBlock,
    Header,
    LineContent,
    ListItem,
    Media,
    OrderedList,
    Paragraph,
    Quote,
    StyledElement,
    UnorderedList,
)
from .style import parse_style

logger = logging.getLogger(__name__)

_INDENT = " " * 12
_ITEM_INDENT = " " * 16


def _render_header(header: Header, style: str) -> str:
    # Level is the marker length; range is enforced by the grammar upstream.
    level = len(header.level.strip())
    return f"{_INDENT}<h{level}{style}>{format_inline(header.text)}</h{level}>"


def _render_paragraph(paragraph: Paragraph, style: str) -> str:
    return f"{_INDENT}<p{style}>{format_inline(paragraph.text)}</p>"


def _render_quote(quote: Quote, style: str) -> str:
    return f"{_INDENT}<blockquote{style}>{format_inline(quote.text)}</blockquote>"


def _render_items(tag: str, items: tuple[ListItem, ...], style: str) -> str:
    lines = [f"{_INDENT}<{tag}{style}>"]
    lines.extend(f"{_ITEM_INDENT}<li>{format_inline(item.text)}</li>" for item in items)
    lines.append(f"{_INDENT}</{tag}>")
    return "\n".join(lines)


def _render_unordered(lst: UnorderedList, style: str) -> str:
    return _render_items("ul", lst.items, style)


def _render_ordered(lst: OrderedList, style: str) -> str:
    return _render_items("ol", lst.items, style)


def _render_media(media: Media, style: str) -> str:
    if media.url is not None:
        return media_tag(media.url, media.alt or "Image", style)
    return resolve_media(media.content or "", style)


def _render_code(code: CodeBlock, style: str) -> str:
    fragment = parse_code_block(code.content, style)
    return f"{_INDENT}{fragment}" if fragment else ""


_RENDERERS: dict[type, Callable[..., str]] = {
    Header: _render_header,
    Paragraph: _render_paragraph,
    UnorderedList: _render_unordered,
    OrderedList: _render_ordered,
    Quote: _render_quote,
    Media: _render_media,
    CodeBlock: _render_code,
}


def render_line(line: LineContent) -> str:
    """Render a single line, applying its style block if it is wrapped.

    Unknown line types render as ``""``.
    """
    style = ""
    if isinstance(line, StyledElement):
        if isinstance(line.element, StyledElement):
            raise TypeError("StyledElement cannot wrap another StyledElement")
        style = parse_style(line.style)
        line = line.element

    renderer = _RENDERERS.get(type(line))
    if renderer is None:
        logger.warning("Dropping unrecognised line type: %s", type(line).__name__)
        return ""
    return renderer(line, style)


def render_block(block: Block) -> str:
    """Render every line of *block*, one per output line."""
    return "\n".join(render_line(line) for line in block.lines)
