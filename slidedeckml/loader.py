"""Build the document tree from a JSON dump of the parsed presentation.

The grammar front end emits its AST as JSON objects discriminated by a
``$type`` key.  This module maps those objects onto the immutable models in
:mod:`slidedeckml.models`.  Missing required fields are contract violations
by the producer and raise :class:`ValueError`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .models import (
    Block,
    CodeBlock,
    Element,
    Header,
    LineContent,
    ListItem,
    Media,
    Metadata,
    OrderedList,
    Paragraph,
    Presentation,
    Quote,
    Slide,
    StyledElement,
    UnorderedList,
)

logger = logging.getLogger(__name__)

_HEADER_TYPES = {"Heading", "Header", "LineHeading"}
_PARAGRAPH_TYPES = {"Paragraph", "LineParagraph"}
_UNORDERED_TYPES = {"PointedList", "UnorderedList"}
_MEDIA_TYPES = {"Media", "ImageBlock", "VideoBlock"}


def _require(node: dict[str, Any], key: str) -> Any:
    if key not in node or node[key] is None:
        raise ValueError(f"{node.get('$type', 'node')} is missing required field '{key}'")
    return node[key]


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _items(node: dict[str, Any]) -> tuple[ListItem, ...]:
    items = []
    for item in _require(node, "items"):
        text = item if isinstance(item, str) else _require(item, "text")
        items.append(ListItem(text=text))
    return tuple(items)


def _media(node: dict[str, Any]) -> Media:
    if node.get("url") is not None:
        return Media(url=_unquote(node["url"]), alt=node.get("alt"))
    return Media(content=_require(node, "content"))


def _element(node: dict[str, Any]) -> Element | None:
    """Map one line node to its model, or ``None`` for an unknown type."""
    kind = node.get("$type")
    if kind in _HEADER_TYPES:
        return Header(level=_require(node, "level"), text=_require(node, "text"))
    if kind in _PARAGRAPH_TYPES:
        return Paragraph(text=_require(node, "text"))
    if kind in _UNORDERED_TYPES:
        return UnorderedList(items=_items(node))
    if kind == "OrderedList":
        return OrderedList(items=_items(node))
    if kind == "Quote":
        return Quote(text=_require(node, "text"))
    if kind in _MEDIA_TYPES:
        return _media(node)
    if kind == "CodeBlock":
        return CodeBlock(content=_require(node, "content"))
    return None


def _line(node: dict[str, Any]) -> LineContent | None:
    if node.get("$type") == "StyledElement":
        inner = _require(node, "element")
        if inner.get("$type") == "StyledElement":
            raise ValueError("StyledElement cannot wrap another StyledElement")
        element = _element(inner)
        if element is None:
            logger.warning("Dropping styled line of unknown type %r", inner.get("$type"))
            return None
        return StyledElement(element=element, style=node.get("style") or "")

    element = _element(node)
    if element is None:
        logger.warning("Dropping line of unknown type %r", node.get("$type"))
    return element


def _block(node: dict[str, Any]) -> Block:
    nodes = list(node.get("lines") or []) + list(node.get("media") or [])
    lines = [line for line in (_line(n) for n in nodes) if line is not None]
    return Block(lines=tuple(lines))


def _slide(node: dict[str, Any]) -> Slide:
    return Slide(blocks=tuple(_block(b) for b in node.get("blocks") or []))


def _metadata(node: dict[str, Any] | None) -> Metadata | None:
    if not node:
        return None
    return Metadata(title=node.get("title"), author=node.get("author"))


def presentation_from_dict(data: dict[str, Any]) -> Presentation:
    """Convert a JSON-decoded AST into a :class:`Presentation`."""
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    if "presentation" in data and "slides" not in data:
        data = data["presentation"]

    slides = tuple(_slide(s) for s in _require(data, "slides"))
    template = data.get("template")
    presentation = Presentation(
        slides=slides,
        template=_slide(template) if template else None,
        metadata=_metadata(data.get("metadata")),
    )
    logger.debug(
        "Loaded presentation: %d slide(s), template=%s, metadata=%s",
        len(slides),
        presentation.template is not None,
        presentation.metadata,
    )
    return presentation


def load_presentation(path: str) -> Presentation:
    """Read a JSON AST dump from *path*."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return presentation_from_dict(data)
