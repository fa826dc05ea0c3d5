"""Shared document models and parsing constants."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Metadata:
    title: str | None = None
    author: str | None = None


@dataclass(frozen=True)
class Header:
    level: str
    text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class ListItem:
    text: str


@dataclass(frozen=True)
class UnorderedList:
    items: tuple[ListItem, ...] = ()


@dataclass(frozen=True)
class OrderedList:
    items: tuple[ListItem, ...] = ()


@dataclass(frozen=True)
class Quote:
    text: str


@dataclass(frozen=True)
class Media:
    """A media line, either raw ``![alt](url)`` content or a pre-split url/alt."""

    content: str | None = None
    url: str | None = None
    alt: str | None = None


@dataclass(frozen=True)
class CodeBlock:
    content: str


@dataclass(frozen=True)
class StyledElement:
    element: Element
    style: str


Element = Union[Header, Paragraph, UnorderedList, OrderedList, Quote, Media, CodeBlock]
LineContent = Union[Element, StyledElement]


@dataclass(frozen=True)
class Block:
    lines: tuple[LineContent, ...] = ()


@dataclass(frozen=True)
class Slide:
    blocks: tuple[Block, ...] = ()


# A template renders exactly like a slide; it is only placed first.
Template = Slide


@dataclass(frozen=True)
class Presentation:
    slides: tuple[Slide, ...] = ()
    template: Template | None = None
    metadata: Metadata | None = None


# Media line: ![alt](url)
MEDIA_RE = re.compile(r"!\[([^\]]+)\]\(([^)]+)\)")

# Opening fence, optional language and [attributes], body, closing fence.
# Nothing but whitespace may follow the closing fence.
CODE_FENCE_RE = re.compile(
    r"\A\s*```(?P<lang>[A-Za-z][A-Za-z0-9-]*)?[ \t]*"
    r"(?:\[(?P<attrs>[^\]\r\n]*)\])?[ \t]*\r?\n"
    r"(?P<body>.*?)```\s*\Z",
    re.DOTALL,
)

# One attribute token inside the fence brackets: 'lines:1-3' or lines:'1-3'.
CODE_ATTR_RE = re.compile(
    r"'?(?P<key>[A-Za-z][\w-]*)\s*:\s*(?:'(?P<quoted>[^']*)'|(?P<bare>[^'\s]*))'?"
)

VIDEO_EXTENSIONS = (".mp4", ".webm", ".ogg", ".mov")
