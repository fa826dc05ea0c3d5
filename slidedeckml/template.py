"""Static reveal.js page shell wrapped around the rendered slides."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .inline import escape_html

DEFAULT_TITLE = "SlideDeckML Presentation"
DEFAULT_AUTHOR = "Unknown Author"

_SURROUNDING_QUOTES_RE = re.compile(r'^"|"$')


@dataclass(frozen=True)
class PageShell:
    reveal_version: str = "5.0.4"
    theme: str = "white"
    transition: str = "slide"
    background_transition: str = "fade"
    hash: bool = True

    @property
    def cdn(self) -> str:
        return f"https://cdn.jsdelivr.net/npm/reveal.js@{self.reveal_version}/dist"


def strip_quotes(value: str) -> str:
    """Drop the double quotes a metadata string literal arrives with."""
    return _SURROUNDING_QUOTES_RE.sub("", value)


def render_page(
    slides_html: str,
    title: str | None = None,
    author: str | None = None,
    shell: PageShell | None = None,
) -> str:
    """Substitute *slides_html* and the title/author into the page shell."""
    shell = shell or PageShell()
    title = escape_html(strip_quotes(title) if title is not None else DEFAULT_TITLE)
    author = escape_html(strip_quotes(author) if author is not None else DEFAULT_AUTHOR)
    hash_js = "true" if shell.hash else "false"

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="author" content="{author}">
    <meta name="title" content="{title}">
    <title>{title}</title>
    <link rel="stylesheet" href="{shell.cdn}/reveal.css">
    <link rel="stylesheet" href="{shell.cdn}/theme/{shell.theme}.css">
</head>
<body>
    <div class="reveal">
        <div class="slides">
{slides_html}
        </div>
    </div>
    <script src="{shell.cdn}/reveal.js"></script>
    <script>
        Reveal.initialize({{
            hash: {hash_js},
            transition: '{shell.transition}',
            backgroundTransition: '{shell.background_transition}'
        }});
    </script>
</body>
</html>"""
