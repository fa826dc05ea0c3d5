"""Assemble rendered slides into the final HTML document."""

from __future__ import annotations

import logging

from .elements import render_block
from .models import Presentation, Slide
from .template import PageShell, render_page

logger = logging.getLogger(__name__)

_SECTION_INDENT = " " * 8


def render_section(slide: Slide) -> str:
    """Wrap the blocks of a slide (or template) in a ``<section>``."""
    content = "\n".join(render_block(block) for block in slide.blocks)
    return f"{_SECTION_INDENT}<section>\n{content}\n{_SECTION_INDENT}</section>"


def generate_html(presentation: Presentation, shell: PageShell | None = None) -> str:
    """Render *presentation* to a complete HTML document.

    The template section, when present, comes first; slides follow in
    order.  Sections are separated by a single newline.
    """
    sections: list[str] = []
    if presentation.template is not None:
        sections.append(render_section(presentation.template))
    sections.extend(render_section(slide) for slide in presentation.slides)
    logger.debug(
        "Rendered %d section(s) (template=%s)",
        len(sections),
        presentation.template is not None,
    )

    metadata = presentation.metadata
    return render_page(
        "\n".join(sections),
        title=metadata.title if metadata else None,
        author=metadata.author if metadata else None,
        shell=shell,
    )
