"""Fenced code blocks — language tag, highlighted lines and start offset."""

from __future__ import annotations

import logging

from .inline import escape_html
from .models import CODE_ATTR_RE, CODE_FENCE_RE

logger = logging.getLogger(__name__)


def _line_number_attrs(attrs: str | None) -> list[str]:
    """Translate bracketed fence attributes into line-number directives.

    ``lines:<range>`` is passed through verbatim; ``start:<int>`` sets the
    first line number.  Unknown keys are ignored.
    """
    if not attrs:
        return []

    lines: str | None = None
    start: str | None = None
    for m in CODE_ATTR_RE.finditer(attrs):
        key = m.group("key")
        value = m.group("quoted")
        if value is None:
            value = m.group("bare").rstrip(",")
        value = value.strip()

        if key == "lines" and value:
            lines = value
        elif key == "start":
            if value.isdigit():
                start = value
            else:
                logger.warning("Ignoring non-integer code fence start: %r", value)
        else:
            logger.debug("Ignoring unknown code fence attribute: %s", m.group(0))

    directives: list[str] = []
    if lines is not None:
        directives.append(f'data-line-numbers="{escape_html(lines)}"')
    if start is not None:
        if lines is None:
            directives.append("data-line-numbers")
        directives.append(f'data-ln-start-from="{start}"')
    return directives


def parse_code_block(raw: str, style: str = "") -> str:
    """Render a fenced block as ``<pre><code>...</code></pre>``.

    Returns ``""`` when *raw* is not a complete fence.  The body is escaped
    but never inline-formatted.  *style* is an already-built `` style="..."``
    attribute placed on the ``<pre>`` tag.
    """
    m = CODE_FENCE_RE.match(raw)
    if not m:
        logger.warning("Skipping malformed code block: %r", raw[:80])
        return ""

    lang = m.group("lang")
    body = m.group("body")
    if body.endswith("\n"):
        body = body[:-1]
        if body.endswith("\r"):
            body = body[:-1]

    code_attrs = ["data-trim", "data-noescape"]
    if lang:
        code_attrs.append(f'class="language-{lang}"')
    code_attrs.extend(_line_number_attrs(m.group("attrs")))

    return f"<pre{style}><code {' '.join(code_attrs)}>{escape_html(body)}</code></pre>"
