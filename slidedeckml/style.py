"""Style-block parser — ``{key: value, ...}`` to an inline ``style`` attribute."""

from __future__ import annotations

import logging

from .inline import escape_html

logger = logging.getLogger(__name__)

# Positioning keywords.  Any of them implies absolute placement.
_KEYWORDS = {
    "calque": "z-index: {}",
    "horizontal-margin": "left: {}px",
    "vertical-margin": "top: {}px",
}


def _split_pairs(content: str) -> list[str]:
    """Split on commas that are not inside parentheses, e.g. ``rgb(1, 2, 3)``."""
    pairs: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(content):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            pairs.append(content[start:i])
            start = i + 1
    pairs.append(content[start:])
    return pairs


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1].strip()
    return value


def parse_style(raw: str | None) -> str:
    """Return `` style="..."`` for a style block, or ``""``.

    Malformed input (missing braces, a pair without ``:``, an empty key or
    value) yields ``""`` so the element still renders, just unstyled.
    """
    if not raw or not raw.strip():
        return ""

    text = raw.strip()
    if not (text.startswith("{") and text.endswith("}")):
        logger.warning("Ignoring style block without enclosing braces: %r", raw)
        return ""

    content = text[1:-1].strip()
    if not content:
        return ""
    if "{" in content or "}" in content:
        logger.warning("Ignoring style block with nested braces: %r", raw)
        return ""

    properties: list[str] = []
    positioned = False
    for pair in _split_pairs(content):
        if not pair.strip():
            continue
        key, sep, value = pair.partition(":")
        key = key.strip()
        value = _unquote(value.strip())
        if not sep or not key or not value:
            logger.warning("Ignoring malformed style pair %r in %r", pair.strip(), raw)
            return ""

        rule = _KEYWORDS.get(key)
        if rule is not None:
            positioned = True
            properties.append(rule.format(value))
        else:
            properties.append(f"{key}: {value}")

    if not properties:
        return ""
    if positioned:
        properties.insert(0, "position: absolute")

    logger.debug("Style block %r -> %s", raw, properties)
    return f' style="{escape_html("; ".join(properties))}"'
