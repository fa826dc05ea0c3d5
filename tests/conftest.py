"""Shared fixtures for slidedeckml tests."""

from __future__ import annotations

import json

import pytest


# ---------------------------------------------------------------------------
# JSON AST dumps (as emitted by the grammar front end)
# ---------------------------------------------------------------------------

MINIMAL_AST = {
    "$type": "Presentation",
    "slides": [
        {
            "$type": "Slide",
            "blocks": [
                {
                    "$type": "Block",
                    "lines": [
                        {"$type": "Heading", "level": "#", "text": "Title"},
                        {"$type": "Paragraph", "text": "Hello **world**"},
                    ],
                }
            ],
        }
    ],
}

FULL_AST = {
    "$type": "Presentation",
    "metadata": {"$type": "Metadata", "title": '"Quarterly Review"', "author": '"Ada"'},
    "template": {
        "$type": "Template",
        "blocks": [
            {"$type": "Block", "lines": [{"$type": "Paragraph", "text": "Footer"}]},
        ],
    },
    "slides": [
        {
            "$type": "Slide",
            "blocks": [
                {
                    "$type": "Block",
                    "lines": [
                        {"$type": "Heading", "level": "##", "text": "Agenda"},
                        {
                            "$type": "PointedList",
                            "items": [
                                {"$type": "ListItem", "text": "First"},
                                {"$type": "ListItem", "text": "*Second*"},
                            ],
                        },
                    ],
                    "media": [
                        {"$type": "Media", "content": "![cat](cat.png)"},
                    ],
                }
            ],
        },
        {
            "$type": "Slide",
            "blocks": [
                {
                    "$type": "Block",
                    "lines": [
                        {
                            "$type": "StyledElement",
                            "style": "{calque: 2, horizontal-margin: 40}",
                            "element": {"$type": "Quote", "text": "Stay curious"},
                        },
                        {
                            "$type": "CodeBlock",
                            "content": "```python ['lines:1-2']\nprint('hi')\nx = 1 < 2\n```",
                        },
                    ],
                }
            ],
        },
    ],
}


@pytest.fixture
def minimal_ast():
    return json.loads(json.dumps(MINIMAL_AST))


@pytest.fixture
def full_ast():
    return json.loads(json.dumps(FULL_AST))


@pytest.fixture
def tmp_ast(tmp_path):
    """Write FULL_AST to a temp file and return its path."""
    p = tmp_path / "deck.json"
    p.write_text(json.dumps(FULL_AST), encoding="utf-8")
    return p
