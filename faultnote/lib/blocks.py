"""Conversion between FaultNote records and Notion JSON.

Builds the block payload appended for each entry and extracts page
records from search results.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from faultnote.lib.records import FaultEntry, Page

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CODE_LANGUAGE",
    "ENTRY_HEADING",
    "MAX_TEXT_LENGTH",
    "create_error_block",
    "entry_to_blocks",
    "extract_page_info",
]

ENTRY_HEADING = "📋 Error Log Entry"
DEFAULT_CODE_LANGUAGE = "plain text"

# Notion rejects rich text objects with more content than this
MAX_TEXT_LENGTH = 2000

# Title property names tried before scanning for any title-typed property
TITLE_PROPERTY_NAMES = ("title", "Name", "Title")

# (label, colour) for each paragraph inside the heading toggle
_PARAGRAPH_LABELS = (
    ("🔴 Error: ", "red"),
    ("🟡 Problem: ", "yellow"),
    ("🟢 Solution: ", "green"),
)


def _text(content: str, annotations: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    item: Dict[str, Any] = {"type": "text", "text": {"content": content}}
    if annotations:
        item["annotations"] = annotations
    return item


def _rich_text(content: str) -> List[Dict[str, Any]]:
    """Split content into text objects that respect MAX_TEXT_LENGTH."""
    if not content:
        return []
    return [
        _text(content[i:i + MAX_TEXT_LENGTH])
        for i in range(0, len(content), MAX_TEXT_LENGTH)
    ]


def _labelled_paragraph(label: str, colour: str, content: str) -> Dict[str, Any]:
    return {
        "object": "block",
        "type": "paragraph",
        "paragraph": {
            "rich_text": [
                _text(label, {"bold": True, "color": colour}),
                *_rich_text(content),
            ],
            "color": "default",
        },
    }


def create_error_block(
    error: str,
    problem: str,
    solution: str,
    code: Optional[str] = None,
    language: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Create the toggleable heading block for one fault log entry.

    The heading holds three labelled paragraphs and, when ``code`` is not
    blank, a code block.

    Args:
        error: Error text
        problem: Problem description
        solution: Solution description
        code: Optional code snippet; whitespace-only snippets are dropped
        language: Notion code language (defaults to "plain text")

    Returns:
        One-element list suitable for the ``children`` of an append request
    """
    children = [
        _labelled_paragraph(label, colour, content)
        for (label, colour), content in zip(_PARAGRAPH_LABELS, (error, problem, solution))
    ]

    if code is not None and code.strip():
        children.append({
            "object": "block",
            "type": "code",
            "code": {
                "caption": [],
                "rich_text": _rich_text(code),
                "language": language or DEFAULT_CODE_LANGUAGE,
            },
        })

    return [{
        "object": "block",
        "type": "heading_3",
        "heading_3": {
            "rich_text": [_text(ENTRY_HEADING)],
            "color": "red",
            "is_toggleable": True,
            "children": children,
        },
    }]


def entry_to_blocks(entry: FaultEntry, language: Optional[str] = None) -> List[Dict[str, Any]]:
    """Create the block payload for a FaultEntry."""
    return create_error_block(
        entry.error,
        entry.problem,
        entry.solution,
        entry.code if entry.has_code() else None,
        language,
    )


def _title_property(properties: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    for name in TITLE_PROPERTY_NAMES:
        prop = properties.get(name)
        if isinstance(prop, dict) and "title" in prop:
            return prop
    for prop in properties.values():
        if isinstance(prop, dict) and prop.get("type") == "title":
            return prop
    return None


def extract_page_info(result: Dict[str, Any]) -> Optional[Page]:
    """Extract a Page from one Notion search result.

    Returns None when the result has no id. Pages without a readable
    title are called "Untitled".
    """
    page_id = result.get("id")
    if not isinstance(page_id, str) or not page_id:
        logger.debug("Skipping search result without id: %r", result.get("object"))
        return None

    title = ""
    properties = result.get("properties")
    if isinstance(properties, dict):
        prop = _title_property(properties)
        segments = prop.get("title") if prop else None
        if isinstance(segments, list):
            title = "".join(
                segment.get("plain_text", "")
                for segment in segments
                if isinstance(segment, dict)
            )

    return Page(id=page_id, title=title.strip() or "Untitled")
