"""
note_builder.py - Proofer Internal Note Builder
===============================================
Serializes the Proofer review content (note_content.py) into the rich-text
editor JSON tree stored as an order's internal note.

Node shapes:
  root       {children, direction:"ltr", format:"", indent:0, type:"root", version:1}
  paragraph  {children, direction:"ltr", format:"", indent:0, type:"paragraph", version:1}
  list       paragraph keys + listType:"bullet", start:1, tag:"ul"
  listitem   paragraph keys + value:n   (1..n within each list)
  text       {detail:0, format:0|1, mode:"normal", style:"", text, type:"text", version:1}
  linebreak  {type:"linebreak", version:1}

format 1 on a text node means bold.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from .models import TrademarkMappingError
from .note_content import (
    DIVIDER_TEXT,
    MIGRATED_FROM_PROOFER_TEXT,
    NoteContent,
    NoteItem,
    build_note_content,
    field_lookup_from,
)

logger = logging.getLogger(__name__)

BOLD = 1


# =============================================================================
# Node factories
# =============================================================================

def text_node(text: str, bold: bool = False) -> dict:
    return {
        "detail": 0,
        "format": BOLD if bold else 0,
        "mode":   "normal",
        "style":  "",
        "text":   text,
        "type":   "text",
        "version": 1,
    }


def linebreak_node() -> dict:
    return {"type": "linebreak", "version": 1}


def _element(node_type: str, children: List[dict], **extra: Any) -> dict:
    node = {
        "children":  children,
        "direction": "ltr",
        "format":    "",
        "indent":    0,
        "type":      node_type,
        "version":   1,
    }
    node.update(extra)
    return node


def paragraph_node(children: Optional[List[dict]] = None) -> dict:
    return _element("paragraph", children or [])


def list_item_node(children: List[dict], value: int) -> dict:
    return _element("listitem", children, value=value)


def bullet_list_node(items: List[dict]) -> dict:
    return _element("list", items, listType="bullet", start=1, tag="ul")


def text_lines(lines: List[str]) -> List[dict]:
    """Text nodes for each line, separated by linebreak nodes."""
    nodes: List[dict] = []
    for i, line in enumerate(lines):
        if i:
            nodes.append(linebreak_node())
        nodes.append(text_node(line))
    return nodes


# =============================================================================
# Serialization
# =============================================================================

def _item_children(item: NoteItem) -> List[dict]:
    if item.label is None:
        return text_lines(item.lines)
    return [text_node(item.label, bold=True), linebreak_node(), *text_lines(item.lines)]


def render_note(content: NoteContent) -> dict:
    """Serialize resolved review content into the editor tree {"root": ...}."""
    children: List[dict] = [
        paragraph_node([text_node(content.title, bold=True)]),
        paragraph_node(),
    ]

    for section in content.sections:
        children.append(paragraph_node([text_node(section.heading, bold=True)]))
        for items in section.lists:
            children.append(bullet_list_node([
                list_item_node(_item_children(item), value=n)
                for n, item in enumerate(items, start=1)
            ]))
        children.append(paragraph_node([text_node(DIVIDER_TEXT)]))

    return {"root": _element("root", children)}


def build_internal_note_from_proofer(proofer_data: Any) -> dict:
    """
    Build the internal note JSON for one Proofer questionnaire.

    Missing or null fieldAnswers produce a note with every section present
    and empty values.

    Raises:
        TrademarkMappingError: proofer_data violates the input contract.
    """
    try:
        fields = field_lookup_from(proofer_data)
    except ValidationError as exc:
        logger.error("Proofer data rejected while building note: %s", exc)
        raise TrademarkMappingError("note", str(exc)) from exc

    note = render_note(build_note_content(fields))
    logger.debug("Built internal note with %d blocks", len(note["root"]["children"]))
    return note


def _iter_text(node: Any):
    if not isinstance(node, Mapping):
        return
    if node.get("type") == "text":
        yield node.get("text") or ""
    for child in node.get("children") or []:
        yield from _iter_text(child)


def is_migrated_note(json_note: Optional[Mapping[str, Any]]) -> bool:
    """True when an existing note tree carries the "Migrated from Proofer" marker."""
    if not isinstance(json_note, Mapping):
        return False
    return any(MIGRATED_FROM_PROOFER_TEXT in text for text in _iter_text(json_note.get("root")))
