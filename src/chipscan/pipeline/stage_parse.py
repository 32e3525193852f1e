"""Parse Stage - Convert Docs API JSON into the typed content tree.

Input is the resource returned by ``documents.get``:

    {
      "documentId": "...",
      "title": "...",
      "body": {"content": [StructuralElement, ...]},
      "inlineObjects": {"kix.abc": {"inlineObjectProperties": {...}}}
    }

Structural elements carrying ``paragraph`` or ``table`` become typed nodes;
everything else (section breaks, tables of contents) is kept verbatim as
UnknownNode. Paragraph elements dispatch on their tag key. A recognized tag
with missing or malformed sub-fields degrades to UnknownElement so that one
bad element never aborts the parse.
"""

import logging
from copy import deepcopy
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from chipscan.models import (
    ContentNode,
    DocumentSnapshot,
    InlineObjectRef,
    Paragraph,
    ParagraphElement,
    PersonMention,
    RichLink,
    Table,
    TableCell,
    TableRow,
    TextRun,
    UnknownElement,
    UnknownNode,
)
from chipscan.pipeline.stage_resolve import build_lookup_table

logger = logging.getLogger(__name__)

# Raised while digging into a recognized tag whose shape is off
_MALFORMED_ERRORS = (KeyError, TypeError, AttributeError, ValidationError)


def _raw_shape(raw: Any) -> dict[str, Any]:
    """Copy a raw value into a mapping suitable for Unknown variants."""
    if isinstance(raw, Mapping):
        return deepcopy(dict(raw))
    return {"value": deepcopy(raw)}


def _parse_text_run(raw: Mapping[str, Any]) -> TextRun:
    run = raw["textRun"]
    return TextRun(text=run["content"], style=run.get("textStyle"))


def _parse_rich_link(raw: Mapping[str, Any]) -> RichLink:
    props = raw["richLink"]["richLinkProperties"]
    return RichLink(
        uri=props["uri"],
        title=props.get("title", ""),
        mime_type=props.get("mimeType"),
    )


def _parse_inline_object(raw: Mapping[str, Any]) -> InlineObjectRef:
    return InlineObjectRef(object_id=raw["inlineObjectElement"]["inlineObjectId"])


def _parse_person(raw: Mapping[str, Any]) -> PersonMention:
    props = raw["person"]["personProperties"]
    # name is only present when the chip displays one; email always is
    return PersonMention(name=props.get("name") or props["email"], email=props.get("email"))


# Tag key -> parser. Order matters only for elements carrying several tags.
ELEMENT_PARSERS: dict[str, Callable[[Mapping[str, Any]], ParagraphElement]] = {
    "textRun": _parse_text_run,
    "richLink": _parse_rich_link,
    "inlineObjectElement": _parse_inline_object,
    "person": _parse_person,
}


def parse_paragraph_element(raw: Any) -> ParagraphElement:
    """Parse one ``ParagraphElement`` into its typed variant.

    Args:
        raw: Element as returned by the API.

    Returns:
        The typed element, or UnknownElement carrying the raw shape.
    """
    if not isinstance(raw, Mapping):
        return UnknownElement(raw_shape=_raw_shape(raw))

    tag = next((key for key in ELEMENT_PARSERS if key in raw), None)
    if tag is None:
        return UnknownElement(raw_shape=_raw_shape(raw))

    try:
        return ELEMENT_PARSERS[tag](raw)
    except _MALFORMED_ERRORS as e:
        logger.debug("Malformed %s element degraded to Unknown: %s", tag, e)
        return UnknownElement(raw_shape=_raw_shape(raw))


def parse_paragraph(raw_paragraph: Mapping[str, Any]) -> Paragraph:
    """Parse a ``Paragraph``; a missing element list means an empty paragraph."""
    elements = raw_paragraph.get("elements") or []
    return Paragraph(elements=[parse_paragraph_element(e) for e in elements])


def parse_table(raw_table: Mapping[str, Any]) -> Table:
    """Parse a ``Table`` via ``tableRows[].tableCells[].content``."""
    rows = []
    for raw_row in raw_table.get("tableRows") or []:
        cells = [
            TableCell(content=parse_content(raw_cell.get("content")))
            for raw_cell in raw_row.get("tableCells") or []
        ]
        rows.append(TableRow(cells=cells))
    return Table(rows=rows)


def parse_structural_element(raw: Any) -> ContentNode:
    """Parse one ``StructuralElement`` of a body or table cell."""
    if not isinstance(raw, Mapping):
        return UnknownNode(raw_shape=_raw_shape(raw))

    try:
        if isinstance(raw.get("paragraph"), Mapping):
            return parse_paragraph(raw["paragraph"])
        if isinstance(raw.get("table"), Mapping):
            return parse_table(raw["table"])
    except _MALFORMED_ERRORS as e:
        logger.debug("Malformed structural element degraded to Unknown: %s", e)

    return UnknownNode(raw_shape=_raw_shape(raw))


def parse_content(raw_content: Optional[list[Any]]) -> list[ContentNode]:
    """Parse a sequence of structural elements, preserving order."""
    return [parse_structural_element(raw) for raw in raw_content or []]


def parse_document(raw: Mapping[str, Any]) -> DocumentSnapshot:
    """Parse a full ``documents.get`` resource.

    Args:
        raw: Decoded JSON document resource.

    Returns:
        DocumentSnapshot with the body content tree and inline object table.
    """
    body = raw.get("body") or {}
    snapshot = DocumentSnapshot(
        document_id=raw.get("documentId") or "",
        title=raw.get("title") or "",
        revision_id=raw.get("revisionId"),
        content=parse_content(body.get("content")),
        inline_objects=build_lookup_table(raw.get("inlineObjects")),
    )
    logger.debug(
        "Parsed document %r: %d top-level nodes, %d inline objects",
        snapshot.document_id,
        len(snapshot.content),
        snapshot.inline_object_count,
    )
    return snapshot
