"""Classification Stage - Walk the content tree and classify every element.

Pre-order, depth-first traversal in reading order:

1. Paragraph → one Paragraph record, then one record per element at depth + 1
2. Table → one Table record, then each cell's content at depth + 2,
   row by row and cell by cell, fully exhausting a cell before the next
3. Inline object references are resolved against the lookup table
4. Unrecognized shapes become Unknown records carrying the raw shape

The classifier never raises and never mutates its inputs. Records are
yielded lazily; re-running over the same tree yields the same sequence.
"""

import logging
from copy import deepcopy
from typing import Any, Iterator, Mapping, Optional, Sequence

from pydantic import BaseModel

from chipscan.models import (
    ClassificationRecord,
    ElementKind,
    InlineObjectRef,
    InlineObjectTable,
    Paragraph,
    PersonMention,
    RecordIssue,
    RichLink,
    Table,
    TextRun,
    UnknownElement,
    UnknownNode,
)
from chipscan.pipeline.stage_resolve import resolve

logger = logging.getLogger(__name__)

# Positional keys present on every Docs API element; not part of its tag
INDEX_KEYS = frozenset({"startIndex", "endIndex"})


def _raw_shape_of(value: Any) -> dict[str, Any]:
    """Best-effort raw shape for values outside the typed variants."""
    if isinstance(value, (UnknownElement, UnknownNode)):
        return deepcopy(value.raw_shape)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Mapping):
        return deepcopy(dict(value))
    return {"value": repr(value)}


def unknown_summary(raw_shape: Mapping[str, Any]) -> dict[str, Any]:
    """Summary for an Unknown record: the tag keys plus the verbatim shape."""
    return {
        "tags": [key for key in raw_shape if key not in INDEX_KEYS],
        "raw": deepcopy(dict(raw_shape)),
    }


class ContentClassifier:
    """Classifies document content trees into record sequences.

    Holds the inline object table for the document being classified; the
    table is consulted whenever an inline object reference is met.
    """

    def __init__(
        self,
        lookup: Optional[InlineObjectTable] = None,
        keep_blank_text: bool = False,
    ):
        """Initialize classifier.

        Args:
            lookup: Inline object table (objectId -> definition).
            keep_blank_text: Emit records for whitespace-only text runs
                instead of skipping them.
        """
        self.lookup = lookup if lookup is not None else {}
        self.keep_blank_text = keep_blank_text

    def classify(self, root: Sequence[Any]) -> Iterator[ClassificationRecord]:
        """Classify a sequence of content nodes.

        Args:
            root: Top-level content nodes (a document body).

        Yields:
            One ClassificationRecord per visited element, in reading order.
        """
        yield from self._walk(root, depth=0, prefix=())

    def _walk(
        self,
        nodes: Sequence[Any],
        depth: int,
        prefix: tuple[int, ...],
    ) -> Iterator[ClassificationRecord]:
        for index, node in enumerate(nodes):
            path = prefix + (index,)
            if isinstance(node, Paragraph):
                yield from self._classify_paragraph(node, depth, path)
            elif isinstance(node, Table):
                yield from self._classify_table(node, depth, path)
            else:
                yield self._unknown(node, depth, path)

    def _classify_paragraph(
        self,
        paragraph: Paragraph,
        depth: int,
        path: tuple[int, ...],
    ) -> Iterator[ClassificationRecord]:
        yield ClassificationRecord(
            depth=depth,
            path=path,
            kind=ElementKind.PARAGRAPH,
            payload_summary={"text": paragraph.text.strip()},
        )

        for index, element in enumerate(paragraph.elements):
            record = self.classify_element(element, depth + 1, path + (index,))
            if record is not None:
                yield record

    def _classify_table(
        self,
        table: Table,
        depth: int,
        path: tuple[int, ...],
    ) -> Iterator[ClassificationRecord]:
        yield ClassificationRecord(depth=depth, path=path, kind=ElementKind.TABLE)

        for row_index, row in enumerate(table.rows):
            for cell_index, cell in enumerate(row.cells):
                logger.debug("Entering cell[%d][%d] at %s", row_index, cell_index, path)
                yield from self._walk(
                    cell.content,
                    depth=depth + 2,
                    prefix=path + (row_index, cell_index),
                )

    def classify_element(
        self,
        element: Any,
        depth: int,
        path: tuple[int, ...],
    ) -> Optional[ClassificationRecord]:
        """Classify a single paragraph element.

        Returns None only for blank text runs when blank text is not kept.
        Anything that cannot be classified degrades to an Unknown record.
        """
        try:
            if isinstance(element, TextRun):
                return self._text_run(element, depth, path)
            if isinstance(element, RichLink):
                return self._rich_link(element, depth, path)
            if isinstance(element, InlineObjectRef):
                return self._inline_object(element, depth, path)
            if isinstance(element, PersonMention):
                return self._person(element, depth, path)
        except (AttributeError, TypeError, ValueError) as e:
            logger.debug("Element at %s degraded to Unknown: %s", path, e)

        return self._unknown(element, depth, path)

    def _text_run(
        self, element: TextRun, depth: int, path: tuple[int, ...]
    ) -> Optional[ClassificationRecord]:
        text = element.text.strip()
        if not text and not self.keep_blank_text:
            return None

        summary: dict[str, Any] = {"text": text}
        if element.style is not None:
            summary["style"] = deepcopy(element.style)

        return ClassificationRecord(
            depth=depth,
            path=path,
            kind=ElementKind.TEXT_RUN,
            payload_summary=summary,
        )

    def _rich_link(
        self, element: RichLink, depth: int, path: tuple[int, ...]
    ) -> ClassificationRecord:
        summary: dict[str, Any] = {"uri": element.uri, "title": element.title}
        if element.mime_type is not None:
            summary["mime_type"] = element.mime_type

        logger.debug("RichLink at %s: %s", path, element.uri)
        return ClassificationRecord(
            depth=depth,
            path=path,
            kind=ElementKind.RICH_LINK,
            payload_summary=summary,
        )

    def _inline_object(
        self, element: InlineObjectRef, depth: int, path: tuple[int, ...]
    ) -> ClassificationRecord:
        definition = resolve(self.lookup, element.object_id)

        return ClassificationRecord(
            depth=depth,
            path=path,
            kind=ElementKind.INLINE_OBJECT_REF,
            payload_summary={"object_id": element.object_id},
            resolved_inline_object=(
                definition.model_copy(deep=True) if definition is not None else None
            ),
            issue=None if definition is not None else RecordIssue.UNRESOLVED_REFERENCE,
        )

    def _person(
        self, element: PersonMention, depth: int, path: tuple[int, ...]
    ) -> ClassificationRecord:
        summary: dict[str, Any] = {"name": element.name}
        if element.email is not None:
            summary["email"] = element.email

        return ClassificationRecord(
            depth=depth,
            path=path,
            kind=ElementKind.PERSON_MENTION,
            payload_summary=summary,
        )

    def _unknown(
        self, element: Any, depth: int, path: tuple[int, ...]
    ) -> ClassificationRecord:
        raw_shape = _raw_shape_of(element)
        logger.debug("Unknown element at %s with keys %s", path, list(raw_shape))

        return ClassificationRecord(
            depth=depth,
            path=path,
            kind=ElementKind.UNKNOWN,
            payload_summary=unknown_summary(raw_shape),
            issue=RecordIssue.UNCLASSIFIED_ELEMENT,
        )


def classify(
    root: Sequence[Any],
    lookup: Optional[InlineObjectTable] = None,
    keep_blank_text: bool = False,
) -> Iterator[ClassificationRecord]:
    """Classify a content tree against an inline object table.

    Convenience wrapper around ContentClassifier.
    """
    return ContentClassifier(lookup, keep_blank_text=keep_blank_text).classify(root)
