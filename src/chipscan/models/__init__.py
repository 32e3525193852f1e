"""Models for chipscan.

This module defines the Pydantic models for the document content tree, the
inline object lookup table, and the classification records produced by the
traversal. Every model is frozen: trees are snapshots taken once per run.

Model Hierarchy:
- DocumentSnapshot → ContentNode (Paragraph | Table | UnknownNode)
- Table → TableRow → TableCell → ContentNode
- Paragraph → ParagraphElement (TextRun | RichLink | InlineObjectRef |
  PersonMention | UnknownElement)
- DocumentSnapshot → InlineObjectDefinition (keyed by objectId)
- ClassificationRecord / ClassificationSummary (traversal output)
"""

from .base import (
    CHIP_KINDS,
    BaseTreeModel,
    ElementKind,
    RecordIssue,
)
from .content import (
    ContentNode,
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
from .document import DocumentSnapshot
from .inline_object import (
    InlineObjectDefinition,
    InlineObjectTable,
)
from .record import (
    ClassificationRecord,
    ClassificationSummary,
)

__all__ = [
    # Base types
    "BaseTreeModel",
    "CHIP_KINDS",
    "ElementKind",
    "RecordIssue",
    # Content tree
    "ContentNode",
    "Paragraph",
    "Table",
    "TableCell",
    "TableRow",
    "UnknownNode",
    # Paragraph elements
    "ParagraphElement",
    "InlineObjectRef",
    "PersonMention",
    "RichLink",
    "TextRun",
    "UnknownElement",
    # Inline objects
    "InlineObjectDefinition",
    "InlineObjectTable",
    # Document
    "DocumentSnapshot",
    # Records
    "ClassificationRecord",
    "ClassificationSummary",
]
