"""Base models and common types for chipscan."""

from enum import Enum

from pydantic import BaseModel


class ElementKind(str, Enum):
    """Classification kinds assigned to visited elements."""

    PARAGRAPH = "Paragraph"
    TABLE = "Table"
    TEXT_RUN = "TextRun"
    RICH_LINK = "RichLink"
    INLINE_OBJECT_REF = "InlineObjectRef"
    PERSON_MENTION = "PersonMention"
    UNKNOWN = "Unknown"


# Kinds that represent a chip rather than plain text or structure
CHIP_KINDS = frozenset(
    {
        ElementKind.RICH_LINK,
        ElementKind.INLINE_OBJECT_REF,
        ElementKind.PERSON_MENTION,
    }
)


class RecordIssue(str, Enum):
    """Non-fatal conditions attached to a classification record."""

    UNRESOLVED_REFERENCE = "unresolved_reference"  # objectId missing from lookup
    UNCLASSIFIED_ELEMENT = "unclassified_element"  # shape outside known variants


class BaseTreeModel(BaseModel):
    """Base class for all document tree models.

    Tree values are immutable snapshots; nothing downstream of the parser
    is allowed to modify them.
    """

    class Config:
        frozen = True
