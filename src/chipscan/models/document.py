"""Document-level models."""

from typing import Optional

from pydantic import Field

from .base import BaseTreeModel
from .content import ContentNode, Table
from .inline_object import InlineObjectDefinition


class DocumentSnapshot(BaseTreeModel):
    """
    Immutable view of a fetched document.

    Holds the body content tree and the inline object table side by side;
    the classifier consumes both and never writes back.
    """

    document_id: str = Field(default="", description="Docs API documentId")
    title: str = ""
    revision_id: Optional[str] = None

    content: list[ContentNode] = Field(default_factory=list)
    inline_objects: dict[str, InlineObjectDefinition] = Field(default_factory=dict)

    @property
    def has_tables(self) -> bool:
        """Check if the top level of the body contains a table."""
        return any(isinstance(node, Table) for node in self.content)

    @property
    def inline_object_count(self) -> int:
        return len(self.inline_objects)
