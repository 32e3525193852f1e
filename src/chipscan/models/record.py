"""Classification output models."""

from typing import Any, Optional

from pydantic import Field

from .base import CHIP_KINDS, BaseTreeModel, ElementKind, RecordIssue
from .inline_object import InlineObjectDefinition


class ClassificationRecord(BaseTreeModel):
    """
    One visited element of the content tree.

    ``path`` holds zero-based indices from the document body down to the
    element: node index, then (row, cell, node) triples per table level,
    then the element index inside its paragraph.
    """

    depth: int = Field(..., ge=0)
    path: tuple[int, ...] = Field(default_factory=tuple)
    kind: ElementKind
    payload_summary: dict[str, Any] = Field(default_factory=dict)
    resolved_inline_object: Optional[InlineObjectDefinition] = None
    issue: Optional[RecordIssue] = None

    @property
    def is_chip(self) -> bool:
        """Check if the record is a chip-like element."""
        return self.kind in CHIP_KINDS

    @property
    def is_unresolved(self) -> bool:
        return self.issue == RecordIssue.UNRESOLVED_REFERENCE


class ClassificationSummary(BaseTreeModel):
    """
    Aggregate statistics over a record sequence.

    Generated after traversal; holds counts only, never the records.
    """

    total_records: int = 0
    kind_counts: dict[ElementKind, int] = Field(default_factory=dict)
    chip_count: int = 0
    unresolved_count: int = 0
    unknown_count: int = 0
    max_depth: int = 0

    def count(self, kind: ElementKind) -> int:
        """Number of records of the given kind."""
        return self.kind_counts.get(kind, 0)

    @property
    def has_chips(self) -> bool:
        return self.chip_count > 0
