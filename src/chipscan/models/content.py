"""Content tree models - paragraphs, tables and inline paragraph elements.

The tree mirrors the structural content of a Google Docs body:

- ContentNode → Paragraph | Table | UnknownNode
- Table → TableRow → TableCell → ContentNode (arbitrary nesting)
- Paragraph → ParagraphElement (TextRun | RichLink | InlineObjectRef |
  PersonMention | UnknownElement)

Both unions are discriminated on ``kind`` so serialized trees round-trip
through ``model_validate``.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from .base import BaseTreeModel


class TextRun(BaseTreeModel):
    """Run of plain text, optionally carrying its text style."""

    kind: Literal["TextRun"] = "TextRun"
    text: str
    style: Optional[dict[str, Any]] = Field(
        None, description="textStyle descriptor, kept verbatim"
    )


class RichLink(BaseTreeModel):
    """Rich link chip. Dropdown chips commonly serialize as this shape."""

    kind: Literal["RichLink"] = "RichLink"
    uri: str
    title: str = ""
    mime_type: Optional[str] = None


class InlineObjectRef(BaseTreeModel):
    """Reference to a document-level inline object by identifier."""

    kind: Literal["InlineObjectRef"] = "InlineObjectRef"
    object_id: str


class PersonMention(BaseTreeModel):
    """Person chip."""

    kind: Literal["PersonMention"] = "PersonMention"
    name: str
    email: Optional[str] = None


class UnknownElement(BaseTreeModel):
    """Paragraph element whose shape is not recognized."""

    kind: Literal["Unknown"] = "Unknown"
    raw_shape: dict[str, Any] = Field(default_factory=dict)


ParagraphElement = Annotated[
    Union[TextRun, RichLink, InlineObjectRef, PersonMention, UnknownElement],
    Field(discriminator="kind"),
]


class Paragraph(BaseTreeModel):
    """Paragraph holding an ordered sequence of inline elements."""

    kind: Literal["Paragraph"] = "Paragraph"
    elements: list[ParagraphElement] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenated text of all text runs, untrimmed."""
        return "".join(e.text for e in self.elements if isinstance(e, TextRun))


class UnknownNode(BaseTreeModel):
    """Structural element that is neither a paragraph nor a table.

    Section breaks and tables of contents land here with their raw shape.
    """

    kind: Literal["Unknown"] = "Unknown"
    raw_shape: dict[str, Any] = Field(default_factory=dict)


class TableCell(BaseTreeModel):
    """Table cell. Its content is a further sequence of content nodes."""

    content: list["ContentNode"] = Field(default_factory=list)


class TableRow(BaseTreeModel):
    """Ordered sequence of table cells."""

    cells: list[TableCell] = Field(default_factory=list)


class Table(BaseTreeModel):
    """Table made of rows of cells."""

    kind: Literal["Table"] = "Table"
    rows: list[TableRow] = Field(default_factory=list)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        """Widest row; rows may be ragged after merges."""
        return max((len(row.cells) for row in self.rows), default=0)


ContentNode = Annotated[
    Union[Paragraph, Table, UnknownNode],
    Field(discriminator="kind"),
]

TableCell.model_rebuild()
TableRow.model_rebuild()
Table.model_rebuild()
