"""Tests for content tree and record models."""

import pytest
from pydantic import ValidationError

from chipscan.models import (
    ClassificationRecord,
    ElementKind,
    Paragraph,
    RecordIssue,
    RichLink,
    Table,
    TableCell,
    TableRow,
    TextRun,
)


class TestParagraph:
    """Tests for Paragraph model."""

    def test_text_concatenates_runs_only(self):
        paragraph = Paragraph(
            elements=[TextRun(text="Pick: "), RichLink(uri="u", title="No"), TextRun(text="!\n")]
        )

        assert paragraph.text == "Pick: !\n"

    def test_elements_validate_by_kind(self):
        """Serialized elements are rebuilt as their tagged variant."""
        paragraph = Paragraph.model_validate(
            {"elements": [{"kind": "RichLink", "uri": "https://x", "title": "Yes"}]}
        )

        assert isinstance(paragraph.elements[0], RichLink)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Paragraph.model_validate({"elements": [{"kind": "Dropdown"}]})

    def test_frozen(self):
        paragraph = Paragraph()

        with pytest.raises(ValidationError):
            paragraph.elements = []


class TestTable:
    """Tests for Table model."""

    def test_ragged_rows(self):
        table = Table(
            rows=[
                TableRow(cells=[TableCell(), TableCell()]),
                TableRow(cells=[TableCell()]),
            ]
        )

        assert table.num_rows == 2
        assert table.num_cols == 2

    def test_empty(self):
        assert Table().num_cols == 0


class TestClassificationRecord:
    """Tests for ClassificationRecord model."""

    def test_chip_kinds(self):
        assert ClassificationRecord(depth=1, kind=ElementKind.PERSON_MENTION).is_chip
        assert not ClassificationRecord(depth=1, kind=ElementKind.TEXT_RUN).is_chip

    def test_unresolved(self):
        record = ClassificationRecord(
            depth=1,
            kind=ElementKind.INLINE_OBJECT_REF,
            issue=RecordIssue.UNRESOLVED_REFERENCE,
        )

        assert record.is_unresolved

    def test_negative_depth_rejected(self):
        with pytest.raises(ValidationError):
            ClassificationRecord(depth=-1, kind=ElementKind.TABLE)
