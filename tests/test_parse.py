"""Tests for Docs API JSON parsing stage."""

from chipscan.models import (
    InlineObjectRef,
    Paragraph,
    PersonMention,
    RichLink,
    Table,
    TextRun,
    UnknownElement,
    UnknownNode,
)
from chipscan.pipeline.stage_parse import (
    parse_content,
    parse_document,
    parse_paragraph_element,
    parse_structural_element,
)


class TestParseParagraphElement:
    """Tests for tag dispatch on paragraph elements."""

    def test_text_run(self):
        element = parse_paragraph_element(
            {"textRun": {"content": "hello ", "textStyle": {"italic": True}}}
        )

        assert element == TextRun(text="hello ", style={"italic": True})

    def test_rich_link(self):
        element = parse_paragraph_element(
            {
                "richLink": {
                    "richLinkId": "rl.9",
                    "richLinkProperties": {"uri": "https://x", "title": "Yes"},
                }
            }
        )

        assert isinstance(element, RichLink)
        assert element.uri == "https://x"
        assert element.title == "Yes"
        assert element.mime_type is None

    def test_inline_object(self):
        element = parse_paragraph_element({"inlineObjectElement": {"inlineObjectId": "kix.1"}})

        assert element == InlineObjectRef(object_id="kix.1")

    def test_person(self):
        element = parse_paragraph_element(
            {"person": {"personProperties": {"name": "Ada", "email": "ada@example.com"}}}
        )

        assert element == PersonMention(name="Ada", email="ada@example.com")

    def test_unrecognized_tag(self):
        """Unknown tags keep every key, index keys included."""
        raw = {"startIndex": 5, "endIndex": 6, "horizontalRule": {}}

        element = parse_paragraph_element(raw)

        assert isinstance(element, UnknownElement)
        assert element.raw_shape == raw

    def test_rich_link_missing_properties_degrades(self):
        """A recognized tag with missing sub-fields becomes Unknown."""
        raw = {"richLink": {"richLinkId": "rl.1"}}

        element = parse_paragraph_element(raw)

        assert isinstance(element, UnknownElement)
        assert element.raw_shape == raw

    def test_person_email_only(self):
        """Chips showing only an address are labelled by that address."""
        raw = {"person": {"personProperties": {"email": "ada@example.com"}}}

        assert parse_paragraph_element(raw) == PersonMention(
            name="ada@example.com", email="ada@example.com"
        )

    def test_person_without_name_or_email_degrades(self):
        raw = {"person": {"personProperties": {}}}

        assert isinstance(parse_paragraph_element(raw), UnknownElement)

    def test_text_run_with_wrong_type_degrades(self):
        """Validation errors degrade instead of propagating."""
        raw = {"textRun": {"content": 42}}

        assert isinstance(parse_paragraph_element(raw), UnknownElement)

    def test_non_mapping(self):
        element = parse_paragraph_element("not an element")

        assert isinstance(element, UnknownElement)
        assert element.raw_shape == {"value": "not an element"}


class TestParseStructuralElement:
    """Tests for paragraphs, tables and other structural elements."""

    def test_paragraph_without_elements(self):
        assert parse_structural_element({"paragraph": {}}) == Paragraph()

    def test_section_break(self):
        raw = {"endIndex": 1, "sectionBreak": {"sectionStyle": {"columnSeparatorStyle": "NONE"}}}

        node = parse_structural_element(raw)

        assert isinstance(node, UnknownNode)
        assert node.raw_shape == raw

    def test_nested_table(self):
        """Tables nest through cell content."""
        raw = {
            "table": {
                "tableRows": [
                    {
                        "tableCells": [
                            {
                                "content": [
                                    {
                                        "table": {
                                            "tableRows": [
                                                {
                                                    "tableCells": [
                                                        {
                                                            "content": [
                                                                {
                                                                    "paragraph": {
                                                                        "elements": [
                                                                            {"textRun": {"content": "deep"}}
                                                                        ]
                                                                    }
                                                                }
                                                            ]
                                                        }
                                                    ]
                                                }
                                            ]
                                        }
                                    }
                                ]
                            },
                            {},
                        ]
                    }
                ]
            }
        }

        node = parse_structural_element(raw)

        assert isinstance(node, Table)
        assert node.num_rows == 1
        assert node.num_cols == 2
        inner = node.rows[0].cells[0].content[0]
        assert isinstance(inner, Table)
        assert inner.rows[0].cells[0].content[0].text == "deep"
        assert node.rows[0].cells[1].content == []

    def test_malformed_table_degrades(self):
        raw = {"table": {"tableRows": ["not a row"]}}

        node = parse_structural_element(raw)

        assert isinstance(node, UnknownNode)
        assert node.raw_shape == raw

    def test_parse_content_preserves_order(self):
        nodes = parse_content(
            [
                {"paragraph": {"elements": [{"textRun": {"content": "one"}}]}},
                {"tableOfContents": {"content": []}},
                {"paragraph": {"elements": [{"textRun": {"content": "two"}}]}},
            ]
        )

        assert [type(n) for n in nodes] == [Paragraph, UnknownNode, Paragraph]
        assert nodes[0].text == "one"
        assert nodes[2].text == "two"

    def test_parse_content_none(self):
        assert parse_content(None) == []


class TestParseDocument:
    """Tests for full document parsing."""

    def test_metadata(self, raw_document):
        snapshot = parse_document(raw_document)

        assert snapshot.document_id == "doc-123"
        assert snapshot.title == "Dropdown test"
        assert snapshot.revision_id == "rev-1"
        assert len(snapshot.content) == 4
        assert snapshot.has_tables

    def test_inline_objects(self, raw_document):
        snapshot = parse_document(raw_document)

        assert snapshot.inline_object_count == 1
        assert snapshot.inline_objects["kix.1"].title == "Dropdown"
        assert snapshot.inline_objects["kix.1"].description == "Status"

    def test_empty_document(self):
        snapshot = parse_document({})

        assert snapshot.content == []
        assert snapshot.inline_objects == {}
        assert not snapshot.has_tables

    def test_source_not_mutated(self, raw_document):
        """Parsing copies raw shapes rather than aliasing them."""
        snapshot = parse_document(raw_document)
        snapshot.content[0].raw_shape["sectionBreak"]["sectionStyle"]["x"] = 1

        assert raw_document["body"]["content"][0]["sectionBreak"]["sectionStyle"] == {}

    def test_serialized_tree_round_trips(self, raw_document):
        """Discriminated unions validate back from their own dump."""
        snapshot = parse_document(raw_document)

        restored = type(snapshot).model_validate(snapshot.model_dump())

        assert restored == snapshot
