"""Pytest configuration and fixtures."""

import json

import pytest

from chipscan.models import InlineObjectDefinition


@pytest.fixture
def raw_document():
    """A documents.get resource covering every element kind.

    Body layout:
    0 sectionBreak
    1 paragraph: "Select option: " + rich link chip
    2 paragraph: inline object, person chip, date chip, trailing newline
    3 table 1x2: ["A"], [dangling inline object]
    """
    return {
        "documentId": "doc-123",
        "title": "Dropdown test",
        "revisionId": "rev-1",
        "body": {
            "content": [
                {"endIndex": 1, "sectionBreak": {"sectionStyle": {}}},
                {
                    "startIndex": 1,
                    "endIndex": 17,
                    "paragraph": {
                        "elements": [
                            {
                                "startIndex": 1,
                                "endIndex": 16,
                                "textRun": {
                                    "content": "Select option: ",
                                    "textStyle": {"bold": True},
                                },
                            },
                            {
                                "startIndex": 16,
                                "endIndex": 17,
                                "richLink": {
                                    "richLinkId": "rl.1",
                                    "richLinkProperties": {
                                        "uri": "https://x",
                                        "title": "Yes",
                                        "mimeType": "application/vnd.google-apps.document",
                                    },
                                },
                            },
                        ]
                    },
                },
                {
                    "paragraph": {
                        "elements": [
                            {"inlineObjectElement": {"inlineObjectId": "kix.1"}},
                            {
                                "person": {
                                    "personId": "p.1",
                                    "personProperties": {
                                        "name": "Ada Lovelace",
                                        "email": "ada@example.com",
                                    },
                                }
                            },
                            {
                                "startIndex": 20,
                                "endIndex": 21,
                                "dateElement": {
                                    "dateId": "d.1",
                                    "dateElementProperties": {"displayText": "Oct 19, 2026"},
                                },
                            },
                            {"textRun": {"content": "\n"}},
                        ]
                    }
                },
                {
                    "table": {
                        "rows": 1,
                        "columns": 2,
                        "tableRows": [
                            {
                                "tableCells": [
                                    {
                                        "content": [
                                            {
                                                "paragraph": {
                                                    "elements": [
                                                        {"textRun": {"content": "A\n"}}
                                                    ]
                                                }
                                            }
                                        ]
                                    },
                                    {
                                        "content": [
                                            {
                                                "paragraph": {
                                                    "elements": [
                                                        {
                                                            "inlineObjectElement": {
                                                                "inlineObjectId": "kix.missing"
                                                            }
                                                        }
                                                    ]
                                                }
                                            }
                                        ]
                                    },
                                ]
                            }
                        ],
                    }
                },
            ]
        },
        "inlineObjects": {
            "kix.1": {
                "objectId": "kix.1",
                "inlineObjectProperties": {
                    "embeddedObject": {
                        "title": "Dropdown",
                        "description": "Status",
                        "imageProperties": {},
                    }
                },
            }
        },
    }


@pytest.fixture
def document_file(tmp_path, raw_document):
    """Write the sample resource to disk as a saved documents.get response."""
    path = tmp_path / "document.json"
    path.write_text(json.dumps(raw_document), encoding="utf-8")
    return path


@pytest.fixture
def dropdown_lookup():
    """Lookup table holding a single dropdown-like inline object."""
    return {
        "kix.1": InlineObjectDefinition(
            title="Dropdown", description="", embedded_payload={}
        )
    }
