"""Inline object models - document-level embedded entities."""

from typing import Any, Mapping

from pydantic import Field

from .base import BaseTreeModel


class InlineObjectDefinition(BaseTreeModel):
    """Definition of an inline object, looked up by its identifier."""

    title: str = ""
    description: str = ""
    embedded_payload: dict[str, Any] = Field(
        default_factory=dict, description="Full embeddedObject, kept verbatim"
    )


# objectId -> definition; supplied once per document, read-only during traversal
InlineObjectTable = Mapping[str, InlineObjectDefinition]
