"""Lookup Stage - Resolve inline object references by identifier.

Inline objects live beside the body in the Docs API response
(``document.inlineObjects``) and are referenced from paragraphs by
``inlineObjectElement.inlineObjectId``. A dangling reference is an
expected, reportable condition, so lookups return None instead of raising.
"""

import logging
from copy import deepcopy
from typing import Any, Mapping, Optional

from chipscan.models import InlineObjectDefinition, InlineObjectTable

logger = logging.getLogger(__name__)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def build_definition(raw_object: Mapping[str, Any]) -> InlineObjectDefinition:
    """Build a definition from one ``inlineObjects`` entry.

    Reads ``inlineObjectProperties.embeddedObject``; missing properties
    become empty strings and an empty payload.
    """
    properties = _as_mapping(_as_mapping(raw_object).get("inlineObjectProperties"))
    embedded = _as_mapping(properties.get("embeddedObject"))

    return InlineObjectDefinition(
        title=_as_str(embedded.get("title")),
        description=_as_str(embedded.get("description")),
        embedded_payload=deepcopy(dict(embedded)),
    )


def build_lookup_table(
    raw_inline_objects: Optional[Mapping[str, Any]],
) -> dict[str, InlineObjectDefinition]:
    """Build the objectId -> definition table from ``document.inlineObjects``."""
    if not raw_inline_objects:
        return {}

    table = {
        object_id: build_definition(raw_object)
        for object_id, raw_object in raw_inline_objects.items()
    }
    logger.debug("Built inline object table with %d entries", len(table))
    return table


def resolve(
    table: InlineObjectTable, object_id: str
) -> Optional[InlineObjectDefinition]:
    """Look up an inline object definition.

    Args:
        table: Inline object table for the document.
        object_id: Identifier carried by the referencing element.

    Returns:
        The definition, or None when the identifier is not in the table.
    """
    definition = table.get(object_id)
    if definition is None:
        logger.debug("Inline object %r not found in lookup table", object_id)
    return definition
