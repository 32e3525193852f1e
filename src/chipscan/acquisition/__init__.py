"""Document acquisition for chipscan.

Supplies DocumentSnapshot values either from the Google Docs API or from a
saved JSON response. This is the only layer that fails fatally; failures are
raised once as AcquisitionFailure before any classification runs.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from chipscan.config import settings
from chipscan.exceptions import AcquisitionFailure, ConfigurationError
from chipscan.models import DocumentSnapshot
from chipscan.pipeline.stage_parse import parse_document

from .docs_api import DocsClient
from .local import load_document_file


def _snapshot(raw: Mapping[str, Any], source: str) -> DocumentSnapshot:
    """Parse a resource, reporting a malformed top level as a terminal failure."""
    try:
        return parse_document(raw)
    except (ValidationError, AttributeError, TypeError) as e:
        raise AcquisitionFailure(f"Not a documents.get resource ({source}): {e}") from e


def acquire_document(
    document_id: str,
    access_token: Optional[str] = None,
    client: Optional[DocsClient] = None,
) -> DocumentSnapshot:
    """Fetch and parse a document from the Docs API.

    Args:
        document_id: Google Docs document ID.
        access_token: Bearer token (default from settings).
        client: Existing client to use instead of creating one.

    Raises:
        ConfigurationError: If no client is given and no token is configured.
        AcquisitionFailure: If the API call fails or returns a malformed
            resource.
    """
    source = f"Document {document_id}"
    if client is not None:
        return _snapshot(client.get_document(document_id), source)

    token = access_token or settings.google_access_token
    if not token:
        raise ConfigurationError(
            "No access token configured; pass --token or set CHIPSCAN_GOOGLE_ACCESS_TOKEN"
        )

    with DocsClient(token) as docs:
        return _snapshot(docs.get_document(document_id), source)


def acquire_file(path: Union[str, Path]) -> DocumentSnapshot:
    """Load and parse a saved document resource."""
    return _snapshot(load_document_file(path), f"Document file {path}")


__all__ = [
    "DocsClient",
    "acquire_document",
    "acquire_file",
    "load_document_file",
]
