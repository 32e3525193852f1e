"""Load saved ``documents.get`` responses from disk."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from chipscan.exceptions import AcquisitionFailure

logger = logging.getLogger(__name__)


def load_document_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a document resource previously saved as JSON.

    Raises:
        AcquisitionFailure: If the file is missing, unreadable, or not a
            JSON object.
    """
    path = Path(path)
    if not path.is_file():
        raise AcquisitionFailure(f"Document file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, ValueError) as e:
        raise AcquisitionFailure(f"Could not read document file {path}: {e}") from e

    if not isinstance(document, dict):
        raise AcquisitionFailure(f"Document file {path} does not hold a JSON object")

    logger.info("Loaded document %r from %s", document.get("title", ""), path)
    return document
