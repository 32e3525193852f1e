"""Google Docs API client for document retrieval."""

import logging
from typing import Any, Optional

import httpx

from chipscan.config import settings
from chipscan.exceptions import AcquisitionFailure

logger = logging.getLogger(__name__)

# Remediation hints for statuses caused by authorization/configuration state
STATUS_HINTS = {
    400: "Check that the document ID is well formed.",
    401: "The access token is missing or expired; obtain a new one.",
    403: (
        "The Google Docs API may not be enabled for this project, or the "
        "account cannot read this document. Enable the API in the Cloud "
        "console and confirm the document is shared with the account."
    ),
    404: "The document was not found; check the document ID.",
}


def _error_message(response: httpx.Response) -> str:
    """Pull the API's error message out of a failed response."""
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return response.reason_phrase


class DocsClient:
    """Service for reading documents from the Google Docs API.

    Performs a single ``documents.get`` per call. Failures are terminal and
    never retried: they stem from authorization or configuration state the
    client cannot fix.
    """

    def __init__(
        self,
        access_token: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize client.

        Args:
            access_token: OAuth bearer token with a documents read scope.
            base_url: API base (default from settings).
            timeout: Request timeout in seconds (default from settings).
            transport: Optional httpx transport, used by tests.
        """
        self.base_url = (base_url or settings.docs_api_base).rstrip("/")
        self.headers = {"Authorization": f"Bearer {access_token}"}
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=self.headers,
            timeout=timeout or settings.http_timeout,
            transport=transport,
        )

    def get_document(self, document_id: str) -> dict[str, Any]:
        """Fetch the raw document resource.

        Args:
            document_id: Google Docs document ID.

        Returns:
            Decoded ``documents.get`` JSON.

        Raises:
            AcquisitionFailure: On HTTP errors, transport errors or an
                undecodable body.
        """
        logger.info("Fetching document %s", document_id)
        try:
            response = self._client.get(f"/documents/{document_id}")
        except httpx.HTTPError as e:
            raise AcquisitionFailure(
                f"Could not reach the Docs API: {e}",
                hint="Check network access to the Docs API.",
            ) from e

        if response.is_error:
            status = response.status_code
            logger.warning("Docs API returned %d for %s", status, document_id)
            raise AcquisitionFailure(
                f"Document {document_id} could not be retrieved: {_error_message(response)}",
                status_code=status,
                hint=STATUS_HINTS.get(status),
            )

        try:
            document = response.json()
        except ValueError as e:
            raise AcquisitionFailure(
                f"Docs API returned a body that is not JSON for {document_id}"
            ) from e

        if not isinstance(document, dict):
            raise AcquisitionFailure(
                f"Docs API returned an unexpected payload for {document_id}"
            )

        logger.info("Document retrieved: %s", document.get("title", ""))
        return document

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "DocsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
