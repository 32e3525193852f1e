"""Exception taxonomy for chipscan.

Only acquisition and configuration problems are raised. Conditions met
during traversal (dangling inline object references, unrecognized element
shapes) are recorded on the output as ``RecordIssue`` values instead.
"""

from typing import Optional


class ChipScanError(Exception):
    """Base class for chipscan errors."""

    pass


class ConfigurationError(ChipScanError):
    """Required configuration is missing, e.g. no access token."""

    pass


class AcquisitionFailure(ChipScanError):
    """The document could not be supplied at all.

    Terminal for the run: never retried, and no partial tree is substituted.
    Examples: Docs API not enabled, permission denied, unreadable file.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.hint = hint

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message
