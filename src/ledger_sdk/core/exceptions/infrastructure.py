"""Infrastructure-specific exceptions for ledger-sdk.

This module defines exceptions raised by paged repositories talking to the
remote ledger service and by the pagination engine consuming them.
"""

from typing import Any, Dict, Optional

from .base import LedgerSdkError


# Validation Errors
class ValidationError(LedgerSdkError):
    """Raised when input validation fails."""
    pass


class ConfigurationError(LedgerSdkError):
    """Raised when settings are missing or invalid."""
    pass


# Repository Errors
class RepositoryError(LedgerSdkError):
    """Base class for failures raised by a paged repository."""
    pass


class TransportError(RepositoryError):
    """Raised on network or protocol failures (unreachable host, bad body)."""
    pass


class ServerError(RepositoryError):
    """Raised when the ledger service answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        details.setdefault("status_code", status_code)
        super().__init__(message, error_code=error_code, details=details)
        self.status_code = status_code


# Pagination Errors
class PaginationLogicError(LedgerSdkError):
    """Raised when a repository breaks the paging contract.

    Examples are a page whose ordering contradicts the requested order, or a
    full page that does not advance the cursor. These are fatal for the
    stream that observed them.
    """
    pass
