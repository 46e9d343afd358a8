"""Base exceptions for ledger-sdk.

This module defines the base exception hierarchy for the ledger-sdk library.
All exceptions inherit from LedgerSdkError and carry an error code and a
details mapping so callers can log or serialize failures uniformly.
"""

from typing import Any, Dict, Optional


class LedgerSdkError(Exception):
    """Base exception for all ledger-sdk errors.

    All exceptions in the ledger-sdk library inherit from this base class
    and include structured error information for better debugging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: LedgerSdkError) -> Dict[str, Any]:
    """Create standardized error payload from exception.

    Args:
        exception: The ledger-sdk exception

    Returns:
        Error payload dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
