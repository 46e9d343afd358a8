"""Exceptions module for ledger-sdk.

This module provides the complete exception hierarchy for ledger-sdk.
"""

from .base import (
    LedgerSdkError,
    create_error_response,
)

from .infrastructure import (
    # Validation Errors
    ValidationError,
    ConfigurationError,

    # Repository Errors
    RepositoryError,
    TransportError,
    ServerError,

    # Pagination Errors
    PaginationLogicError,
)

__all__ = [
    "LedgerSdkError",
    "create_error_response",
    "ValidationError",
    "ConfigurationError",
    "RepositoryError",
    "TransportError",
    "ServerError",
    "PaginationLogicError",
]
