"""ledger-sdk - client-side data access for paged ledger collections.

This library turns the paged search routes of a ledger REST gateway (blocks,
transactions, accounts, mosaic restrictions) into lazy async streams with
limit control and correct continuation.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    LedgerSettings,
    get_settings,
)

from .core.exceptions import (
    LedgerSdkError,
    ValidationError,
    ConfigurationError,
    RepositoryError,
    TransportError,
    ServerError,
    PaginationLogicError,
    create_error_response,
)

from .core.value_objects import (
    Order,
    TransactionType,
    QueryParams,
)

from .core.entities import Page
from .core.protocols import PagedRepository, IdExtractor

from .streaming import (
    PaginationStream,
    PaginationStreamer,
    StreamState,
    StreamStatus,
    BlockPaginationStreamer,
    TransactionPaginationStreamer,
    AccountPaginationStreamer,
    MosaicRestrictionPaginationStreamer,
    path_id_of,
    default_id_of,
)

from .infrastructure import (
    InMemoryPagedRepository,
    HttpPagedRepository,
)

__all__ = [
    "__version__",
    "LedgerSettings",
    "get_settings",
    "LedgerSdkError",
    "ValidationError",
    "ConfigurationError",
    "RepositoryError",
    "TransportError",
    "ServerError",
    "PaginationLogicError",
    "create_error_response",
    "Order",
    "TransactionType",
    "QueryParams",
    "Page",
    "PagedRepository",
    "IdExtractor",
    "PaginationStream",
    "PaginationStreamer",
    "StreamState",
    "StreamStatus",
    "BlockPaginationStreamer",
    "TransactionPaginationStreamer",
    "AccountPaginationStreamer",
    "MosaicRestrictionPaginationStreamer",
    "path_id_of",
    "default_id_of",
    "InMemoryPagedRepository",
    "HttpPagedRepository",
]
