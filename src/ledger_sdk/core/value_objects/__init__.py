"""Value objects for ledger-sdk.

Immutable descriptors used to build paged search requests.
"""

from .order import Order
from .transaction_type import TransactionType
from .query_params import (
    QueryParams,
    clamp_page_size,
    MIN_PAGE_SIZE,
    MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
)

__all__ = [
    "Order",
    "TransactionType",
    "QueryParams",
    "clamp_page_size",
    "MIN_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "DEFAULT_PAGE_SIZE",
]
