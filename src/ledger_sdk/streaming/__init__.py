"""Pagination streaming engine and per-entity streamers."""

from .identifiers import (
    path_id_of,
    resolve_key_of,
    default_id_of,
    block_id_of,
    transaction_id_of,
    account_id_of,
    mosaic_restriction_id_of,
)
from .pagination_streamer import (
    PaginationStream,
    PaginationStreamer,
    StreamState,
    StreamStatus,
)
from .streamers import (
    BlockPaginationStreamer,
    TransactionPaginationStreamer,
    AccountPaginationStreamer,
    MosaicRestrictionPaginationStreamer,
)

__all__ = [
    "path_id_of",
    "resolve_key_of",
    "default_id_of",
    "block_id_of",
    "transaction_id_of",
    "account_id_of",
    "mosaic_restriction_id_of",
    "PaginationStream",
    "PaginationStreamer",
    "StreamState",
    "StreamStatus",
    "BlockPaginationStreamer",
    "TransactionPaginationStreamer",
    "AccountPaginationStreamer",
    "MosaicRestrictionPaginationStreamer",
]
