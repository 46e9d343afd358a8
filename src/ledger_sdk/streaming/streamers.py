"""Per-entity pagination streamers.

Each streamer binds the generic engine to the identifier layout of one
entity kind, so callers only supply the repository.
"""

from typing import Any, Optional

from ..config.settings import LedgerSettings
from ..core.protocols.paged_repository import IdExtractor, PagedRepository
from .identifiers import (
    account_id_of,
    block_id_of,
    mosaic_restriction_id_of,
    transaction_id_of,
)
from .pagination_streamer import PaginationStreamer


class _EntityPaginationStreamer(PaginationStreamer[Any]):
    """Streamer with a fixed, entity-specific ``id_of``."""

    entity_id_of: IdExtractor

    def __init__(
        self,
        repository: PagedRepository[Any],
        verify_order: Optional[bool] = None,
        settings: Optional[LedgerSettings] = None,
    ):
        super().__init__(
            repository,
            id_of=type(self).entity_id_of,
            verify_order=verify_order,
            settings=settings,
        )


class BlockPaginationStreamer(_EntityPaginationStreamer):
    """Streams blocks; the cursor is the block's record id."""
    entity_id_of = staticmethod(block_id_of)


class TransactionPaginationStreamer(_EntityPaginationStreamer):
    """Streams transactions; the cursor is ``transaction_info.id``."""
    entity_id_of = staticmethod(transaction_id_of)


class AccountPaginationStreamer(_EntityPaginationStreamer):
    """Streams accounts; the cursor is the account's record id."""
    entity_id_of = staticmethod(account_id_of)


class MosaicRestrictionPaginationStreamer(_EntityPaginationStreamer):
    """Streams mosaic restrictions; the cursor is the entry's record id."""
    entity_id_of = staticmethod(mosaic_restriction_id_of)
