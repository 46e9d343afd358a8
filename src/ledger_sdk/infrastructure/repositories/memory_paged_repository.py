"""In-memory paged repository.

Serves pages out of a list of items with the same contract as the ledger
REST gateway: items sorted by id in the requested order, starting strictly
after the cursor id, limited to the page size and optionally filtered by
transaction type. Every request is recorded for inspection.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from ...core.entities.page import Page
from ...core.exceptions import RepositoryError
from ...core.value_objects.order import Order
from ...core.value_objects.query_params import QueryParams
from ...core.protocols.paged_repository import IdExtractor
from ...streaming.identifiers import default_id_of, resolve_key_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default_type_of(item: Any) -> Optional[int]:
    if isinstance(item, dict):
        return item.get("type")
    return getattr(item, "type", None)


class InMemoryPagedRepository:
    """Memory-based PagedRepository.

    Handles ONLY page slicing over a fixed item list. Failures can be
    scheduled per call number to exercise error propagation.
    """

    def __init__(
        self,
        items: Iterable[T],
        id_of: IdExtractor = default_id_of,
        sort_key: Optional[Callable[[Any], Any]] = None,
        type_of: Callable[[Any], Optional[int]] = _default_type_of,
        latency_seconds: float = 0.0,
    ):
        """Initialize the repository.

        Args:
            items: Items to serve, in any order
            id_of: Identifier of an item, matched against cursors
            sort_key: Key ordering items ascending; defaults to the raw id
                (``id_of.key_of`` when present, else ``id_of``)
            type_of: Transaction type of an item, used by type filters
            latency_seconds: Delay applied to every search call
        """
        if latency_seconds < 0:
            raise ValueError("Latency must not be negative")

        self._id_of = id_of
        self._sort_key = sort_key or resolve_key_of(id_of)
        self._type_of = type_of
        self._latency = latency_seconds
        self._items: List[T] = sorted(items, key=self._sort_key)
        self._failures: Dict[int, Exception] = {}

        self.requests: List[QueryParams] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def fail_on_call(self, call_number: int, error: Exception) -> None:
        """Raise ``error`` from the ``call_number``-th search (1-based)."""
        if call_number < 1:
            raise ValueError("Call number is 1-based")
        self._failures[call_number] = error

    async def search(self, params: QueryParams) -> Page[T]:
        self.requests.append(params)
        call_number = len(self.requests)

        if self._latency:
            await asyncio.sleep(self._latency)

        failure = self._failures.get(call_number)
        if failure is not None:
            logger.debug("Simulated failure on call %d: %r", call_number, failure)
            raise failure

        ordered = self._items if params.order is Order.ASC else list(reversed(self._items))

        if params.types:
            allowed = {int(t) for t in params.types}
            ordered = [item for item in ordered if self._type_of(item) in allowed]

        if params.id is not None:
            ordered = self._after_cursor(ordered, params.id)

        return Page.of(ordered[:params.page_size])

    def _after_cursor(self, ordered: List[T], cursor: str) -> List[T]:
        for index, item in enumerate(ordered):
            if self._id_of(item) == cursor:
                return ordered[index + 1:]
        raise RepositoryError(
            f"Unknown cursor id: {cursor}",
            details={"cursor": cursor},
        )
