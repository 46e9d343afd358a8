"""Pagination streaming engine.

Turns a paged search endpoint into one lazy, cancelable async sequence of
items. A stream pulls one page at a time from its PagedRepository, hands
items out one by one and threads the continuation id forward:

    INIT -> FETCHING -> (EMITTING <-> FETCHING) -> ENDED
                 \\-> FAILED

A stream ends on an empty page, a page shorter than the requested page size,
an explicit ``is_last`` page, or when the item limit is used up. Items left
in a page when the limit runs out are discarded.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from ..config.settings import LedgerSettings, get_settings
from ..core.entities.page import Page
from ..core.exceptions import PaginationLogicError, ValidationError
from ..core.protocols.paged_repository import IdExtractor, PagedRepository
from ..core.value_objects.order import Order
from ..core.value_objects.query_params import QueryParams
from .identifiers import resolve_id_of, resolve_key_of

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EXHAUSTED = object()
_NO_KEY = object()


class StreamStatus(str, Enum):
    """Lifecycle of a single stream."""
    INIT = "init"
    FETCHING = "fetching"
    EMITTING = "emitting"
    ENDED = "ended"
    FAILED = "failed"


@dataclass
class StreamState:
    """Iteration state owned by one stream.

    ``remaining_limit`` is None for unbounded streams.
    """
    remaining_limit: Optional[int]
    current_cursor: Optional[str]
    status: StreamStatus = StreamStatus.INIT
    fetch_count: int = 0
    yielded_count: int = 0

    @property
    def ended(self) -> bool:
        return self.status in (StreamStatus.ENDED, StreamStatus.FAILED)


def _log_discarded_result(task: "asyncio.Future") -> None:
    # Retrieve the outcome of a fetch abandoned by a cancelled consumer.
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Discarded failure of abandoned page fetch: %r", exc)


class PaginationStream(Generic[T]):
    """Lazy sequence of items spanning every page of one search.

    Use with ``async for``. A stream has exactly one consumer; stopping the
    loop early (or calling ``aclose``) ends it without further requests.
    """

    def __init__(
        self,
        repository: PagedRepository[T],
        params: QueryParams,
        limit: Optional[int],
        id_of: IdExtractor,
        verify_order: bool = False,
        key_of: Optional[Callable[[Any], Any]] = None,
    ):
        self._repository = repository
        self._params = params
        self._id_of = id_of
        self._key_of = key_of or resolve_key_of(id_of)
        self._verify_order = verify_order

        unbounded = limit is None or limit < 0
        self._state = StreamState(
            remaining_limit=None if unbounded else limit,
            current_cursor=params.id,
        )
        if self._state.remaining_limit == 0:
            self._state.status = StreamStatus.ENDED

        self._page_items: Optional[Iterator[T]] = None
        self._page_length = 0
        self._page_is_last = False
        self._last_item: Any = _EXHAUSTED
        self._previous_key: Any = _NO_KEY

    @property
    def params(self) -> QueryParams:
        return self._params

    @property
    def state(self) -> StreamState:
        """Snapshot of the stream's counters and status."""
        return replace(self._state)

    @property
    def ended(self) -> bool:
        return self._state.ended

    def __aiter__(self) -> "PaginationStream[T]":
        return self

    async def __anext__(self) -> T:
        while True:
            if self._state.ended:
                raise StopAsyncIteration
            if self._state.status is StreamStatus.FETCHING:
                raise PaginationLogicError(
                    "Stream already has a page fetch in flight; a stream supports one consumer"
                )

            if self._page_items is None:
                page = await self._fetch_page()
                if page.is_empty:
                    self._finish("empty page")
                    raise StopAsyncIteration
                self._start_page(page)

            item = next(self._page_items, _EXHAUSTED)
            if item is _EXHAUSTED:
                self._page_items = None
                if self._page_is_last or self._page_length < self._params.page_size:
                    self._finish("last page")
                    raise StopAsyncIteration
                self._advance_cursor()
                continue

            return self._emit(item)

    async def aclose(self) -> None:
        """End the stream; no further pages are requested."""
        if not self._state.ended:
            self._finish("closed by consumer")

    async def __aenter__(self) -> "PaginationStream[T]":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _fetch_page(self) -> Page[T]:
        request = self._params.with_id(self._state.current_cursor)
        self._state.status = StreamStatus.FETCHING
        self._state.fetch_count += 1
        logger.debug(
            "Fetching page %d (page_size=%d, id=%s, order=%s)",
            self._state.fetch_count, request.page_size, request.id, request.order.name,
        )

        fetch = asyncio.ensure_future(self._repository.search(request))
        try:
            result = await asyncio.shield(fetch)
        except asyncio.CancelledError:
            # Let an in-flight request complete, but never use its result.
            if fetch.done():
                _log_discarded_result(fetch)
            else:
                fetch.add_done_callback(_log_discarded_result)
            self._finish("cancelled during fetch")
            raise
        except Exception as exc:
            self._state.status = StreamStatus.FAILED
            self._page_items = None
            logger.warning(
                "Page fetch %d failed after %d items: %s",
                self._state.fetch_count, self._state.yielded_count, exc,
            )
            raise

        self._state.status = StreamStatus.EMITTING
        return self._coerce_page(result)

    def _coerce_page(self, result: Any) -> Page[T]:
        if isinstance(result, Page):
            return result
        if isinstance(result, (list, tuple)):
            return Page.of(result)
        self._fail(
            f"Repository returned {type(result).__name__}, expected a Page",
            {"result_type": type(result).__name__},
        )

    def _start_page(self, page: Page[T]) -> None:
        self._page_items = iter(page.items)
        self._page_length = len(page.items)
        self._page_is_last = page.is_last
        self._last_item = _EXHAUSTED

    def _emit(self, item: T) -> T:
        self._last_item = item
        if self._verify_order:
            self._check_order(item)

        self._state.yielded_count += 1
        if self._state.remaining_limit is not None:
            self._state.remaining_limit -= 1
            if self._state.remaining_limit == 0:
                self._finish("limit reached")
        return item

    def _advance_cursor(self) -> None:
        try:
            next_cursor = self._id_of(self._last_item)
        except Exception:
            self._state.status = StreamStatus.FAILED
            self._page_items = None
            raise
        if next_cursor == self._state.current_cursor:
            self._fail(
                f"Full page did not advance past cursor {next_cursor}",
                {"cursor": next_cursor, "page_size": self._params.page_size},
            )
        self._state.current_cursor = next_cursor

    def _check_order(self, item: T) -> None:
        try:
            current = self._key_of(item)
        except Exception:
            self._state.status = StreamStatus.FAILED
            self._page_items = None
            raise
        previous = self._previous_key
        if previous is _NO_KEY:
            previous = self._initial_cursor_key(current)
        self._previous_key = current
        if previous is _NO_KEY:
            return
        try:
            in_order = current < previous if self._params.order is Order.DESC else current > previous
        except TypeError:
            in_order = False
        if not in_order:
            self._fail(
                f"Item {current} breaks {self._params.order.name} order after {previous}",
                {"previous_id": previous, "current_id": current, "order": self._params.order.name},
            )

    def _initial_cursor_key(self, current: Any) -> Any:
        # The starting cursor is a string; read it as the key type of the first item.
        cursor = self._params.id
        if cursor is None:
            return _NO_KEY
        if isinstance(current, str):
            return cursor
        try:
            return type(current)(cursor)
        except (TypeError, ValueError):
            return _NO_KEY

    def _finish(self, reason: str) -> None:
        self._state.status = StreamStatus.ENDED
        self._page_items = None
        logger.debug(
            "Stream ended (%s) after %d items and %d fetches",
            reason, self._state.yielded_count, self._state.fetch_count,
        )

    def _fail(self, message: str, details: dict) -> None:
        self._state.status = StreamStatus.FAILED
        self._page_items = None
        raise PaginationLogicError(message, details=details)


class PaginationStreamer(Generic[T]):
    """Creates independent item streams over a PagedRepository.

    Example:
        streamer = PaginationStreamer(repository)
        async for block in streamer.search(QueryParams(page_size=50), limit=500):
            ...
    """

    def __init__(
        self,
        repository: PagedRepository[T],
        id_of: Optional[IdExtractor] = None,
        verify_order: Optional[bool] = None,
        settings: Optional[LedgerSettings] = None,
        key_of: Optional[Callable[[Any], Any]] = None,
    ):
        """Initialize the streamer.

        Args:
            repository: Source of pages
            id_of: Extracts the cursor id from an item (defaults to ``id``)
            verify_order: Reject pages whose ids contradict the requested
                order; defaults to ``settings.verify_page_order``
            settings: Settings used for defaults, ``get_settings()`` if omitted
            key_of: Raw id used by the order check; defaults to
                ``id_of.key_of`` when present, else ``id_of``
        """
        self._repository = repository
        self._id_of = resolve_id_of(id_of)
        self._key_of = key_of or resolve_key_of(self._id_of)
        self._settings = settings or get_settings()
        self._verify_order = (
            self._settings.verify_page_order if verify_order is None else verify_order
        )

    @property
    def repository(self) -> PagedRepository[T]:
        return self._repository

    def search(
        self,
        params: Optional[QueryParams] = None,
        limit: Optional[int] = None,
    ) -> PaginationStream[T]:
        """Stream every item matching ``params``.

        Args:
            params: Starting query; its ``id`` is the initial cursor
            limit: Maximum number of items; None or negative is unbounded

        Returns:
            A new stream; nothing is fetched until it is iterated
        """
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
            raise ValidationError(
                f"limit must be an integer or None, got {type(limit).__name__}",
                details={"limit": repr(limit)},
            )
        if params is None:
            params = QueryParams.from_settings(self._settings)
        return PaginationStream(
            self._repository,
            params,
            limit,
            self._id_of,
            verify_order=self._verify_order,
            key_of=self._key_of,
        )

    async def collect(
        self,
        params: Optional[QueryParams] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        """Consume a whole stream into a list."""
        return [item async for item in self.search(params, limit)]
