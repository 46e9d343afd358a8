"""Paged repository protocol for ledger searches.

This module defines the PagedRepository protocol contract consumed by the
pagination streaming engine. Implementations talk to the ledger service
(or any other source) and return one page per call.
"""

from abc import abstractmethod
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from ..entities.page import Page
from ..value_objects.query_params import QueryParams

T_co = TypeVar("T_co", covariant=True)

IdExtractor = Callable[[Any], str]


@runtime_checkable
class PagedRepository(Protocol[T_co]):
    """Search capability returning one page of items per request.

    Implementations must be safe for concurrent read-only use: several
    independent streams may call ``search`` on the same repository at the
    same time.
    """

    @abstractmethod
    async def search(self, params: QueryParams) -> Page[T_co]:
        """Fetch the page described by ``params``.

        The page holds at most ``params.page_size`` items, ordered according
        to ``params.order`` and starting after ``params.id`` when it is set.

        Args:
            params: Page size, cursor, order and filters of the request

        Returns:
            The requested page; an empty page when no data remains

        Raises:
            TransportError: On network or protocol failure
            ServerError: When the service answers with a non-success status
        """
        ...
