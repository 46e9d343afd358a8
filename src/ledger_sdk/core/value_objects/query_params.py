"""Query parameters value object for paged searches.

QueryParams describes one page request: page size, continuation id, order
and optional transaction type filters. Instances are immutable; every
``with_*`` method returns an updated copy, so a stream that captured an
instance never observes later changes made by its caller.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..exceptions import ValidationError
from .order import Order
from .transaction_type import TransactionType


MIN_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


def clamp_page_size(page_size: Any) -> int:
    """Return ``page_size`` when it lies in [10, 100], otherwise 10.

    Out-of-range values are corrected, never rejected.
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        return DEFAULT_PAGE_SIZE
    if MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
        return page_size
    return DEFAULT_PAGE_SIZE


def _normalize_types(
    types: Optional[Iterable[Union[TransactionType, int]]]
) -> Tuple[TransactionType, ...]:
    if not types:
        return ()
    normalized = []
    for value in types:
        try:
            member = TransactionType(value)
        except ValueError as e:
            raise ValidationError(
                f"Unknown transaction type: {value!r}",
                details={"type": repr(value)},
            ) from e
        if member not in normalized:
            normalized.append(member)
    return tuple(normalized)


@dataclass(frozen=True)
class QueryParams:
    """Pagination parameters for a search request.

    Attributes:
        page_size: Items per page, between 10 and 100 (otherwise 10)
        id: Id after which the next items are returned
        order: DESC is newer to older, ASC is older to newer
        types: Optional transaction type allow-list
    """

    page_size: int = DEFAULT_PAGE_SIZE
    id: Optional[str] = None
    order: Order = Order.DESC
    types: Tuple[TransactionType, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Use object.__setattr__ for frozen dataclasses
        object.__setattr__(self, "page_size", clamp_page_size(self.page_size))
        object.__setattr__(self, "order", Order.parse(self.order))
        object.__setattr__(self, "types", _normalize_types(self.types))

    @classmethod
    def from_settings(cls, settings: Any) -> "QueryParams":
        """Build default parameters from a LedgerSettings instance."""
        return cls(
            page_size=settings.default_page_size,
            order=settings.default_order,
        )

    def with_page_size(self, page_size: int) -> "QueryParams":
        return replace(self, page_size=page_size)

    def with_id(self, id: Optional[str] = None) -> "QueryParams":
        return replace(self, id=id)

    def with_order(self, order: Order = Order.DESC) -> "QueryParams":
        return replace(self, order=order)

    def with_types(
        self, types: Optional[Iterable[Union[TransactionType, int]]] = None
    ) -> "QueryParams":
        return replace(self, types=types)

    @staticmethod
    def convert_csv(
        types: Optional[Iterable[Union[TransactionType, int]]]
    ) -> Optional[str]:
        """Return comma separated list of type tokens.

        Args:
            types: Transaction type list

        Returns:
            The joined tokens, or None when the list is empty or unset
        """
        normalized = _normalize_types(types)
        if not normalized:
            return None
        return ",".join(t.token for t in normalized)

    def types_csv(self) -> Optional[str]:
        return self.convert_csv(self.types)

    def to_query_params(self) -> Dict[str, Any]:
        """Wire form of these parameters as query-string values.

        Absent values are omitted rather than sent empty.
        """
        params: Dict[str, Any] = {
            "pageSize": self.page_size,
            "order": self.order.value,
        }
        if self.id is not None:
            params["id"] = self.id
        csv = self.types_csv()
        if csv is not None:
            params["type"] = csv
        return params
