"""Sort order value object for paged searches."""

from enum import Enum
from typing import Union

from ..exceptions import ValidationError


class Order(str, Enum):
    """Traversal order of a paged search, by the entity's monotonic id.

    The values are the wire tokens understood by the ledger REST gateway.
    """
    ASC = "id"       # Older to newer
    DESC = "-id"     # Newer to older

    @classmethod
    def parse(cls, value: Union[str, "Order"]) -> "Order":
        """Accept either a member, its name ("asc"/"DESC") or its wire token."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip()
        for member in cls:
            if normalized == member.value or normalized.upper() == member.name:
                return member
        raise ValidationError(
            f"Unknown order: {value!r}",
            details={"order": str(value), "allowed": [m.name for m in cls]},
        )
