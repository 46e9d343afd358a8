"""Identifier extraction for paged items.

The streaming engine never looks inside items except to derive the next
cursor, and it does so through an ``id_of`` callable. This module provides
the default extractor and per-entity extractors built from attribute paths.

Extractors built by ``path_id_of`` also carry a ``key_of`` attribute that
returns the raw identifier. Cursors are always strings, but ordering (the
optional order check and the in-memory repository) uses the raw value so
that integer ids sort numerically.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from ..core.exceptions import PaginationLogicError
from ..core.protocols.paged_repository import IdExtractor

_MISSING = object()


def _resolve(item: Any, path: str) -> Any:
    current = item
    for part in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        else:
            current = getattr(current, part, _MISSING)
        if current is _MISSING or current is None:
            return _MISSING
    return current


def path_id_of(*paths: str) -> IdExtractor:
    """Build an extractor trying each dotted ``path`` in turn.

    Each path segment is read as a mapping key for dicts and as an attribute
    otherwise, so the same extractor works on raw JSON and on mapped models.

    Args:
        paths: Candidate locations of the identifier, most specific first

    Returns:
        Callable returning the first identifier found, as a string. Its
        ``key_of`` attribute returns the same identifier unconverted.
    """
    if not paths:
        raise ValueError("At least one identifier path is required")

    def key_of(item: Any) -> Any:
        for path in paths:
            value = _resolve(item, path)
            if value is not _MISSING:
                return value
        raise PaginationLogicError(
            f"Cannot derive cursor: no identifier at {', '.join(paths)}",
            details={"paths": list(paths), "item_type": type(item).__name__},
        )

    def id_of(item: Any) -> str:
        return str(key_of(item))

    id_of.key_of = key_of  # type: ignore[attr-defined]
    return id_of


default_id_of = path_id_of("id", "meta.id")

block_id_of = path_id_of("record_id", "id", "meta.id")
transaction_id_of = path_id_of("transaction_info.id", "id", "meta.id")
account_id_of = path_id_of("record_id", "id", "meta.id")
mosaic_restriction_id_of = path_id_of("record_id", "id", "meta.id")


def resolve_id_of(id_of: Optional[IdExtractor]) -> IdExtractor:
    return id_of if id_of is not None else default_id_of


def resolve_key_of(id_of: IdExtractor) -> Callable[[Any], Any]:
    """Raw ordering key for ``id_of``; plain callables order by their own result."""
    return getattr(id_of, "key_of", id_of)
