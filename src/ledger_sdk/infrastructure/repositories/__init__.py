"""PagedRepository implementations."""

from .memory_paged_repository import InMemoryPagedRepository
from .http_paged_repository import HttpPagedRepository

__all__ = ["InMemoryPagedRepository", "HttpPagedRepository"]
