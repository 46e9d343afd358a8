"""Infrastructure layer for ledger-sdk."""

from .repositories import InMemoryPagedRepository, HttpPagedRepository

__all__ = ["InMemoryPagedRepository", "HttpPagedRepository"]
