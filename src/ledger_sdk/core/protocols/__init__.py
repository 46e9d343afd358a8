"""Protocols for ledger-sdk."""

from .paged_repository import PagedRepository, IdExtractor

__all__ = ["PagedRepository", "IdExtractor"]
