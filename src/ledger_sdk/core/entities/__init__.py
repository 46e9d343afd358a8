"""Core entities for ledger-sdk."""

from .page import Page

__all__ = ["Page"]
