"""Pytest configuration and fixtures for ledger-sdk tests."""

import asyncio
from typing import Any, Dict, List, Optional

import pytest

from ledger_sdk.config.settings import LedgerSettings
from ledger_sdk.core.entities import Page
from ledger_sdk.core.value_objects import QueryParams, TransactionType
from ledger_sdk.infrastructure.repositories import InMemoryPagedRepository


def make_id(index: int) -> str:
    """Fixed-width hex id so lexical order matches numeric order."""
    return f"{index:024X}"


def make_items(count: int, start: int = 1) -> List[Dict[str, Any]]:
    types = [TransactionType.TRANSFER, TransactionType.HASH_LOCK, TransactionType.AGGREGATE_BONDED]
    return [
        {"id": make_id(i), "height": i, "type": int(types[i % len(types)])}
        for i in range(start, start + count)
    ]


class BlockingRepository:
    """Repository whose searches wait until the test releases them."""

    def __init__(self, items: List[Dict[str, Any]], error: Optional[Exception] = None):
        self._items = items
        self._error = error
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.calls = 0
        self.completed = 0

    async def search(self, params: QueryParams) -> Page:
        self.calls += 1
        self.started.set()
        await self.release.wait()
        self.completed += 1
        if self._error is not None:
            raise self._error
        return Page.of(self._items[:params.page_size])


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return LedgerSettings(_env_file=None, base_url="http://ledger.test")


@pytest.fixture
def items_factory():
    return make_items


@pytest.fixture
def memory_repository_factory():
    def factory(count: int, **kwargs) -> InMemoryPagedRepository:
        return InMemoryPagedRepository(make_items(count), **kwargs)
    return factory


@pytest.fixture
def blocking_repository_factory():
    def factory(count: int = 10, error: Optional[Exception] = None) -> BlockingRepository:
        return BlockingRepository(make_items(count), error=error)
    return factory
