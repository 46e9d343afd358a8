"""Tests for the per-entity pagination streamers."""

from types import SimpleNamespace

import pytest

from ledger_sdk.core.exceptions import PaginationLogicError
from ledger_sdk.core.value_objects import Order, QueryParams
from ledger_sdk.infrastructure.repositories import InMemoryPagedRepository
from ledger_sdk.streaming import (
    AccountPaginationStreamer,
    BlockPaginationStreamer,
    MosaicRestrictionPaginationStreamer,
    TransactionPaginationStreamer,
    path_id_of,
    resolve_key_of,
)


def _block(index):
    return SimpleNamespace(record_id=f"{index:024X}", height=index)


def _transaction(index):
    return SimpleNamespace(transaction_info=SimpleNamespace(id=f"{index:024X}", height=index))


def _account(index):
    return {"record_id": f"{index:024X}", "address": f"ADDRESS{index}"}


def _mosaic_restriction(index):
    return {"meta": {"id": f"{index:024X}"}, "mosaic_id": f"{index:016X}"}


STREAMERS = [
    (BlockPaginationStreamer, _block),
    (TransactionPaginationStreamer, _transaction),
    (AccountPaginationStreamer, _account),
    (MosaicRestrictionPaginationStreamer, _mosaic_restriction),
]


def _repository(streamer_class, builder, count):
    return InMemoryPagedRepository(
        [builder(i) for i in range(1, count + 1)],
        id_of=streamer_class.entity_id_of,
    )


@pytest.mark.parametrize("streamer_class,builder", STREAMERS)
class TestEntityStreamers:
    """Each entity streamer pages through its own identifier layout."""

    @pytest.mark.asyncio
    async def test_basic_multi_page(self, streamer_class, builder, settings):
        repository = _repository(streamer_class, builder, 20)
        streamer = streamer_class(repository, settings=settings)

        result = await streamer.collect(QueryParams(order=Order.ASC))

        assert [streamer_class.entity_id_of(item) for item in result] == [f"{i:024X}" for i in range(1, 21)]
        assert repository.call_count == 3

    @pytest.mark.asyncio
    async def test_basic_single_page(self, streamer_class, builder, settings):
        repository = _repository(streamer_class, builder, 9)
        streamer = streamer_class(repository, settings=settings)

        result = await streamer.collect(QueryParams())

        assert len(result) == 9
        assert repository.call_count == 1

    @pytest.mark.asyncio
    async def test_limit_to_two_pages(self, streamer_class, builder, settings):
        repository = _repository(streamer_class, builder, 50)
        streamer = streamer_class(repository, settings=settings)

        result = await streamer.collect(QueryParams(), limit=20)

        assert len(result) == 20
        assert repository.call_count == 2

    @pytest.mark.asyncio
    async def test_multi_page_with_limit(self, streamer_class, builder, settings):
        repository = _repository(streamer_class, builder, 50)
        streamer = streamer_class(repository, settings=settings)

        result = await streamer.collect(QueryParams(page_size=20), limit=35)

        assert len(result) == 35
        assert repository.call_count == 2

    @pytest.mark.asyncio
    async def test_limit_to_three_pages(self, streamer_class, builder, settings):
        repository = _repository(streamer_class, builder, 50)
        streamer = streamer_class(repository, settings=settings)

        result = await streamer.collect(QueryParams(), limit=30)

        assert len(result) == 30
        assert repository.call_count == 3


class TestIdentifierPaths:
    """Identifier extraction from mappings and attributes."""

    def test_first_matching_path_wins(self):
        id_of = path_id_of("record_id", "id")

        assert id_of({"record_id": "A", "id": "B"}) == "A"
        assert id_of({"id": "B"}) == "B"
        assert id_of(SimpleNamespace(id=42)) == "42"

    def test_nested_path(self):
        id_of = path_id_of("meta.id")

        assert id_of({"meta": {"id": "C"}}) == "C"

    def test_missing_identifier_raises(self):
        id_of = path_id_of("id")

        with pytest.raises(PaginationLogicError) as exc_info:
            id_of({"height": 1})

        assert exc_info.value.details["paths"] == ["id"]

    def test_at_least_one_path_required(self):
        with pytest.raises(ValueError):
            path_id_of()

    def test_key_of_keeps_raw_value(self):
        id_of = path_id_of("record_id", "id")

        assert id_of({"id": 7}) == "7"
        assert id_of.key_of({"id": 7}) == 7
        assert resolve_key_of(id_of) is id_of.key_of

    def test_plain_callable_is_its_own_key(self):
        def id_of(item):
            return item["id"]

        assert resolve_key_of(id_of) is id_of
