"""Tests for QueryParams and related value objects."""

from dataclasses import FrozenInstanceError

import pytest

from ledger_sdk.core.exceptions import ValidationError
from ledger_sdk.core.value_objects import Order, QueryParams, TransactionType, clamp_page_size


class TestPageSize:
    """Page size is clamped, never rejected."""

    @pytest.mark.parametrize("page_size", [10, 11, 50, 99, 100])
    def test_in_range_is_kept(self, page_size):
        assert QueryParams(page_size=page_size).page_size == page_size

    @pytest.mark.parametrize("page_size", [-1, 0, 9, 101, 10_000, 2.5, "20", None, True])
    def test_out_of_range_falls_back_to_ten(self, page_size):
        assert QueryParams(page_size=page_size).page_size == 10
        assert clamp_page_size(page_size) == 10

    def test_with_page_size_returns_copy(self):
        original = QueryParams(page_size=30)
        updated = original.with_page_size(500)

        assert original.page_size == 30
        assert updated.page_size == 10


class TestImmutability:
    """Updates never mutate the original instance."""

    def test_frozen(self):
        params = QueryParams()

        with pytest.raises(FrozenInstanceError):
            params.page_size = 20

    def test_with_methods(self):
        original = QueryParams()
        updated = (
            original.with_id("ABC")
            .with_order(Order.ASC)
            .with_types([TransactionType.TRANSFER])
            .with_page_size(25)
        )

        assert original == QueryParams()
        assert updated.id == "ABC"
        assert updated.order is Order.ASC
        assert updated.types == (TransactionType.TRANSFER,)
        assert updated.page_size == 25

    def test_with_id_clears_cursor(self):
        assert QueryParams(id="ABC").with_id().id is None

    def test_defaults(self):
        params = QueryParams()

        assert params.page_size == 10
        assert params.id is None
        assert params.order is Order.DESC
        assert params.types == ()
        assert QueryParams(order=Order.ASC).with_order().order is Order.DESC


class TestOrder:
    """Order parsing and wire tokens."""

    def test_wire_tokens(self):
        assert Order.ASC.value == "id"
        assert Order.DESC.value == "-id"

    @pytest.mark.parametrize("value,expected", [
        ("asc", Order.ASC), ("DESC", Order.DESC), ("id", Order.ASC), ("-id", Order.DESC), (Order.ASC, Order.ASC),
    ])
    def test_parse(self, value, expected):
        assert Order.parse(value) is expected
        assert QueryParams(order=value).order is expected

    def test_parse_unknown(self):
        with pytest.raises(ValidationError) as exc_info:
            Order.parse("sideways")

        assert exc_info.value.error_code == "ValidationError"
        assert exc_info.value.details["allowed"] == ["ASC", "DESC"]

    def test_unknown_order_in_query_params(self):
        with pytest.raises(ValidationError):
            QueryParams(order="sideways")


class TestTypeFilters:
    """CSV conversion of transaction type filters."""

    def test_csv_of_types(self):
        params = QueryParams(types=[TransactionType.TRANSFER, TransactionType.HASH_LOCK])

        assert params.types_csv() == "16724,16712"

    @pytest.mark.parametrize("types", [None, [], ()])
    def test_empty_filters_are_absent(self, types):
        assert QueryParams.convert_csv(types) is None
        assert QueryParams(types=types).types_csv() is None

    def test_integers_and_duplicates(self):
        params = QueryParams(types=[0x4141, TransactionType.AGGREGATE_COMPLETE, 0x4241])

        assert params.types == (TransactionType.AGGREGATE_COMPLETE, TransactionType.AGGREGATE_BONDED)
        assert params.types_csv() == "16705,16961"

    @pytest.mark.parametrize("code", [1, "transfer"])
    def test_unknown_type_code(self, code):
        with pytest.raises(ValidationError) as exc_info:
            QueryParams(types=[code])

        assert exc_info.value.details["type"] == repr(code)


class TestWireForm:
    """Query-string parameters built from QueryParams."""

    def test_minimal(self):
        assert QueryParams().to_query_params() == {"pageSize": 10, "order": "-id"}

    def test_full(self):
        params = QueryParams(
            page_size=40,
            id="5E7A2F3C9D1B4A0012345678",
            order=Order.ASC,
            types=[TransactionType.TRANSFER],
        )

        assert params.to_query_params() == {
            "pageSize": 40,
            "order": "id",
            "id": "5E7A2F3C9D1B4A0012345678",
            "type": "16724",
        }

    def test_from_settings(self, settings):
        settings.default_page_size = 50
        settings.default_order = Order.ASC

        params = QueryParams.from_settings(settings)

        assert params.page_size == 50
        assert params.order is Order.ASC
