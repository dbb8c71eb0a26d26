"""Tests for resolving raw document values."""

from datetime import date, datetime, timezone

import pytest

from ledgerbook.domain.entities import (
    MYSELF_BANK,
    MYSELF_CASH,
    AdjustmentDirection,
    MiddlemanUnit,
    Party,
    TransactionType,
)
from ledgerbook.domain.errors import ValidationError
from ledgerbook.domain.resolution import (
    coerce_datetime,
    coerce_float,
    coerce_int,
    resolve_adjustment,
    resolve_party,
    resolve_type,
    resolve_unit,
    transaction_from_fields,
)


def test_resolve_party():
    assert resolve_party("myself_special_id") == MYSELF_CASH
    assert resolve_party("myself_bank_special_id") == MYSELF_BANK
    assert resolve_party("c-1") == Party.entity("c-1")
    assert resolve_party("") is None
    assert resolve_party(None) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("give", MiddlemanUnit.GIVE),
        ("Give", MiddlemanUnit.GIVE),
        ("receive", MiddlemanUnit.RECEIVE),
        ("take", MiddlemanUnit.RECEIVE),
        ("", None),
        (None, None),
    ],
)
def test_resolve_unit(raw, expected):
    assert resolve_unit(raw) is expected


def test_resolve_adjustment():
    assert resolve_adjustment("To Receive") is AdjustmentDirection.TO_RECEIVE
    assert resolve_adjustment("To Pay") is AdjustmentDirection.TO_PAY
    assert resolve_adjustment("anything") is AdjustmentDirection.TO_PAY
    assert resolve_adjustment(None) is None


def test_resolve_type():
    assert resolve_type("currencyExchange") is TransactionType.CURRENCY_EXCHANGE
    with pytest.raises(ValidationError, match="Unknown transaction type 'gift'"):
        resolve_type("gift")


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (12, 12.0),
        (3.5, 3.5),
        ("$1,200.50", 1200.5),
        ("abc", 0.0),
        (True, 0.0),
        ([1], 0.0),
    ],
)
def test_coerce_float(value, expected):
    assert coerce_float(value) == expected


def test_coerce_int():
    assert coerce_int(1042) == 1042
    assert coerce_int("17") == 17
    assert coerce_int(3.0) == 3
    assert coerce_int("n/a") is None
    assert coerce_int(None) is None


class TestCoerceDatetime:
    """Tests for timestamp resolution."""

    def test_naive_values_pass_through(self):
        value = datetime(2025, 1, 15, 10, 30)
        assert coerce_datetime(value) == value
        assert coerce_datetime("2025-01-15T10:30:00") == value
        assert coerce_datetime(date(2025, 1, 15)) == datetime(2025, 1, 15)

    def test_timestamp_map_converted_to_local_time(self):
        expected = datetime.fromtimestamp(1737972000, tz=timezone.utc).astimezone().replace(tzinfo=None)

        assert coerce_datetime({"seconds": 1737972000, "nanoseconds": 0}) == expected
        assert coerce_datetime(1737972000) == expected

    def test_unreadable_values(self):
        assert coerce_datetime("not a date") is None
        assert coerce_datetime({"seconds": "x"}) is None
        assert coerce_datetime(None) is None


def test_transaction_from_fields():
    txn = transaction_from_fields(
        {
            "document_id": "cur-1",
            "type": "currencyRegular",
            "role": "",
            "date": "2025-01-27",
            "amount": "200",
            "giver": "myself_bank_special_id",
            "taker": "c-1",
            "order_number": None,
        }
    )

    assert txn.id == "cur-1"
    assert txn.type is TransactionType.CURRENCY_REGULAR
    assert txn.amount == 200.0
    assert txn.giver == MYSELF_BANK
    assert txn.taker == Party.entity("c-1")
    assert txn.role is None
    assert txn.paid is None
    assert txn.date == datetime(2025, 1, 27)


def test_transaction_from_fields_defaults_amount():
    txn = transaction_from_fields({"document_id": "e", "type": "expense"})
    assert txn.amount == 0.0
    assert txn.date is None
