"""Tests for date-range and zero-amount filtering."""

from datetime import date, datetime, timedelta

from ledgerbook.domain.entities import TransactionType
from ledgerbook.domain.filtering import (
    filter_history_entries,
    filter_transactions,
    in_date_range,
    sort_chronologically,
    start_of_day,
)

from helpers import make_entry, make_txn


def test_start_of_day_drops_time():
    assert start_of_day(datetime(2025, 1, 15, 18, 45)) == datetime(2025, 1, 15)
    assert start_of_day(date(2025, 1, 15)) == datetime(2025, 1, 15)


def test_start_bound_is_inclusive_from_midnight():
    start = date(2025, 1, 1)
    assert in_date_range(datetime(2025, 1, 1, 0, 0), start, None)
    assert not in_date_range(datetime(2024, 12, 31, 23, 59, 59), start, None)


def test_end_bound_covers_whole_day():
    end = date(2025, 1, 31)
    assert in_date_range(datetime(2025, 1, 31, 0, 0), None, end)
    assert in_date_range(datetime(2025, 1, 31, 23, 59, 59), None, end)
    next_midnight = datetime(2025, 2, 1)
    assert not in_date_range(next_midnight, None, end)
    assert not in_date_range(next_midnight + timedelta(milliseconds=1), None, end)


def test_unbounded_range_matches_everything():
    assert in_date_range(datetime(1999, 1, 1), None, None)
    assert in_date_range(None, None, None)


def test_undated_record_excluded_by_any_bound():
    assert not in_date_range(None, date(2025, 1, 1), None)
    assert not in_date_range(None, None, date(2025, 1, 1))


def test_zero_amount_dropped_unless_credit_outstanding():
    empty_sale = make_txn(TransactionType.SALE, id="a", amount=0.0, grand_total=0.0)
    credit_sale = make_txn(TransactionType.SALE, id="b", grand_total=0.0, credit=50.0)
    paid_sale = make_txn(TransactionType.SALE, id="c", paid=10.0)

    result = filter_transactions([empty_sale, credit_sale, paid_sale])

    assert [txn.id for txn in result] == ["b", "c"]


def test_negative_amounts_are_kept():
    adjustment = make_txn(TransactionType.BALANCE_ADJUSTMENT, amount=-25.0)
    assert filter_transactions([adjustment]) == [adjustment]


def test_filter_keeps_input_order():
    later = make_txn(id="later", date=datetime(2025, 1, 20), paid=5.0)
    earlier = make_txn(id="earlier", date=datetime(2025, 1, 10), paid=5.0)
    outside = make_txn(id="outside", date=datetime(2025, 2, 10), paid=5.0)

    result = filter_transactions(
        [later, earlier, outside], date(2025, 1, 1), date(2025, 1, 31)
    )

    assert [txn.id for txn in result] == ["later", "earlier"]


def test_filter_history_entries_uses_transaction_date():
    inside = make_entry(make_txn(id="in", date=datetime(2025, 1, 5), paid=1.0))
    outside = make_entry(make_txn(id="out", date=datetime(2024, 1, 5), paid=1.0))

    result = filter_history_entries([inside, outside], start=date(2025, 1, 1))

    assert result == [inside]


def test_sort_puts_undated_first():
    undated = make_txn(id="undated", date=None, paid=1.0)
    second = make_txn(id="second", date=datetime(2025, 1, 2), paid=1.0)
    first = make_txn(id="first", date=datetime(2025, 1, 1), paid=1.0)

    result = sort_chronologically([second, undated, first])

    assert [txn.id for txn in result] == ["undated", "first", "second"]
