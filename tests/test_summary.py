"""Tests for statement totals."""

import pytest

from ledgerbook.domain.entities import (
    MYSELF_CASH,
    AdjustmentDirection,
    LedgerSummary,
    MiddlemanUnit,
    Party,
    TransactionType,
)
from ledgerbook.domain.summary import aggregate, aggregate_history

from helpers import make_entry, make_txn


def test_empty_statement_has_zero_totals():
    assert aggregate([], "c-1") == LedgerSummary()


def test_inflow_outflow_and_net():
    transactions = [
        make_txn(TransactionType.SALE, id="s1", paid=1000.0),
        make_txn(TransactionType.SALE, id="s2", paid=250.0),
        make_txn(TransactionType.PURCHASE, id="p1", paid=400.0),
        make_txn(TransactionType.EXPENSE, id="e1", amount=50.0),
    ]

    summary = aggregate(transactions, "c-1")

    assert summary.inflow == pytest.approx(1250.0)
    assert summary.outflow == pytest.approx(450.0)
    assert summary.net == pytest.approx(800.0)


def test_purchase_counts_as_outflow_only():
    summary = aggregate([make_txn(TransactionType.PURCHASE, paid=100.0)], "s-1")

    assert summary.outflow == pytest.approx(100.0)
    assert summary.inflow == 0.0


def test_amounts_bucketed_by_magnitude():
    adjustment = make_txn(
        TransactionType.BALANCE_ADJUSTMENT,
        amount=-60.0,
        adjustment_direction=AdjustmentDirection.TO_RECEIVE,
    )

    summary = aggregate([adjustment], "c-1")

    assert summary.inflow == pytest.approx(60.0)
    assert summary.outflow == 0.0


def test_middleman_direction_from_unit():
    transactions = [
        make_txn(
            TransactionType.MIDDLEMAN,
            id="give",
            middleman_cash=30.0,
            middleman_unit=MiddlemanUnit.GIVE,
        ),
        make_txn(
            TransactionType.MIDDLEMAN,
            id="receive",
            middleman_bank=80.0,
            middleman_unit=MiddlemanUnit.RECEIVE,
        ),
    ]

    summary = aggregate(transactions, "m-1")

    assert summary.inflow == pytest.approx(80.0)
    assert summary.outflow == pytest.approx(30.0)


def test_currency_direction_from_entity_side():
    paid_out = make_txn(
        TransactionType.CURRENCY_REGULAR,
        id="out",
        amount=200.0,
        giver=MYSELF_CASH,
        taker=Party.entity("c-1"),
    )
    paid_in = make_txn(
        TransactionType.CURRENCY_REGULAR,
        id="in",
        amount=75.0,
        giver=Party.entity("c-1"),
        taker=MYSELF_CASH,
    )

    summary = aggregate([paid_out, paid_in], "c-1")

    assert summary.inflow == pytest.approx(75.0)
    assert summary.outflow == pytest.approx(200.0)


def test_credit_balance():
    transactions = [
        make_txn(TransactionType.SALE, id="s", paid=100.0, credit=500.0),
        make_txn(TransactionType.PURCHASE, id="p", paid=100.0, credit=200.0),
        make_txn(
            TransactionType.MIDDLEMAN,
            id="m",
            middleman_cash=10.0,
            middleman_credit=40.0,
            middleman_unit=MiddlemanUnit.RECEIVE,
        ),
    ]

    summary = aggregate(transactions, "c-1")

    assert summary.credit_balance == pytest.approx(340.0)


def test_history_summary_uses_each_entry_entity():
    entries = [
        make_entry(
            make_txn(
                TransactionType.CURRENCY_REGULAR,
                id="t1",
                amount=100.0,
                giver=MYSELF_CASH,
                taker=Party.entity("c-1"),
            ),
            entity_id="c-1",
        ),
        make_entry(
            make_txn(
                TransactionType.CURRENCY_REGULAR,
                id="t2",
                amount=40.0,
                giver=Party.entity("c-2"),
                taker=MYSELF_CASH,
            ),
            entity_id="c-2",
            entity_name="John Roe",
        ),
    ]

    summary = aggregate_history(entries)

    assert summary.inflow == pytest.approx(40.0)
    assert summary.outflow == pytest.approx(100.0)
    assert summary.net == pytest.approx(-60.0)


def test_adjustment_without_direction_counts_as_outflow():
    summary = aggregate([make_txn(TransactionType.BALANCE_ADJUSTMENT, amount=40.0)], "c-1")

    assert summary.outflow == pytest.approx(40.0)
    assert summary.inflow == 0.0
