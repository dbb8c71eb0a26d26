"""Statement totals."""

from typing import Iterable

from ledgerbook.domain.classifier import cash_direction, credit_delta, primary_amount
from ledgerbook.domain.entities import (
    CashDirection,
    HistoryEntry,
    LedgerSummary,
    Transaction,
)


class SummaryAccumulator:
    """Running inflow/outflow/credit totals."""

    def __init__(self):
        self.inflow = 0.0
        self.outflow = 0.0
        self.credit_balance = 0.0

    def add(self, txn: Transaction, entity_id: str) -> None:
        """Fold one transaction into the totals, seen from ``entity_id``."""
        amount = abs(primary_amount(txn))
        direction = cash_direction(txn, entity_id)
        if direction is CashDirection.INFLOW:
            self.inflow += amount
        elif direction is CashDirection.OUTFLOW:
            self.outflow += amount
        self.credit_balance += credit_delta(txn)

    def result(self) -> LedgerSummary:
        return LedgerSummary(
            inflow=self.inflow,
            outflow=self.outflow,
            net=self.inflow - self.outflow,
            credit_balance=self.credit_balance,
        )


def aggregate(transactions: Iterable[Transaction], entity_id: str) -> LedgerSummary:
    """Compute statement totals for one entity.

    Args:
        transactions: The complete filtered transaction set of the statement
        entity_id: Entity the statement is written for

    Returns:
        LedgerSummary with inflow, outflow, net and balance-due
    """
    accumulator = SummaryAccumulator()
    for txn in transactions:
        accumulator.add(txn, entity_id)
    return accumulator.result()


def aggregate_history(entries: Iterable[HistoryEntry]) -> LedgerSummary:
    """Compute statement totals for a tab listing.

    Each entry is classified from the point of view of its own entity.
    """
    accumulator = SummaryAccumulator()
    for entry in entries:
        accumulator.add(entry.transaction, entry.entity_id)
    return accumulator.result()
