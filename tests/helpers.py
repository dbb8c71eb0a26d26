"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta

from ledgerbook.domain.entities import HistoryEntry, Transaction, TransactionType

GENERATED_AT = datetime(2025, 3, 1, 9, 30)


def make_txn(txn_type=TransactionType.SALE, **overrides) -> Transaction:
    """Build a Transaction with sensible defaults for tests."""
    values = {
        "id": "txn-1",
        "type": txn_type,
        "date": datetime(2025, 1, 15, 10, 0),
        "amount": 0.0,
    }
    values.update(overrides)
    return Transaction(**values)


def make_sales(count: int, amount: float = 100.0, start=datetime(2025, 1, 1, 9, 0)) -> list[Transaction]:
    """Build ``count`` sales one hour apart."""
    return [
        make_txn(
            TransactionType.SALE,
            id=f"sale-{index}",
            date=start + timedelta(hours=index),
            paid=amount,
        )
        for index in range(count)
    ]


def make_entry(txn: Transaction, entity_id="c-1", entity_name="Jane Doe") -> HistoryEntry:
    """Wrap a transaction in a HistoryEntry."""
    return HistoryEntry(entity_id=entity_id, entity_name=entity_name, transaction=txn)
