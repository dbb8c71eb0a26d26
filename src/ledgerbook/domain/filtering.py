"""Date-range and zero-amount filtering of ledger records."""

from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional, Sequence

from ledgerbook.domain.classifier import is_nonzero, primary_amount
from ledgerbook.domain.entities import HistoryEntry, Transaction


def start_of_day(value: date) -> datetime:
    """Return midnight at the start of the given day."""
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, time.min)


def in_date_range(
    when: Optional[datetime], start: Optional[date], end: Optional[date]
) -> bool:
    """Check a timestamp against an inclusive day range.

    ``end`` covers its whole day. A record with no timestamp never matches a
    bounded range.
    """
    if start is None and end is None:
        return True
    if when is None:
        return False
    if start is not None and when < start_of_day(start):
        return False
    if end is not None and when >= start_of_day(end) + timedelta(days=1):
        return False
    return True


def has_ledger_amount(txn: Transaction) -> bool:
    """Return True if a transaction carries money worth printing.

    Outstanding credit keeps a record even when nothing was paid.
    """
    if is_nonzero(txn.credit):
        return True
    return abs(primary_amount(txn)) > 0.01


def filter_transactions(
    transactions: Iterable[Transaction],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[Transaction]:
    """Keep transactions inside the date range with a non-zero amount.

    Args:
        transactions: Candidate transactions
        start: Optional first day of the range
        end: Optional last day of the range (inclusive)

    Returns:
        Filtered transactions, in input order
    """
    return [
        txn
        for txn in transactions
        if in_date_range(txn.date, start, end) and has_ledger_amount(txn)
    ]


def filter_history_entries(
    entries: Iterable[HistoryEntry],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[HistoryEntry]:
    """Apply :func:`filter_transactions` rules to history entries."""
    return [
        entry
        for entry in entries
        if in_date_range(entry.transaction.date, start, end)
        and has_ledger_amount(entry.transaction)
    ]


def _sort_key(when: Optional[datetime]) -> tuple[int, datetime]:
    return (0, datetime.min) if when is None else (1, when)


def sort_chronologically(transactions: Sequence[Transaction]) -> list[Transaction]:
    """Sort transactions oldest first; undated records lead."""
    return sorted(transactions, key=lambda txn: _sort_key(txn.date))


def sort_entries_chronologically(entries: Sequence[HistoryEntry]) -> list[HistoryEntry]:
    """Sort history entries oldest first; undated records lead."""
    return sorted(entries, key=lambda entry: _sort_key(entry.transaction.date))
