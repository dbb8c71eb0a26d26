"""History tabs: account-level groupings of transactions across entities."""

from dataclasses import replace
from enum import Enum
from typing import Iterable, Optional

from ledgerbook.domain.entities import (
    MYSELF_BANK,
    HistoryEntry,
    Transaction,
    TransactionType,
)
from ledgerbook.domain.errors import ValidationError, unknown_history_tab

CURRENCY_TYPES = frozenset({TransactionType.CURRENCY_REGULAR, TransactionType.CURRENCY_EXCHANGE})
PAYMENT_TYPES = frozenset({TransactionType.SALE, TransactionType.PURCHASE, TransactionType.EXPENSE})


class HistoryTab(str, Enum):
    """Tabs of the history view. The value is the printed tab name."""

    PURCHASES = "Purchases"
    SALES = "Sales"
    MIDDLEMEN = "Middlemen"
    CASH = "Cash"
    BANK = "Bank"
    CREDIT_CARD = "Credit Card"
    EXPENSES = "Expenses"

    @classmethod
    def from_name(cls, name: str) -> "HistoryTab":
        """Resolve a tab by its value or member name, case-insensitively.

        Raises:
            ValidationError: If no tab matches
        """
        normalized = name.strip().lower().replace("-", " ").replace("_", " ")
        for tab in cls:
            if normalized in (tab.value.lower(), tab.name.lower().replace("_", " ")):
                return tab
        raise ValidationError(unknown_history_tab(name))

    @property
    def is_account(self) -> bool:
        """True for the tabs grouping money by where it moved."""
        return self in _ACCOUNT_FIELDS

    @property
    def candidate_types(self) -> frozenset[TransactionType]:
        """Transaction types that can appear on this tab."""
        return _CANDIDATE_TYPES[self]

    def includes(self, txn: Transaction) -> bool:
        """Return True if the transaction belongs on this tab.

        Type tabs take every transaction of their type. Account tabs take
        currency transfers by whether the bank account is a party, and
        sales, purchases, expenses and middleman deals by whether anything
        was paid through the tab's method. Expenses never reach the Credit
        Card tab.
        """
        if txn.type not in self.candidate_types:
            return False
        if not self.is_account:
            return True
        if txn.type in CURRENCY_TYPES:
            return _touches_bank(txn) == (self is HistoryTab.BANK)
        return _value(account_paid(txn, self)) > 0


_ACCOUNT_FIELDS = {
    HistoryTab.CASH: ("cash_paid", "middleman_cash"),
    HistoryTab.BANK: ("bank_paid", "middleman_bank"),
    HistoryTab.CREDIT_CARD: ("credit_card_paid", "middleman_credit_card"),
}

_CANDIDATE_TYPES = {
    HistoryTab.PURCHASES: frozenset({TransactionType.PURCHASE}),
    HistoryTab.SALES: frozenset({TransactionType.SALE}),
    HistoryTab.MIDDLEMEN: frozenset({TransactionType.MIDDLEMAN}),
    HistoryTab.CASH: PAYMENT_TYPES | CURRENCY_TYPES | {TransactionType.MIDDLEMAN},
    HistoryTab.BANK: PAYMENT_TYPES | CURRENCY_TYPES | {TransactionType.MIDDLEMAN},
    HistoryTab.CREDIT_CARD: frozenset(
        {TransactionType.SALE, TransactionType.PURCHASE, TransactionType.MIDDLEMAN}
    ),
    HistoryTab.EXPENSES: frozenset({TransactionType.EXPENSE}),
}


def _value(amount: Optional[float]) -> float:
    return amount if amount is not None else 0.0


def _touches_bank(txn: Transaction) -> bool:
    return MYSELF_BANK in (txn.giver, txn.taker)


def _is_outside_transfer(txn: Transaction) -> bool:
    if txn.type not in CURRENCY_TYPES:
        return False
    return not any(party is not None and party.is_myself for party in (txn.giver, txn.taker))


def account_paid(txn: Transaction, tab: HistoryTab) -> Optional[float]:
    """Amount of the transaction paid through an account tab's method."""
    paid_field, middleman_field = _ACCOUNT_FIELDS[tab]
    if txn.type is TransactionType.MIDDLEMAN:
        return getattr(txn, middleman_field)
    return getattr(txn, paid_field)


def tab_view(entry: HistoryEntry, tab: HistoryTab) -> HistoryEntry:
    """Rewrite ``paid`` to the part paid through an account tab's method.

    Totals and the payment method breakdown are left as recorded.
    """
    txn = entry.transaction
    if not tab.is_account or txn.type in CURRENCY_TYPES:
        return entry
    paid = _value(account_paid(txn, tab))
    return replace(entry, transaction=replace(txn, paid=paid))


def _merge_sides(first: HistoryEntry, second: HistoryEntry) -> HistoryEntry:
    giver = first.transaction.giver
    if giver is not None and giver.is_entity(second.entity_id):
        first, second = second, first
    return replace(first, entity_name=f"{first.entity_name} -> {second.entity_name}")


def entries_for_tab(entries: Iterable[HistoryEntry], tab: HistoryTab) -> list[HistoryEntry]:
    """Select, adjust and de-duplicate the entries shown on a tab.

    The same transaction can be listed once per party it touches; only the
    first listing of each (entity, transaction, type, role) key is kept. On
    the Cash and Bank tabs a transfer between two outside parties is shown
    once, named "giver -> taker".
    """
    seen: set[str] = set()
    transfers: dict[tuple[str, TransactionType], int] = {}
    selected: list[HistoryEntry] = []
    for entry in entries:
        txn = entry.transaction
        if not tab.includes(txn):
            continue
        if entry.key in seen:
            continue
        seen.add(entry.key)
        if tab in (HistoryTab.CASH, HistoryTab.BANK) and _is_outside_transfer(txn):
            transfer_key = (txn.id, txn.type)
            if transfer_key in transfers:
                index = transfers[transfer_key]
                if selected[index].entity_id != entry.entity_id:
                    selected[index] = _merge_sides(selected[index], entry)
                continue
            transfers[transfer_key] = len(selected)
        selected.append(tab_view(entry, tab))
    return selected
