"""Domain model entities for ledgerbook.

These are pure data classes representing business concepts, independent of
database schema and document layout. Anything stringly-typed in the source
documents (sentinel party ids, adjustment types, middleman units) is resolved
into the enums below at ingestion time so the statement code never compares
raw strings.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from enum import Enum
from typing import Optional, Union


class TransactionType(str, Enum):
    """Kind of ledger event. Behaviour is dispatched per member."""

    SALE = "sale"
    PURCHASE = "purchase"
    EXPENSE = "expense"
    MIDDLEMAN = "middleman"
    CURRENCY_REGULAR = "currencyRegular"
    CURRENCY_EXCHANGE = "currencyExchange"
    BALANCE_ADJUSTMENT = "balanceAdjustment"

    @property
    def label(self) -> str:
        return _TYPE_LABELS[self]

    @property
    def badge_color(self) -> str:
        return _TYPE_COLORS[self]

    @property
    def is_currency(self) -> bool:
        return self in (TransactionType.CURRENCY_REGULAR, TransactionType.CURRENCY_EXCHANGE)


_TYPE_LABELS = {
    TransactionType.SALE: "Sale",
    TransactionType.PURCHASE: "Purchase",
    TransactionType.EXPENSE: "Expense",
    TransactionType.MIDDLEMAN: "Middleman",
    TransactionType.CURRENCY_REGULAR: "Currency",
    TransactionType.CURRENCY_EXCHANGE: "Exchange",
    TransactionType.BALANCE_ADJUSTMENT: "Balance Adjustment",
}

_TYPE_COLORS = {
    TransactionType.PURCHASE: "#34C759",
    TransactionType.SALE: "#007AFF",
    TransactionType.MIDDLEMAN: "#CC6633",
    TransactionType.CURRENCY_REGULAR: "#FF9500",
    TransactionType.CURRENCY_EXCHANGE: "#AF52DE",
    TransactionType.EXPENSE: "#FF3B30",
    TransactionType.BALANCE_ADJUSTMENT: "#5856D6",
}


class EntityType(str, Enum):
    """Kind of counterparty profile."""

    CUSTOMER = "Customer"
    SUPPLIER = "Supplier"
    MIDDLEMAN = "Middleman"


class PartyKind(Enum):
    """Who stands on one side of a currency transfer."""

    ENTITY = "entity"
    MYSELF_CASH = "myself_cash"
    MYSELF_BANK = "myself_bank"


@dataclass(frozen=True)
class Party:
    """Giver or taker of a currency transfer.

    ``entity_id`` is only set for ``PartyKind.ENTITY``; the two ``MYSELF_*``
    kinds stand for the business's own cash drawer and bank account.
    """

    kind: PartyKind
    entity_id: Optional[str] = None

    @classmethod
    def entity(cls, entity_id: str) -> "Party":
        return cls(PartyKind.ENTITY, entity_id)

    @property
    def is_myself(self) -> bool:
        return self.kind is not PartyKind.ENTITY

    def is_entity(self, entity_id: str) -> bool:
        """Return True if this party is the regular entity with the given ID."""
        return self.kind is PartyKind.ENTITY and self.entity_id == entity_id


MYSELF_CASH = Party(PartyKind.MYSELF_CASH)
MYSELF_BANK = Party(PartyKind.MYSELF_BANK)


class MiddlemanUnit(Enum):
    """Explicit payment direction of a middleman leg."""

    GIVE = "give"
    RECEIVE = "receive"


class AdjustmentDirection(Enum):
    """Direction of a manual balance adjustment."""

    TO_RECEIVE = "To Receive"
    TO_PAY = "To Pay"


class AmountClass(Enum):
    """Colour class of a rendered amount."""

    POSITIVE = "amount-positive"
    NEGATIVE = "amount-negative"
    NEUTRAL = "amount-neutral"

    @property
    def css_class(self) -> str:
        return self.value


class CashDirection(Enum):
    """Which summary bucket a transaction's primary amount belongs to."""

    INFLOW = 1
    OUTFLOW = -1
    NEUTRAL = 0


@dataclass(frozen=True)
class Transaction:
    """One financial event, already resolved from its source document."""

    id: str
    type: TransactionType
    date: Optional[datetime]
    amount: float = 0.0
    grand_total: Optional[float] = None
    paid: Optional[float] = None
    credit: Optional[float] = None
    cash_paid: Optional[float] = None
    bank_paid: Optional[float] = None
    credit_card_paid: Optional[float] = None
    middleman_cash: Optional[float] = None
    middleman_bank: Optional[float] = None
    middleman_credit_card: Optional[float] = None
    middleman_credit: Optional[float] = None
    middleman_unit: Optional[MiddlemanUnit] = None
    giver: Optional[Party] = None
    taker: Optional[Party] = None
    role: Optional[str] = None
    order_number: Optional[int] = None
    notes: Optional[str] = None
    adjustment_direction: Optional[AdjustmentDirection] = None


@dataclass(frozen=True)
class HistoryEntry:
    """Transaction tagged with the entity it was listed under."""

    entity_id: str
    entity_name: str
    transaction: Transaction
    entity_type: Optional[EntityType] = None

    @property
    def key(self) -> str:
        """Stable identity used to de-duplicate history listings."""
        role = self.transaction.role or "none"
        return f"{self.entity_id}-{self.transaction.id}-{self.transaction.type.value}-{role}"


@dataclass(frozen=True)
class EntityProfile:
    """Customer, supplier or middleman profile."""

    id: str
    name: str
    phone: str = ""
    email: str = ""
    balance: float = 0.0
    address: str = ""
    notes: str = ""
    entity_type: EntityType = EntityType.CUSTOMER


@dataclass(frozen=True)
class CompanyInfo:
    """Letterhead details printed on every statement page."""

    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class StatementFilters:
    """Inclusive date range of a statement. ``None`` means unbounded."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass(frozen=True)
class ClassifiedAmount:
    """Rendered amount cell and its colour class."""

    display: str
    amount_class: AmountClass


@dataclass(frozen=True)
class LedgerSummary:
    """Totals of a statement."""

    inflow: float = 0.0
    outflow: float = 0.0
    net: float = 0.0
    credit_balance: float = 0.0


LedgerRow = Union[Transaction, HistoryEntry]


@dataclass(frozen=True)
class LedgerPage:
    """One printable page of a statement.

    ``summary`` is computed over the whole filtered statement, never over
    ``rows`` alone, and is only set when ``show_summary`` is True.
    """

    rows: tuple = field(default_factory=tuple)
    is_first_page: bool = True
    show_summary: bool = True
    summary: Optional[LedgerSummary] = None
