"""Per-transaction sign, colour and cell text rules.

Every transaction type follows exactly one sign convention:

- sale: always inflow, credit adds to balance-due
- purchase: always outflow, credit subtracts from balance-due
- expense: always outflow, no credit
- middleman: direction from the explicit unit (give/receive)
- currency transfers: direction from which side the entity stands on
- balance adjustment: direction from the adjustment direction
"""

from typing import Optional

from ledgerbook.domain.entities import (
    AdjustmentDirection,
    AmountClass,
    CashDirection,
    ClassifiedAmount,
    MiddlemanUnit,
    PartyKind,
    Transaction,
    TransactionType,
)
from ledgerbook.rendering.formatting import (
    format_currency,
    format_signed_currency,
)

# Amounts below this magnitude are treated as zero.
EPSILON = 0.01

PLACEHOLDER = "-"

# History tabs in which transfers between two outside parties are shown greyed out.
ACCOUNT_TABS = frozenset({"Cash", "Bank"})

_DIRECTION_CLASS = {
    CashDirection.INFLOW: AmountClass.POSITIVE,
    CashDirection.OUTFLOW: AmountClass.NEGATIVE,
    CashDirection.NEUTRAL: AmountClass.NEUTRAL,
}


def _value(amount: Optional[float]) -> float:
    return amount if amount is not None else 0.0


def is_nonzero(amount: Optional[float]) -> bool:
    """Return True if the amount is set and not below the zero threshold."""
    return amount is not None and abs(amount) > EPSILON


def middleman_total(txn: Transaction) -> float:
    """Sum of the cash, bank and card legs of a middleman payment."""
    return (
        _value(txn.middleman_cash)
        + _value(txn.middleman_bank)
        + _value(txn.middleman_credit_card)
    )


def primary_amount(txn: Transaction) -> float:
    """Return the amount a transaction contributes to cash flow.

    Args:
        txn: Transaction to inspect

    Returns:
        The type-specific primary amount; missing fields count as 0.0
    """
    if txn.type in (TransactionType.SALE, TransactionType.PURCHASE):
        if txn.paid is not None:
            return txn.paid
        if txn.grand_total is not None:
            return txn.grand_total
        return _value(txn.amount)
    if txn.type == TransactionType.EXPENSE:
        if txn.grand_total is not None:
            return txn.grand_total
        return _value(txn.amount)
    if txn.type == TransactionType.MIDDLEMAN:
        return middleman_total(txn)
    return _value(txn.amount)


def _currency_direction(
    txn: Transaction, entity_id: str, tab_context: Optional[str]
) -> CashDirection:
    if tab_context in ACCOUNT_TABS:
        giver_is_myself = txn.giver is not None and txn.giver.is_myself
        taker_is_myself = txn.taker is not None and txn.taker.is_myself
        if not giver_is_myself and not taker_is_myself:
            return CashDirection.NEUTRAL

    if txn.taker is not None and txn.taker.is_entity(entity_id):
        return CashDirection.OUTFLOW
    if txn.giver is not None and txn.giver.is_entity(entity_id):
        return CashDirection.INFLOW
    return CashDirection.INFLOW if txn.role == "giver" else CashDirection.OUTFLOW


def cash_direction(
    txn: Transaction, entity_id: str, tab_context: Optional[str] = None
) -> CashDirection:
    """Decide which way a transaction moves money for ``entity_id``.

    The magnitude of the amount is ignored here; see :func:`classify` for the
    near-zero neutral rendering.

    Args:
        txn: Transaction to inspect
        entity_id: Entity the ledger is written for
        tab_context: History tab name, if the ledger is a tab listing

    Returns:
        CashDirection of the transaction's primary amount
    """
    if txn.type == TransactionType.SALE:
        return CashDirection.INFLOW
    if txn.type in (TransactionType.PURCHASE, TransactionType.EXPENSE):
        return CashDirection.OUTFLOW
    if txn.type == TransactionType.MIDDLEMAN:
        if txn.middleman_unit is MiddlemanUnit.GIVE:
            return CashDirection.OUTFLOW
        if txn.middleman_unit is MiddlemanUnit.RECEIVE:
            return CashDirection.INFLOW
        return CashDirection.INFLOW if middleman_total(txn) >= 0 else CashDirection.OUTFLOW
    if txn.type.is_currency:
        return _currency_direction(txn, entity_id, tab_context)
    if txn.adjustment_direction is AdjustmentDirection.TO_RECEIVE:
        return CashDirection.INFLOW
    return CashDirection.OUTFLOW


def classify(
    txn: Transaction, entity_id: str, tab_context: Optional[str] = None
) -> ClassifiedAmount:
    """Render the signed amount cell of a transaction.

    Args:
        txn: Transaction to render
        entity_id: Entity the ledger is written for
        tab_context: History tab name, if the ledger is a tab listing

    Returns:
        ClassifiedAmount such as ``+$1,200.00`` / POSITIVE
    """
    amount = primary_amount(txn)
    if abs(amount) < EPSILON:
        return ClassifiedAmount(format_currency(abs(amount)), AmountClass.NEUTRAL)

    direction = cash_direction(txn, entity_id, tab_context)
    if direction is CashDirection.NEUTRAL:
        return ClassifiedAmount(format_currency(abs(amount)), AmountClass.NEUTRAL)

    sign = "+" if direction is CashDirection.INFLOW else "-"
    return ClassifiedAmount(
        format_signed_currency(amount, sign), _DIRECTION_CLASS[direction]
    )


def credit_delta(txn: Transaction) -> float:
    """Signed contribution of a transaction to the balance-due total."""
    if txn.type == TransactionType.SALE and is_nonzero(txn.credit):
        return txn.credit
    if txn.type == TransactionType.PURCHASE and is_nonzero(txn.credit):
        return -txn.credit
    if txn.type == TransactionType.MIDDLEMAN and is_nonzero(txn.middleman_credit):
        if txn.middleman_unit is MiddlemanUnit.RECEIVE:
            return txn.middleman_credit
        return -txn.middleman_credit
    return 0.0


def credit_cell(txn: Transaction) -> Optional[ClassifiedAmount]:
    """Return the credit column content, or None when the placeholder applies."""
    if txn.type in (TransactionType.SALE, TransactionType.PURCHASE):
        amount = txn.credit
        amount_class = (
            AmountClass.POSITIVE
            if txn.type == TransactionType.SALE
            else AmountClass.NEGATIVE
        )
    elif txn.type == TransactionType.MIDDLEMAN:
        amount = txn.middleman_credit
        amount_class = (
            AmountClass.POSITIVE
            if txn.middleman_unit is MiddlemanUnit.RECEIVE
            else AmountClass.NEGATIVE
        )
    else:
        return None

    if not is_nonzero(amount):
        return None
    return ClassifiedAmount(format_currency(abs(amount)), amount_class)


def _join_methods(cash: Optional[float], bank: Optional[float], card: Optional[float]) -> str:
    methods = []
    for label, value in (("Cash", cash), ("Bank", bank), ("Card", card)):
        if value is not None and value > 0:
            methods.append(f"{label}: {format_currency(value)}")
    return ", ".join(methods) if methods else PLACEHOLDER


def payment_method(txn: Transaction) -> str:
    """Describe how a transaction was settled.

    Currency transfers resolve to the account of the "myself" party; giver is
    checked before taker and ``Cash`` is assumed when neither side is ours.
    """
    if txn.type in (TransactionType.SALE, TransactionType.PURCHASE, TransactionType.EXPENSE):
        return _join_methods(txn.cash_paid, txn.bank_paid, txn.credit_card_paid)
    if txn.type == TransactionType.MIDDLEMAN:
        return _join_methods(
            txn.middleman_cash, txn.middleman_bank, txn.middleman_credit_card
        )
    if txn.type.is_currency:
        for party in (txn.giver, txn.taker):
            if party is None:
                continue
            if party.kind is PartyKind.MYSELF_CASH:
                return "Cash"
            if party.kind is PartyKind.MYSELF_BANK:
                return "Bank"
        return "Cash"
    return PLACEHOLDER


def type_badge(txn: Transaction) -> str:
    """Return the type label shown in the badge column; empty for middleman."""
    if txn.type == TransactionType.MIDDLEMAN:
        return ""
    return txn.type.label


def describe(txn: Transaction) -> str:
    """Build the description column text."""
    notes = txn.notes or ""
    if txn.type in (TransactionType.SALE, TransactionType.PURCHASE):
        if txn.order_number is not None:
            description = f"Order #{txn.order_number}"
        else:
            description = txn.type.label
        if notes:
            description += f" - {notes}"
        return description
    return notes or txn.type.label
