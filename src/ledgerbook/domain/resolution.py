"""Resolution of raw document values into domain types.

Source documents carry sentinel ids, free-form unit strings and loosely typed
numbers. Everything is resolved here, once, so statement code only sees
typed values.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Mapping, Optional

from dateutil import parser as date_parser

from ledgerbook.domain.entities import (
    MYSELF_BANK,
    MYSELF_CASH,
    AdjustmentDirection,
    MiddlemanUnit,
    Party,
    Transaction,
    TransactionType,
)
from ledgerbook.domain.errors import ValidationError

MYSELF_CASH_ID = "myself_special_id"
MYSELF_BANK_ID = "myself_bank_special_id"

TO_RECEIVE = "To Receive"


def resolve_party(raw: Optional[str]) -> Optional[Party]:
    """Map a raw giver/taker id to a Party."""
    if raw is None or raw == "":
        return None
    if raw == MYSELF_CASH_ID:
        return MYSELF_CASH
    if raw == MYSELF_BANK_ID:
        return MYSELF_BANK
    return Party.entity(raw)


def resolve_unit(raw: Optional[str]) -> Optional[MiddlemanUnit]:
    """Map a middleman unit string; anything other than ``give`` receives."""
    if not raw:
        return None
    if raw.strip().lower() == MiddlemanUnit.GIVE.value:
        return MiddlemanUnit.GIVE
    return MiddlemanUnit.RECEIVE


def resolve_adjustment(raw: Optional[str]) -> Optional[AdjustmentDirection]:
    """Map an ``adjustmentType`` string; anything other than To Receive pays."""
    if raw is None:
        return None
    if raw == TO_RECEIVE:
        return AdjustmentDirection.TO_RECEIVE
    return AdjustmentDirection.TO_PAY


def resolve_type(raw: Any) -> TransactionType:
    """Map a type tag to TransactionType.

    Raises:
        ValidationError: If the tag is unknown
    """
    try:
        return TransactionType(raw)
    except ValueError:
        raise ValidationError(f"Unknown transaction type '{raw}'")


def coerce_float(value: Any) -> Optional[float]:
    """Read a numeric field leniently.

    Missing values stay None; values that are present but not numeric read
    as 0.0 so one bad historical record never breaks a statement.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.replace(",", "").replace("$", "").strip())
        except ValueError:
            return 0.0
    return 0.0


def coerce_int(value: Any) -> Optional[int]:
    """Read an integer field, None when missing or malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def coerce_datetime(value: Any) -> Optional[datetime]:
    """Read a timestamp field; None when it cannot be resolved.

    Accepts datetimes, dates, epoch seconds, ``{"seconds": ...}`` timestamp
    maps and date strings. Aware values are converted to naive local time.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        result = datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, Mapping) and "seconds" in value:
        try:
            seconds = float(value["seconds"]) + float(value.get("nanoseconds", 0)) / 1e9
        except (TypeError, ValueError):
            return None
        result = datetime.fromtimestamp(seconds, tz=timezone.utc)
    elif isinstance(value, str):
        try:
            result = date_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    else:
        return None

    if result.tzinfo is not None:
        result = result.astimezone().replace(tzinfo=None)
    return result


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def transaction_from_fields(fields: Mapping[str, Any]) -> Transaction:
    """Build a Transaction from flat raw fields.

    ``fields`` uses the flat field names of :mod:`ledgerbook.domain.documents`
    (``document_id``, ``grand_total``, ``giver``, ``adjustment_type`` ...).

    Raises:
        ValidationError: If the type tag is unknown
    """
    amount = coerce_float(fields.get("amount"))
    return Transaction(
        id=str(fields.get("document_id") or ""),
        type=resolve_type(fields.get("type")),
        date=coerce_datetime(fields.get("date")),
        amount=amount if amount is not None else 0.0,
        grand_total=coerce_float(fields.get("grand_total")),
        paid=coerce_float(fields.get("paid")),
        credit=coerce_float(fields.get("credit")),
        cash_paid=coerce_float(fields.get("cash_paid")),
        bank_paid=coerce_float(fields.get("bank_paid")),
        credit_card_paid=coerce_float(fields.get("credit_card_paid")),
        middleman_cash=coerce_float(fields.get("middleman_cash")),
        middleman_bank=coerce_float(fields.get("middleman_bank")),
        middleman_credit_card=coerce_float(fields.get("middleman_credit_card")),
        middleman_credit=coerce_float(fields.get("middleman_credit")),
        middleman_unit=resolve_unit(_text(fields.get("middleman_unit"))),
        giver=resolve_party(_text(fields.get("giver"))),
        taker=resolve_party(_text(fields.get("taker"))),
        role=_text(fields.get("role")) or None,
        order_number=coerce_int(fields.get("order_number")),
        notes=_text(fields.get("notes")),
        adjustment_direction=resolve_adjustment(_text(fields.get("adjustment_type"))),
    )
