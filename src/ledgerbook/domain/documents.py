"""Document import domain service.

Reads exported document-database records (JSON) into the local store. The
export is a single object::

    {
        "entities": [{"id": "...", "name": "...", "type": "Customer", ...}],
        "transactions": [{"id": "...", "entityId": "...", "type": "sale", ...}]
    }

Transaction documents may use the nested layout of the sales/purchases
collections (``paymentMethods``, ``middlemanPayment.paymentSplit``,
``balancesAfterTransaction``) or flat camelCase keys.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import EntityType
from ledgerbook.domain.errors import ValidationError
from ledgerbook.domain.resolution import coerce_float, resolve_type

logger = logging.getLogger(__name__)


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def flatten_document(doc: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a transaction document into raw storage fields.

    Values are not converted here; see
    :func:`ledgerbook.domain.resolution.transaction_from_fields`.
    """
    payments = _mapping(doc.get("paymentMethods"))
    middleman = _mapping(doc.get("middlemanPayment"))
    split = _mapping(middleman.get("paymentSplit"))
    balances = _mapping(doc.get("balancesAfterTransaction"))

    grand_total = doc.get("grandTotal")
    return {
        "document_id": _first(doc.get("id"), doc.get("documentId")),
        "type": doc.get("type"),
        "role": doc.get("role") or "",
        "date": _first(doc.get("transactionDate"), doc.get("timestamp"), doc.get("date")),
        "amount": _first(doc.get("amount"), grand_total),
        "grand_total": grand_total,
        "paid": _first(doc.get("paid"), payments.get("totalPaid")),
        "credit": _first(doc.get("credit"), payments.get("remainingCredit")),
        "cash_paid": _first(doc.get("cashPaid"), payments.get("cash")),
        "bank_paid": _first(doc.get("bankPaid"), payments.get("bank")),
        "credit_card_paid": _first(doc.get("creditCardPaid"), payments.get("creditCard")),
        "middleman_cash": _first(doc.get("middlemanCash"), split.get("cash")),
        "middleman_bank": _first(doc.get("middlemanBank"), split.get("bank")),
        "middleman_credit_card": _first(
            doc.get("middlemanCreditCard"), split.get("creditCard")
        ),
        "middleman_credit": _first(doc.get("middlemanCredit"), split.get("credit")),
        "middleman_unit": _first(doc.get("middlemanUnit"), middleman.get("unit")),
        "giver": doc.get("giver"),
        "taker": doc.get("taker"),
        "order_number": doc.get("orderNumber"),
        "notes": doc.get("notes"),
        "adjustment_type": _first(doc.get("adjustmentType"), balances.get("adjustmentType")),
    }


def entity_fields(doc: Mapping[str, Any]) -> dict[str, Any]:
    """Extract entity profile fields from an entity document.

    Raises:
        ValidationError: If the id or name is missing, or the type is unknown
    """
    entity_id = doc.get("id")
    name = doc.get("name")
    if not entity_id or not name:
        raise ValidationError("Entity document requires 'id' and 'name'")
    try:
        entity_type = EntityType(doc.get("type") or EntityType.CUSTOMER.value)
    except ValueError:
        raise ValidationError(f"Unknown entity type '{doc.get('type')}'")

    balance = coerce_float(doc.get("balance"))
    return {
        "entity_id": str(entity_id),
        "name": str(name),
        "entity_type": entity_type,
        "phone": str(doc.get("phone") or ""),
        "email": str(doc.get("email") or ""),
        "balance": balance if balance is not None else 0.0,
        "address": str(doc.get("address") or ""),
        "notes": str(doc.get("notes") or ""),
    }


class DocumentImportService:
    """Service for importing exported documents."""

    def __init__(self, db: Database):
        """Initialize document import service.

        Args:
            db: Database instance
        """
        self.db = db

    def import_file(self, file_path: str) -> dict[str, Any]:
        """Import entities and transactions from a JSON export.

        Args:
            file_path: Path to the JSON export

        Returns:
            Dict with import statistics:
            - entities: number of entity profiles created
            - imported: number of transactions imported
            - skipped: number of transactions skipped (duplicates)
            - errors: list of error messages

        Raises:
            ValueError: If the file is not a valid export
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Export file not found: {file_path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")

        if not isinstance(payload, Mapping):
            raise ValueError("Export must be a JSON object with 'entities' and 'transactions'")

        return self.import_documents(
            payload.get("entities") or [], payload.get("transactions") or []
        )

    def import_documents(
        self, entity_docs: list[Mapping[str, Any]], transaction_docs: list[Mapping[str, Any]]
    ) -> dict[str, Any]:
        """Import already-decoded documents. See :meth:`import_file`."""
        created = 0
        imported = 0
        skipped = 0
        errors = []

        for index, doc in enumerate(entity_docs, start=1):
            try:
                fields = entity_fields(_mapping(doc))
                if self.db.get_entity(fields["entity_id"]) is not None:
                    continue
                self.db.create_entity(**fields)
                created += 1
            except ValueError as e:
                errors.append(f"Entity {index}: {e}")

        for index, doc in enumerate(transaction_docs, start=1):
            doc = _mapping(doc)
            fields = flatten_document(doc)
            entity_id = doc.get("entityId")
            try:
                if not entity_id:
                    raise ValidationError("Missing entityId")
                if not fields["document_id"]:
                    raise ValidationError("Missing id")
                resolve_type(fields["type"])
                if self.db.get_entity(str(entity_id)) is None:
                    raise ValidationError(f"Entity '{entity_id}' not found")
                if self.db.transaction_exists(
                    str(entity_id), str(fields["document_id"]), fields["type"], fields["role"]
                ):
                    skipped += 1
                    continue
                self.db.add_transaction(str(entity_id), fields)
                imported += 1
            except ValueError as e:
                logger.warning("Skipping transaction document %d: %s", index, e)
                errors.append(f"Transaction {index}: {e}")

        return {
            "entities": created,
            "imported": imported,
            "skipped": skipped,
            "errors": errors,
        }
