"""Mapper functions to convert between domain models and SQLAlchemy models.

Transaction rows store raw document values; converting a row is where
sentinel ids, middleman units and adjustment types become domain types.
"""

from ledgerbook.domain import entities as domain
from ledgerbook.domain.resolution import transaction_from_fields
from ledgerbook.database.models import (
    Entity as ORMEntity,
    LedgerTransaction as ORMLedgerTransaction,
)

TRANSACTION_FIELDS = (
    "document_id",
    "type",
    "role",
    "date",
    "amount",
    "grand_total",
    "paid",
    "credit",
    "cash_paid",
    "bank_paid",
    "credit_card_paid",
    "middleman_cash",
    "middleman_bank",
    "middleman_credit_card",
    "middleman_credit",
    "middleman_unit",
    "giver",
    "taker",
    "order_number",
    "notes",
    "adjustment_type",
)


def entity_to_domain(orm_entity: ORMEntity) -> domain.EntityProfile:
    """Convert SQLAlchemy Entity model to domain EntityProfile."""
    return domain.EntityProfile(
        id=orm_entity.id,
        name=orm_entity.name,
        phone=orm_entity.phone or "",
        email=orm_entity.email or "",
        balance=orm_entity.balance or 0.0,
        address=orm_entity.address or "",
        notes=orm_entity.notes or "",
        entity_type=domain.EntityType(orm_entity.entity_type),
    )


def transaction_to_domain(orm_transaction: ORMLedgerTransaction) -> domain.Transaction:
    """Convert SQLAlchemy LedgerTransaction model to domain Transaction."""
    fields = {name: getattr(orm_transaction, name) for name in TRANSACTION_FIELDS}
    return transaction_from_fields(fields)


def history_entry_to_domain(orm_transaction: ORMLedgerTransaction) -> domain.HistoryEntry:
    """Convert a LedgerTransaction row to a HistoryEntry tagged with its entity."""
    entity = orm_transaction.entity
    return domain.HistoryEntry(
        entity_id=entity.id,
        entity_name=entity.name,
        entity_type=domain.EntityType(entity.entity_type),
        transaction=transaction_to_domain(orm_transaction),
    )
