"""Tests for database mappers."""

from datetime import datetime, UTC

from ledgerbook.database.models import (
    Entity as ORMEntity,
    LedgerTransaction as ORMLedgerTransaction,
)
from ledgerbook.database.mappers import (
    entity_to_domain,
    history_entry_to_domain,
    transaction_to_domain,
)
from ledgerbook.domain.entities import (
    MYSELF_BANK,
    AdjustmentDirection,
    EntityProfile,
    EntityType,
    HistoryEntry,
    MiddlemanUnit,
    Transaction,
    TransactionType,
)


class TestEntityMapper:
    """Tests for Entity mapper."""

    def test_entity_to_domain(self):
        """Test converting ORM Entity to domain EntityProfile."""
        orm_entity = ORMEntity(
            id="s-1",
            name="Acme Supply",
            entity_type="Supplier",
            phone="555-0111",
            email="",
            balance=-120.0,
            address="1 Dock Rd",
            notes="",
            created_at=datetime.now(UTC),
        )
        profile = entity_to_domain(orm_entity)

        assert isinstance(profile, EntityProfile)
        assert profile.id == "s-1"
        assert profile.entity_type == EntityType.SUPPLIER
        assert profile.balance == -120.0
        assert profile.address == "1 Dock Rd"

    def test_entity_to_domain_fills_missing_text(self):
        """Test that unset columns map to empty strings."""
        orm_entity = ORMEntity(id="c-1", name="Jane", entity_type="Customer")
        profile = entity_to_domain(orm_entity)

        assert profile.phone == ""
        assert profile.email == ""
        assert profile.balance == 0.0


class TestTransactionMapper:
    """Tests for LedgerTransaction mapper."""

    def test_transaction_to_domain_resolves_raw_values(self):
        """Test that sentinel ids, units and adjustment strings become enums."""
        orm_transaction = ORMLedgerTransaction(
            id=1,
            document_id="mm-1",
            entity_id="m-1",
            type="middleman",
            role="",
            date=datetime(2025, 1, 20, 14, 0),
            amount=0.0,
            middleman_cash=50.0,
            middleman_unit="give",
            giver="myself_bank_special_id",
        )
        txn = transaction_to_domain(orm_transaction)

        assert isinstance(txn, Transaction)
        assert txn.id == "mm-1"
        assert txn.type == TransactionType.MIDDLEMAN
        assert txn.middleman_unit is MiddlemanUnit.GIVE
        assert txn.giver == MYSELF_BANK
        assert txn.role is None
        assert txn.date == datetime(2025, 1, 20, 14, 0)

    def test_adjustment_type_mapped(self):
        """Test balance adjustment direction mapping."""
        orm_transaction = ORMLedgerTransaction(
            document_id="adj-1",
            entity_id="c-1",
            type="balanceAdjustment",
            role="",
            amount=40.0,
            adjustment_type="To Receive",
        )
        txn = transaction_to_domain(orm_transaction)

        assert txn.adjustment_direction is AdjustmentDirection.TO_RECEIVE
        assert txn.date is None

    def test_history_entry_to_domain(self):
        """Test that history entries carry the owning entity."""
        orm_entity = ORMEntity(id="c-1", name="Jane Doe", entity_type="Customer")
        orm_transaction = ORMLedgerTransaction(
            document_id="sale-1",
            entity_id="c-1",
            type="sale",
            role="",
            amount=10.0,
            entity=orm_entity,
        )
        entry = history_entry_to_domain(orm_transaction)

        assert isinstance(entry, HistoryEntry)
        assert entry.entity_id == "c-1"
        assert entry.entity_name == "Jane Doe"
        assert entry.entity_type == EntityType.CUSTOMER
        assert entry.transaction.id == "sale-1"
