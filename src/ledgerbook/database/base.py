"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerbook.domain.entities import (
    EntityProfile,
    EntityType,
    HistoryEntry,
    Transaction,
    TransactionType,
)


class Database(ABC):
    """Abstract database interface for ledgerbook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Entity operations
    @abstractmethod
    def create_entity(
        self,
        entity_id: str,
        name: str,
        entity_type: EntityType = EntityType.CUSTOMER,
        phone: str = "",
        email: str = "",
        balance: float = 0.0,
        address: str = "",
        notes: str = "",
    ) -> str:
        """Create an entity profile. Returns entity ID."""
        pass

    @abstractmethod
    def get_entity(self, entity_id: str) -> Optional[EntityProfile]:
        """Get entity profile by ID."""
        pass

    @abstractmethod
    def find_entities_by_name(self, name: str) -> list[EntityProfile]:
        """Get entity profiles with exactly the given name."""
        pass

    @abstractmethod
    def list_entities(self, entity_type: Optional[EntityType] = None) -> list[EntityProfile]:
        """List entity profiles, optionally filtered by type."""
        pass

    # Transaction operations
    @abstractmethod
    def add_transaction(self, entity_id: str, fields: dict[str, Any]) -> int:
        """Store a transaction listing for an entity. Returns row ID.

        ``fields`` holds raw flat document fields (see
        ``ledgerbook.domain.documents.flatten_document``).
        """
        pass

    @abstractmethod
    def transaction_exists(
        self, entity_id: str, document_id: str, txn_type: str, role: str = ""
    ) -> bool:
        """Check if a listing of the document already exists for the entity."""
        pass

    @abstractmethod
    def list_entity_transactions(self, entity_id: str) -> list[Transaction]:
        """List all transactions in an entity's ledger."""
        pass

    @abstractmethod
    def list_history_entries(
        self, types: Optional[set[TransactionType]] = None
    ) -> list[HistoryEntry]:
        """List transactions of all entities, tagged with the owning entity.

        Args:
            types: Optional set of transaction types to include
        """
        pass
