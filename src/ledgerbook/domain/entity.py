"""Entity profile domain service."""

from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import EntityProfile, EntityType
from ledgerbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_entity,
    entity_not_found,
)


class EntityService:
    """Service for managing entity profiles."""

    def __init__(self, db: Database):
        """Initialize entity service.

        Args:
            db: Database instance
        """
        self.db = db

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
        """Create a new entity profile.

        Args:
            entity_id: Document ID of the entity
            name: Display name
            entity_type: Customer, supplier or middleman
            phone: Optional phone number
            email: Optional email address
            balance: Current running balance
            address: Optional address
            notes: Optional notes

        Returns:
            Entity ID

        Raises:
            ValidationError: If ID or name is empty
            ConflictError: If the ID is already taken
        """
        if not entity_id.strip() or not name.strip():
            raise ValidationError("Entity ID and name must not be empty")
        if self.db.get_entity(entity_id) is not None:
            raise ConflictError(duplicate_entity(entity_id))

        return self.db.create_entity(
            entity_id=entity_id,
            name=name,
            entity_type=entity_type,
            phone=phone,
            email=email,
            balance=balance,
            address=address,
            notes=notes,
        )

    def get_entity(self, entity_id: str) -> Optional[EntityProfile]:
        """Get entity profile by ID."""
        return self.db.get_entity(entity_id)

    def list_entities(self, entity_type: Optional[EntityType] = None) -> list[EntityProfile]:
        """List entity profiles, optionally filtered by type."""
        return self.db.list_entities(entity_type)

    def resolve_entity(self, identifier: str) -> EntityProfile:
        """Resolve an entity by ID or exact name.

        Args:
            identifier: Entity ID or name

        Returns:
            Matching entity profile

        Raises:
            NotFoundError: If nothing matches
            ValidationError: If the name matches more than one entity
        """
        entity = self.db.get_entity(identifier)
        if entity is not None:
            return entity

        matches = self.db.find_entities_by_name(identifier)
        if not matches:
            raise NotFoundError(entity_not_found(identifier))
        if len(matches) > 1:
            ids = ", ".join(match.id for match in matches)
            raise ValidationError(
                f"Name '{identifier}' matches several entities ({ids}); use the entity ID"
            )
        return matches[0]
