"""Tests for entity profile service."""

import pytest

from ledgerbook.domain.entities import EntityType
from ledgerbook.domain.errors import ConflictError, NotFoundError, ValidationError


def test_create_entity(entity_service):
    """Test creating an entity profile."""
    entity_id = entity_service.create_entity(
        entity_id="m-1", name="Sam Broker", entity_type=EntityType.MIDDLEMAN
    )

    entity = entity_service.get_entity(entity_id)
    assert entity.name == "Sam Broker"
    assert entity.entity_type == EntityType.MIDDLEMAN


def test_create_entity_requires_id_and_name(entity_service):
    with pytest.raises(ValidationError):
        entity_service.create_entity(entity_id=" ", name="Jane")
    with pytest.raises(ValidationError):
        entity_service.create_entity(entity_id="c-1", name="")


def test_create_duplicate_entity(entity_service, stored_customer):
    with pytest.raises(ConflictError, match="already exists"):
        entity_service.create_entity(entity_id=stored_customer.id, name="Other")


def test_list_entities(entity_service, stored_customer):
    entity_service.create_entity(entity_id="s-1", name="Acme", entity_type=EntityType.SUPPLIER)

    assert len(entity_service.list_entities()) == 2
    assert [e.id for e in entity_service.list_entities(EntityType.CUSTOMER)] == ["c-1"]


class TestResolveEntity:
    """Tests for resolving an entity by ID or name."""

    def test_by_id(self, entity_service, stored_customer):
        assert entity_service.resolve_entity("c-1") == stored_customer

    def test_by_name(self, entity_service, stored_customer):
        assert entity_service.resolve_entity("Jane Doe").id == "c-1"

    def test_unknown(self, entity_service):
        with pytest.raises(NotFoundError, match="Entity 'nobody' not found"):
            entity_service.resolve_entity("nobody")

    def test_ambiguous_name(self, entity_service, stored_customer):
        entity_service.create_entity(entity_id="c-2", name="Jane Doe")

        with pytest.raises(ValidationError, match="several entities"):
            entity_service.resolve_entity("Jane Doe")
