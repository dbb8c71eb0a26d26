"""Shared pytest fixtures for ledgerbook tests."""

import tempfile
import os
from pathlib import Path
import pytest

from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.domain.entities import EntityProfile, EntityType
from ledgerbook.domain.entity import EntityService
from ledgerbook.domain.statement import StatementService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def entity_service(temp_db):
    """Create an EntityService with a temporary database."""
    return EntityService(temp_db)


@pytest.fixture
def statement_service(temp_db):
    """Create a StatementService with a temporary database."""
    return StatementService(temp_db)


@pytest.fixture
def customer():
    """A customer profile not stored anywhere."""
    return EntityProfile(
        id="c-1",
        name="Jane Doe",
        phone="555-0100",
        email="jane@example.com",
        balance=250.0,
        entity_type=EntityType.CUSTOMER,
    )


@pytest.fixture
def stored_customer(entity_service):
    """Create a stored customer profile."""
    entity_id = entity_service.create_entity(
        entity_id="c-1",
        name="Jane Doe",
        phone="555-0100",
        email="jane@example.com",
    )
    return entity_service.get_entity(entity_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
