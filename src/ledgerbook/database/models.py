"""SQLAlchemy models for ledgerbook database.

Transaction rows keep the raw document values (sentinel party ids, unit and
adjustment strings); the mappers resolve them into domain types on load.
"""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Float,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Entity(Base):
    """Customer, supplier or middleman profile."""

    __tablename__ = "entities"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    entity_type = Column(String, nullable=False, default="Customer")
    phone = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    balance = Column(Float, nullable=False, default=0.0)
    address = Column(String, nullable=False, default="")
    notes = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship(
        "LedgerTransaction", back_populates="entity", cascade="all, delete-orphan"
    )


class LedgerTransaction(Base):
    """Transaction as listed in one entity's ledger."""

    __tablename__ = "ledger_transactions"

    id = Column(Integer, primary_key=True)
    document_id = Column(String, nullable=False)
    entity_id = Column(String, ForeignKey("entities.id"), nullable=False)
    type = Column(String, nullable=False)
    role = Column(String, nullable=False, default="")
    date = Column(DateTime, nullable=True)
    amount = Column(Float, nullable=False, default=0.0)
    grand_total = Column(Float, nullable=True)
    paid = Column(Float, nullable=True)
    credit = Column(Float, nullable=True)
    cash_paid = Column(Float, nullable=True)
    bank_paid = Column(Float, nullable=True)
    credit_card_paid = Column(Float, nullable=True)
    middleman_cash = Column(Float, nullable=True)
    middleman_bank = Column(Float, nullable=True)
    middleman_credit_card = Column(Float, nullable=True)
    middleman_credit = Column(Float, nullable=True)
    middleman_unit = Column(String, nullable=True)
    giver = Column(String, nullable=True)
    taker = Column(String, nullable=True)
    order_number = Column(Integer, nullable=True)
    notes = Column(String, nullable=True)
    adjustment_type = Column(String, nullable=True)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # One listing per entity, document, type and role
    __table_args__ = (
        UniqueConstraint(
            "entity_id", "document_id", "type", "role", name="uq_entity_document_listing"
        ),
    )

    # Relationships
    entity = relationship("Entity", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
