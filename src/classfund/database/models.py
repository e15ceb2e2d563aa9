"""SQLAlchemy models for classfund database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

DEFAULT_CLASSROOM_NAME = "Classroom fund"
DEFAULT_MONTHLY_FEE = 20


class LedgerEntry(Base):
    """Ledger entry model."""

    __tablename__ = "ledger_entries"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, nullable=True, index=True)
    owner_label = Column(String, nullable=False)
    direction = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    period = Column(String, nullable=True, index=True)
    note = Column(String, nullable=True)
    status = Column(String, nullable=False, default="PENDING", index=True)
    evidence_ref = Column(String, nullable=True)
    # Split entries leave this NULL; SQL unique constraints ignore NULLs
    evidence_fingerprint = Column(String, nullable=True, unique=True)
    reviewer_label = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    evidence_claim = relationship("EvidenceClaim", back_populates="entry", uselist=False)


class EvidenceClaim(Base):
    """Permanent reservation of an evidence fingerprint."""

    __tablename__ = "evidence_claims"

    fingerprint = Column(String, primary_key=True)
    entry_id = Column(Integer, ForeignKey("ledger_entries.id"), nullable=False)
    owner_label = Column(String, nullable=False)
    claimed_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    entry = relationship("LedgerEntry", back_populates="evidence_claim")


class Period(Base):
    """Billing period model."""

    __tablename__ = "periods"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    amount = Column(Numeric(10, 2), nullable=True)
    position = Column(Integer, nullable=False, default=0)
    is_closed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class ClassroomSettings(Base):
    """Single-row classroom configuration model."""

    __tablename__ = "classroom_settings"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, default=DEFAULT_CLASSROOM_NAME)
    monthly_fee = Column(Numeric(10, 2), nullable=False, default=DEFAULT_MONTHLY_FEE)
    is_payment_active = Column(Boolean, default=True, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
