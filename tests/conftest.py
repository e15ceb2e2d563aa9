"""Shared pytest fixtures for classfund tests."""

import tempfile
import os
import pytest

from classfund.database.factories import create_sqlite_database
from classfund.domain.approval import ApprovalStateMachine
from classfund.domain.classroom import ClassroomService
from classfund.domain.entities import Direction
from classfund.domain.fingerprints import EvidenceFingerprintStore, fingerprint_evidence
from classfund.domain.reconciliation import ReconciliationService


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
def classroom_service(temp_db):
    """Create a ClassroomService with a temporary database."""
    return ClassroomService(temp_db)


@pytest.fixture
def fingerprint_store(temp_db):
    """Create an EvidenceFingerprintStore with a temporary database."""
    return EvidenceFingerprintStore(temp_db)


@pytest.fixture
def state_machine(temp_db):
    """Create an ApprovalStateMachine without a period catalog."""
    return ApprovalStateMachine(temp_db)


@pytest.fixture
def sample_periods(classroom_service):
    """Create July and August priced periods plus an unpriced Uniform period."""
    classroom_service.add_period("July", 60)
    classroom_service.add_period("August", 40)
    classroom_service.add_period("Uniform 350")
    return ["July", "August", "Uniform 350"]


@pytest.fixture
def reconciliation_service(temp_db, sample_periods):
    """Create a ReconciliationService with the sample periods loaded."""
    return ReconciliationService.from_database(temp_db)


@pytest.fixture
def pending_deposit(reconciliation_service):
    """Submit a pending member deposit of 100 and return its ID."""
    return reconciliation_service.submit_payment(
        direction=Direction.DEPOSIT,
        owner_id="u1",
        owner_label="Alice",
        amount=100,
        note="July August",
        fingerprint=fingerprint_evidence(b"alice slip"),
    )


@pytest.fixture
def evidence_file(tmp_path):
    """Write a small evidence file and return its path."""
    path = tmp_path / "slip.jpg"
    path.write_bytes(b"\xff\xd8\xff transfer slip 100.00")
    return path


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_entry():
    """Return a factory for in-memory LedgerEntry values."""
    from datetime import datetime, UTC
    from decimal import Decimal

    from classfund.domain.entities import EntryStatus, LedgerEntry

    counter = iter(range(1, 10_000))

    def _make(
        amount="100",
        direction=Direction.DEPOSIT,
        status=EntryStatus.APPROVED,
        owner_id="u1",
        owner_label="Alice",
        period=None,
        note=None,
        created_at=None,
    ):
        return LedgerEntry(
            id=next(counter),
            owner_id=owner_id,
            owner_label=owner_label,
            direction=direction,
            amount=Decimal(str(amount)),
            period=period,
            note=note,
            status=status,
            evidence_ref=None,
            evidence_fingerprint=None,
            reviewer_label=None,
            created_at=created_at or datetime.now(UTC),
        )

    return _make


@pytest.fixture
def racing_db(temp_db, monkeypatch):
    """Second connection to the temp database whose claim pre-check always misses.

    Models a concurrent writer that checked for an existing claim before the
    other writer committed, so only the storage constraints can stop it.
    """
    db = create_sqlite_database(database_path=temp_db.database_path)
    db.connect()
    monkeypatch.setattr(db._get_session(), "get", lambda *args, **kwargs: None)

    yield db

    db.disconnect()
