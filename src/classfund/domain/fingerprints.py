"""Evidence fingerprint store.

Maps the content hash of submitted payment evidence to the ledger entry that
first used it. Claims are permanent: a rejected entry keeps its fingerprint
reserved so the same slip cannot be resubmitted for another purpose.
"""

import hashlib
import logging
from typing import Optional

from classfund.database.base import Database
from classfund.domain.entities import EvidenceClaim
from classfund.domain.errors import ValidationError

logger = logging.getLogger(__name__)


def fingerprint_evidence(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw evidence bytes."""
    return hashlib.sha256(data).hexdigest()


def normalize_fingerprint(fingerprint: Optional[str]) -> Optional[str]:
    """Strip and lowercase a hex fingerprint; blank values become None."""
    if fingerprint is None:
        return None
    fingerprint = fingerprint.strip().lower()
    if not fingerprint:
        return None
    return fingerprint


class EvidenceFingerprintStore:
    """Service answering whether payment evidence was already used."""

    def __init__(self, db: Database):
        """Initialize fingerprint store.

        Args:
            db: Database instance
        """
        self.db = db

    def is_claimed(self, fingerprint: str) -> Optional[str]:
        """Look up a fingerprint without side effects.

        Args:
            fingerprint: Evidence content hash

        Returns:
            Owner label of the claiming entry, or None if the fingerprint is free
        """
        claim = self.get_claim(fingerprint)
        if claim is None:
            return None
        return claim.owner_label

    def get_claim(self, fingerprint: str) -> Optional[EvidenceClaim]:
        """Return the full claim record for a fingerprint, if any."""
        normalized = normalize_fingerprint(fingerprint)
        if normalized is None:
            return None
        return self.db.get_evidence_claim(normalized)

    def claim(self, fingerprint: str, entry_id: int, owner_label: str) -> None:
        """Reserve a fingerprint for an entry.

        Args:
            fingerprint: Evidence content hash
            entry_id: Entry that uses the evidence
            owner_label: Display name shown when the evidence is reused

        Raises:
            ValidationError: If the fingerprint is blank
            FingerprintAlreadyClaimed: If the fingerprint is already claimed
        """
        normalized = normalize_fingerprint(fingerprint)
        if normalized is None:
            raise ValidationError("Evidence fingerprint must not be empty")
        self.db.claim_evidence(normalized, entry_id, owner_label)
        logger.info("Evidence %s claimed by entry %s", normalized, entry_id)
