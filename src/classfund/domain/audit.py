"""Audit trail records for ledger changes.

Records are emitted on the ``classfund.audit`` logger; where they are stored
is up to whoever configures logging handlers.
"""

import logging
from typing import Optional

from classfund.domain.entities import LedgerEntry

audit_logger = logging.getLogger("classfund.audit")

CREATE_TRANSACTION = "CREATE_TRANSACTION"
APPROVE_TRANSACTION = "APPROVE_TRANSACTION"
REJECT_TRANSACTION = "REJECT_TRANSACTION"


def record_audit(action: str, actor: Optional[str], entry: LedgerEntry) -> None:
    """Emit one audit record for an entry change."""
    audit_logger.info(
        "%s by %s: entry %s %s - %s",
        action,
        actor or "system",
        entry.id,
        entry.owner_label,
        entry.amount,
        extra={
            "action": action,
            "actor": actor or "system",
            "target_type": "TRANSACTION",
            "target_id": entry.id,
        },
    )
