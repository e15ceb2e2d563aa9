"""Domain layer for classfund application."""

# Services import the database layer, which in turn imports domain entities,
# so they are resolved lazily to keep ``classfund.domain.entities`` importable
# from ``classfund.database`` without a cycle.
_SERVICES = {
    "ApprovalStateMachine": "classfund.domain.approval",
    "ClassroomService": "classfund.domain.classroom",
    "EvidenceFingerprintStore": "classfund.domain.fingerprints",
    "ReconciliationService": "classfund.domain.reconciliation",
}


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = list(_SERVICES)
