"""Observability – AuditLogger.

A dedicated structured-log sink for authorization decisions.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from gateway_authorizer.observability.logging.factory import get_logger


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    SUCCESS = "success"
    DENIED = "denied"


class AuditLogger:
    """Records one ``audit.access`` entry per decision.

    Entries are emitted at ``WARNING`` level so they pass through even
    restrictive log-level filters.
    """

    def __init__(self, service: str = "gateway-authorizer", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_access(
        self,
        principal_id: str,
        resource: str,
        action: str,
        outcome: AuditOutcome | str = AuditOutcome.SUCCESS,
        **extra: Any,
    ) -> None:
        """Record a decision for *principal_id* on *resource* / *action*.

        *extra* fields are passed through as structured keys.
        """
        self._log.warning(
            "audit.access",
            service=self._service,
            principal_id=principal_id,
            resource=resource,
            action=action,
            outcome=outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            **extra,
        )


__all__ = ["AuditLogger", "AuditOutcome"]
