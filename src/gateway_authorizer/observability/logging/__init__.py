"""Observability – structured logging helpers."""
from gateway_authorizer.observability.logging.audit import AuditLogger, AuditOutcome
from gateway_authorizer.observability.logging.factory import JsonLoggerFactory, get_logger
from gateway_authorizer.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
