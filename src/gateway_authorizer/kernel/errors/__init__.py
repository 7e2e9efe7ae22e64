"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   ├── InvariantViolationError
    │   │   └── EmptyPolicyError
    │   └── ValidationError
    │       ├── InvalidResourcePathError
    │       ├── InvalidEffectError
    │       ├── InvalidMethodArnError
    │       └── UnknownHttpVerbError
    └── ApplicationError             (application.py)
        └── UnauthorizedError
            └── CredentialParseError
"""

from gateway_authorizer.kernel.errors.application import (
    ApplicationError,
    CredentialParseError,
    UnauthorizedError,
)
from gateway_authorizer.kernel.errors.base import BaseError
from gateway_authorizer.kernel.errors.domain import (
    DomainError,
    EmptyPolicyError,
    InvalidEffectError,
    InvalidMethodArnError,
    InvalidResourcePathError,
    InvariantViolationError,
    UnknownHttpVerbError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CredentialParseError",
    "DomainError",
    "EmptyPolicyError",
    "InvalidEffectError",
    "InvalidMethodArnError",
    "InvalidResourcePathError",
    "InvariantViolationError",
    "UnauthorizedError",
    "UnknownHttpVerbError",
    "ValidationError",
]
