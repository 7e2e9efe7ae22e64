"""Domain errors — violations of the decision-document rules."""

from __future__ import annotations

from typing import Any

from gateway_authorizer.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a policy-building rule is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A builder invariant was violated."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input handed to the builder does not meet validation rules."""

    default_code = "validation_error"


class InvalidResourcePathError(ValidationError):
    """A resource path contains characters outside the allowed pattern."""

    default_code = "invalid_resource_path"

    def __init__(self, path: str, pattern: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid resource path: {path!r}. Path should match {pattern}",
            detail={"path": path, "pattern": pattern},
            **kwargs,
        )
        self.path = path
        self.pattern = pattern


class UnknownHttpVerbError(ValidationError):
    """A verb name does not map onto any :class:`HttpVerb` member."""

    default_code = "unknown_http_verb"

    def __init__(self, verb: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown HTTP verb: {verb!r}", detail={"verb": verb}, **kwargs)
        self.verb = verb


class InvalidEffectError(ValidationError):
    """An effect other than ``allow`` / ``deny`` was requested."""

    default_code = "invalid_effect"

    def __init__(self, effect: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid effect: {effect!r}. Expected 'allow' or 'deny'",
            detail={"effect": effect},
            **kwargs,
        )
        self.effect = effect


class InvalidMethodArnError(ValidationError):
    """The inbound method ARN does not have the execute-api shape."""

    default_code = "invalid_method_arn"

    def __init__(self, arn: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid method ARN {arn!r}: {reason}",
            reason=reason,
            detail={"arn": arn},
            **kwargs,
        )
        self.arn = arn


class EmptyPolicyError(InvariantViolationError):
    """``build()`` was called before any method was allowed or denied."""

    default_code = "empty_policy"

    def __init__(self, message: str = "No statements defined for the policy", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "DomainError",
    "EmptyPolicyError",
    "InvalidEffectError",
    "InvalidMethodArnError",
    "InvalidResourcePathError",
    "InvariantViolationError",
    "UnknownHttpVerbError",
    "ValidationError",
]
