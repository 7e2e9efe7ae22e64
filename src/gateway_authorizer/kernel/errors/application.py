"""Application-layer errors — credential handling at request level."""

from __future__ import annotations

from typing import Any

from gateway_authorizer.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Missing or invalid credentials."""

    default_code = "unauthorized"


class CredentialParseError(UnauthorizedError):
    """The bearer credential could not be turned into a principal.

    ``reason`` is a short slug (``malformed``, ``missing_subject``,
    ``missing_roles``, ``invalid_token`` …) that is safe to log; the token
    itself never is.
    """

    default_code = "credential_parse_error"

    def __init__(self, message: str, *, reason: str = "malformed", **kwargs: Any) -> None:
        super().__init__(message, reason=reason, **kwargs)


__all__ = ["ApplicationError", "CredentialParseError", "UnauthorizedError"]
