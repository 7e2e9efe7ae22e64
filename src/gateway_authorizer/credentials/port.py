"""Credentials – CredentialExtractor port and claim mapping."""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol

from gateway_authorizer.kernel.errors import CredentialParseError
from gateway_authorizer.kernel.security import Principal

BEARER_PREFIX = "Bearer "


def strip_bearer(authorization: str) -> str:
    """Drop a leading ``"Bearer "`` from an authorization header value."""
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return authorization


class CredentialExtractor(Protocol):
    """Port: turn a bearer token into a :class:`Principal`.

    Implementations raise :class:`CredentialParseError` for every token they
    cannot accept; no other exception type may escape.
    """

    async def extract(self, token: str) -> Principal: ...


@dataclasses.dataclass(frozen=True)
class ClaimMapper:
    """Reads the principal id and the realm roles out of decoded claims.

    Parameters
    ----------
    principal_claim:
        Claim holding the principal id. Keycloak puts the session id in
        ``sid``.
    fallback_principal_claim:
        Claim tried when ``principal_claim`` is absent; empty to disable.
    roles_claim:
        Dot-separated path to the list of role names.
    """

    principal_claim: str = "sid"
    fallback_principal_claim: str = "sub"
    roles_claim: str = "realm_access.roles"

    def to_principal(self, claims: Any) -> Principal:
        if not isinstance(claims, dict):
            raise CredentialParseError(
                f"Token payload must be an object, got {type(claims).__name__}",
                reason="not_an_object",
            )
        return Principal.from_names(
            self._subject(claims),
            self._roles(claims),
            claims=dict(claims),
        )

    def _subject(self, claims: dict[str, Any]) -> str:
        candidates = [self.principal_claim]
        if self.fallback_principal_claim:
            candidates.append(self.fallback_principal_claim)
        for claim in candidates:
            value = claims.get(claim)
            if isinstance(value, str) and value:
                return value
        raise CredentialParseError(
            f"Token has no principal claim (tried {', '.join(candidates)})",
            reason="missing_subject",
        )

    def _roles(self, claims: dict[str, Any]) -> list[str]:
        node: Any = claims
        for part in self.roles_claim.split("."):
            if not isinstance(node, dict) or part not in node:
                raise CredentialParseError(
                    f"Token has no '{self.roles_claim}' claim",
                    reason="missing_roles",
                )
            node = node[part]
        if not isinstance(node, list) or not all(isinstance(r, str) for r in node):
            raise CredentialParseError(
                f"Claim '{self.roles_claim}' must be a list of strings",
                reason="invalid_roles",
            )
        return list(node)


__all__ = ["BEARER_PREFIX", "ClaimMapper", "CredentialExtractor", "strip_bearer"]
