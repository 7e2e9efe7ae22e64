"""Credentials – StructuralCredentialExtractor.

Decodes the bearer token as a JSON object and maps its claims. The token is
trusted as-is: there is no signature, issuer or expiry check. Use
:class:`~gateway_authorizer.credentials.jwt.JwtCredentialExtractor` wherever
tokens come from an untrusted caller.
"""
from __future__ import annotations

import json

from gateway_authorizer.credentials.port import ClaimMapper
from gateway_authorizer.kernel.errors import CredentialParseError
from gateway_authorizer.kernel.security import Principal


class StructuralCredentialExtractor:
    def __init__(self, mapper: ClaimMapper | None = None) -> None:
        self._mapper = mapper or ClaimMapper()

    async def extract(self, token: str) -> Principal:
        try:
            claims = json.loads(token)
        except (ValueError, TypeError, RecursionError) as exc:
            raise CredentialParseError("Token is not valid JSON", reason="malformed", cause=exc) from exc
        return self._mapper.to_principal(claims)


__all__ = ["StructuralCredentialExtractor"]
