"""Credentials – JwtCredentialExtractor using PyJWT."""
from __future__ import annotations

from typing import Any

import jwt as pyjwt

from gateway_authorizer.credentials.jwks import JWKSClient
from gateway_authorizer.credentials.port import ClaimMapper
from gateway_authorizer.kernel.errors import CredentialParseError
from gateway_authorizer.kernel.security import Principal


class JwtCredentialExtractor:
    """Verify a signed bearer JWT and map its claims to a :class:`Principal`.

    Signature, ``exp`` and (when configured) ``aud`` are enforced by PyJWT.
    Every failure, including a key-set fetch error, surfaces as
    :class:`CredentialParseError` so the authorizer can answer with a deny.

    Parameters
    ----------
    jwks_client:
        A :class:`JWKSClient` (or any object with an async
        ``get_signing_key(token)`` method).
    audience:
        Expected ``aud`` claim; empty disables the audience check.
    algorithms:
        Accepted signature algorithms.  Defaults to ``["RS256"]``.
    mapper:
        Claim mapping shared with the structural extractor.
    """

    def __init__(
        self,
        jwks_client: JWKSClient,
        audience: str = "",
        algorithms: list[str] | None = None,
        mapper: ClaimMapper | None = None,
    ) -> None:
        self._jwks = jwks_client
        self._audience = audience
        self._algorithms = algorithms or ["RS256"]
        self._mapper = mapper or ClaimMapper()

    async def extract(self, token: str) -> Principal:
        try:
            signing_key = await self._jwks.get_signing_key(token)
            claims: dict[str, Any] = pyjwt.decode(
                token,
                signing_key.key,
                algorithms=self._algorithms,
                audience=self._audience or None,
                options={"verify_aud": bool(self._audience), "require": ["exp"]},
            )
        except pyjwt.ExpiredSignatureError as exc:
            raise CredentialParseError("Token has expired", reason="expired", cause=exc) from exc
        except pyjwt.InvalidAudienceError as exc:
            raise CredentialParseError("Invalid audience", reason="invalid_audience", cause=exc) from exc
        except pyjwt.PyJWTError as exc:
            raise CredentialParseError(f"Invalid token: {exc}", reason="invalid_token", cause=exc) from exc
        except Exception as exc:  # network errors while fetching the key set
            raise CredentialParseError(
                f"Token verification failed: {exc}", reason="verification_failed", cause=exc
            ) from exc
        return self._mapper.to_principal(claims)


__all__ = ["JwtCredentialExtractor"]
