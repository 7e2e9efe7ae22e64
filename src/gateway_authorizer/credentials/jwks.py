"""Credentials – JWKSClient backed by PyJWT."""
from __future__ import annotations

import asyncio
import ssl
from typing import Any

import jwt

from gateway_authorizer.observability.logging import get_logger

logger = get_logger(__name__)


class JWKSClient:
    """Fetches and caches the identity provider's JWKS using :class:`jwt.PyJWKClient`.

    Parameters
    ----------
    jwks_uri:
        Full URL of the JWKS endpoint, e.g.
        ``https://auth.example.com/realms/myrealm/protocol/openid-connect/certs``.
    cache_ttl:
        How many seconds to cache the key set locally.  Defaults to 300 s.
    verify_tls:
        Verify the endpoint's certificate.  Turning this off is meant for
        local identity providers with self-signed certificates and only
        affects this client instance.
    timeout:
        HTTP timeout in seconds for a key-set fetch.
    """

    def __init__(
        self,
        jwks_uri: str,
        cache_ttl: float = 300.0,
        *,
        verify_tls: bool = True,
        timeout: float = 5.0,
    ) -> None:
        self._jwks_uri = jwks_uri
        self._cache_ttl = cache_ttl
        self._verify_tls = verify_tls
        self._timeout = timeout
        self._client: Any = None
        if not verify_tls:
            logger.warning("jwks.tls_verification_disabled", jwks_uri=jwks_uri)

    @property
    def verify_tls(self) -> bool:
        return self._verify_tls

    def _ssl_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if not self._verify_tls:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = jwt.PyJWKClient(
                self._jwks_uri,
                lifespan=int(self._cache_ttl),
                timeout=self._timeout,
                ssl_context=self._ssl_context(),
            )
        return self._client

    async def get_signing_key(self, token: str) -> Any:
        """Return the :class:`jwt.PyJWK` signing key for *token*.

        ``PyJWKClient`` fetches synchronously on a cache miss, so the call is
        pushed to a worker thread.
        """
        client = self._get_client()
        return await asyncio.to_thread(client.get_signing_key_from_jwt, token)

    def invalidate(self) -> None:
        """Force a fresh JWKS fetch on the next :meth:`get_signing_key` call."""
        self._client = None


__all__ = ["JWKSClient"]
