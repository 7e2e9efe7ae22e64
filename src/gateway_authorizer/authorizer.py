"""Token authorizer – turns one gateway authorizer event into a decision.

Flow per request::

    Unauthenticated -> Extracting -> Authorized | Denied

A token the extractor accepts yields a policy allowing exactly the invoked
method; any :class:`CredentialParseError` yields a deny-all policy issued to
a placeholder principal.  Other errors (bad method ARN, bad resource path)
are defects in the platform input and propagate.
"""
from __future__ import annotations

import asyncio
import functools
from collections.abc import Mapping
from typing import Any

from gateway_authorizer.config import AuthorizerSettings, EnvSettingsLoader
from gateway_authorizer.credentials import (
    ClaimMapper,
    CredentialExtractor,
    JWKSClient,
    JwtCredentialExtractor,
    StructuralCredentialExtractor,
    strip_bearer,
)
from gateway_authorizer.kernel.errors import CredentialParseError, InvalidMethodArnError
from gateway_authorizer.kernel.time import Clock, SystemClock
from gateway_authorizer.observability.logging import (
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    get_logger,
)
from gateway_authorizer.policy import AuthorizerResponse, AuthPolicy, DecisionDocument, MethodArn

logger = get_logger(__name__)

ROLES_CONTEXT_KEY = "X-ROLES"
AUTHENTICATED_CONTEXT_KEY = "authenticated"
ROLE_MARKER = "dummy"


def build_context(roles: list[str], authenticated_at: int) -> dict[str, Any]:
    """Context passed to the integration alongside the policy.

    Write order is the timestamp, one marker per role, then the space-joined
    role list; ``X-ROLES`` always holds the joined list.
    """
    context: dict[str, Any] = {AUTHENTICATED_CONTEXT_KEY: authenticated_at}
    for role in roles:
        context[role] = ROLE_MARKER
    context[ROLES_CONTEXT_KEY] = " ".join(roles)
    return context


class TokenAuthorizer:
    """Builds one decorated decision document per authorizer event."""

    def __init__(
        self,
        extractor: CredentialExtractor,
        *,
        clock: Clock | None = None,
        placeholder_principal: str = "SID",
        audit: AuditLogger | None = None,
    ) -> None:
        self._extractor = extractor
        self._clock = clock or SystemClock()
        self._placeholder_principal = placeholder_principal
        self._audit = audit or AuditLogger()

    async def authorize(self, method_arn: str, authorization_token: str) -> AuthorizerResponse:
        method = MethodArn.parse(method_arn)
        roles: list[str] = []
        try:
            principal = await self._extractor.extract(strip_bearer(authorization_token))
        except CredentialParseError as exc:
            logger.debug("authorizer.credential_rejected", **exc.log_fields())
            policy = AuthPolicy(self._placeholder_principal, method.coordinates)
            policy.deny_all_methods()
            outcome = AuditOutcome.DENIED
        else:
            roles = principal.role_names
            policy = AuthPolicy(principal.subject, method.coordinates)
            policy.allow_method(method.verb, method.resource)
            outcome = AuditOutcome.SUCCESS

        document: DecisionDocument = policy.build()
        self._audit.log_access(
            document.principal_id,
            resource=method.resource,
            action=method.verb.value,
            outcome=outcome,
            roles=roles,
        )
        return AuthorizerResponse(document, build_context(roles, self._clock.epoch_millis()))

    async def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        """Authorize a ``TOKEN`` authorizer event and return its JSON-ready payload."""
        method_arn = event.get("methodArn")
        if not isinstance(method_arn, str):
            raise InvalidMethodArnError(repr(method_arn), "event has no 'methodArn' string")
        token = event.get("authorizationToken")
        response = await self.authorize(method_arn, token if isinstance(token, str) else "")
        return response.to_dict()


def build_authorizer(settings: AuthorizerSettings, *, clock: Clock | None = None) -> TokenAuthorizer:
    """Wire a :class:`TokenAuthorizer` from *settings*.

    A configured ``jwks_uri`` selects signature verification; otherwise tokens
    are decoded structurally only.
    """
    mapper = ClaimMapper(
        principal_claim=settings.principal_claim,
        fallback_principal_claim=settings.fallback_principal_claim,
        roles_claim=settings.roles_claim,
    )
    extractor: CredentialExtractor
    if settings.verifies_signatures:
        extractor = JwtCredentialExtractor(
            JWKSClient(settings.jwks_uri),
            audience=settings.audience,
            algorithms=settings.algorithms,
            mapper=mapper,
        )
    else:
        logger.warning("authorizer.signature_verification_disabled")
        extractor = StructuralCredentialExtractor(mapper)
    return TokenAuthorizer(
        extractor,
        clock=clock,
        placeholder_principal=settings.placeholder_principal,
    )


@functools.lru_cache(maxsize=1)
def default_authorizer() -> TokenAuthorizer:
    """The process-wide authorizer, configured from the environment on first use."""
    settings = EnvSettingsLoader().load(AuthorizerSettings)
    JsonLoggerFactory.configure(level=settings.log_level_number)
    return build_authorizer(settings)


async def handler(event: Mapping[str, Any]) -> dict[str, Any]:
    """Async entry point for a gateway ``TOKEN`` authorizer event."""
    return await default_authorizer().handle(event)


def lambda_handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:  # noqa: ARG001
    """Synchronous Lambda entry point."""
    return asyncio.run(handler(event))


__all__ = [
    "AUTHENTICATED_CONTEXT_KEY",
    "ROLES_CONTEXT_KEY",
    "ROLE_MARKER",
    "TokenAuthorizer",
    "build_authorizer",
    "build_context",
    "default_authorizer",
    "handler",
    "lambda_handler",
]
