"""Policy – AuthPolicy builder.

``AuthPolicy`` collects allowed and denied methods for one principal and
turns them into a :class:`DecisionDocument` for the gateway::

    policy = AuthPolicy("user-1", ApiCoordinates("123456789012", "eu-central-1", "abc123", "prod"))
    policy.allow_method(HttpVerb.GET, "/users/username")
    policy.deny_method(HttpVerb.POST, "/pets")
    document = policy.build()

The gateway evaluates the statements as a union in which any matching Deny
wins, so statement order carries no meaning.
"""
from __future__ import annotations

from gateway_authorizer.kernel.errors import EmptyPolicyError
from gateway_authorizer.policy.arn import ApiCoordinates, build_resource_arn
from gateway_authorizer.policy.document import DecisionDocument
from gateway_authorizer.policy.statement import Conditions, MethodDeclaration, group_statements
from gateway_authorizer.policy.verbs import Effect, HttpVerb


class AuthPolicy:
    """Accumulates method declarations and builds the decision document.

    One instance serves one request; the allow and deny lists are owned by the
    builder and only ever handed out as tuples.
    """

    def __init__(self, principal_id: str, coordinates: ApiCoordinates) -> None:
        self._principal_id = principal_id
        self._coordinates = coordinates
        self._allow: list[MethodDeclaration] = []
        self._deny: list[MethodDeclaration] = []

    @property
    def principal_id(self) -> str:
        return self._principal_id

    @property
    def coordinates(self) -> ApiCoordinates:
        return self._coordinates

    @property
    def allowed(self) -> tuple[MethodDeclaration, ...]:
        return tuple(self._allow)

    @property
    def denied(self) -> tuple[MethodDeclaration, ...]:
        return tuple(self._deny)

    def add_method(
        self,
        effect: Effect | str,
        verb: HttpVerb,
        resource: str,
        conditions: Conditions | None = None,
    ) -> MethodDeclaration:
        """Register *verb* on *resource* under *effect*.

        Raises :class:`InvalidResourcePathError` for paths outside the
        allowed character set and :class:`InvalidEffectError` for effects
        other than allow/deny.
        """
        resolved = Effect.parse(effect)
        declaration = MethodDeclaration(
            effect=resolved,
            verb=verb,
            resource_path=resource,
            resource_arn=build_resource_arn(self._coordinates, verb, resource),
            conditions=conditions,
        )
        target = self._allow if resolved is Effect.ALLOW else self._deny
        target.append(declaration)
        return declaration

    def allow_method(self, verb: HttpVerb, resource: str) -> MethodDeclaration:
        return self.add_method(Effect.ALLOW, verb, resource)

    def deny_method(self, verb: HttpVerb, resource: str) -> MethodDeclaration:
        return self.add_method(Effect.DENY, verb, resource)

    def allow_method_with_conditions(
        self, verb: HttpVerb, resource: str, conditions: Conditions
    ) -> MethodDeclaration:
        """Allow *verb* on *resource* only when *conditions* hold.

        *conditions* uses the IAM condition block format, e.g.
        ``{"IpAddress": {"aws:SourceIp": ["203.0.113.0/24"]}}``.
        """
        return self.add_method(Effect.ALLOW, verb, resource, conditions)

    def deny_method_with_conditions(
        self, verb: HttpVerb, resource: str, conditions: Conditions
    ) -> MethodDeclaration:
        return self.add_method(Effect.DENY, verb, resource, conditions)

    def allow_all_methods(self) -> MethodDeclaration:
        return self.add_method(Effect.ALLOW, HttpVerb.ALL, "*")

    def deny_all_methods(self) -> MethodDeclaration:
        return self.add_method(Effect.DENY, HttpVerb.ALL, "*")

    def build(self) -> DecisionDocument:
        """Build the document: allow statements first, then deny statements.

        Raises :class:`EmptyPolicyError` when nothing was allowed or denied.
        """
        if not self._allow and not self._deny:
            raise EmptyPolicyError()
        statements = group_statements(Effect.ALLOW, self._allow) + group_statements(Effect.DENY, self._deny)
        return DecisionDocument(principal_id=self._principal_id, statements=tuple(statements))

    def __repr__(self) -> str:
        return (
            f"AuthPolicy(principal_id={self._principal_id!r}, "
            f"allow={len(self._allow)}, deny={len(self._deny)})"
        )


__all__ = ["AuthPolicy"]
