"""Policy – DecisionDocument and AuthorizerResponse snapshots."""
from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from typing import Any

from gateway_authorizer.policy.statement import StatementGroup
from gateway_authorizer.policy.verbs import Effect

POLICY_VERSION = "2012-10-17"


@dataclasses.dataclass(frozen=True)
class DecisionDocument:
    """The built policy for one principal. Never mutated after construction."""

    principal_id: str
    statements: tuple[StatementGroup, ...]
    version: str = POLICY_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))

    def statements_for(self, effect: Effect) -> tuple[StatementGroup, ...]:
        return tuple(s for s in self.statements if s.effect is effect)

    def to_dict(self) -> dict[str, Any]:
        return {
            "principalId": self.principal_id,
            "policyDocument": {
                "Version": self.version,
                "Statement": [s.to_dict() for s in self.statements],
            },
        }


@dataclasses.dataclass(frozen=True)
class AuthorizerResponse:
    """A decision document decorated with the context handed to the integration."""

    document: DecisionDocument
    context: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", types.MappingProxyType(dict(self.context)))

    @property
    def principal_id(self) -> str:
        return self.document.principal_id

    def to_dict(self) -> dict[str, Any]:
        payload = self.document.to_dict()
        payload["context"] = dict(self.context)
        return payload


__all__ = ["AuthorizerResponse", "DecisionDocument", "POLICY_VERSION"]
