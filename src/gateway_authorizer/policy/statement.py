"""Policy – method declarations, statement groups and the grouping algorithm."""
from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping, Sequence
from typing import Any, Union

from gateway_authorizer.policy.verbs import Effect, HttpVerb

ACTION = "execute-api:Invoke"

#: ``{operator: {context-key: value-or-values}}``, passed through verbatim.
Conditions = Mapping[str, Mapping[str, Union[str, Sequence[str]]]]


def freeze_conditions(conditions: Conditions | None) -> Conditions | None:
    """Read-only deep copy of *conditions*: mappings become proxies, lists tuples."""
    if conditions is None:
        return None
    return _freeze(conditions)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return types.MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


@dataclasses.dataclass(frozen=True)
class MethodDeclaration:
    """One registered allow/deny of a verb on a resource path."""

    effect: Effect
    verb: HttpVerb
    resource_path: str
    resource_arn: str
    conditions: Conditions | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", freeze_conditions(self.conditions))

    @property
    def is_conditional(self) -> bool:
        return bool(self.conditions)


@dataclasses.dataclass(frozen=True)
class StatementGroup:
    """A single policy statement: one effect, its resources and an optional condition."""

    effect: Effect
    resources: tuple[str, ...] = ()
    condition: Conditions | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "resources", tuple(self.resources))
        object.__setattr__(self, "condition", freeze_conditions(self.condition))

    def to_dict(self) -> dict[str, Any]:
        statement: dict[str, Any] = {
            "Action": ACTION,
            "Effect": self.effect.value,
            "Resource": list(self.resources),
        }
        if self.condition:
            statement["Condition"] = _plain(self.condition)
        return statement


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def group_statements(effect: Effect, methods: Sequence[MethodDeclaration]) -> list[StatementGroup]:
    """Group *methods* into the statements for *effect*.

    Every method ARN lands in one base statement. A method carrying conditions
    additionally gets a statement of its own holding just its ARN and its
    condition, so a conditional ARN appears twice. The base statement comes
    first, then the conditional ones in declaration order.
    """
    if not methods:
        return []

    base: list[str] = []
    conditional: list[StatementGroup] = []
    for method in methods:
        base.append(method.resource_arn)
        if method.is_conditional:
            conditional.append(
                StatementGroup(effect=effect, resources=(method.resource_arn,), condition=method.conditions)
            )

    groups: list[StatementGroup] = []
    if base:
        groups.append(StatementGroup(effect=effect, resources=tuple(base)))
    groups.extend(conditional)
    return groups


__all__ = [
    "ACTION",
    "Conditions",
    "MethodDeclaration",
    "StatementGroup",
    "freeze_conditions",
    "group_statements",
]
