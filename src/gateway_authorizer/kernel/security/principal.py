"""Kernel security – Principal, Role."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Role:
    """Named realm role (e.g. ADMIN, VIEWER)."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Principal:
    """Caller identity extracted from a bearer credential.

    ``roles`` keeps the order the credential listed them in; the context
    decoration of the decision document depends on it.
    """
    subject: str
    roles: tuple[Role, ...] = ()
    claims: dict[str, Any] = dataclasses.field(default_factory=dict, compare=False)

    @classmethod
    def from_names(cls, subject: str, roles: list[str] | tuple[str, ...], **kwargs: Any) -> Principal:
        return cls(subject=subject, roles=tuple(Role(r) for r in roles), **kwargs)

    @property
    def role_names(self) -> list[str]:
        return [r.name for r in self.roles]

    def has_role(self, role: str | Role) -> bool:
        name = role.name if isinstance(role, Role) else role
        return any(r.name == name for r in self.roles)


__all__ = ["Principal", "Role"]
