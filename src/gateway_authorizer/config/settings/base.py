"""Config settings – Settings base class and the authorizer's settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from gateway_authorizer.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class AuthorizerSettings(Settings):
    """Settings read once per cold start from ``AUTHORIZER_*`` variables.

    When ``jwks_uri`` is set, bearer tokens are verified as signed JWTs;
    otherwise they are only decoded structurally.
    """

    _prefix: ClassVar[str] = "AUTHORIZER"

    principal_claim: str = "sid"
    fallback_principal_claim: str = "sub"
    roles_claim: str = "realm_access.roles"
    placeholder_principal: str = "SID"
    log_level: str = "INFO"
    jwks_uri: str = ""
    audience: str = ""
    algorithms: list[str] = dataclasses.field(default_factory=lambda: ["RS256"])

    def _validate(self) -> None:
        if not self.principal_claim:
            raise InvalidSettingValueError("principal_claim", self.principal_claim, "must not be empty")
        if not self.roles_claim or any(not part for part in self.roles_claim.split(".")):
            raise InvalidSettingValueError("roles_claim", self.roles_claim, "must be a dotted claim path")
        if not self.placeholder_principal:
            raise InvalidSettingValueError(
                "placeholder_principal", self.placeholder_principal, "must not be empty"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if self.jwks_uri and not self.algorithms:
            raise InvalidSettingValueError("algorithms", self.algorithms, "required when jwks_uri is set")

    @property
    def verifies_signatures(self) -> bool:
        return bool(self.jwks_uri)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["AuthorizerSettings", "Settings"]
