"""Policy – HttpVerb and Effect enumerations."""
from __future__ import annotations

from enum import Enum

from gateway_authorizer.kernel.errors import InvalidEffectError, UnknownHttpVerbError


class HttpVerb(str, Enum):
    """HTTP verbs usable in an execute-api method ARN. ``ALL`` renders as ``*``."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    HEAD = "HEAD"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    ALL = "*"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> HttpVerb:
        """Look *name* up by member name or rendered value.

        Raises :class:`UnknownHttpVerbError` when nothing matches.
        """
        member = cls.__members__.get(name)
        if member is not None:
            return member
        for verb in cls:
            if verb.value == name:
                return verb
        raise UnknownHttpVerbError(name)


class Effect(str, Enum):
    ALLOW = "Allow"
    DENY = "Deny"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | Effect) -> Effect:
        """Accept an :class:`Effect` or any casing of ``allow`` / ``deny``."""
        if isinstance(value, Effect):
            return value
        lowered = str(value).lower()
        if lowered == "allow":
            return cls.ALLOW
        if lowered == "deny":
            return cls.DENY
        raise InvalidEffectError(str(value))


__all__ = ["Effect", "HttpVerb"]
