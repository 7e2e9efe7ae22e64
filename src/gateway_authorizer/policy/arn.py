"""Policy – execute-api ARN construction and method-ARN parsing.

Resource ARNs have the shape::

    arn:<partition>:execute-api:<region>:<account>:<api-id>/<stage>/<verb>/<path>

The prefix and separators must be reproduced exactly or the gateway will not
match the statement against the invoked method.
"""
from __future__ import annotations

import dataclasses
import re

from gateway_authorizer.kernel.errors import InvalidMethodArnError, InvalidResourcePathError
from gateway_authorizer.policy.verbs import HttpVerb

RESOURCE_PATH_PATTERN = r"^[a-zA-Z0-9_./*-]+$"
_PATH_RE = re.compile(RESOURCE_PATH_PATTERN)

DEFAULT_PARTITION = "aws"
SERVICE = "execute-api"


@dataclasses.dataclass(frozen=True)
class ApiCoordinates:
    """Where a REST API is deployed: the non-path half of every resource ARN."""

    account_id: str
    region: str
    rest_api_id: str
    stage: str
    partition: str = DEFAULT_PARTITION


def validate_resource_path(resource: str) -> str:
    """Return *resource* unchanged, or raise :class:`InvalidResourcePathError`."""
    if not _PATH_RE.fullmatch(resource):
        raise InvalidResourcePathError(resource, RESOURCE_PATH_PATTERN)
    return resource


def build_resource_arn(coords: ApiCoordinates, verb: HttpVerb, resource: str) -> str:
    """Build the resource ARN for ``verb`` on ``resource``.

    A single leading ``/`` is stripped from the path; nothing else is
    normalised.
    """
    validate_resource_path(resource)
    cleaned = resource[1:] if resource.startswith("/") else resource
    return (
        f"arn:{coords.partition}:{SERVICE}:{coords.region}:{coords.account_id}:"
        f"{coords.rest_api_id}/{coords.stage}/{verb.value}/{cleaned}"
    )


@dataclasses.dataclass(frozen=True)
class MethodArn:
    """The invoked method, as decoded from an authorizer event's ``methodArn``."""

    coordinates: ApiCoordinates
    verb: HttpVerb
    resource: str

    @classmethod
    def parse(cls, arn: str) -> MethodArn:
        """Split ``methodArn`` into coordinates, verb and resource path.

        The resource is ``/`` followed by every segment after the verb; with no
        such segments it is the root resource ``/``.
        """
        parts = arn.split(":", 5)
        if len(parts) != 6 or parts[0] != "arn" or parts[2] != SERVICE:
            raise InvalidMethodArnError(arn, f"expected 'arn:<partition>:{SERVICE}:...'")
        _, partition, _, region, account_id, api_part = parts
        segments = api_part.split("/")
        if len(segments) < 3:
            raise InvalidMethodArnError(arn, "expected '<api-id>/<stage>/<verb>[/<path>]'")
        rest_api_id, stage, verb_name = segments[0], segments[1], segments[2]
        resource = "/" + "/".join(segments[3:])
        return cls(
            coordinates=ApiCoordinates(
                account_id=account_id,
                region=region,
                rest_api_id=rest_api_id,
                stage=stage,
                partition=partition,
            ),
            verb=HttpVerb.parse(verb_name),
            resource=resource,
        )


__all__ = [
    "ApiCoordinates",
    "DEFAULT_PARTITION",
    "MethodArn",
    "RESOURCE_PATH_PATTERN",
    "build_resource_arn",
    "validate_resource_path",
]
