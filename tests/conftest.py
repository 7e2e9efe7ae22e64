"""Shared fixtures for the authorizer test-suite."""
from __future__ import annotations

import json
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from gateway_authorizer.kernel.time import FrozenClock
from gateway_authorizer.policy import ApiCoordinates


@pytest.fixture
def coords() -> ApiCoordinates:
    return ApiCoordinates(
        account_id="123456789012",
        region="us-east-1",
        rest_api_id="abc123",
        stage="dev",
    )


@pytest.fixture
def method_arn() -> str:
    return (
        "arn:aws:execute-api:eu-central-1:606743733838:9e201bs3b6/$default/GET/"
        "GetStartedLambdaProxyIntegration"
    )


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """A clock pinned to 2026-01-01 12:00 UTC."""
    return FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Factory for the JSON body of a Keycloak-style access token."""

    def _make(**overrides: Any) -> str:
        payload: dict[str, Any] = {
            "sid": "test_user_id",
            "realm_access": {"roles": ["TEST_ROLE_1", "TEST_ROLE_2"]},
        }
        payload.update(overrides)
        return json.dumps(payload)

    return _make


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo any root-logger / structlog configuration a test performs."""
    import logging

    import structlog

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
