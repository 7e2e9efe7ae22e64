"""Unit tests for kernel security primitives and clocks."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from gateway_authorizer.kernel.security import Principal, Role
from gateway_authorizer.kernel.time import FrozenClock, SystemClock


class TestPrincipal:
    def test_from_names_keeps_role_order(self) -> None:
        principal = Principal.from_names("u1", ["R2", "R1"])
        assert principal.role_names == ["R2", "R1"]
        assert principal.roles == (Role("R2"), Role("R1"))

    def test_has_role_accepts_str_and_role(self) -> None:
        principal = Principal.from_names("u1", ["admin"])
        assert principal.has_role("admin")
        assert principal.has_role(Role("admin"))
        assert not principal.has_role("viewer")

    def test_claims_ignored_in_equality(self) -> None:
        a = Principal.from_names("u1", ["r"], claims={"x": 1})
        b = Principal.from_names("u1", ["r"], claims={"x": 2})
        assert a == b

    def test_is_frozen(self) -> None:
        principal = Principal("u1")
        with pytest.raises((AttributeError, TypeError)):
            principal.subject = "u2"  # type: ignore[misc]

    def test_role_str(self) -> None:
        assert str(Role("admin")) == "admin"


class TestClocks:
    def test_frozen_clock_epoch_millis(self) -> None:
        fixed = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.epoch_millis() == int(fixed.timestamp()) * 1000

    def test_frozen_clock_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        before = clock.epoch_millis()
        clock.advance(seconds=1.5)
        assert clock.epoch_millis() - before == 1500

    def test_system_clock_is_utc_millis(self) -> None:
        clock = SystemClock()
        assert clock.now().tzinfo is not None
        millis = clock.epoch_millis()
        assert isinstance(millis, int)
        assert abs(millis - int(datetime.now(UTC).timestamp() * 1000)) < 60_000
