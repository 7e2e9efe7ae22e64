"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from gateway_authorizer.kernel.errors import (
    ApplicationError,
    BaseError,
    CredentialParseError,
    DomainError,
    EmptyPolicyError,
    InvalidEffectError,
    InvalidMethodArnError,
    InvalidResourcePathError,
    InvariantViolationError,
    UnauthorizedError,
    UnknownHttpVerbError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_to_json_is_valid_json(self) -> None:
        parsed = json.loads(BaseError("oops", code="oops", detail={"x": 1}).to_json())
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"

    def test_reason_is_mirrored_into_detail(self) -> None:
        err = BaseError("m", reason="why", detail={"k": 1})
        assert err.reason == "why"
        assert err.detail == {"k": 1, "reason": "why"}
        assert "reason='why'" in repr(err)

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        BaseError("m", reason="why", detail=detail)
        assert detail == {"k": 1}

    def test_log_fields(self) -> None:
        err = BaseError("m", code="c", reason="r", cause=ValueError("secret-token"))
        assert err.log_fields() == {"code": "c", "reason": "r", "cause": "ValueError"}
        assert BaseError("m").log_fields() == {"code": "base_error"}


class TestDomainErrors:
    def test_invalid_resource_path_carries_path_and_pattern(self) -> None:
        err = InvalidResourcePathError("/a b", "^[a-z]+$")
        assert err.path == "/a b"
        assert err.pattern == "^[a-z]+$"
        assert "/a b" in err.message
        assert "^[a-z]+$" in err.message
        assert err.code == "invalid_resource_path"
        assert err.detail == {"path": "/a b", "pattern": "^[a-z]+$"}

    def test_empty_policy_default_message(self) -> None:
        err = EmptyPolicyError()
        assert err.code == "empty_policy"
        assert "No statements" in err.message

    @pytest.mark.parametrize(
        "err",
        [
            InvalidResourcePathError("x y", "p"),
            UnknownHttpVerbError("FETCH"),
            InvalidEffectError("maybe"),
            InvalidMethodArnError("arn", "bad"),
        ],
    )
    def test_validation_errors_are_domain_errors(self, err: BaseError) -> None:
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)

    def test_empty_policy_is_invariant_violation(self) -> None:
        assert isinstance(EmptyPolicyError(), InvariantViolationError)


class TestApplicationErrors:
    def test_credential_parse_error_is_unauthorized(self) -> None:
        err = CredentialParseError("bad token", reason="malformed")
        assert isinstance(err, UnauthorizedError)
        assert isinstance(err, ApplicationError)
        assert err.code == "credential_parse_error"

    def test_credential_parse_error_reason_in_detail(self) -> None:
        err = CredentialParseError("bad token", reason="missing_roles")
        assert err.reason == "missing_roles"
        assert err.detail["reason"] == "missing_roles"

    def test_method_arn_error_shares_reason_convention(self) -> None:
        err = InvalidMethodArnError("arn:x", "too few segments")
        assert err.reason == "too few segments"
        assert err.detail == {"arn": "arn:x", "reason": "too few segments"}

    def test_not_a_domain_error(self) -> None:
        assert not isinstance(CredentialParseError("x"), DomainError)
