"""Unit tests for claim mapping and the structural extractor."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable

import pytest

from gateway_authorizer.credentials import ClaimMapper, StructuralCredentialExtractor, strip_bearer
from gateway_authorizer.kernel.errors import CredentialParseError


class TestStripBearer:
    def test_strips_prefix(self) -> None:
        assert strip_bearer("Bearer abc") == "abc"

    def test_leaves_raw_token_alone(self) -> None:
        assert strip_bearer("abc") == "abc"

    def test_strips_only_once(self) -> None:
        assert strip_bearer("Bearer Bearer abc") == "Bearer abc"


class TestClaimMapper:
    def test_maps_keycloak_claims(self) -> None:
        principal = ClaimMapper().to_principal(
            {"sid": "u1", "realm_access": {"roles": ["R1", "R2"]}}
        )
        assert principal.subject == "u1"
        assert principal.role_names == ["R1", "R2"]
        assert principal.claims["sid"] == "u1"

    def test_falls_back_to_sub(self) -> None:
        principal = ClaimMapper().to_principal({"sub": "u2", "realm_access": {"roles": []}})
        assert principal.subject == "u2"
        assert principal.roles == ()

    def test_prefers_principal_claim_over_fallback(self) -> None:
        principal = ClaimMapper().to_principal(
            {"sid": "session", "sub": "subject", "realm_access": {"roles": []}}
        )
        assert principal.subject == "session"

    def test_missing_subject_raises(self) -> None:
        with pytest.raises(CredentialParseError) as exc_info:
            ClaimMapper().to_principal({"realm_access": {"roles": []}})
        assert exc_info.value.reason == "missing_subject"

    def test_fallback_can_be_disabled(self) -> None:
        mapper = ClaimMapper(fallback_principal_claim="")
        with pytest.raises(CredentialParseError):
            mapper.to_principal({"sub": "u1", "realm_access": {"roles": []}})

    @pytest.mark.parametrize(
        "claims",
        [
            {"sid": "u1"},
            {"sid": "u1", "realm_access": {}},
            {"sid": "u1", "realm_access": "admin"},
        ],
    )
    def test_missing_roles_raises(self, claims: dict) -> None:
        with pytest.raises(CredentialParseError) as exc_info:
            ClaimMapper().to_principal(claims)
        assert exc_info.value.reason == "missing_roles"

    @pytest.mark.parametrize("roles", ["admin", [1, 2], None, {"a": 1}])
    def test_roles_must_be_list_of_strings(self, roles: object) -> None:
        with pytest.raises(CredentialParseError) as exc_info:
            ClaimMapper().to_principal({"sid": "u1", "realm_access": {"roles": roles}})
        assert exc_info.value.reason == "invalid_roles"

    def test_custom_roles_claim(self) -> None:
        mapper = ClaimMapper(roles_claim="groups")
        assert mapper.to_principal({"sid": "u1", "groups": ["g"]}).role_names == ["g"]

    @pytest.mark.parametrize("claims", [[], "text", 42, None])
    def test_payload_must_be_object(self, claims: object) -> None:
        with pytest.raises(CredentialParseError) as exc_info:
            ClaimMapper().to_principal(claims)
        assert exc_info.value.reason == "not_an_object"


class TestStructuralCredentialExtractor:
    def test_extracts_principal(self, make_token: Callable[..., str]) -> None:
        principal = asyncio.run(StructuralCredentialExtractor().extract(make_token()))
        assert principal.subject == "test_user_id"
        assert principal.role_names == ["TEST_ROLE_1", "TEST_ROLE_2"]

    def test_not_json_raises(self) -> None:
        with pytest.raises(CredentialParseError) as exc_info:
            asyncio.run(StructuralCredentialExtractor().extract("not-json"))
        assert exc_info.value.reason == "malformed"
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_oversized_integer_literal_raises_parse_error(self) -> None:
        with pytest.raises(CredentialParseError) as exc_info:
            asyncio.run(StructuralCredentialExtractor().extract("1" * 5000))
        assert exc_info.value.reason == "malformed"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_deeply_nested_json_raises_parse_error(self) -> None:
        with pytest.raises(CredentialParseError) as exc_info:
            asyncio.run(StructuralCredentialExtractor().extract("[" * 200_000))
        assert exc_info.value.reason == "malformed"
        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_missing_roles_raises(self) -> None:
        with pytest.raises(CredentialParseError):
            asyncio.run(StructuralCredentialExtractor().extract(json.dumps({"sid": "u1"})))

    def test_uses_injected_mapper(self) -> None:
        extractor = StructuralCredentialExtractor(ClaimMapper(principal_claim="email"))
        token = json.dumps({"email": "a@example.com", "realm_access": {"roles": []}})
        assert asyncio.run(extractor.extract(token)).subject == "a@example.com"
