"""Credentials – bearer-token extractors."""
from gateway_authorizer.credentials.jwks import JWKSClient
from gateway_authorizer.credentials.jwt import JwtCredentialExtractor
from gateway_authorizer.credentials.port import BEARER_PREFIX, ClaimMapper, CredentialExtractor, strip_bearer
from gateway_authorizer.credentials.structural import StructuralCredentialExtractor

__all__ = [
    "BEARER_PREFIX",
    "ClaimMapper",
    "CredentialExtractor",
    "JWKSClient",
    "JwtCredentialExtractor",
    "StructuralCredentialExtractor",
    "strip_bearer",
]
