"""Kernel security – Principal and Role."""
from gateway_authorizer.kernel.security.principal import Principal, Role

__all__ = ["Principal", "Role"]
