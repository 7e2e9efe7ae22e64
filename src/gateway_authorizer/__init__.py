"""
gateway_authorizer – API gateway token authorizer.

Import path convention::

    from gateway_authorizer.policy import AuthPolicy, HttpVerb
    from gateway_authorizer.authorizer import TokenAuthorizer, handler
    from gateway_authorizer.kernel.errors import InvalidResourcePathError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
