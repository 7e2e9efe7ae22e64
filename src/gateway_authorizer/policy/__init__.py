"""Policy – building API gateway decision documents."""
from gateway_authorizer.policy.arn import (
    ApiCoordinates,
    MethodArn,
    RESOURCE_PATH_PATTERN,
    build_resource_arn,
    validate_resource_path,
)
from gateway_authorizer.policy.builder import AuthPolicy
from gateway_authorizer.policy.document import POLICY_VERSION, AuthorizerResponse, DecisionDocument
from gateway_authorizer.policy.statement import (
    ACTION,
    Conditions,
    MethodDeclaration,
    StatementGroup,
    freeze_conditions,
    group_statements,
)
from gateway_authorizer.policy.verbs import Effect, HttpVerb

__all__ = [
    "ACTION",
    "ApiCoordinates",
    "AuthPolicy",
    "AuthorizerResponse",
    "Conditions",
    "DecisionDocument",
    "Effect",
    "HttpVerb",
    "MethodArn",
    "MethodDeclaration",
    "POLICY_VERSION",
    "RESOURCE_PATH_PATTERN",
    "StatementGroup",
    "build_resource_arn",
    "freeze_conditions",
    "group_statements",
    "validate_resource_path",
]
