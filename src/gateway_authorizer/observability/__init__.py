"""Observability – structured logging for the authorizer."""
