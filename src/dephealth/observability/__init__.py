"""Observability – logging."""

from dephealth.observability.logging import CredentialsFilter, JsonLoggerFactory, get_logger

__all__ = ["CredentialsFilter", "JsonLoggerFactory", "get_logger"]
