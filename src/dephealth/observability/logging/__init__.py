"""Observability – structured logging helpers."""
from dephealth.observability.logging.factory import JsonLoggerFactory
from dephealth.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, CredentialsFilter
from dephealth.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "CredentialsFilter",
    "JsonLoggerFactory",
    "get_logger",
]
