"""Observability – structured logging helpers."""
from profile_es.observability.logging.factory import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from profile_es.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "SensitiveFieldsFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
