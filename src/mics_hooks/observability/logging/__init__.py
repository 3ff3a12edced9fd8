"""Observability – structured logging helpers."""
from mics_hooks.observability.logging.factory import configure_logging, get_logger
from mics_hooks.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
