"""Utility modules for the B2BI transformer resource provider."""

from .error_mapping import SERVICE_ERROR_MAP, get_service_error_code, to_handler_exception
from .logging_config import configure_logging

__all__ = [
    "SERVICE_ERROR_MAP",
    "get_service_error_code",
    "to_handler_exception",
    "configure_logging",
]
