"""Observability – structlog configuration and logger helper."""
from mp_option.observability.logging.factory import JsonLoggerFactory
from mp_option.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
