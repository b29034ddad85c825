"""Observability – structured logging helpers."""
from xerr.observability.logging.factory import JsonLoggerFactory
from xerr.observability.logging.processors import ErrorChainProcessor, get_logger

__all__ = [
    "ErrorChainProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
