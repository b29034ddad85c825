"""Observability – logging integration for error chains."""
from xerr.observability.logging import ErrorChainProcessor, JsonLoggerFactory, get_logger

__all__ = ["ErrorChainProcessor", "JsonLoggerFactory", "get_logger"]
