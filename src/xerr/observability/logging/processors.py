"""Observability – structlog processors and get_logger helper.

``ErrorChainProcessor`` turns :class:`~xerr.ErrorNode` values in an event
dict into their structured form so JSON log lines carry the whole chain.
``get_logger(name)`` returns a bound structlog logger.
"""
from __future__ import annotations

import sys
from typing import Any

import structlog


class ErrorChainProcessor:
    """structlog processor that expands error chains in log events.

    * every ``ErrorNode`` value in the event dict is replaced by its
      ``to_dict()`` mapping (``None`` for the empty node);
    * when ``exc_info`` carries a node and ``error_chain`` is not already
      set, the chain is added under ``error_chain``.

    Usage::

        import structlog
        from xerr.observability.logging import ErrorChainProcessor

        structlog.configure(processors=[ErrorChainProcessor(), ...])
        log.error("payment_failed", error=err)
    """

    def __init__(self, include_stack_trace: bool = False) -> None:
        self._include_stack_trace = include_stack_trace

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from xerr.kernel.errors.codec import to_dict
        from xerr.kernel.errors.node import ErrorNode

        for key, value in list(event_dict.items()):
            if isinstance(value, ErrorNode):
                event_dict[key] = to_dict(value, include_stack_trace=self._include_stack_trace)

        exc_info = event_dict.get("exc_info")
        if exc_info is True:
            exc_info = sys.exc_info()
        if isinstance(exc_info, tuple) and len(exc_info) == 3:
            exc_info = exc_info[1]
        if isinstance(exc_info, ErrorNode) and "error_chain" not in event_dict:
            event_dict["error_chain"] = to_dict(exc_info, include_stack_trace=self._include_stack_trace)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ErrorChainProcessor", "get_logger"]
