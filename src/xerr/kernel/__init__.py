"""Kernel – the error chain value type and its time primitives."""

from xerr.kernel.errors import (
    BaseError,
    ErrorNode,
    SerializationError,
    clone,
    empty,
    from_error,
    new,
    new_without_context,
    render,
    to_error,
)

__all__ = [
    "BaseError",
    "ErrorNode",
    "SerializationError",
    "clone",
    "empty",
    "from_error",
    "new",
    "new_without_context",
    "render",
    "to_error",
]
