"""Kernel errors – the error chain and the library's own exceptions.

::

    ErrorNode                 (node.py)   structured, chainable error value
    BaseError                 (base.py)   raised/wrapped by xerr itself
    └── SerializationError                JSON encoding failure
"""

from xerr.kernel.errors.base import BaseError, SerializationError
from xerr.kernel.errors.node import (
    JSON_FAILURE_MESSAGE,
    ErrorNode,
    clone,
    empty,
    from_error,
    new,
    new_without_context,
    to_error,
)
from xerr.kernel.errors.render import render

__all__ = [
    "BaseError",
    "ErrorNode",
    "JSON_FAILURE_MESSAGE",
    "SerializationError",
    "clone",
    "empty",
    "from_error",
    "new",
    "new_without_context",
    "render",
    "to_error",
]
