"""
xerr – structured, chainable error values.

Import path convention::

    import xerr

    err = xerr.new(KeyError("sku-42"), "loading cart", details={"cart": 7}, code=404)
    outer = err.wrap(RuntimeError("checkout failed"), "placing order")

    from xerr.config import configure, XerrSettings
    from xerr.observability.logging import ErrorChainProcessor
"""

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

__version__ = "0.1.0"
__all__ = [
    "BaseError",
    "ErrorNode",
    "SerializationError",
    "__version__",
    "clone",
    "empty",
    "from_error",
    "new",
    "new_without_context",
    "render",
    "to_error",
]
