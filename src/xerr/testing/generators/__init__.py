"""Testing generators – property-based strategies."""
from xerr.testing.generators.strategies import (
    details_strategy,
    error_chain_strategy,
    error_node_strategy,
    exception_strategy,
)

__all__ = [
    "details_strategy",
    "error_chain_strategy",
    "error_node_strategy",
    "exception_strategy",
]
