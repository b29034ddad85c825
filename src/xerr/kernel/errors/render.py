"""Canonical single-line rendering of an error chain.

The format is consumed by log scrapers, so field names, order and the
omission of unset fields are fixed::

    value=boom, code=100, msg=charge failed, source=billing.py:26,
    timestamp=2023-08-05T11:22:47.89Z, prev={value=timeout, ...}

(one line in practice; wrapped here for width).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xerr.kernel.time import format_rfc3339_nano

if TYPE_CHECKING:
    from xerr.kernel.errors.node import ErrorNode


def render_fields(node: ErrorNode) -> str:
    """Render *node* alone, without its ``prev`` link."""
    if node.value is None:
        return ""

    parts = [f"value={node.value}"]
    if node.code != 0:
        parts.append(f"code={node.code}")
    if node.msg:
        parts.append(f"msg={node.msg}")
    if node.details is not None:
        parts.append(f"details={node.details}")
    if node.file:
        parts.append(f"source={node.file}:{node.line}")
    if node.timestamp != 0:
        parts.append(f"timestamp={format_rfc3339_nano(node.timestamp)}")
    return ", ".join(parts)


def render(node: ErrorNode | None) -> str:
    """Render the whole chain starting at *node*.

    An empty node renders as ``""`` and ends the chain there, even when it
    still carries a ``prev`` link.
    """
    segments: list[str] = []
    while node is not None:
        segments.append(render_fields(node))
        if node.value is None:
            break
        node = node.prev
    if not segments:
        return ""

    # fold from the root outwards so deep chains need no recursion
    text = segments[-1]
    for segment in reversed(segments[:-1]):
        text = f"{segment}, prev={{{text}}}"
    return text


__all__ = ["render", "render_fields"]
