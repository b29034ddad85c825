"""JSON encoding of error chains.

The wire form is a compact JSON object per node, keys in this order::

    value, details, timestamp, [code], msg, file, line, prev, [stack_trace]

``code`` is omitted when it is ``0``; ``stack_trace`` appears on the
outermost node only when requested. Output is byte-for-byte stable for
existing consumers, including the escaping of ``<``, ``>`` and ``&`` as
``\\u003c``-style sequences.
"""

from __future__ import annotations

import base64
import dataclasses
import json
from typing import TYPE_CHECKING, Any

from xerr.config.settings import get_settings
from xerr.kernel.errors.base import SerializationError
from xerr.kernel.time import format_rfc3339_nano
from xerr.observability.logging import get_logger

if TYPE_CHECKING:
    from xerr.kernel.errors.node import ErrorNode

log = get_logger(__name__)

_HTML_ESCAPES = (("<", "\\u003c"), (">", "\\u003e"), ("&", "\\u0026"))
_LINE_SEPARATOR_ESCAPES = (("\u2028", "\\u2028"), ("\u2029", "\\u2029"))


def _default(obj: Any) -> Any:
    """``json`` fallback: dataclasses become objects, bytes become base64."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _dumps(payload: Any) -> str:
    return json.dumps(
        payload,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
        default=_default,
    )


def portable_details(details: Any) -> Any:
    """Return *details* if it encodes on its own, else ``None``."""
    if details is None:
        return None
    try:
        # lone surrogates pass json.dumps but cannot be written as UTF-8
        _dumps(details).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        log.debug("xerr.details_dropped", details_type=type(details).__name__, reason=str(exc))
        return None
    return details


def _node_payload(node: ErrorNode) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "value": "" if node.value is None else str(node.value),
        "details": portable_details(node.details),
        "timestamp": format_rfc3339_nano(node.timestamp),
    }
    if node.code != 0:
        payload["code"] = node.code
    payload["msg"] = node.msg
    payload["file"] = node.file
    payload["line"] = node.line
    return payload


def _stack_trace(node: ErrorNode) -> str | None:
    return base64.b64encode(node.stack_trace).decode("ascii") if node.stack_trace else None


def to_dict(node: ErrorNode | None, include_stack_trace: bool = False) -> dict[str, Any] | None:
    """Ordered mapping the JSON form is produced from.

    ``None`` for a missing or empty node. Empty ancestors further down the
    chain are kept as zero-valued objects.
    """
    if node is None or node.is_empty():
        return None

    payload: dict[str, Any] | None = None
    for ancestor in reversed(list(node.iter_chain())):
        inner = payload
        payload = _node_payload(ancestor)
        payload["prev"] = inner
    assert payload is not None

    if include_stack_trace:
        payload["stack_trace"] = _stack_trace(node)
    return payload


def _chain_text(node: ErrorNode, include_stack_trace: bool) -> str:
    # Each node is dumped flat and the "prev" links are spliced in as text,
    # so chain depth never reaches the encoder's recursion limit.
    heads = [_dumps(_node_payload(ancestor))[:-1] for ancestor in node.iter_chain()]
    text = ',"prev":'.join(heads) + ',"prev":null' + "}" * (len(heads) - 1)
    if include_stack_trace:
        text += ',"stack_trace":' + _dumps(_stack_trace(node))
    return text + "}"


def encode(node: ErrorNode, include_stack_trace: bool = False) -> bytes:
    """Encode *node* and its chain; ``b""`` for the empty node.

    Raises:
        SerializationError: any field other than ``details`` cannot be encoded,
            including text that is not valid UTF-8.
    """
    if node.is_empty():
        return b""
    try:
        text = _chain_text(node, include_stack_trace)
        for char, escaped in _LINE_SEPARATOR_ESCAPES:
            text = text.replace(char, escaped)
        if get_settings().json_escape_html:
            for char, escaped in _HTML_ESCAPES:
                text = text.replace(char, escaped)
        return text.encode("utf-8")
    except Exception as exc:  # noqa: BLE001
        raise SerializationError(
            f"cannot encode error chain: {exc}",
            payload_type=type(node).__name__,
            cause=exc,
        ) from exc


__all__ = ["encode", "portable_details", "to_dict"]
