"""ErrorNode – one layer of context in a causal error chain.

A node wraps an underlying error ``value`` with a message, a code,
structured details, the call site that created it and a timestamp, and
links to the node it was built on top of through ``prev``::

    timeout = xerr.new(TimeoutError("read timed out"), "fetching invoice")
    charge = timeout.wrap(PaymentError("charge failed"), "billing run", code=502)

    charge.matches(timeout.value)   # True, found one level down
    str(charge)                     # "value=charge failed, code=502, msg=billing run, ..."
    data, failure = charge.to_json()

Ownership: a node owns its ``prev`` chain exclusively. Every node taken in
as ``prev`` and every node handed back by :meth:`ErrorNode.unwrap` is a
deep copy, so changing one chain never changes another.

"No error" is the empty node (``value is None``) rather than ``None``;
it is falsy, renders as ``""`` and encodes as ``b""``.
"""

from __future__ import annotations

import copy
import sys
import traceback
from types import FrameType
from itertools import zip_longest
from typing import Any, Iterator

from xerr.config.settings import get_settings
from xerr.kernel.errors import codec
from xerr.kernel.errors.base import SerializationError
from xerr.kernel.errors.render import render
from xerr.kernel.time import Clock, SystemClock
from xerr.observability.logging import get_logger

log = get_logger(__name__)

_system_clock = SystemClock()

JSON_FAILURE_MESSAGE = "Error when converting Err into JSON"


class ErrorNode(Exception):
    """Structured, chainable error value.

    The keyword constructor sets fields as given, like a struct literal, and
    captures nothing; use :func:`new` to record the call site, time and
    stack. ``prev`` is deep-copied on intake.

    Args:
        value: Underlying error; ``None`` makes the node empty.
        code: Classification code, ``0`` meaning unset.
        msg: Human-readable context for this wrapping point.
        details: Machine-readable payload, ``None`` meaning unset.
        file: Source file of the capture point.
        line: Source line of the capture point.
        timestamp: Capture time in microseconds since the epoch.
        prev: Causal predecessor.
        stack_trace: Captured call stack.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: Any = None,
        *,
        code: int = 0,
        msg: str = "",
        details: Any = None,
        file: str = "",
        line: int = 0,
        timestamp: int = 0,
        prev: ErrorNode | None = None,
        stack_trace: bytes = b"",
    ) -> None:
        super().__init__()
        self.value = value
        self.code = code
        self.msg = msg
        self.details = details
        self.file = file
        self.line = line
        self.timestamp = timestamp
        self.prev = prev.clone() if prev is not None else None
        self.stack_trace = stack_trace

    @property
    def prev(self) -> ErrorNode | None:
        return self._prev

    @prev.setter
    def prev(self, node: ErrorNode | None) -> None:
        self._prev = node
        # mirror the chain on __cause__ so traceback and logging show it
        cause = node if node is not None and node.is_error() else None
        if cause is not None or self.__cause__ is not None:
            self.__cause__ = cause

    # -- predicates ---------------------------------------------------------

    def is_empty(self) -> bool:
        return self.value is None

    def is_error(self) -> bool:
        return self.value is not None

    def __bool__(self) -> bool:
        return self.is_error()

    # -- chain --------------------------------------------------------------

    def iter_chain(self) -> Iterator[ErrorNode]:
        """Yield this node, then each ancestor down to the root."""
        node: ErrorNode | None = self
        while node is not None:
            yield node
            node = node.prev

    def root_cause(self) -> ErrorNode:
        """The last node of the chain."""
        node = self
        while node.prev is not None:
            node = node.prev
        return node

    def clone(self) -> ErrorNode:
        """Deep copy of this node and its whole ``prev`` chain.

        ``value`` and ``details`` are shared with the original; the node
        objects themselves are all new.
        """
        copied: ErrorNode | None = None
        for node in reversed(list(self.iter_chain())):
            dup = copy.copy(node)
            dup.prev = copied
            copied = dup
        assert copied is not None
        return copied

    def wrap(
        self,
        value: Any,
        msg: str = "",
        details: Any = None,
        code: int = 0,
        *,
        stacklevel: int = 1,
        clock: Clock | None = None,
    ) -> ErrorNode:
        """Build a new node on top of a copy of this one.

        Same as ``new(value, msg, details, code, prev=self)``, with the
        caller of ``wrap`` recorded as the source.
        """
        return new(value, msg, details, code, self, stacklevel=stacklevel + 1, clock=clock)

    def unwrap(self) -> ErrorNode | None:
        """A copy of the previous node, or ``None`` at the root."""
        return self.prev.clone() if self.prev is not None else None

    def matches(self, target: Any) -> bool:
        """True if *target* is the value of this node or of any ancestor.

        Each value is compared with ``is`` and ``==``, then the same test is
        applied to its ``__cause__`` chain. A value that is itself an
        ``ErrorNode`` is searched through its own chain.

        Example::

            >>> boom = ValueError("boom")
            >>> new(RuntimeError("outer"), prev=new(boom)).matches(boom)
            True
        """
        return any(
            node.value is not None and _value_matches(node.value, target)
            for node in self.iter_chain()
        )

    def value_eq(self, other: ErrorNode) -> bool:
        """True if both nodes wrap the very same error object."""
        return self.value is other.value

    def eq(self, other: ErrorNode) -> bool:
        """True if both chains wrap the same error objects, level by level.

        Chains of different lengths are never equal.
        """
        left: ErrorNode | None = self
        right: ErrorNode | None = other
        while left is not None and right is not None:
            if left.value is not right.value:
                return False
            left, right = left.prev, right.prev
        return left is None and right is None

    # -- conversion ---------------------------------------------------------

    def to_error(self) -> Exception | None:
        """Flatten the chain into a plain ``Exception`` carrying its rendered text."""
        if self.is_empty():
            return None
        return Exception(render(self))

    def to_json(self, include_stack_trace: bool = False) -> tuple[bytes, ErrorNode]:
        """Encode the chain as JSON.

        Returns ``(data, empty())`` on success, ``(b"", empty())`` for the
        empty node and ``(b"", failure)`` when encoding fails, ``failure``
        being a new node whose value is a :class:`SerializationError`.
        Undecodable ``details`` never fail: they are written as ``null``.
        """
        if self.is_empty():
            return b"", empty()
        try:
            return codec.encode(self, include_stack_trace=include_stack_trace), empty()
        except SerializationError as exc:
            log.warning("xerr.json_encode_failed", error=str(exc))
            return b"", new(exc, JSON_FAILURE_MESSAGE)

    def to_json_or_empty(self) -> bytes:
        """JSON without stack trace, ``b""`` on any failure."""
        data, _ = self.to_json()
        return data

    # -- dunder -------------------------------------------------------------

    def _fields(self) -> tuple[Any, ...]:
        return (
            self.value,
            self.code,
            self.msg,
            self.details,
            self.file,
            self.line,
            self.timestamp,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorNode):
            return NotImplemented
        for left, right in zip_longest(self.iter_chain(), other.iter_chain()):
            if left is None or right is None or left._fields() != right._fields():
                return False
        return True

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        if self.is_empty():
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}(value={self.value!r}, code={self.code!r}, msg={self.msg!r})"


def _value_matches(value: Any, target: Any) -> bool:
    seen: set[int] = set()
    current = value
    while current is not None and id(current) not in seen:
        if current is target or current == target:
            return True
        if isinstance(current, ErrorNode):
            return current.matches(target)
        seen.add(id(current))
        current = current.__cause__ if isinstance(current, BaseException) else None
    return False


def _call_site(stacklevel: int) -> FrameType:
    # frame 0 is this helper, frame 1 the public constructor
    frame = sys._getframe(1)
    for _ in range(stacklevel):
        if frame.f_back is None:
            break
        frame = frame.f_back
    return frame


def new(
    value: Any,
    msg: str = "",
    details: Any = None,
    code: int = 0,
    prev: ErrorNode | None = None,
    *,
    stacklevel: int = 1,
    clock: Clock | None = None,
) -> ErrorNode:
    """Create a node wrapping *value*, recording where and when.

    Returns :func:`empty` when *value* is ``None``; the other arguments are
    then ignored. *stacklevel* selects the frame recorded as the source the
    way :mod:`logging` does: ``1`` is the direct caller of ``new``.
    """
    if value is None:
        return empty()

    settings = get_settings()
    frame = _call_site(stacklevel)
    file, line = "", 0
    if settings.capture_source:
        file, line = frame.f_code.co_filename, frame.f_lineno
    stack = b""
    if settings.capture_stack_trace:
        stack = "".join(traceback.format_stack(frame)).encode("utf-8")

    return ErrorNode(
        value,
        code=code,
        msg=msg,
        details=details,
        file=file,
        line=line,
        timestamp=(clock or _system_clock).timestamp_us(),
        prev=prev,
        stack_trace=stack,
    )


def new_without_context(
    value: Any,
    msg: str = "",
    prev: ErrorNode | None = None,
    *,
    stacklevel: int = 1,
) -> ErrorNode:
    """:func:`new` without details or code."""
    return new(value, msg, None, 0, prev, stacklevel=stacklevel + 1)


def from_error(err: BaseException | None, *, stacklevel: int = 1) -> ErrorNode:
    """Lift a plain exception into a single-node chain."""
    if err is None:
        return empty()
    return new(err, stacklevel=stacklevel + 1)


def empty() -> ErrorNode:
    """The "no error" sentinel."""
    return ErrorNode()


def clone(node: ErrorNode | None) -> ErrorNode | None:
    return node.clone() if node is not None else None


def to_error(node: ErrorNode | None) -> Exception | None:
    return node.to_error() if node is not None else None


__all__ = [
    "ErrorNode",
    "JSON_FAILURE_MESSAGE",
    "clone",
    "empty",
    "from_error",
    "new",
    "new_without_context",
    "to_error",
]
