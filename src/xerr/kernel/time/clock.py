"""Kernel time – Clock protocol, implementations and micro-epoch helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def timestamp_us(self) -> int: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp_us(self) -> int:
        return to_micros(datetime.now(UTC))


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def timestamp_us(self) -> int:
        return to_micros(self._fixed)

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def to_micros(dt: datetime) -> int:
    """Microseconds since the Unix epoch; naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    # integer arithmetic, float timestamps lose the last microsecond
    return (dt - _EPOCH) // timedelta(microseconds=1)


def from_micros(us: int) -> datetime:
    """Inverse of :func:`to_micros`, always UTC-aware."""
    return _EPOCH + timedelta(microseconds=us)


def format_rfc3339_nano(us: int) -> str:
    """Render a micro-epoch as RFC 3339 with a trimmed fractional part.

    The ``RFC3339Nano`` layout in UTC: trailing zeros of the
    fraction are dropped, and so is the dot when the fraction is zero::

        >>> format_rfc3339_nano(1_691_234_567_890_000)
        '2023-08-05T11:22:47.89Z'
        >>> format_rfc3339_nano(0)
        '1970-01-01T00:00:00Z'

    Values outside the range of ``datetime`` come back as the bare integer.
    """
    try:
        dt = from_micros(us)
    except OverflowError:
        return str(us)
    text = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    fraction = f"{dt.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    return text + "Z"


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "format_rfc3339_nano",
    "from_micros",
    "to_micros",
    "utc_now",
]
