"""Kernel time – Clock port + implementations."""
from xerr.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    format_rfc3339_nano,
    from_micros,
    to_micros,
    utc_now,
)

__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "format_rfc3339_nano",
    "from_micros",
    "to_micros",
    "utc_now",
]
