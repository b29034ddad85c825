"""Testing utilities – fakes and property-based strategies."""
from xerr.testing.fakes import FakeClock

__all__ = ["FakeClock"]
