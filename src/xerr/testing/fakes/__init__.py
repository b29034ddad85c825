"""Testing fakes – deterministic collaborators."""
from xerr.testing.fakes.clock import FakeClock

__all__ = ["FakeClock"]
