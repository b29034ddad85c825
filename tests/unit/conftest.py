"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from xerr.config import XerrSettings, configure


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """Every test starts from default settings and an unconfigured structlog."""
    configure(XerrSettings())
    yield
    configure(XerrSettings())
    structlog.reset_defaults()


@pytest.fixture
def fixed_us() -> int:
    """2023-08-05T11:22:47.89Z as microseconds since the epoch."""
    return 1_691_234_567_890_000
