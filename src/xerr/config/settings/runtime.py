"""Config settings – process-wide xerr settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from xerr.config.settings.base import Settings
from xerr.config.settings.loaders import EnvSettingsLoader


@dataclasses.dataclass
class XerrSettings(Settings):
    """Knobs read by node construction and JSON encoding.

    ``capture_stack_trace``: snapshot the call stack in :func:`xerr.new`.
    ``capture_source``: record the caller's file and line.
    ``json_escape_html``: escape ``<``, ``>`` and ``&`` in JSON output.
    """

    _prefix: ClassVar[str] = "XERR"

    capture_stack_trace: bool = True
    capture_source: bool = True
    json_escape_html: bool = True


_current = XerrSettings()


def get_settings() -> XerrSettings:
    return _current


def configure(settings: XerrSettings | None = None) -> XerrSettings:
    """Install *settings* process-wide; without arguments reload from the environment."""
    global _current
    _current = settings if settings is not None else EnvSettingsLoader().load(XerrSettings)
    return _current


__all__ = ["XerrSettings", "configure", "get_settings"]
