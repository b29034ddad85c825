"""Unit tests for the structlog integration."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator

import pytest
import structlog

from xerr import ErrorNode, empty, new
from xerr.kernel.errors.codec import to_dict
from xerr.observability.logging import ErrorChainProcessor, JsonLoggerFactory, get_logger


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestErrorChainProcessor:
    def test_expands_node_values(self) -> None:
        err = new(ValueError("boom"), "ctx", prev=new(KeyError("k")))
        event = ErrorChainProcessor()(None, "error", {"event": "failed", "error": err})
        assert event["error"] == to_dict(err)
        assert event["error"]["prev"]["value"] == "'k'"

    def test_empty_node_becomes_none(self) -> None:
        event = ErrorChainProcessor()(None, "info", {"event": "ok", "error": empty()})
        assert event["error"] is None

    def test_leaves_other_values(self) -> None:
        event = ErrorChainProcessor()(None, "info", {"event": "ok", "count": 3})
        assert event == {"event": "ok", "count": 3}

    def test_stack_trace_on_request(self) -> None:
        err = new(ValueError("boom"))
        event = ErrorChainProcessor(include_stack_trace=True)(None, "error", {"error": err})
        assert event["error"]["stack_trace"]

    def test_exc_info_tuple(self) -> None:
        err = new(ValueError("boom"))
        event = ErrorChainProcessor()(
            None, "error", {"event": "x", "exc_info": (ErrorNode, err, None)}
        )
        assert event["error_chain"] == to_dict(err)

    def test_exc_info_true_inside_handler(self) -> None:
        err = new(ValueError("boom"))
        try:
            raise err
        except Exception:
            event = ErrorChainProcessor()(None, "exception", {"event": "x", "exc_info": True})
        assert event["error_chain"]["value"] == "boom"

    def test_existing_error_chain_kept(self) -> None:
        err = new(ValueError("boom"))
        event = ErrorChainProcessor()(
            None, "error", {"exc_info": (type(err), err, None), "error_chain": "mine"}
        )
        assert event["error_chain"] == "mine"

    def test_plain_exception_ignored(self) -> None:
        exc = ValueError("plain")
        event = ErrorChainProcessor()(None, "error", {"exc_info": (type(exc), exc, None)})
        assert "error_chain" not in event


class TestGetLogger:
    def test_returns_logger_with_methods(self) -> None:
        log = get_logger(__name__)
        for method in ("debug", "info", "warning", "error"):
            assert callable(getattr(log, method))

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger(__name__, component="billing").info("started")
        assert logs[0]["component"] == "billing"


class TestJsonLoggerFactory:
    def test_emits_json_with_chain(
        self, restore_root_logger: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        root.handlers[0].stream = sys.stdout  # type: ignore[attr-defined]

        err = new(ValueError("boom"), "charging", code=402)
        structlog.get_logger("billing").error("charge_failed", error=err)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        doc = json.loads(line)
        assert doc["event"] == "charge_failed"
        assert doc["level"] == "error"
        assert doc["error"]["value"] == "boom"
        assert doc["error"]["code"] == 402
        assert "stack_trace" not in doc["error"]

    def test_sets_level(self, restore_root_logger: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
