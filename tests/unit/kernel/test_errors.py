"""Unit tests for the library's own exception types."""

from __future__ import annotations

import pytest

from xerr import BaseError, SerializationError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "xerr_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r

    def test_is_exception(self) -> None:
        with pytest.raises(BaseError):
            raise BaseError("boom")


class TestSerializationError:
    def test_inherits_base_error(self) -> None:
        assert issubclass(SerializationError, BaseError)

    def test_code_and_payload_type(self) -> None:
        err = SerializationError("bad JSON", payload_type="ErrorNode")
        assert err.code == "serialization_error"
        assert err.payload_type == "ErrorNode"
