"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_option.config.validation import ConfigError
from mp_option.kernel.errors import (
    BaseError,
    EmptyValueError,
    ExpectationError,
    OptionError,
)
from mp_option.kernel.types import Nothing


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        cause = ValueError("original")
        d = BaseError("wrapper", cause=cause).to_dict()
        assert "original" in d["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestOptionErrors:
    def test_empty_value_defaults(self) -> None:
        err = EmptyValueError()
        assert err.code == "empty_value"
        assert err.message == "Called `unwrap()` on a `Nothing` value"

    def test_expectation_carries_message(self) -> None:
        err = ExpectationError("user must exist")
        assert err.code == "expectation_failed"
        assert err.message == "user must exist"

    @pytest.mark.parametrize("cls", [EmptyValueError, ExpectationError])
    def test_hierarchy(self, cls: type[OptionError]) -> None:
        assert issubclass(cls, OptionError)
        assert issubclass(cls, BaseError)
        assert issubclass(cls, ValueError)

    def test_catch_as_option_error(self) -> None:
        with pytest.raises(OptionError):
            Nothing().unwrap()
        with pytest.raises(OptionError):
            Nothing().expect("x")

    def test_str_contains_message(self) -> None:
        with pytest.raises(ExpectationError) as exc_info:
            Nothing().expect("config not loaded")
        assert json.loads(str(exc_info.value))["message"] == "config not loaded"

    def test_config_error_is_not_option_error(self) -> None:
        assert not issubclass(ConfigError, OptionError)
        assert issubclass(ConfigError, BaseError)

    def test_unwrap_message_plain_text_and_json_str(self) -> None:
        with pytest.raises(EmptyValueError) as exc_info:
            Nothing().unwrap()
        err = exc_info.value
        assert err.message == "Called `unwrap()` on a `Nothing` value"
        assert json.loads(str(err))["message"] == err.message
