"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from listquery.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from listquery.kernel.errors import ApplicationError, BaseError, DomainError, ValidationError


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("boom").code == "base_error"

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("boom", code="x", detail={"k": 1})
        assert err.to_dict() == {"code": "x", "message": "boom", "detail": {"k": 1}}

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom")))
        assert payload["message"] == "boom"

    def test_cause_chained(self) -> None:
        cause = KeyError("year")
        err = BaseError("boom", cause=cause)
        assert err.__cause__ is cause
        assert "cause" in err.to_dict()


class TestHierarchy:
    def test_validation_error_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)

    def test_validation_error_carries_field_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "items_per_page", "value": 0}])
        assert err.to_dict()["errors"] == [{"field": "items_per_page", "value": 0}]

    def test_config_errors_are_application_errors(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_invalid_setting_message(self) -> None:
        err = InvalidSettingValueError("items_per_page", 0, "must be > 0")
        assert "items_per_page" in err.message
        assert err.code == "invalid_setting_value"

    def test_raise_and_catch_as_base(self) -> None:
        with pytest.raises(BaseError):
            raise ValidationError("bad")
