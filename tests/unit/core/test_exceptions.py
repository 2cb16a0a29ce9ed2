"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from status_screen.core.exceptions import (
    ConfigurationError,
    EngineError,
    StaleResultError,
    StatusScreenError,
    ValidationError,
)


class TestStatusScreenError:
    """Tests for the base StatusScreenError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = StatusScreenError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = StatusScreenError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(StatusScreenError("Test", details={"x": 1}))
        assert "StatusScreenError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestConfigurationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error_with_key(self) -> None:
        """Test ConfigurationError records the offending key."""
        exc = ConfigurationError("Bad rule", config_key="sync_rules")
        assert exc.details["config_key"] == "sync_rules"

    def test_validation_error_with_field(self) -> None:
        """Test ValidationError records field and value."""
        exc = ValidationError("Bad level", field_name="level", invalid_value=0)
        assert exc.details["field_name"] == "level"
        assert exc.details["invalid_value"] == 0

    def test_validation_error_without_value(self) -> None:
        """Test a missing invalid value is left out of the details."""
        exc = ValidationError("Missing level", field_name="level")
        assert "invalid_value" not in exc.details


class TestEngineExceptions:
    """Tests for engine exceptions."""

    def test_stale_result_error(self) -> None:
        """Test StaleResultError records both fingerprints."""
        exc = StaleResultError("Stale", expected_fingerprint="abc", actual_fingerprint="def")
        assert exc.details == {"expected_fingerprint": "abc", "actual_fingerprint": "def"}
        assert isinstance(exc, EngineError)


class TestExceptionHierarchy:
    """Tests for the exception inheritance tree."""

    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, ValidationError, EngineError, StaleResultError],
    )
    def test_all_inherit_from_base(self, exc_class: type[StatusScreenError]) -> None:
        """Test every exception derives from StatusScreenError."""
        assert issubclass(exc_class, StatusScreenError)

    def test_catch_by_base(self) -> None:
        """Test engine errors can be caught by the base class."""
        with pytest.raises(StatusScreenError):
            raise StaleResultError("Stale")
