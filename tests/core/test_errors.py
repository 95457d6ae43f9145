"""Tests for error types and codes."""

import pytest

from cobolassist.core.errors import (
    CobolAssistError,
    ConfigError,
    ErrorCode,
    ExpansionError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.EXPANSION_FAILED, 3000),
            (ErrorCode.EXPANSION_TIMEOUT, 3000),
            (ErrorCode.EXPANSION_NOT_CONFIGURED, 3000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        # Given
        error_code = code

        # When
        value = error_code.value

        # Then
        assert expected_range <= value < expected_range + 1000


class TestCobolAssistError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = CobolAssistError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = CobolAssistError(code=ErrorCode.EXPANSION_NOT_CONFIGURED, message="Something broke")

        # When
        result = str(error)

        # Then
        assert result == "[3003] EXPANSION_NOT_CONFIGURED: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Errors behave as regular exceptions."""
        with pytest.raises(CobolAssistError) as exc_info:
            raise ConfigError.parse_error("config.yaml", "tab in indentation")

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR


class TestConfigError:
    """ConfigError factory tests."""

    def test_parse_error_includes_path(self) -> None:
        error = ConfigError.parse_error("/etc/config.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/etc/config.yaml", "reason": "bad indent"}
        assert "/etc/config.yaml" in error.message

    def test_invalid_value_stringifies_value(self) -> None:
        error = ConfigError.invalid_value("completion.cache_capacity", 0, "must be >= 1")

        assert error.details["value"] == "0"
        assert error.details["field"] == "completion.cache_capacity"


class TestExpansionError:
    """ExpansionError factory tests."""

    def test_failed_is_retryable_and_carries_uri(self) -> None:
        error = ExpansionError.failed("file:///src/PROG.CBL", "exit 8")

        assert error.code == ErrorCode.EXPANSION_FAILED
        assert error.retryable
        assert error.details == {"uri": "file:///src/PROG.CBL", "reason": "exit 8"}

    def test_timeout_mentions_limit(self) -> None:
        error = ExpansionError.timeout("file:///src/PROG.CBL", 2.5)

        assert error.code == ErrorCode.EXPANSION_TIMEOUT
        assert "2.5s" in error.message
        assert error.details["timeout_sec"] == 2.5

    def test_not_configured(self) -> None:
        error = ExpansionError.not_configured()

        assert error.error_name == "EXPANSION_NOT_CONFIGURED"
        assert error.details == {}

