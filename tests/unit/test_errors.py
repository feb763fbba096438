"""Tests for faultnote/lib/errors.py - structured exception hierarchy."""

import httpx
import pytest

from faultnote.lib.errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    DecodeError,
    FaultNoteError,
    NetworkError,
)


class TestFaultNoteError:
    """Tests for base FaultNoteError class."""

    def test_basic_message(self):
        """Test error with just a message."""
        error = FaultNoteError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"

    def test_with_operation(self):
        """Test error with operation context."""
        error = FaultNoteError("Request failed", operation="list_pages")
        assert "[list_pages]" in str(error)
        assert error.message == "Request failed"

    def test_with_details(self):
        """Test error with details dict."""
        error = FaultNoteError("Bad response", details={"status_code": 500, "url": "/v1/search"})
        assert "status_code: 500" in str(error)
        assert "url: /v1/search" in str(error)

    def test_with_suggestion(self):
        """Test error with fix suggestion."""
        error = FaultNoteError("Missing token", suggestion="Set API_KEY")
        assert "Suggestion: Set API_KEY" in str(error)

    def test_to_dict(self):
        """Test conversion to dictionary."""
        error = FaultNoteError(
            "Test error",
            operation="append_entry",
            details={"key": "value"},
            suggestion="Fix it",
        )
        d = error.to_dict()
        assert d["error_type"] == "FaultNoteError"
        assert d["message"] == "Test error"
        assert d["operation"] == "append_entry"
        assert d["details"]["key"] == "value"
        assert d["suggestion"] == "Fix it"

    @pytest.mark.parametrize(
        "error_class",
        [ConfigurationError, AuthError, NetworkError, ApiError, DecodeError],
    )
    def test_subclasses_share_base(self, error_class):
        """Every error is catchable as FaultNoteError."""
        with pytest.raises(FaultNoteError):
            raise error_class("boom")


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_field_and_value(self):
        error = ConfigurationError("Setting 'timeout' must be float", field="timeout", value="soon")
        assert error.field == "timeout"
        assert error.details == {"field": "timeout", "value": "soon"}


class TestAuthError:
    """Tests for AuthError."""

    def test_default_suggestion(self):
        error = AuthError("API_KEY not found in environment variables")
        assert "API_KEY" in error.suggestion

    def test_status_code(self):
        error = AuthError("rejected", status_code=401, suggestion="Rotate the token")
        assert error.status_code == 401
        assert error.details["status_code"] == 401
        assert error.suggestion == "Rotate the token"


class TestNetworkError:
    """Tests for NetworkError."""

    def test_with_cause(self):
        cause = httpx.ConnectError("refused")
        error = NetworkError("Could not reach the Notion API", url="/v1/search", cause=cause)
        assert error.cause is cause
        assert error.details["cause_type"] == "ConnectError"
        assert error.details["url"] == "/v1/search"
        assert "network connection" in error.suggestion


class TestApiError:
    """Tests for ApiError."""

    def test_status_and_code(self):
        error = ApiError("Notion API error 400: invalid", status_code=400, code="validation_error")
        assert error.status_code == 400
        assert error.code == "validation_error"
        assert error.details == {"status_code": 400, "code": "validation_error"}


class TestDecodeError:
    """Tests for DecodeError."""

    def test_with_cause(self):
        error = DecodeError("not JSON", cause=ValueError("Expecting value"))
        assert error.details["cause_type"] == "ValueError"
