"""Structured exception hierarchy for FaultNote.

Provides specific exception types for the ways a Notion round trip can fail,
with enough context for a one-line status message and a detailed log entry.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "FaultNoteError",
    "ConfigurationError",
    "AuthError",
    "NetworkError",
    "ApiError",
    "DecodeError",
]


class FaultNoteError(Exception):
    """Base exception for all FaultNote errors.

    ``message`` stays short enough for the status line; ``str(error)``
    includes the operation, details and suggestion for logs.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.details = details or {}
        self.suggestion = suggestion

        parts = [message]

        if operation:
            parts.insert(0, f"[{operation}]")

        if details:
            detail_lines = [f"  {k}: {v}" for k, v in details.items()]
            parts.append("\nDetails:")
            parts.extend(detail_lines)

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "operation": self.operation,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class ConfigurationError(FaultNoteError):
    """Invalid or incomplete configuration.

    Raised when the settings file cannot be interpreted.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value

        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(message, details=details, **kwargs)


class AuthError(FaultNoteError):
    """Missing or rejected integration token."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        self.status_code = status_code

        details = kwargs.pop("details", {})
        if status_code is not None:
            details["status_code"] = status_code

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = (
                "Check that API_KEY holds a valid Notion integration token "
                "and that the pages are shared with the integration."
            )

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)


class NetworkError(FaultNoteError):
    """The Notion API could not be reached.

    Raised on connection failures and timeouts.
    """

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.url = url
        self.cause = cause

        details = kwargs.pop("details", {})
        if url:
            details["url"] = url
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = "Check your network connection and try again."

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)


class ApiError(FaultNoteError):
    """The Notion API rejected the request.

    Raised for non-2xx responses that are not authentication failures,
    e.g. an unknown page id or malformed block content.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.status_code = status_code
        self.code = code

        details = kwargs.pop("details", {})
        if status_code is not None:
            details["status_code"] = status_code
        if code:
            details["code"] = code

        super().__init__(message, details=details, **kwargs)


class DecodeError(FaultNoteError):
    """A Notion response could not be decoded into domain records."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.cause = cause

        details = kwargs.pop("details", {})
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__

        super().__init__(message, details=details, **kwargs)
