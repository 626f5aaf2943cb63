"""
Exception hierarchy for dd-integrations.

All exceptions inherit from DDToolsError for unified error handling.
Specific exceptions provide detailed context for debugging.
"""

from __future__ import annotations

from typing import Any


class DDToolsError(Exception):
    """
    Base exception for all dd-integrations errors.

    All custom exceptions inherit from this class, allowing callers
    to catch all dd-integrations errors with a single except clause.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DDToolsError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Environment values fail validation
    - Required settings are missing
    """

    pass


class MissingCredentialsError(ConfigurationError):
    """Required credentials not configured."""

    def __init__(self, missing_fields: list[str] | None = None):
        fields = missing_fields or ["credentials"]
        super().__init__(
            f"Missing required credentials: {', '.join(fields)}",
            context={"missing_fields": fields},
        )


# =============================================================================
# Request Building Errors
# =============================================================================


class PayloadError(DDToolsError):
    """
    A request record lacks a field needed to build the request.

    Raised before any network traffic, e.g. when a PagerDuty service
    update has no service name to put in the URL.
    """

    def __init__(self, model: str, field: str, reason: str = "must be set"):
        super().__init__(
            f"{model}.{field} {reason}",
            context={"model": model, "field": field},
        )
        self.model = model
        self.field = field


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(DDToolsError):
    """
    The request never produced an HTTP response.

    Covers unreachable hosts, DNS and TLS failures, and timeouts.
    Never retried by the client.
    """

    def __init__(self, message: str, method: str | None = None, path: str | None = None):
        super().__init__(message, context={"method": method, "path": path})
        self.method = method
        self.path = path


class APIConnectionError(TransportError):
    """Failed to connect to API endpoint."""

    pass


class APITimeoutError(TransportError):
    """API request timed out."""

    pass


# =============================================================================
# API Errors
# =============================================================================


class APIError(DDToolsError):
    """
    The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code
        messages: Messages from the response's "errors" list, or the raw
            body text when the body is not a structured error
        body: Raw response body
    """

    def __init__(
        self,
        status_code: int,
        messages: list[str] | None = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.messages = list(messages or [])
        self.body = body
        detail = "; ".join(self.messages) if self.messages else "no error details"
        super().__init__(
            f"API error {status_code}: {detail}",
            context={"status_code": status_code},
        )


class APIValidationError(APIError):
    """API rejected the request payload (400)."""

    pass


class APIAuthenticationError(APIError):
    """API or application key rejected (401/403)."""

    pass


class APINotFoundError(APIError):
    """Requested integration or object does not exist (404)."""

    pass


# =============================================================================
# Decode Errors
# =============================================================================


class DecodeError(DDToolsError):
    """
    A successful response could not be decoded into the expected shape.

    Attributes:
        body: Raw response body that failed to decode
    """

    def __init__(self, message: str, body: str = "", path: str | None = None):
        super().__init__(message, context={"path": path} if path else None)
        self.body = body
        self.path = path
