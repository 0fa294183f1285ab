"""
Exceptions raised by the eFax client.

Transport failures and service-reported failures are returned as result
values. Exceptions are reserved for misconfiguration and for responses that
violate the documented response schema.
"""

from typing import Any


class EFaxError(Exception):
    """Base exception for eFax client errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(EFaxError):
    """Client configuration is incomplete or invalid."""


class ResponseParseError(EFaxError):
    """Service response is not XML or lacks a required element."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message, error_code=error_code, details={"body": body})
        self.body = body
