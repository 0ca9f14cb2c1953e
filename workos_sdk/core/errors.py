"""
Error types raised by WorkOS API operations.
Every failure surfaces as a subclass of WorkOsError so callers can catch one base.
"""

from typing import Optional


class WorkOsError(Exception):
    """Base class for all SDK errors."""


class UnauthorizedError(WorkOsError):
    """The API key (or client credentials) was rejected."""

    def __init__(self, message: str = "unauthorized"):
        super().__init__(message)
        self.message = message


class RequestError(WorkOsError):
    """Non-2xx reply or transport failure that no operation handled more specifically."""

    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.status}: {self.message}"


class OperationError(WorkOsError):
    """Error reported by the API for a specific operation."""

    def __init__(self, code: str, message: str = ""):
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code
        self.message = message


class InvalidPhoneNumberError(OperationError):
    def __init__(self, message: str = "invalid phone number"):
        super().__init__("invalid_phone_number", message)


class AuthenticationError(OperationError):
    """OAuth-style error payload: {"error": ..., "error_description": ...}."""

    def __init__(self, error: str, error_description: str = ""):
        super().__init__(error, error_description)
        self.error = error
        self.error_description = error_description


class UserNotFoundError(OperationError):
    def __init__(self, description: str = ""):
        super().__init__("not_found", description)
        self.error = "not_found"
        self.error_description = description
