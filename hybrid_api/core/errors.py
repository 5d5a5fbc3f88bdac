"""
Error taxonomy shared by the calculator service and its SDK.

Errors are plain exception classes so they can be raised inside the
service layer, but the SDK hands them back to callers as values in a
``(result, error)`` tuple instead of raising them.
"""

from typing import Optional


class CalculatorError(Exception):
    """Base class for every calculator failure."""


class ConfigurationError(CalculatorError):
    """A required setting is missing."""


class InvalidOperationError(CalculatorError):
    """The request is semantically invalid (unknown operation, divide by zero)."""


class TransportError(CalculatorError):
    """The remote endpoint could not be reached."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause


class RemoteError(CalculatorError):
    """The remote endpoint answered with a non-success status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        text = f"calculator service returned non-200 status: {status_code}"
        if message:
            text = f"{text} ({message})"
        super().__init__(text)
        self.status_code = status_code
        self.message = message


class DecodeError(CalculatorError):
    """The remote response body does not have the expected shape."""
