"""Library exceptions."""

from __future__ import annotations


class PyTollCalculatorError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.detail = detail if detail is not None else message
        self.user_message = user_message
        super().__init__(message if message is not None else (detail or ""))


class ValidationError(PyTollCalculatorError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class PolicyError(PyTollCalculatorError):
    """Raised when bundled policy data is missing or malformed."""

    error_type = "policy"
    default_error_code = "policy_error"
