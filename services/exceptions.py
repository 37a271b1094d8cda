# -*- coding: utf-8 -*-
"""Custom exceptions for the wizard core."""


class ApiException(Exception):
    """Exception raised when an eligibility or lookup endpoint answers with an error."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class ValidationException(Exception):
    """Exception raised when the backend rejects submitted form data."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class RuleConfigurationError(Exception):
    """Raised when a step, rule or rule set is wired incorrectly.

    These are programmer errors and are never turned into field errors.
    """


class UnsupportedFieldError(RuleConfigurationError):
    """Raised when a field variant has no registered validation handler."""

    def __init__(self, field):
        super().__init__(
            f"No validation handler registered for field type "
            f"{type(field).__name__} (id={getattr(field, 'id', '?')})"
        )
        self.field = field


# Lookup failures that must never be read as a business verdict
TRANSIENT_ERRORS = (ApiException, NetworkException)
