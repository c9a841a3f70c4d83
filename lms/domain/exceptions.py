# lms/domain/exceptions.py

"""
Custom exceptions for the domain layer.

These exceptions carry no HTTP knowledge. Each one exposes an
``internal_code`` that the exception middleware translates into
an HTTP status code and a JSON error body.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for every domain error raised by the application.

    Attributes:
        message: Human readable description
        internal_code: Stable machine readable code
        details: Optional structured information (field errors, ids...)
    """

    def __init__(
            self,
            message: str = "Domain error",
            internal_code: str = "DOMAIN_ERROR",
            details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.internal_code = internal_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidCredentialsException(DomainException):
    """Invalid or revoked credentials."""

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(
            message=detail,
            internal_code="INVALID_CREDENTIALS"
        )


class DatabaseOperationException(DomainException):
    """Error while talking to the storage backend."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(
            message=f"{detail}{error_info}",
            internal_code="DATABASE_OPERATION_ERROR"
        )
        self.original_error = original_error


class InvalidInputException(DomainException):
    """Invalid input data."""

    def __init__(self, detail: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        field_errors = ""
        if fields:
            field_errors = ": " + ", ".join([f"{field}: {error}" for field, error in fields.items()])

        super().__init__(
            message=f"{detail}{field_errors}",
            internal_code="INVALID_INPUT",
            details=fields
        )


class InvalidTimeFormatException(DomainException):
    """A schedule time is not a zero padded 24h ``HH:MM`` string."""

    def __init__(self, value: Any, field: str = "time"):
        super().__init__(
            message=f"Invalid time format for '{field}': {value!r} (expected HH:MM)",
            internal_code="INVALID_TIME_FORMAT",
            details={field: str(value)}
        )
        self.value = value
        self.field = field


class OutsideAcademicPeriodException(DomainException):
    """There is no academic period in progress (July and August)."""

    def __init__(self, detail: str = "Currently outside any defined academic semester"):
        super().__init__(
            message=detail,
            internal_code="OUTSIDE_ACADEMIC_PERIOD"
        )
