# core/errors.py

"""
Error types raised by the grade record models.

Each error carries a machine-readable `ErrorCode` alongside a human-readable detail,
so callers can branch on the kind of failure without parsing messages.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"

    # === Validation Failures ===
    # required argument is missing or blank
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # field value is out of bounds or incorrectly formatted
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"


class GradeRecordError(Exception):
    """Base class for errors raised by `StudentRecord` and `GradeEntry`."""

    def __init__(self, detail: str, error: ErrorCode):
        super().__init__(detail)
        self._detail = detail
        self._error = error

    @property
    def detail(self) -> str:
        return self._detail

    @property
    def error(self) -> ErrorCode:
        return self._error

    def __str__(self) -> str:
        return self._detail


class InvalidArgumentError(GradeRecordError, ValueError):
    """
    Raised when an argument fails validation.

    Attributes:
        field (str): The name of the parameter that failed.
        reason (str): Why the value was rejected.
    """

    def __init__(
        self,
        field: str,
        reason: str,
        error: ErrorCode = ErrorCode.INVALID_FIELD_VALUE,
    ):
        self._field = field
        self._reason = reason
        super().__init__(f"Invalid {field}: {reason}", error)

    @property
    def field(self) -> str:
        return self._field

    @property
    def reason(self) -> str:
        return self._reason


class CourseNotFoundError(GradeRecordError, KeyError):
    """Raised when removing a course that is not on the record."""

    def __init__(self, course: str):
        self._course = course
        super().__init__(f"Course '{course}' not found.", ErrorCode.NOT_FOUND)

    @property
    def course(self) -> str:
        return self._course
