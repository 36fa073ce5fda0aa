# core/utils.py

"""
Repository for program-wide utilities.
"""

import re
from typing import Any

from core.errors import ErrorCode, InvalidArgumentError

_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_int_input(value: Any, field: str) -> int:
    """
    Parses integer text (or an int) for the named field.

    Accepts an optional sign and surrounding whitespace. Rejects decimals, digit
    separators, booleans, and anything that is not text or an int.

    Raises:
        InvalidArgumentError: If the value is missing or not an integer.
    """
    if value is None:
        raise InvalidArgumentError(
            field, "value is required.", ErrorCode.MISSING_REQUIRED_FIELD
        )

    if isinstance(value, bool):
        raise InvalidArgumentError(field, "must be an integer.")

    if isinstance(value, int):
        return value

    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        try:
            return int(value)

        except ValueError:
            raise InvalidArgumentError(
                field, "value has too many digits to be an integer."
            ) from None

    raise InvalidArgumentError(field, f"'{value}' is not an integer.")


def require_text(value: Any, field: str, label: str) -> str:
    """
    Ensures a text value is present and not only whitespace.

    Returns the value unchanged; trimming is used for the check only.

    Raises:
        InvalidArgumentError: If the value is None, not text, or blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            field,
            f"{label} cannot be empty or whitespace.",
            ErrorCode.MISSING_REQUIRED_FIELD,
        )
    return value
