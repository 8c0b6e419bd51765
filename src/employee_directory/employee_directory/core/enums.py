from __future__ import annotations

from enum import Enum
from typing import Optional

from .exceptions import ValidationError


class Role(str, Enum):
    """Closed set of directory roles."""

    ADMIN = "admin"
    EMPLOYEE = "employee"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Role":
        """Normalise user input ("Admin", " employee ") into a Role."""
        if isinstance(value, Role):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            raise ValidationError(f"Invalid role: {value!r}")


class OrderBy(str, Enum):
    """Sort keys accepted by the employee listing."""

    CREATED_AT = "created_at"
    NAME = "name"


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class FieldError(str, Enum):
    """Codes of the field rules a value can violate."""

    REQUIRED = "Required"
    TOO_SHORT = "TooShort"
    TOO_LONG = "TooLong"
    LENGTH_OUT_OF_RANGE = "LengthOutOfRange"
    INVALID_CHARACTERS = "InvalidCharacters"
    REPEATED_WHITESPACE = "RepeatedWhitespace"
    MISSING_AT_SYMBOL = "MissingAtSymbol"
    CONTAINS_WHITESPACE = "ContainsWhitespace"
    INVALID_FORMAT = "InvalidFormat"
    MISSING_LOWERCASE = "MissingLowercase"
    MISSING_UPPERCASE = "MissingUppercase"
    MISSING_DIGIT = "MissingDigit"
    MISSING_SPECIAL_CHAR = "MissingSpecialChar"
    INVALID_CHOICE = "InvalidChoice"
