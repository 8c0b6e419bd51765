"""Field validators for the employee forms.

Every ``validate_*`` function takes the raw input and returns ``None`` when the
value is acceptable, or a :class:`FieldViolation` describing the first rule the
value breaks. Rules are checked in a fixed order so a value breaking several
rules always reports the same one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from ..core.constants import (
    EMAIL_MAX_LENGTH,
    EMAIL_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_SPECIAL_CHARS,
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
)
from ..core.enums import FieldError, Role
from ..core.exceptions import ValidationError

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z\s'-]*$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[A-Za-z]{2,}$")
_PHONE_ALLOWED_RE = re.compile(r"^[0-9\s\-()+.]+$")
_TEN_DIGIT_LOCAL_RE = re.compile(r"^[6-9][0-9]{9}$")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_DIGIT_RE = re.compile(r"[0-9]")
_WHITESPACE_RE = re.compile(r"\s")


@dataclass(frozen=True)
class FieldViolation:
    code: FieldError
    message: str

    def __str__(self) -> str:
        return self.message


Validator = Callable[[Optional[str]], Optional[FieldViolation]]


def validate_name(raw: Optional[str]) -> Optional[FieldViolation]:
    value = (raw or "").strip()
    if not value:
        return FieldViolation(FieldError.REQUIRED, "Name is required")
    if len(value) < NAME_MIN_LENGTH:
        return FieldViolation(FieldError.TOO_SHORT, f"Name must be at least {NAME_MIN_LENGTH} characters")
    if len(value) > NAME_MAX_LENGTH:
        return FieldViolation(FieldError.TOO_LONG, f"Name must be at most {NAME_MAX_LENGTH} characters")
    if not _NAME_RE.match(value):
        return FieldViolation(
            FieldError.INVALID_CHARACTERS,
            "Name must start with a letter and contain only letters, spaces, hyphens and apostrophes",
        )
    if "  " in value:
        return FieldViolation(FieldError.REPEATED_WHITESPACE, "Name cannot contain consecutive spaces")
    return None


def validate_email(raw: Optional[str]) -> Optional[FieldViolation]:
    value = raw or ""
    if not value.strip():
        return FieldViolation(FieldError.REQUIRED, "Email is required")
    if not EMAIL_MIN_LENGTH <= len(value) <= EMAIL_MAX_LENGTH:
        return FieldViolation(
            FieldError.LENGTH_OUT_OF_RANGE,
            f"Email must be between {EMAIL_MIN_LENGTH} and {EMAIL_MAX_LENGTH} characters",
        )
    if "@" not in value:
        return FieldViolation(FieldError.MISSING_AT_SYMBOL, "Email must contain an @ symbol")
    if _WHITESPACE_RE.search(value):
        return FieldViolation(FieldError.CONTAINS_WHITESPACE, "Email cannot contain spaces")
    if not _EMAIL_RE.match(value):
        return FieldViolation(FieldError.INVALID_FORMAT, "Enter a valid email address (e.g. name@company.com)")
    return None


def validate_phone(raw: Optional[str]) -> Optional[FieldViolation]:
    """Phone is optional: an empty value is valid."""
    value = (raw or "").strip()
    if not value:
        return None
    if not _PHONE_ALLOWED_RE.match(value):
        return FieldViolation(
            FieldError.INVALID_CHARACTERS,
            "Phone may only contain digits, spaces, hyphens, parentheses, dots and a leading +",
        )

    digits = _NON_DIGIT_RE.sub("", value)
    if len(digits) < PHONE_MIN_DIGITS:
        return FieldViolation(FieldError.TOO_SHORT, f"Phone must have at least {PHONE_MIN_DIGITS} digits")
    if len(digits) > PHONE_MAX_DIGITS:
        return FieldViolation(FieldError.TOO_LONG, f"Phone must have at most {PHONE_MAX_DIGITS} digits")
    if not (value.startswith("+") or _TEN_DIGIT_LOCAL_RE.match(digits)):
        return FieldViolation(
            FieldError.INVALID_FORMAT,
            "Enter a 10-digit number starting with 6-9, or an international number starting with +",
        )
    return None


def validate_password(raw: Optional[str]) -> Optional[FieldViolation]:
    value = raw or ""
    if not value:
        return FieldViolation(FieldError.REQUIRED, "Password is required")
    if len(value) < PASSWORD_MIN_LENGTH:
        return FieldViolation(FieldError.TOO_SHORT, f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    if len(value) > PASSWORD_MAX_LENGTH:
        return FieldViolation(FieldError.TOO_LONG, f"Password must be at most {PASSWORD_MAX_LENGTH} characters")
    if _WHITESPACE_RE.search(value):
        return FieldViolation(FieldError.CONTAINS_WHITESPACE, "Password cannot contain spaces")
    if not re.search(r"[a-z]", value):
        return FieldViolation(FieldError.MISSING_LOWERCASE, "Password must contain a lowercase letter")
    if not re.search(r"[A-Z]", value):
        return FieldViolation(FieldError.MISSING_UPPERCASE, "Password must contain an uppercase letter")
    if not _DIGIT_RE.search(value):
        return FieldViolation(FieldError.MISSING_DIGIT, "Password must contain a digit")
    if not any(ch in PASSWORD_SPECIAL_CHARS for ch in value):
        return FieldViolation(
            FieldError.MISSING_SPECIAL_CHAR,
            f"Password must contain one of {PASSWORD_SPECIAL_CHARS}",
        )
    return None


def validate_role(raw: Optional[str]) -> Optional[FieldViolation]:
    if not (raw or "").strip():
        return FieldViolation(FieldError.REQUIRED, "Role is required")
    try:
        Role.parse(raw)
    except ValidationError:
        return FieldViolation(FieldError.INVALID_CHOICE, "Role must be admin or employee")
    return None


def validate_fields(values: Mapping[str, Optional[str]], validators: Mapping[str, Validator]) -> dict[str, str]:
    """Run ``validators`` over ``values`` and collect the failing messages by field."""
    errors: dict[str, str] = {}
    for field_name, validator in validators.items():
        violation = validator(values.get(field_name))
        if violation:
            errors[field_name] = violation.message
    return errors


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()
