"""Validation rules for player, game and settings input.

Every rule is a pure function that returns ``None`` when the value is valid
and a human-readable reason when it is not. Invalid input is an expected
outcome here, so nothing in this module raises for it; the services turn a
reason into a ``ValidationError`` and the forms turn it into a field error.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any, Optional

from rallybook.core.constants import (
    ADDRESS_MIN_LENGTH,
    COURT_NAME_MIN_LENGTH,
    FULL_NAME_MAX_LENGTH,
    FULL_NAME_MIN_LENGTH,
    NICKNAME_MAX_LENGTH,
    NICKNAME_MIN_LENGTH,
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
)
from rallybook.player.models import skill_ordinal

if TYPE_CHECKING:
    from rallybook.player.models import SkillLevel, SkillStrength

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def validate_email(value: Optional[str]) -> Optional[str]:
    """Check that the value looks like local@domain.tld."""
    email = _text(value)
    if not email:
        return "Please enter an email address"
    if not EMAIL_PATTERN.match(email):
        return "Please enter a valid email address"
    return None


def normalize_phone(value: Optional[str]) -> str:
    """Strip spaces, hyphens, parentheses and a leading plus sign."""
    digits = PHONE_SEPARATORS.sub("", _text(value))
    if digits.startswith("+"):
        digits = digits[1:]
    return digits


def validate_phone(value: Optional[str]) -> Optional[str]:
    """Check that the value holds 7 to 15 digits once separators are removed."""
    if not _text(value):
        return "Please enter a contact number"
    digits = normalize_phone(value)
    if not digits.isdigit() or not digits.isascii():
        return "Contact number can only contain digits"
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        return (
            f"Contact number must be between {PHONE_MIN_DIGITS} "
            f"and {PHONE_MAX_DIGITS} digits"
        )
    return None


def _validate_length(
    value: Optional[str], label: str, min_length: int, max_length: Optional[int]
) -> Optional[str]:
    text = _text(value)
    if not text:
        article = "an" if label[0].lower() in "aeiou" else "a"
        return f"Please enter {article} {label.lower()}"
    if len(text) < min_length:
        return f"{label} must be at least {min_length} characters"
    if max_length is not None and len(text) > max_length:
        return f"{label} must be at most {max_length} characters"
    return None


def validate_nickname(value: Optional[str]) -> Optional[str]:
    return _validate_length(
        value, "Nickname", NICKNAME_MIN_LENGTH, NICKNAME_MAX_LENGTH
    )


def validate_full_name(value: Optional[str]) -> Optional[str]:
    return _validate_length(
        value, "Full name", FULL_NAME_MIN_LENGTH, FULL_NAME_MAX_LENGTH
    )


def validate_address(value: Optional[str]) -> Optional[str]:
    return _validate_length(value, "Address", ADDRESS_MIN_LENGTH, None)


def validate_court_name(value: Optional[str]) -> Optional[str]:
    return _validate_length(value, "Court name", COURT_NAME_MIN_LENGTH, None)


def parse_number(value: Any) -> Optional[float]:
    """Parse a numeric string, returning None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    try:
        number = float(_text(value))
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def validate_positive_number(value: Any, field_label: str) -> Optional[str]:
    """Check that the value parses as a number greater than zero."""
    if not _text(value):
        return f"Please enter {field_label.lower()}"
    number = parse_number(value)
    if number is None:
        return f"{field_label} must be a valid number"
    if number <= 0:
        return f"{field_label} must be greater than 0"
    return None


def validate_level_range(
    min_level: SkillLevel,
    min_strength: SkillStrength,
    max_level: SkillLevel,
    max_strength: SkillStrength,
) -> Optional[str]:
    """Check that the minimum skill does not exceed the maximum skill."""
    if skill_ordinal(min_level, min_strength) > skill_ordinal(
        max_level, max_strength
    ):
        return "Minimum level cannot be higher than maximum level"
    return None


def validate_schedule_entry(
    court_name: Optional[str], date: Any, start_time: Any, end_time: Any
) -> Optional[str]:
    """Check a single court booking row.

    ``start_time`` and ``end_time`` are compared directly, so they may be
    ``datetime.time`` values for the chosen date or full datetimes. A booking
    that ends at the moment it starts is rejected.
    """
    court_error = validate_court_name(court_name)
    if court_error:
        return court_error
    if date is None:
        return "Please select a date"
    if start_time is None:
        return "Please select a start time"
    if end_time is None:
        return "Please select an end time"
    if end_time <= start_time:
        return "End time must be after start time"
    return None


def validate_schedules_non_empty(count: int) -> Optional[str]:
    if count <= 0:
        return "Please add at least one court schedule"
    return None
