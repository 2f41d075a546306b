"""Wall-clock helpers for the half-hour slot grid."""

from __future__ import annotations

import re
from typing import Tuple

from app.core.exceptions import ValidationError

SLOT_MINUTES = 30

_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_time(value: str) -> Tuple[int, int]:
    """Parse an ``HH:MM`` string into an ``(hour, minute)`` pair."""

    if not isinstance(value, str):
        raise ValidationError(f"Time must be a string in HH:MM format, got {value!r}")

    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise ValidationError(f"Invalid time '{value}', expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if not 0 <= hour <= 23:
        raise ValidationError(f"Invalid time '{value}', hour must be between 0 and 23")
    if not 0 <= minute <= 59:
        raise ValidationError(f"Invalid time '{value}', minute must be between 0 and 59")
    return hour, minute


def format_time(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def advance(hour: int, minute: int) -> Tuple[int, int]:
    """Move one slot forward.

    A minute overflow resets the minute to zero (it does not carry the
    remainder) and the hour wraps past midnight.
    """

    minute += SLOT_MINUTES
    if minute >= 60:
        minute = 0
        hour += 1
    if hour >= 24:
        hour = 0
    return hour, minute


def next_slot_time(value: str) -> str:
    return format_time(*advance(*parse_time(value)))


__all__ = ["SLOT_MINUTES", "advance", "format_time", "next_slot_time", "parse_time"]
