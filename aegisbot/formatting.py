"""Human readable durations and reason trimming for moderation logs."""

from __future__ import annotations

from datetime import timedelta

MAX_REASON_LENGTH = 500
PERMANENT = "permanent"

_MICROS_PER_SECOND = 1_000_000


def _whole_seconds(delta: timedelta) -> int:
    micros = (delta.days * 86_400 + delta.seconds) * _MICROS_PER_SECOND + delta.microseconds
    seconds = abs(micros) // _MICROS_PER_SECOND
    return seconds if micros >= 0 else -seconds


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _amount_and_unit(delta: timedelta) -> tuple[int, str]:
    seconds = _whole_seconds(delta)
    days = _truncating_div(seconds, 86_400)
    hours = _truncating_div(seconds, 3_600)
    minutes = _truncating_div(seconds, 60)

    if days >= 365 and days % 365 == 0:
        return days // 365, "year"
    if days >= 30 and days % 30 == 0:
        return days // 30, "month"
    if days:
        return days, "day"
    if hours:
        return hours, "hour"
    if minutes:
        return minutes, "minute"
    if seconds:
        return seconds, "second"
    return 0, ""


def humanize_duration(delta: timedelta) -> str:
    """Render ``delta`` as e.g. ``"3 days"``; a zero duration is ``"permanent"``."""
    if delta == timedelta(0):
        return PERMANENT
    amount, unit = _amount_and_unit(delta)
    if amount > 1:
        unit += "s"
    return f"{amount} {unit}"


def duration_phrase(delta: timedelta) -> str:
    """Render ``delta`` as e.g. ``"for 3 days"``; a zero duration is ``"permanent"``."""
    if delta == timedelta(0):
        return PERMANENT
    return f"for {humanize_duration(delta)}"


def truncate_reason(reason: str) -> str:
    """Cut a reason longer than 500 characters and mark the cut with ``...``."""
    if len(reason) > MAX_REASON_LENGTH:
        return reason[:MAX_REASON_LENGTH] + "..."
    return reason