"""Mute and unmute timing and log descriptions."""

from __future__ import annotations

from datetime import datetime, timedelta

from aegisbot.formatting import humanize_duration, truncate_reason
from aegisbot.tasks import MAX_TIMEOUT


def mute_expiry(now: datetime, delta: timedelta) -> datetime | None:
    """When a mute ends; ``None`` for a permanent (zero length) mute."""
    if delta == timedelta(0):
        return None
    return now + delta


def timeout_until(now: datetime, expires_at: datetime | None) -> datetime:
    """End of the platform timeout to apply; permanent mutes use the maximum."""
    if expires_at is not None:
        return expires_at
    return now + MAX_TIMEOUT


def mute_audit_reason(db_id: str) -> str:
    """Audit log reason recorded on managed permanent mutes."""
    return (
        f"Aegis Managed Mute: log id `{db_id}`. "
        "Please use Aegis to unmute to avoid accidental re-application!"
    )


def describe_mute(
    db_id: str, actor_id: int, target_id: int, delta: timedelta, reason: str
) -> str:
    """Log description of a mute."""
    return (
        f"**MEMBER MUTED**\n-# Log ID: `{db_id}` | Actor: <@{actor_id}> "
        f"| Target: <@{target_id}> | Duration: {humanize_duration(delta)}"
        f"\n```\n{truncate_reason(reason)}\n```"
    )


def describe_unmute(db_id: str, actor_id: int, target_id: int, reason: str) -> str:
    """Log description of an unmute."""
    return (
        f"**MEMBER UNMUTED**\n-# Log ID: `{db_id}` | Actor: <@{actor_id}> "
        f"| Target: <@{target_id}>\n```\n{truncate_reason(reason)}\n```"
    )