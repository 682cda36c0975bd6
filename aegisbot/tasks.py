"""Scheduling of timeout re-application for long running mutes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

MAX_TIMEOUT = timedelta(days=27)
REAPPLY_INTERVAL = timedelta(days=20)
_ONE_SECOND = timedelta(seconds=1)


@dataclass(frozen=True)
class TimeoutEntry:
    """An active timeout recorded in the actions table."""

    id: str
    guild_id: int
    user_id: int
    expires_at: datetime | None = None
    last_reapplied_at: datetime | None = None


def _reapplied_long_ago(entry: TimeoutEntry, now: datetime) -> bool:
    if entry.last_reapplied_at is None:
        return True
    return now - entry.last_reapplied_at >= REAPPLY_INTERVAL


def _still_active(entry: TimeoutEntry, now: datetime) -> bool:
    if entry.expires_at is None:
        return True
    return entry.expires_at - now >= _ONE_SECOND


def needs_reapply(entry: TimeoutEntry, now: datetime) -> bool:
    """Whether the platform timeout must be set again to keep the mute in force."""
    if entry.expires_at is not None and entry.expires_at - now <= MAX_TIMEOUT:
        return True
    return _reapplied_long_ago(entry, now)


def reapply_until(entry: TimeoutEntry, now: datetime) -> datetime:
    """When a re-applied timeout ends: the expiry, capped at the platform maximum."""
    remaining = entry.expires_at - now if entry.expires_at is not None else MAX_TIMEOUT
    return now + min(remaining, MAX_TIMEOUT)


def plan_timeouts(
    entries: Iterable[TimeoutEntry], now: datetime
) -> list[tuple[TimeoutEntry, datetime]]:
    """Entries whose timeout must be re-applied, each with its new end time."""
    return [
        (entry, reapply_until(entry, now))
        for entry in entries
        if _still_active(entry, now) and needs_reapply(entry, now)
    ]