"""Records and log descriptions for bans, kicks, softbans, unbans and warnings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from aegisbot.formatting import duration_phrase, truncate_reason


class ActionType(Enum):
    """Kinds of moderation action, as stored in the actions table."""

    BAN = "ban"
    KICK = "kick"
    SOFTBAN = "softban"
    UNBAN = "unban"
    WARN = "warn"
    MUTE = "mute"
    UNMUTE = "unmute"


@dataclass(frozen=True)
class ModerationAction:
    """One row of the actions table; the reason is trimmed to the stored limit."""

    id: str
    type: ActionType
    guild_id: int
    user_id: int
    moderator_id: int
    reason: str
    expires_at: datetime | None = None
    active: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "reason", truncate_reason(self.reason))


def ban_expiry(now: datetime, delta: timedelta) -> datetime | None:
    """When a ban ends; ``None`` for a permanent (zero length) ban."""
    if delta == timedelta(0):
        return None
    return now + delta


def _header(title: str, db_id: str, actor_id: int, target_id: int) -> str:
    return f"**{title}**\n-# Log ID: `{db_id}` | Actor: <@{actor_id}> | Target: <@{target_id}>"


def _body(reason: str) -> str:
    return f"\n```\n{truncate_reason(reason)}\n```"


def describe_ban(
    db_id: str,
    actor_id: int,
    target_id: int,
    delta: timedelta,
    clear_days: int,
    reason: str,
) -> str:
    """Log description of a ban, with its duration and cleared message days."""
    cleared = f" | Cleared {clear_days} days of messages" if clear_days != 0 else ""
    return (
        _header("MEMBER BANNED", db_id, actor_id, target_id)
        + f" | Duration: {duration_phrase(delta)}{cleared}"
        + _body(reason)
    )


def describe_kick(db_id: str, actor_id: int, target_id: int, reason: str) -> str:
    """Log description of a kick."""
    return _header("MEMBER KICKED", db_id, actor_id, target_id) + _body(reason)


def describe_softban(db_id: str, actor_id: int, target_id: int, reason: str) -> str:
    """Log description of a softban."""
    return _header("MEMBER SOFTBANNED", db_id, actor_id, target_id) + _body(reason)


def describe_unban(db_id: str, actor_id: int, target_id: int, reason: str) -> str:
    """Log description of an unban."""
    return _header("MEMBER UNBANNED", db_id, actor_id, target_id) + _body(reason)


def describe_warn(db_id: str, actor_id: int, target_id: int, reason: str) -> str:
    """Log description of a warning."""
    return _header("MEMBER WARNED", db_id, actor_id, target_id) + _body(reason)