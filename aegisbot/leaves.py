"""Working out whether a member left, was kicked or was banned."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto

NO_REASON = "No reason provided"
MATCH_WINDOW_SECONDS = 5
KICK_ACTION = "kick"
BAN_ACTION = "ban"


class LeaveKind(Enum):
    """How a member came to leave a guild."""

    USER = auto()
    KICK = auto()
    BAN = auto()


@dataclass(frozen=True)
class LeaveType:
    """A classified leave; kicks and bans carry who did it and why."""

    kind: LeaveKind
    actor_id: int | None = None
    reason: str | None = None


@dataclass(frozen=True)
class AuditRecord:
    """A member audit log entry; ``action`` is ``"kick"``, ``"ban"`` or another name."""

    action: str
    user_id: int
    created_at: datetime
    target_id: int | None = None
    reason: str | None = None


def classify_leave(
    user_id: int, entries: Iterable[AuditRecord], now: datetime
) -> LeaveType:
    """Classify a leave from recent audit log entries about the member."""
    for entry in entries:
        elapsed = int((now - entry.created_at).total_seconds())
        if abs(elapsed) > MATCH_WINDOW_SECONDS:
            continue
        if entry.target_id is not None and entry.target_id != user_id:
            continue
        kind = {KICK_ACTION: LeaveKind.KICK, BAN_ACTION: LeaveKind.BAN}.get(entry.action)
        if kind is None:
            continue
        if entry.target_id == user_id:
            reason = entry.reason if entry.reason is not None else NO_REASON
            return LeaveType(kind, entry.user_id, reason)
        break
    return LeaveType(LeaveKind.USER)


_TITLES = {LeaveKind.KICK: "MEMBER KICKED", LeaveKind.BAN: "MEMBER BANNED"}


def describe_leave(leave: LeaveType, target_id: int) -> str | None:
    """Log description of a kick or ban; ``None`` for a voluntary leave."""
    title = _TITLES.get(leave.kind)
    if title is None:
        return None
    return (
        f"**{title}**\n-# Actor: <@{leave.actor_id}> | Target: <@{target_id}>"
        f"\n```\n{leave.reason}\n```"
    )