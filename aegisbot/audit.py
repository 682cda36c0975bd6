"""Descriptions of channel and role audit log entries."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

ARROW = "→"
UNKNOWN_TARGET = "(unknown)"


class ChannelAction(Enum):
    """Channel related audit log actions."""

    CREATE = auto()
    UPDATE = auto()
    DELETE = auto()
    OVERWRITE_CREATE = auto()
    OVERWRITE_UPDATE = auto()
    OVERWRITE_DELETE = auto()


class RoleAction(Enum):
    """Role related audit log actions."""

    CREATE = auto()
    UPDATE = auto()
    DELETE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Change:
    """One changed field of an audit log entry.

    ``kind`` names the field, e.g. ``"name"``, ``"topic"``, ``"nsfw"``,
    ``"bitrate"``, ``"rate_limit_per_user"``, ``"user_limit"``, ``"position"``,
    ``"color"``, ``"hoist"``, ``"mentionable"`` or ``"permissions"``.
    """

    kind: str
    old: Any = None
    new: Any = None


@dataclass
class AuditEntry:
    """The parts of an audit log entry that are logged."""

    user_id: int
    target_id: int | None = None
    reason: str | None = None
    changes: list[Change] | None = field(default=None)


def field_diff(label: str, old: str | None, new: str | None) -> str:
    """Render the change of one field, or an empty string if nothing changed."""
    if old is not None and new is not None:
        return f"{label}: `{old}` {ARROW} `{new}`" if old != new else ""
    if old is None and new is not None:
        return f"{label}: (none) {ARROW} `{new}`"
    if old is not None:
        return f"{label}: `{old}` {ARROW} (none)"
    return ""


def _mapped(value: Any, render: Callable[[Any], str]) -> str | None:
    return None if value is None else render(value)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


_Formatter = tuple[str, Callable[[Any], str]]

_CHANNEL_FIELDS: dict[str, _Formatter] = {
    "name": ("Name", str),
    "topic": ("Topic", str),
    "nsfw": ("NSFW", _yes_no),
    "bitrate": ("Bitrate", lambda v: f"{v}bps"),
    "rate_limit_per_user": ("Slowmode", lambda v: f"{v}s"),
    "user_limit": ("User Limit", str),
    "position": ("Position", str),
}

_ROLE_FIELDS: dict[str, _Formatter] = {
    "name": ("Name", str),
    "color": ("Color", lambda v: f"#{v:06X}"),
    "hoist": ("Hoisted", _yes_no),
    "mentionable": ("Mentionable", _yes_no),
    "permissions": ("Permissions", lambda v: f"`{v}`"),
}


def _format_changes(changes: Iterable[Change], fields: dict[str, _Formatter]) -> str:
    lines = []
    for change in changes:
        known = fields.get(change.kind)
        if known is None:
            continue
        label, render = known
        lines.append(field_diff(label, _mapped(change.old, render), _mapped(change.new, render)))
    return "\n".join(lines)


def format_channel_changes(changes: Iterable[Change]) -> str:
    """Render the channel fields among ``changes``, one per line."""
    return _format_changes(changes, _CHANNEL_FIELDS)


def format_role_changes(changes: Iterable[Change]) -> str:
    """Render the role fields among ``changes``, one per line."""
    return _format_changes(changes, _ROLE_FIELDS)


def _describe(
    entry: AuditEntry,
    label: str,
    mention: str,
    diff: Callable[[Iterable[Change]], str] | None,
) -> str:
    description = f"**{label} {mention}**\n-# Actor: <@{entry.user_id}>"
    if diff is not None and entry.changes is not None:
        rendered = diff(entry.changes)
        if rendered:
            description += f"\n{rendered}"
    if entry.reason is not None:
        description += f"\nReason:\n```{entry.reason} ```"
    return description


_CHANNEL_LABELS = {
    ChannelAction.CREATE: "CHANNEL CREATED",
    ChannelAction.UPDATE: "CHANNEL UPDATED",
    ChannelAction.DELETE: "CHANNEL DELETED",
}

_ROLE_LABELS = {
    RoleAction.CREATE: "ROLE CREATED",
    RoleAction.UPDATE: "ROLE UPDATED",
    RoleAction.DELETE: "ROLE DELETED",
}


def describe_channel_action(entry: AuditEntry, action: ChannelAction) -> str | None:
    """Log description for a channel action, or ``None`` if it is not logged."""
    label = _CHANNEL_LABELS.get(action)
    if label is None:
        return None
    mention = f"<#{entry.target_id}>" if entry.target_id is not None else UNKNOWN_TARGET
    diff = format_channel_changes if action is ChannelAction.UPDATE else None
    return _describe(entry, label, mention, diff)


def describe_role_action(entry: AuditEntry, action: RoleAction) -> str | None:
    """Log description for a role action, or ``None`` if it is not logged."""
    label = _ROLE_LABELS.get(action)
    if label is None:
        return None
    mention = f"<@&{entry.target_id}>" if entry.target_id is not None else UNKNOWN_TARGET
    diff = format_role_changes if action is RoleAction.UPDATE else None
    return _describe(entry, label, mention, diff)