"""Descriptions of member nickname and role updates."""

from __future__ import annotations

from collections.abc import Iterable

NONE_TEXT = "(none)"


def nickname_change(old_nick: str | None, new_nick: str | None, known: bool) -> str:
    """Describe a nickname change; empty if the old nickname is unknown or unchanged."""
    if not known or old_nick == new_nick:
        return ""
    old = old_nick if old_nick is not None else NONE_TEXT
    new = new_nick if new_nick is not None else NONE_TEXT
    return f"\n\nName:\n`{old}` -> `{new}`"


def _mentions(role_ids: Iterable[int]) -> str:
    return " ".join(f"<@&{role_id}>" for role_id in sorted(role_ids))


def role_changes(old_roles: Iterable[int] | None, new_roles: Iterable[int] | None) -> str:
    """Describe roles added and removed; empty if unknown or nothing changed."""
    if old_roles is None or new_roles is None:
        return ""
    old_set, new_set = set(old_roles), set(new_roles)
    added = _mentions(new_set - old_set)
    removed = _mentions(old_set - new_set)
    if not added and not removed:
        return ""
    parts = []
    if added:
        parts.append(f"+{added}")
    if removed:
        parts.append(f"-{removed}")
    return "\n\nRoles:\n" + "\n".join(parts)


def should_log(user_id: int, moderator_id: int | None, name: str, roles: str) -> bool:
    """Whether an update is worth logging.

    Nothing changed, or only roles changed by the member themselves, is skipped.
    """
    if not name and not roles:
        return False
    if not name and (moderator_id or 0) == user_id:
        return False
    return True


def describe_member_update(
    user_id: int,
    moderator_id: int | None,
    reason: str | None,
    name: str,
    roles: str,
) -> str:
    """Log description of a member update."""
    moderator = f" | Actor: <@{moderator_id}>" if moderator_id is not None else ""
    reason_text = f"\nReason:\n```{reason} ```" if reason is not None else ""
    return f"**MEMBER UPDATE**\n-# <@{user_id}>{moderator}{name}{reason_text}{roles}"