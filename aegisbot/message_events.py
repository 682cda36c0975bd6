"""Log descriptions for edited and deleted messages."""

from __future__ import annotations

import difflib
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

NO_CONTENT = "(no content)"
INLINE_LIMIT = 500
ACTOR_WINDOW_SECONDS = 5
_FENCE = "```"
_ESCAPED_FENCE = "\\`\\`\\`"
_NOT_CACHED = "\n-# Previous message content not found in cache"


@dataclass(frozen=True)
class EditLog:
    """What is posted for an edited message.

    ``attachment`` is ``(filename, data)`` when the content is too long to show
    inline. ``logged_content`` is the previous content kept as log context.
    """

    description: str
    attachment: tuple[str, bytes] | None = None
    logged_content: str | None = None


@dataclass(frozen=True)
class DeleteAuditEntry:
    """A message deletion entry from the guild audit log."""

    user_id: int
    created_at: datetime
    target_id: int | None = None
    channel_id: int | None = None


def escape_code_fences(text: str) -> str:
    """Escape triple backticks so the text cannot break out of a code block."""
    return text.replace(_FENCE, _ESCAPED_FENCE)


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def _unified_diff(old: str, new: str) -> str:
    lines = difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile="before",
        tofile="after",
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


def describe_edit(
    message_id: int,
    author_id: int,
    channel_id: int,
    guild_id: int,
    old_content: str | None,
    new_content: str,
) -> EditLog:
    """Build the log entry for an edit; ``old_content`` is ``None`` when not cached."""
    new_content = new_content or NO_CONTENT
    base = (
        f"**MESSAGE EDITED**\n-# ID: {message_id} "
        f"[jump](https://discord.com/channels/{guild_id}/{channel_id}/{message_id}) "
        f"| Target: <@{author_id}> | Channel: <#{channel_id}>"
    )
    logged = old_content if old_content else None

    if old_content is None:
        if _byte_length(new_content) > INLINE_LIMIT:
            return EditLog(
                description=base + _NOT_CACHED,
                attachment=("new.txt", new_content.encode("utf-8")),
                logged_content=logged,
            )
        return EditLog(
            description=(
                f"{base}{_NOT_CACHED}\nAfter:\n```\n{escape_code_fences(new_content)}\n```"
            ),
            logged_content=logged,
        )

    old_content = old_content or NO_CONTENT
    if _byte_length(old_content) > INLINE_LIMIT or _byte_length(new_content) > INLINE_LIMIT:
        diff = _unified_diff(old_content, new_content)
        return EditLog(
            description=base,
            attachment=("msg.diff", diff.encode("utf-8")),
            logged_content=logged,
        )
    return EditLog(
        description=(
            f"{base}\nBefore:```\n{escape_code_fences(old_content)}\n```"
            f"\nAfter:\n```\n{escape_code_fences(new_content)}\n```"
        ),
        logged_content=logged,
    )


def find_delete_actor(
    entries: Sequence[DeleteAuditEntry],
    author_id: int,
    channel_id: int,
    now: datetime,
) -> int | None:
    """Who deleted someone else's message, judged from the latest audit entry."""
    if not entries:
        return None
    entry = entries[0]
    elapsed = int((now - entry.created_at).total_seconds())
    if (
        abs(elapsed) <= ACTOR_WINDOW_SECONDS
        and entry.target_id is not None
        and entry.channel_id is not None
        and entry.target_id == author_id
        and entry.channel_id == channel_id
    ):
        return entry.user_id
    return None


def describe_delete(
    message_id: int,
    channel_id: int,
    content: str,
    target_id: int | None,
    actor_id: int | None,
) -> str:
    """Log description for a deleted message."""
    parts = [f"**MESSAGE DELETED**\n-# ID: {message_id} "]
    if target_id is not None:
        parts.append(f"| Target: <@{target_id}> ")
    if actor_id is not None:
        parts.append(f"| Actor: <@{actor_id}> ")
    parts.append(f"| Channel: <#{channel_id}> ")
    body = f"```\n{content} \n```" if content else ""
    parts.append(f"\n{body}")
    return "".join(parts)