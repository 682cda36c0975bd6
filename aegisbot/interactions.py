"""Handling of button interactions on log messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

VIEW_REF_PREFIX = "view_ref:"
DISABLE_ENCRYPTION_ID = "disable_encryption"

REFERENCE_MISSING = "This reference could not be found in the database."
REFERENCE_EMPTY = "This reference is empty."
ENCRYPTION_DISABLED = (
    "**ENCRYPTION DISABLED**\nAll previously cached messages have been wiped."
)
ENCRYPTION_DENIED = (
    "You do not have permission to disable encryption. "
    "Only Administrators can do this."
)


class ComponentKind(Enum):
    """Buttons the bot responds to."""

    VIEW_REFERENCE = auto()
    DISABLE_ENCRYPTION = auto()


@dataclass(frozen=True)
class ComponentAction:
    """A recognised button press; ``reference_id`` is set for reference views."""

    kind: ComponentKind
    reference_id: str | None = None


def parse_custom_id(custom_id: str) -> ComponentAction | None:
    """Interpret a component's custom id, or ``None`` if it is not handled."""
    if custom_id.startswith(VIEW_REF_PREFIX):
        action_id = custom_id
        while action_id.startswith(VIEW_REF_PREFIX):
            action_id = action_id[len(VIEW_REF_PREFIX):]
        return ComponentAction(ComponentKind.VIEW_REFERENCE, action_id)
    if custom_id == DISABLE_ENCRYPTION_ID:
        return ComponentAction(ComponentKind.DISABLE_ENCRYPTION)
    return None


def reference_response(found: bool, has_content: bool) -> str | None:
    """Ephemeral text for a reference view, or ``None`` when its contents are shown."""
    if not found:
        return REFERENCE_MISSING
    if not has_content:
        return REFERENCE_EMPTY
    return None


def disable_encryption_response(is_admin: bool | None) -> tuple[str, bool] | None:
    """Reply ``(content, ephemeral)`` to a disable-encryption press.

    ``is_admin`` is ``None`` when the presser's permissions could not be
    determined; that is answered with a refusal. A known non-administrator
    gets no reply at all.
    """
    if is_admin is None:
        return ENCRYPTION_DENIED, True
    if not is_admin:
        return None
    return ENCRYPTION_DISABLED, False