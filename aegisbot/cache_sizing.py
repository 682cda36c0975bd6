"""Adaptive per-channel message cache sizes."""

from __future__ import annotations

import math
from collections.abc import Mapping

DEFAULT_CHANNEL_SIZE = 100
GROW_THRESHOLD = 0.4
SHRINK_THRESHOLD = 0.2
GROW_FACTOR = 1.2
SHRINK_FACTOR = 0.8


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else -math.floor(-value + 0.5)


def resize_channels(inserts: Mapping[int, int], sizes: Mapping[int, int]) -> dict[int, int]:
    """Return new cache sizes given the inserts seen per channel since the last pass.

    A channel that received more than 40% of its size grows by 20%; one that
    received fewer than 20% shrinks by 20%. Channels seen for the first time
    start at the default size.
    """
    resized = dict(sizes)
    for channel, count in inserts.items():
        size = resized.setdefault(channel, DEFAULT_CHANNEL_SIZE)
        if count > size * GROW_THRESHOLD:
            resized[channel] = _round_half_away(size * GROW_FACTOR)
        elif count < size * SHRINK_THRESHOLD:
            resized[channel] = _round_half_away(size * SHRINK_FACTOR)
    return resized


def store_rows(sizes: Mapping[int, int]) -> list[tuple[int, int, int]]:
    """Rows of ``(channel_id, message_count, previous_action)`` for persisting sizes."""
    return [(channel, count, 0) for channel, count in sorted(sizes.items())]