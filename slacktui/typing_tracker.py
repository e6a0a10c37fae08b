"""Tracking of who is typing in which channel."""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass, field

# Seconds after which a typing indicator is considered stale.
TYPING_TIMEOUT = 5.0


@dataclass
class TypingTracker:
    """Remembers when each user last typed, per channel."""

    # channel id -> {user id: time of last typing event}
    channels: dict[str, dict[str, float]] = field(default_factory=dict)

    def record(self, channel_id: str, user_id: str, now: float | None = None) -> None:
        """Note that ``user_id`` is typing in ``channel_id`` at time ``now``."""
        when = time.monotonic() if now is None else now
        self.channels.setdefault(channel_id, {})[user_id] = when

    def expire(self, now: float | None = None) -> bool:
        """Drop indicators older than the timeout; return True if any were dropped."""
        current = time.monotonic() if now is None else now
        changed = False
        for channel_id in list(self.channels):
            entries = self.channels[channel_id]
            fresh = {
                uid: when for uid, when in entries.items() if current - when < TYPING_TIMEOUT
            }
            if len(fresh) != len(entries):
                changed = True
            if fresh:
                self.channels[channel_id] = fresh
            else:
                del self.channels[channel_id]
        return changed

    def users(self, channel_id: str) -> list[str]:
        """User ids currently typing in ``channel_id``, in the order they started."""
        return list(self.channels.get(channel_id, {}))


def format_typing(names: Sequence[str]) -> str | None:
    """Describe who is typing, or None when nobody is."""
    if not names:
        return None
    if len(names) == 1:
        return f"{names[0]} is typing..."
    if len(names) == 2:
        return f"{names[0]} and {names[1]} are typing..."
    return f"{names[0]} and {len(names) - 1} others are typing..."