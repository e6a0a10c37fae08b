"""Editable message input with history navigation and a kill ring."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

KILL_RING_LIMIT = 16


@dataclass
class InputLine:
    """Text being composed, its cursor (in characters) and recall history."""

    text: str = ""
    cursor: int = 0
    history: list[str] = field(default_factory=list)
    history_idx: int | None = None
    stash: str = ""
    kill_ring: deque[str] = field(default_factory=lambda: deque(maxlen=KILL_RING_LIMIT))

    def cursor_byte_offset(self) -> int:
        """UTF-8 byte offset of the cursor, clamped to the end of the text."""
        return len(self.text[: self.cursor].encode("utf-8"))

    def char_count(self) -> int:
        """Number of characters in the text."""
        return len(self.text)

    def push_kill_ring(self, text: str) -> None:
        """Remember killed text for yanking; empty text is ignored."""
        if text:
            self.kill_ring.append(text)

    def save_to_history(self) -> None:
        """Store the trimmed text in history (skipping repeats) and clear the line."""
        entry = self.text.strip()
        if entry and (not self.history or self.history[-1] != entry):
            self.history.append(entry)
        self.text = ""
        self.cursor = 0
        self.history_idx = None
        self.stash = ""

    def _recall(self, idx: int) -> None:
        self.history_idx = idx
        self.text = self.history[idx]
        self.cursor = self.char_count()

    def history_prev(self) -> None:
        """Step back to an older history entry, stashing the current text first."""
        if not self.history:
            return
        if self.history_idx is None:
            self.stash = self.text
            self._recall(len(self.history) - 1)
        elif self.history_idx > 0:
            self._recall(self.history_idx - 1)

    def history_next(self) -> None:
        """Step forward to a newer entry, restoring the stashed text past the end."""
        if self.history_idx is None:
            return
        if self.history_idx + 1 < len(self.history):
            self._recall(self.history_idx + 1)
        else:
            self.history_idx = None
            self.text = self.stash
            self.cursor = self.char_count()
            self.stash = ""