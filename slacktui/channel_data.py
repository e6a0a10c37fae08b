"""Per-channel message storage: the main timeline, thread replies and reactions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from slacktui.models import Message, Reaction

MAX_CHANNEL_MESSAGES = 500


def _is_thread_reply(msg: Message) -> bool:
    return msg.thread_ts is not None and msg.thread_ts != msg.ts


def _find_message(messages: Iterable[Message], ts: str) -> Message | None:
    return next((m for m in messages if m.ts == ts), None)


def _add_reaction_to(messages: Iterable[Message], ts: str, reaction: str, user: str) -> None:
    msg = _find_message(messages, ts)
    if msg is None:
        return
    existing = next((r for r in msg.reactions if r.name == reaction), None)
    if existing is None:
        msg.reactions.append(Reaction(name=reaction, count=1, users=[user]))
    elif user not in existing.users:
        existing.users.append(user)
        existing.count += 1


def _remove_reaction_from(messages: Iterable[Message], ts: str, reaction: str, user: str) -> None:
    msg = _find_message(messages, ts)
    if msg is None:
        return
    existing = next((r for r in msg.reactions if r.name == reaction), None)
    if existing is None:
        return
    existing.users = [u for u in existing.users if u != user]
    existing.count = max(existing.count - 1, 0)
    if existing.count == 0:
        msg.reactions = [r for r in msg.reactions if r.name != reaction]


@dataclass
class ChannelData:
    """Messages and threads loaded for one channel."""

    messages: deque[Message] = field(default_factory=deque)
    has_more_history: bool = False
    loading_more_history: bool = False
    last_activity: str = ""
    # parent ts -> replies, oldest first
    threads: dict[str, list[Message]] = field(default_factory=dict)

    def touch_activity(self, ts: str) -> None:
        """Remember ``ts`` as the latest activity if it is newer than the current one."""
        if ts > self.last_activity:
            self.last_activity = ts

    def push_message(self, msg: Message) -> None:
        """Add a live message to the timeline or to its thread, ignoring duplicates."""
        self.touch_activity(msg.ts)

        if _is_thread_reply(msg):
            replies = self.threads.setdefault(msg.thread_ts, [])
            if _find_message(replies, msg.ts) is None:
                replies.append(msg)
        elif _find_message(self.messages, msg.ts) is None:
            self.messages.append(msg)

        while len(self.messages) > MAX_CHANNEL_MESSAGES:
            self.messages.popleft()

    def set_thread_replies(self, parent_ts: str, messages: list[Message]) -> None:
        """Replace the stored replies of a thread."""
        self.threads[parent_ts] = messages

    def thread_replies(self, parent_ts: str) -> list[Message] | None:
        """Return the stored replies of a thread, or None if it was never loaded."""
        return self.threads.get(parent_ts)

    def add_reaction(self, ts: str, reaction: str, user: str) -> None:
        """Record ``user`` reacting with ``reaction`` on the message ``ts``."""
        _add_reaction_to(self.messages, ts, reaction, user)
        for replies in self.threads.values():
            _add_reaction_to(replies, ts, reaction, user)

    def remove_reaction(self, ts: str, reaction: str, user: str) -> None:
        """Withdraw ``user``'s ``reaction`` from the message ``ts``."""
        _remove_reaction_from(self.messages, ts, reaction, user)
        for replies in self.threads.values():
            _remove_reaction_from(replies, ts, reaction, user)