"""Custom emoji resolution, image caching and emoji picker filtering."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from slacktui.emoji_standard import all_standard_emoji
from slacktui.models import CachedImage, EmojiPickerSource, InlineEmojiPlacement

_ALIAS_PREFIX = "alias:"
_MAX_ALIAS_HOPS = 5


@dataclass
class EmojiStore:
    """Workspace custom emoji, their loaded images and pending loads."""

    # name -> image URL or "alias:<other name>"
    custom_emoji: dict[str, str] = field(default_factory=dict)
    custom_emoji_images: dict[str, CachedImage] = field(default_factory=dict)
    pending_emoji_images: set[str] = field(default_factory=set)
    emoji_load_queue: list[str] = field(default_factory=list)
    inline_emoji_placements: list[InlineEmojiPlacement] = field(default_factory=list)

    def _resolve(self, name: str) -> tuple[str, str] | None:
        """Follow aliases from ``name``; return (base name, URL) or None."""
        current = name
        for _ in range(_MAX_ALIAS_HOPS):
            value = self.custom_emoji.get(current)
            if value is None:
                return None
            if not value.startswith(_ALIAS_PREFIX):
                return current, value
            current = value[len(_ALIAS_PREFIX) :]
        return None

    def resolve_custom_emoji(self, name: str) -> str | None:
        """URL of a custom emoji, following at most five alias hops."""
        resolved = self._resolve(name)
        return resolved[1] if resolved else None

    def resolve_emoji_key(self, name: str) -> str | None:
        """Base name of a custom emoji, used as its image cache key."""
        resolved = self._resolve(name)
        return resolved[0] if resolved else None

    def has_emoji_image(self, name: str) -> bool:
        """Whether the image for ``name`` is loaded."""
        key = self.resolve_emoji_key(name)
        return key is not None and key in self.custom_emoji_images

    def emoji_image(self, name: str) -> CachedImage | None:
        """The loaded image for ``name``, if any."""
        key = self.resolve_emoji_key(name)
        return None if key is None else self.custom_emoji_images.get(key)

    def _enqueue(self, key: str) -> None:
        if key not in self.custom_emoji_images and key not in self.pending_emoji_images:
            self.emoji_load_queue.append(key)

    def request_emoji_load(self, name: str) -> None:
        """Queue the image for ``name`` for loading unless it is loaded or pending."""
        key = self.resolve_emoji_key(name)
        if key is not None:
            self._enqueue(key)

    def place_inline_emoji(self, name: str, screen_row: int, screen_col: int) -> bool:
        """Place a loaded emoji image on screen; otherwise queue it and return False."""
        key = self.resolve_emoji_key(name)
        if key is None:
            return False
        if key in self.custom_emoji_images:
            self.inline_emoji_placements.append(
                InlineEmojiPlacement(emoji_key=key, screen_row=screen_row, screen_col=screen_col)
            )
            return True
        if key not in self.pending_emoji_images:
            self.emoji_load_queue.append(key)
        return False


def filter_emoji(
    query: str,
    standard_emoji: Mapping[str, str],
    custom_emoji: Mapping[str, str],
    source: EmojiPickerSource,
    message_reactions: Sequence[tuple[str, bool]],
) -> list[tuple[str, str, bool]]:
    """Emoji picker results as (name, display, is_custom) tuples.

    Names containing the query match; prefix matches come first. When reacting,
    reactions already on the message are moved to the top in their own order.
    """
    query = query.lower()
    standard = standard_emoji.items() if standard_emoji else all_standard_emoji()

    results: list[tuple[str, str, bool]] = [
        (name, display, False) for name, display in standard if not query or query in name
    ]
    results += [
        (name, f":{name}:", True) for name in custom_emoji if not query or query in name
    ]

    if query:
        results.sort(key=lambda item: (not item[0].startswith(query), item[0]))

    if source is EmojiPickerSource.REACTION and message_reactions:
        order = {}
        for pos, (name, _) in enumerate(message_reactions):
            order.setdefault(name, pos)
        on_message = [item for item in results if item[0] in order]
        rest = [item for item in results if item[0] not in order]
        on_message.sort(key=lambda item: order[item[0]])
        results = on_message + rest

    return results