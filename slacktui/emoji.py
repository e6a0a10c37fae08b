"""Replacement of ``:shortcode:`` sequences in message text with Unicode emoji."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from slacktui.emoji_table import emoji_for, emoji_for_runtime

# Largest distance, in characters, between an opening colon and its closing one.
_MAX_SHORTCODE_SPAN = 64

_SKIN_TONE_MODIFIERS = frozenset(
    {"skin-tone-2", "skin-tone-3", "skin-tone-4", "skin-tone-5", "skin-tone-6"}
)


def _is_shortcode_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "_-+"


def _closing_colon(text: str, start: int) -> int | None:
    """Return the index of the colon closing a shortcode opened at ``start``."""
    limit = min(len(text), start + 1 + _MAX_SHORTCODE_SPAN)
    for pos in range(start + 1, limit):
        char = text[pos]
        if char == ":":
            return pos
        if not _is_shortcode_char(char):
            return None
    return None


def _replace(text: str, lookup: Callable[[str], str | None]) -> str:
    if ":" not in text:
        return text

    parts: list[str] = []
    pos = 0
    length = len(text)
    while pos < length:
        if text[pos] != ":":
            nxt = text.find(":", pos)
            if nxt == -1:
                nxt = length
            parts.append(text[pos:nxt])
            pos = nxt
            continue

        end = _closing_colon(text, pos)
        shortcode = text[pos + 1 : end] if end is not None else ""
        if shortcode:
            if shortcode in _SKIN_TONE_MODIFIERS:
                pos = end + 1
                continue
            emoji = lookup(shortcode)
            if emoji is not None:
                parts.append(emoji)
                pos = end + 1
                continue
        parts.append(":")
        pos += 1

    return "".join(parts)


def replace_emoji_shortcodes(text: str) -> str:
    """Replace known ``:shortcode:`` patterns using the built-in table.

    Skin-tone modifiers are dropped and unknown shortcodes are left as they are.
    """
    return _replace(text, emoji_for)


def replace_emoji_shortcodes_with_map(text: str, standard_emoji: Mapping[str, str]) -> str:
    """Replace shortcodes, preferring ``standard_emoji`` over the built-in table."""
    return _replace(text, lambda code: emoji_for_runtime(code, standard_emoji))