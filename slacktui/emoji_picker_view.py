"""Layout and text of the emoji picker overlay."""

from __future__ import annotations

from slacktui.app_state import AppState
from slacktui.models import EmojiPickerSource, Rect

REACT_TITLE = " React \u2014 \u2191\u2193 existing \u00b7 type to search "
EMOJI_TITLE = " Emoji \u2014 type to search "


def _percent(length: int, percent: int) -> int:
    return (length * percent + 50) // 100


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """A rectangle of the given percentages of ``area``, centred within it."""
    width = min(_percent(area.width, percent_x), area.width)
    height = min(_percent(area.height, percent_y), area.height)
    x = area.x + (area.width - width) // 2
    y = area.y + (area.height - height) // 2
    return Rect(x, y, width, height)


def overlay_rect(area: Rect) -> Rect:
    """Area covered by the emoji picker within ``area``."""
    return centered_rect(50, 60, area)


def picker_title(state: AppState) -> str:
    """Title of the picker, which hints at existing reactions when reacting."""
    if (
        state.emoji_picker_source is EmojiPickerSource.REACTION
        and state.emoji_picker_message_reactions
    ):
        return REACT_TITLE
    return EMOJI_TITLE


def status_text(state: AppState) -> str:
    """Text after the search query: match position, no-match notice or nothing."""
    results = state.emoji_picker_results
    if not results:
        return " (no matches)" if state.emoji_picker_query else ""
    return f" [{state.emoji_picker_selected + 1}/{len(results)}]"


def visible_custom_emoji(
    state: AppState, scroll_offset: int, max_visible: int
) -> list[tuple[int, str]]:
    """(result index, name) of custom emoji shown in the scrolled results window."""
    return [
        (idx, name)
        for idx, (name, _, is_custom) in enumerate(state.emoji_picker_results)
        if is_custom and scroll_offset <= idx < scroll_offset + max_visible
    ]