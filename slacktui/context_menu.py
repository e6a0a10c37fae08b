"""The message actions menu: its entries and where it appears."""

from __future__ import annotations

from slacktui.app_state import AppState
from slacktui.models import Rect

MENU_ITEMS: tuple[tuple[str, str], ...] = (
    ("Open thread", "Enter"),
    ("Reply in thread", "R"),
    ("React with emoji", "r"),
    ("Copy message", "y"),
)
MENU_WIDTH = 30
MENU_HEIGHT = len(MENU_ITEMS) + 2


def menu_lines(selected: int) -> list[tuple[str, str, bool]]:
    """Each menu entry as (padded label, padded key hint, is selected)."""
    return [
        (f" {label:20}", f" {key:>5} ", idx == selected)
        for idx, (label, key) in enumerate(MENU_ITEMS)
    ]


def overlay_rect(state: AppState, messages_area: Rect) -> Rect:
    """Area of the menu, just below the selected message and inside the pane."""
    msg_pos = max(max(state.message_count() - 1, 0) - state.selected_message_idx, 0)
    starts = state.message_line_starts
    sel_line = starts[msg_pos] if msg_pos < len(starts) else 0
    info = state.messages_render_info
    scroll_y = info.scroll_y if info is not None else 0
    screen_line = max(sel_line - scroll_y, 0)

    inner_y = messages_area.y + 1
    inner_bottom = messages_area.y + messages_area.height
    menu_y = min(inner_y + screen_line + 1, max(inner_bottom - MENU_HEIGHT, 0))
    menu_x = min(
        messages_area.x + 4,
        max(messages_area.x + messages_area.width - MENU_WIDTH, 0),
    )
    return Rect(
        menu_x,
        menu_y,
        min(MENU_WIDTH, messages_area.width),
        min(MENU_HEIGHT, messages_area.height),
    )