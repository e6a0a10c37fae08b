"""Layout of the sidebar channel list: rows, visual map and scroll offset."""

from __future__ import annotations

from dataclasses import dataclass

from slacktui.app_state import AppState
from slacktui.emoji_table import emoji_for_runtime
from slacktui.models import ChannelListEntry, Focus, InputMode, Rect

DM_TRUNCATE_LIMIT = 10
DM_SECTION_KEY = "__dm__"
CHANNELS_SECTION_KEY = "__channels__"

_COLLAPSED = "\u25b8 "
_EXPANDED = "\u25be "
_PRIVATE_PREFIX = "  \U0001f512 "
_PUBLIC_PREFIX = "  # "
_DM_PREFIX = "  "
# Column, relative to the inner left edge, where a header's emoji is drawn.
_HEADER_EMOJI_COL = 3

Color = "str | tuple[int, int, int]"


@dataclass
class ChannelRow:
    """One rendered row of the channel list with its styling."""

    entry: ChannelListEntry
    text: str
    selected: bool = False
    fg: str | tuple[int, int, int] = "gray"
    bg: str | None = None
    bold: bool = False
    badge: str = ""


def truncate_str(text: str, max_width: int) -> str:
    """Shorten ``text`` to ``max_width`` characters, marking the cut with ``~``."""
    if len(text) <= max_width:
        return text
    if max_width > 1:
        return text[: max_width - 1] + "~"
    return text[:max_width]


def adjust_list_offset(offset: int, visual_idx: int, items_len: int, inner_height: int) -> int:
    """New scroll offset, moved only when the selection enters the top or bottom quarter."""
    if inner_height <= 0 or items_len <= 0:
        return offset
    quarter = inner_height // 4
    margin = max(quarter, 1)
    max_offset = max(items_len - inner_height, 0)
    top_edge = offset + quarter
    bottom_edge = offset + max(inner_height - margin, 0)
    if visual_idx < top_edge:
        offset = max(visual_idx - quarter, 0)
    elif visual_idx >= bottom_edge:
        offset = min(max(visual_idx + margin - inner_height, 0), max_offset)
    return min(offset, max_offset)


def _channel_row(
    state: AppState,
    ch_idx: int,
    visual_idx: int,
    max_name_width: int,
    highlight: bool,
) -> ChannelRow:
    channel = state.channels[ch_idx]
    name_color = None
    if channel.is_im:
        prefix = _DM_PREFIX
        if channel.user is not None:
            name = state.user_display_name(channel.user)
            name_color = state.user_color(channel.user)
        else:
            name = channel.display_name()
    elif channel.is_mpim:
        prefix = _DM_PREFIX
        name = state.mpim_display_name(channel)
    elif channel.is_private:
        prefix = _PRIVATE_PREFIX
        name = channel.display_name()
    else:
        prefix = _PUBLIC_PREFIX
        name = channel.display_name()

    name = truncate_str(name, max(max_name_width - len(prefix.encode("utf-8")), 0))
    selected = visual_idx == state.selected_visual_idx
    has_unread = channel.unread_count_display > 0
    row = ChannelRow(entry=ChannelListEntry.channel(ch_idx), text=prefix + name, selected=selected)

    if selected:
        row.fg, row.bg, row.bold = "black", ("cyan" if highlight else "dark_gray"), True
    elif has_unread:
        row.fg, row.bold = "white", True
    elif name_color is not None:
        row.fg = name_color
    if has_unread and not selected:
        row.badge = f" {channel.unread_count_display}"
    return row


def _section_rows(
    state: AppState, max_name_width: int, is_focused: bool, highlight: bool
) -> tuple[list[ChannelRow], list[tuple[int, str]]]:
    rows: list[ChannelRow] = []
    custom_headers: list[tuple[int, str]] = []

    for sec_idx, section in enumerate(state.channels_by_section()):
        if sec_idx > 0:
            rows.append(ChannelRow(entry=ChannelListEntry.spacer(), text=""))

        indices = section.channel_indices
        first = state.channels[indices[0]] if indices else None
        is_dm_section = (
            section.section_id is None
            and first is not None
            and (first.is_im or first.is_mpim)
        )
        is_collapsed = (
            section.section_id is not None and section.section_id in state.collapsed_sections
        )

        if section.section_id is None:
            indicator = ""
        else:
            indicator = _COLLAPSED if is_collapsed else _EXPANDED

        header_idx = len(rows)
        header_selected = header_idx == state.selected_visual_idx and is_focused
        if section.section_id is not None:
            key = section.section_id
        elif is_dm_section:
            key = DM_SECTION_KEY
        else:
            key = CHANNELS_SECTION_KEY
        header = ChannelRow(
            entry=ChannelListEntry.section_header(key),
            text=f" {indicator}{section.name}",
            selected=header_selected,
            fg="black" if header_selected else "white",
            bg="cyan" if header_selected else None,
            bold=True,
        )
        rows.append(header)
        if section.emoji and emoji_for_runtime(section.emoji, state.standard_emoji) is None:
            custom_headers.append((header_idx, section.emoji))

        if is_collapsed:
            continue

        if is_dm_section and not state.dm_list_expanded:
            visible = indices[:DM_TRUNCATE_LIMIT]
        else:
            visible = indices
        hidden = len(indices) - len(visible)

        for ch_idx in visible:
            rows.append(_channel_row(state, ch_idx, len(rows), max_name_width, highlight))

        if hidden > 0:
            more_selected = len(rows) == state.selected_visual_idx and is_focused
            rows.append(
                ChannelRow(
                    entry=ChannelListEntry.dm_more(),
                    text=f"  {hidden} more...",
                    selected=more_selected,
                    fg="black" if more_selected else "dark_gray",
                    bg="cyan" if more_selected else None,
                )
            )
    return rows, custom_headers


def build_channel_list(state: AppState, area: Rect) -> list[ChannelRow]:
    """Lay out the channel list for ``area`` and record its visual map in ``state``.

    Also updates the list's scroll offset and places custom emoji images that
    appear in visible section headers.
    """
    is_focused = state.focus is Focus.CHANNEL_LIST
    is_searching = state.input_mode is InputMode.SEARCH
    highlight = is_focused or is_searching
    max_name_width = max(area.width - 5, 0)

    if is_searching:
        rows = [
            _channel_row(state, ch_idx, vis_idx, max_name_width, highlight)
            for vis_idx, ch_idx in enumerate(state.filtered_channel_indices())
        ]
        custom_headers: list[tuple[int, str]] = []
    else:
        rows, custom_headers = _section_rows(state, max_name_width, is_focused, highlight)

    state.channel_list_items = [row.entry for row in rows]

    items_len = len(rows)
    visual_idx = min(state.selected_visual_idx, max(items_len - 1, 0))
    inner_height = max(area.height - 2, 0)
    offset = adjust_list_offset(state.channel_list_offset, visual_idx, items_len, inner_height)
    state.channel_list_offset = min(offset, max(items_len - 1, 0))

    inner_x = area.x + 1
    inner_y = area.y + 1
    for vis_idx, emoji_name in custom_headers:
        row_in_view = vis_idx - state.channel_list_offset
        if 0 <= row_in_view < inner_height:
            state.emoji.place_inline_emoji(
                emoji_name, inner_y + row_in_view, inner_x + _HEADER_EMOJI_COL
            )

    return rows