"""Whole-application state of the chat client and the operations on it."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from slacktui.channel_data import ChannelData
from slacktui.emoji_store import EmojiStore, filter_emoji
from slacktui.input_line import InputLine
from slacktui.models import (
    CachedImage,
    Channel,
    ChannelListEntry,
    ChannelSection,
    EmojiPickerSource,
    Focus,
    ImagePlacement,
    InputMode,
    Message,
    Rect,
    RenderInfo,
    User,
    parse_hex_color,
)
from slacktui.sections import Section, channels_by_section
from slacktui.typing_tracker import TypingTracker, format_typing

DEFAULT_USER_COLOR = "green"
_MPIM_PREFIX = "mpdm-"


@dataclass
class AppState:
    """Everything the client knows and shows at a given moment."""

    # Connection
    connected: bool = False
    self_user_id: str = ""
    team_id: str = ""
    team_name: str = ""

    # Channels
    channels: list[Channel] = field(default_factory=list)
    selected_channel_idx: int = 0
    channel_activity: dict[str, str] = field(default_factory=dict)
    channel_filter: str = ""
    channel_filter_active: bool = False
    channel_data: dict[str, ChannelData] = field(default_factory=dict)

    # Message view
    scroll_offset: int = 0
    max_scroll_offset: int = 0
    selected_message_idx: int = 0  # 0 = newest
    messages_scroll_override: int | None = None

    # Thread view
    thread_channel_id: str | None = None
    thread_parent_ts: str | None = None
    thread_scroll_offset: int = 0
    thread_max_scroll_offset: int = 0

    typing: TypingTracker = field(default_factory=TypingTracker)
    user_cache: dict[str, User] = field(default_factory=dict)

    # Input
    input: InputLine = field(default_factory=InputLine)
    input_mode: InputMode = InputMode.NORMAL
    reply_to_thread: bool = False
    input_scroll: int = 0
    # channel id -> (text, cursor, reply_to_thread)
    channel_drafts: dict[str, tuple[str, int, bool]] = field(default_factory=dict)

    # File upload and reactions
    file_path_input: str = ""
    file_path_cursor: int = 0
    upload_status: str | None = None
    reaction_input: str = ""

    # Message search
    message_search_query: str = ""
    message_search_active: bool = False
    message_search_results: list[int] = field(default_factory=list)
    message_search_results_set: set[int] = field(default_factory=set)
    message_search_idx: int = 0

    # Overlays
    show_help: bool = False
    show_context_menu: bool = False
    context_menu_selected: int = 0
    clipboard_pending: str | None = None
    message_line_starts: list[int] = field(default_factory=list)

    # Images
    image_cache: dict[str, CachedImage] = field(default_factory=dict)
    pending_images: set[str] = field(default_factory=set)
    image_placements: list[ImagePlacement] = field(default_factory=list)
    messages_render_info: RenderInfo | None = None
    thread_placements: list[ImagePlacement] = field(default_factory=list)
    thread_render_info: RenderInfo | None = None
    occlusion_rects: list[Rect] = field(default_factory=list)

    # Emoji
    standard_emoji: dict[str, str] = field(default_factory=dict)
    emoji: EmojiStore = field(default_factory=EmojiStore)

    # Avatars
    avatar_images: dict[str, CachedImage] = field(default_factory=dict)
    pending_avatar_images: set[str] = field(default_factory=set)
    avatar_load_queue: list[str] = field(default_factory=list)

    # Sections
    channel_sections: list[ChannelSection] = field(default_factory=list)
    collapsed_sections: set[str] = field(default_factory=set)
    dm_list_expanded: bool = False

    # Emoji picker
    emoji_picker_query: str = ""
    emoji_picker_selected: int = 0
    emoji_picker_results: list[tuple[str, str, bool]] = field(default_factory=list)
    emoji_picker_source: EmojiPickerSource = EmojiPickerSource.REACTION
    emoji_picker_message_reactions: list[tuple[str, bool]] = field(default_factory=list)
    emoji_picker_inline_colon_pos: int | None = None

    # User picker
    user_picker_query: str = ""
    user_picker_selected: int = 0
    user_picker_results: list[tuple[str, str]] = field(default_factory=list)

    # Channel list as rendered
    channel_list_items: list[ChannelListEntry] = field(default_factory=list)
    channel_list_offset: int = 0
    selected_visual_idx: int = 0
    channels_need_resort: bool = False

    # Global search
    global_search_query: str = ""
    global_search_results: list[Any] = field(default_factory=list)
    global_search_selected: int = 0
    global_search_loading: bool = False
    global_search_total: int = 0

    # Pane areas for mouse hit testing
    channel_list_area: Rect = field(default_factory=Rect)
    messages_area: Rect = field(default_factory=Rect)
    thread_area: Rect | None = None
    input_area: Rect = field(default_factory=Rect)

    # Performance overlay
    show_fps: bool = False
    last_frame_time: float = 0.0
    frame_count: int = 0

    # UI
    focus: Focus = Focus.CHANNEL_LIST
    dirty: bool = True
    last_error: str | None = None

    # ----- channels -------------------------------------------------------

    def active_channel_id(self) -> str | None:
        channel = self.active_channel()
        return channel.id if channel is not None else None

    def active_channel(self) -> Channel | None:
        if 0 <= self.selected_channel_idx < len(self.channels):
            return self.channels[self.selected_channel_idx]
        return None

    def _sorted_channels(self, channels: list[Channel]) -> list[Channel]:
        """Unread first, then most recent activity, then channels before DMs, then name."""
        activity = self.channel_activity
        ordered = sorted(channels, key=lambda c: c.display_name())
        ordered.sort(key=lambda c: c.is_im or c.is_mpim)
        ordered.sort(key=lambda c: activity.get(c.id, ""), reverse=True)
        ordered.sort(key=lambda c: c.unread_count_display <= 0)
        return ordered

    def _apply_channels(self, channels: list[Channel]) -> None:
        selected_id = self.active_channel_id()
        self.channels = self._sorted_channels(channels)
        if selected_id is not None:
            pos = next((i for i, c in enumerate(self.channels) if c.id == selected_id), None)
            if pos is not None:
                self.selected_channel_idx = pos

    def set_channels(self, channels: list[Channel]) -> None:
        """Replace the channel list, sorted, keeping the selected channel selected."""
        self._apply_channels(list(channels))

    def resort_channels(self) -> None:
        """Re-sort the channels after activity changed."""
        self._apply_channels(self.channels)

    def channel_data_for(self, channel_id: str) -> ChannelData | None:
        return self.channel_data.get(channel_id)

    def channel_data_mut(self, channel_id: str) -> ChannelData:
        """The data of a channel, created empty if it does not exist yet."""
        data = self.channel_data.get(channel_id)
        if data is None:
            data = self.channel_data[channel_id] = ChannelData()
        return data

    def touch_channel_activity(self, channel_id: str, ts: str) -> None:
        if ts > self.channel_activity.get(channel_id, ""):
            self.channel_activity[channel_id] = ts
        self.channel_data_mut(channel_id).touch_activity(ts)

    def _search_name(self, channel: Channel) -> str:
        if channel.is_im and channel.user is not None:
            return self.user_display_name(channel.user)
        return channel.display_name()

    def filtered_channel_indices(self) -> list[int]:
        """Indices of channels whose name contains the active filter."""
        if not self.channel_filter_active or not self.channel_filter:
            return list(range(len(self.channels)))
        query = self.channel_filter.lower()
        return [
            idx
            for idx, channel in enumerate(self.channels)
            if query in self._search_name(channel).lower()
        ]

    # ----- history --------------------------------------------------------

    def set_history(self, channel_id: str, messages: list[Message], has_more: bool) -> None:
        """Install history given newest first; it is stored oldest first."""
        if messages:
            self.touch_channel_activity(channel_id, messages[0].ts)
        data = self.channel_data_mut(channel_id)
        data.messages = deque(reversed(messages))
        data.has_more_history = has_more
        self.selected_message_idx = 0

    def prepend_history(self, channel_id: str, messages: list[Message], has_more: bool) -> None:
        """Put older messages, given newest first, in front of the loaded ones."""
        data = self.channel_data_mut(channel_id)
        data.messages.extendleft(messages)
        self.selected_message_idx += len(messages)
        data.has_more_history = has_more
        data.loading_more_history = False
        self.dirty = True

    def push_message(self, channel_id: str, msg: Message) -> None:
        self.touch_channel_activity(channel_id, msg.ts)
        self.channel_data_mut(channel_id).push_message(msg)
        self.dirty = True

    # ----- channel list navigation ---------------------------------------

    def _step_channel_fallback(self, step: int, wrap: bool) -> None:
        count = len(self.channels)
        if not count:
            return
        target = self.selected_channel_idx + step
        if wrap:
            self.selected_channel_idx = target % count
        elif 0 <= target < count:
            self.selected_channel_idx = target

    def _step_visual_wrapping(
        self, step: int, accept: Callable[[ChannelListEntry], bool]
    ) -> None:
        count = len(self.channel_list_items)
        for distance in range(1, count + 1):
            pos = (self.selected_visual_idx + step * distance) % count
            if accept(self.channel_list_items[pos]):
                self.selected_visual_idx = pos
                self.sync_selected_channel_from_visual()
                return

    def channel_next(self) -> None:
        if not self.channel_list_items:
            self._step_channel_fallback(1, wrap=True)
            return
        self._step_visual_wrapping(1, lambda e: not e.is_spacer)

    def channel_prev(self) -> None:
        if not self.channel_list_items:
            self._step_channel_fallback(-1, wrap=True)
            return
        self._step_visual_wrapping(-1, lambda e: not e.is_spacer)

    def channel_next_no_wrap(self) -> None:
        if not self.channel_list_items:
            self._step_channel_fallback(1, wrap=False)
            return
        for pos in range(self.selected_visual_idx + 1, len(self.channel_list_items)):
            if not self.channel_list_items[pos].is_spacer:
                self.selected_visual_idx = pos
                self.sync_selected_channel_from_visual()
                return

    def channel_prev_no_wrap(self) -> None:
        if not self.channel_list_items:
            self._step_channel_fallback(-1, wrap=False)
            return
        for pos in range(self.selected_visual_idx - 1, -1, -1):
            if not self.channel_list_items[pos].is_spacer:
                self.selected_visual_idx = pos
                self.sync_selected_channel_from_visual()
                return

    def sync_selected_channel_from_visual(self) -> None:
        entry = self.selected_visual_entry()
        if entry is not None and entry.is_channel:
            self.selected_channel_idx = entry.index

    def channel_next_channel(self) -> None:
        if not self.channel_list_items:
            self._step_channel_fallback(1, wrap=True)
            return
        self._step_visual_wrapping(1, lambda e: e.is_channel)

    def channel_prev_channel(self) -> None:
        if not self.channel_list_items:
            self._step_channel_fallback(-1, wrap=True)
            return
        self._step_visual_wrapping(-1, lambda e: e.is_channel)

    def selected_visual_entry(self) -> ChannelListEntry | None:
        if 0 <= self.selected_visual_idx < len(self.channel_list_items):
            return self.channel_list_items[self.selected_visual_idx]
        return None

    def visible_channel_indices(self) -> list[int]:
        if not self.channel_list_items:
            return list(range(len(self.channels)))
        return [e.index for e in self.channel_list_items if e.is_channel]

    def _step_filtered(self, step: int) -> None:
        indices = self.filtered_channel_indices()
        if not indices:
            return
        if self.selected_channel_idx in indices:
            pos = indices.index(self.selected_channel_idx)
            self.selected_channel_idx = indices[(pos + step) % len(indices)]
        else:
            self.selected_channel_idx = indices[0]

    def filtered_channel_next(self) -> None:
        self._step_filtered(1)

    def filtered_channel_prev(self) -> None:
        self._step_filtered(-1)

    # ----- scrolling and message selection -------------------------------

    def scroll_down(self) -> None:
        self.scroll_offset = max(self.scroll_offset - 1, 0)

    def scroll_up(self) -> None:
        self.scroll_offset = min(self.scroll_offset + 1, self.max_scroll_offset)

    def scroll_to_bottom(self) -> None:
        self.scroll_offset = 0
        self.selected_message_idx = 0
        self.messages_scroll_override = None

    def scroll_to_top(self) -> None:
        self.scroll_offset = self.max_scroll_offset
        self.messages_scroll_override = None

    def scroll_half_page_down(self, page_height: int) -> None:
        self.scroll_offset = max(self.scroll_offset - page_height // 2, 0)

    def scroll_half_page_up(self, page_height: int) -> None:
        self.scroll_offset = min(self.scroll_offset + page_height // 2, self.max_scroll_offset)

    def channel_messages(self) -> deque[Message] | None:
        channel_id = self.active_channel_id()
        if channel_id is None:
            return None
        data = self.channel_data.get(channel_id)
        return data.messages if data is not None else None

    def message_count(self) -> int:
        messages = self.channel_messages()
        return len(messages) if messages is not None else 0

    def _max_message_idx(self) -> int:
        return max(self.message_count() - 1, 0)

    def message_select_newer(self) -> bool:
        old = self.selected_message_idx
        self.selected_message_idx = max(old - 1, 0)
        self.messages_scroll_override = None
        return self.selected_message_idx != old

    def message_select_older(self) -> bool:
        old = self.selected_message_idx
        self.selected_message_idx = min(old + 1, self._max_message_idx())
        self.messages_scroll_override = None
        return self.selected_message_idx != old

    def selected_message(self) -> Message | None:
        messages = self.channel_messages()
        if not messages:
            return None
        idx = max(len(messages) - 1 - self.selected_message_idx, 0)
        return messages[idx]

    def message_select_page(self, delta: int) -> bool:
        """Move the selection by ``delta`` messages; positive is newer."""
        old = self.selected_message_idx
        if delta > 0:
            self.selected_message_idx = max(old - delta, 0)
        else:
            self.selected_message_idx = min(old - delta, self._max_message_idx())
        self.messages_scroll_override = None
        return self.selected_message_idx != old

    def messages_scroll_lines(self, delta: int) -> bool:
        """Scroll the message view by lines without moving the selection."""
        if self.messages_scroll_override is not None:
            current = self.messages_scroll_override
        elif self.messages_render_info is not None:
            current = self.messages_render_info.scroll_y
        else:
            current = 0
        if delta > 0:
            new = min(current + delta, self.max_scroll_offset)
        else:
            new = max(current + delta, 0)
        if new == current:
            return False
        self.messages_scroll_override = new
        return True

    # ----- users -----------------------------------------------------------

    def user_display_name(self, user_id: str) -> str:
        user = self.user_cache.get(user_id)
        return user.display_name() if user is not None else user_id

    def user_color(self, user_id: str) -> tuple[int, int, int] | str:
        """The user's colour as (r, g, b), or the default colour name."""
        user = self.user_cache.get(user_id)
        if user is not None and user.color:
            rgb = parse_hex_color(user.color)
            if rgb is not None:
                return rgb
        return DEFAULT_USER_COLOR

    def mpim_display_name(self, channel: Channel) -> str:
        """Names of the other members of a group DM, taken from its channel name."""
        name = channel.name
        if name and name.startswith(_MPIM_PREFIX):
            inner = name[len(_MPIM_PREFIX) :].rstrip("-0123456789")
            self_user = self.user_cache.get(self.self_user_id)
            self_name = self_user.display_name() if self_user is not None else None
            names = []
            for handle in filter(None, inner.split("--")):
                user = next((u for u in self.user_cache.values() if u.name == handle), None)
                shown = user.display_name() if user is not None else handle
                if shown != self_name:
                    names.append(shown)
            if names:
                return ", ".join(names)
        return channel.display_name()

    def avatar_url(self, user_id: str) -> str | None:
        user = self.user_cache.get(user_id)
        if user is None or user.profile is None:
            return None
        return user.profile.image_48

    def request_avatar(self, user_id: str) -> None:
        if user_id not in self.avatar_images and user_id not in self.pending_avatar_images:
            self.avatar_load_queue.append(user_id)

    # ----- reactions and read state --------------------------------------

    def add_reaction(self, channel_id: str, ts: str, reaction: str, user: str) -> None:
        data = self.channel_data.get(channel_id)
        if data is not None:
            data.add_reaction(ts, reaction, user)
            self.dirty = True

    def remove_reaction(self, channel_id: str, ts: str, reaction: str, user: str) -> None:
        data = self.channel_data.get(channel_id)
        if data is not None:
            data.remove_reaction(ts, reaction, user)
            self.dirty = True

    def mark_channel_read(self, channel_id: str, ts: str) -> None:
        channel = next((c for c in self.channels if c.id == channel_id), None)
        if channel is not None:
            channel.last_read = ts
            channel.unread_count_display = 0
        self.dirty = True

    # ----- typing ----------------------------------------------------------

    def record_typing(self, channel_id: str, user_id: str) -> None:
        self.typing.record(channel_id, user_id)
        self.dirty = True

    def expire_typing(self) -> None:
        if self.typing.expire():
            self.dirty = True

    def typing_display(self) -> str | None:
        """Who is typing in the active channel, other than ourselves."""
        channel_id = self.active_channel_id()
        if channel_id is None:
            return None
        names = [
            self.user_display_name(uid)
            for uid in self.typing.users(channel_id)
            if uid != self.self_user_id
        ]
        return format_typing(names)

    # ----- input and drafts ----------------------------------------------

    def save_current_draft(self) -> None:
        channel_id = self.active_channel_id()
        if channel_id is None:
            return
        if self.input.text:
            self.channel_drafts[channel_id] = (
                self.input.text,
                self.input.cursor,
                self.reply_to_thread,
            )
        else:
            self.channel_drafts.pop(channel_id, None)

    def restore_draft_for_current(self) -> None:
        channel_id = self.active_channel_id()
        if channel_id is None:
            return
        text, cursor, reply = self.channel_drafts.get(channel_id, ("", 0, False))
        self.input.text = text
        self.input.cursor = cursor
        self.reply_to_thread = reply
        self.input_scroll = 0

    def save_input_to_history(self) -> None:
        """Record the sent text in history, clear the input and the channel's draft."""
        self.input.save_to_history()
        channel_id = self.active_channel_id()
        if channel_id is not None:
            self.channel_drafts.pop(channel_id, None)

    # ----- threads ---------------------------------------------------------

    def open_thread(self, channel_id: str, parent_ts: str) -> None:
        self.thread_channel_id = channel_id
        self.thread_parent_ts = parent_ts
        self.thread_scroll_offset = 0
        self.thread_max_scroll_offset = 0
        self.focus = Focus.THREAD

    def close_thread(self) -> None:
        self.thread_channel_id = None
        self.thread_parent_ts = None
        self.focus = Focus.MESSAGES

    def set_thread_messages(
        self, channel_id: str, parent_ts: str, messages: list[Message]
    ) -> None:
        self.channel_data_mut(channel_id).set_thread_replies(parent_ts, messages)
        self.thread_scroll_offset = 0
        self.dirty = True

    def thread_messages(self) -> list[Message] | None:
        if self.thread_channel_id is None or self.thread_parent_ts is None:
            return None
        data = self.channel_data.get(self.thread_channel_id)
        return data.thread_replies(self.thread_parent_ts) if data is not None else None

    def thread_message_count(self) -> int:
        messages = self.thread_messages()
        return len(messages) if messages is not None else 0

    # ----- message search ------------------------------------------------

    def perform_message_search(self) -> None:
        """Find messages of the active channel whose text contains the query."""
        self.message_search_results.clear()
        self.message_search_results_set.clear()
        self.message_search_idx = 0
        if not self.message_search_query:
            return
        messages = self.channel_messages()
        if messages is None:
            return
        query = self.message_search_query.lower()
        self.message_search_results = [
            idx for idx, msg in enumerate(messages) if query in msg.text.lower()
        ]
        self.message_search_results_set = set(self.message_search_results)

    def message_search_next(self) -> None:
        if not self.message_search_results:
            return
        self.message_search_idx = (self.message_search_idx + 1) % len(
            self.message_search_results
        )
        self.jump_to_search_result()

    def message_search_prev(self) -> None:
        if not self.message_search_results:
            return
        self.message_search_idx = (self.message_search_idx - 1) % len(
            self.message_search_results
        )
        self.jump_to_search_result()

    def jump_to_search_result(self) -> None:
        if 0 <= self.message_search_idx < len(self.message_search_results):
            msg_idx = self.message_search_results[self.message_search_idx]
            self.selected_message_idx = max(self.message_count() - 1 - msg_idx, 0)

    def clear_message_search(self) -> None:
        self.message_search_query = ""
        self.message_search_results.clear()
        self.message_search_results_set.clear()
        self.message_search_idx = 0
        self.message_search_active = False

    # ----- unread navigation ---------------------------------------------

    def _step_unread(self, step: int) -> bool:
        count = len(self.channels)
        for distance in range(1, count + 1):
            idx = (self.selected_channel_idx + step * distance) % count
            if self.channels[idx].unread_count_display > 0:
                self.selected_channel_idx = idx
                self.sync_visual_from_selected_channel()
                return True
        return False

    def next_unread_channel(self) -> bool:
        return self._step_unread(1)

    def prev_unread_channel(self) -> bool:
        return self._step_unread(-1)

    def sync_visual_from_selected_channel(self) -> None:
        for pos, entry in enumerate(self.channel_list_items):
            if entry.is_channel and entry.index == self.selected_channel_idx:
                self.selected_visual_idx = pos
                return

    # ----- pickers ---------------------------------------------------------

    def open_emoji_picker(
        self, source: EmojiPickerSource, message_reactions: list[tuple[str, bool]]
    ) -> None:
        self.input_mode = InputMode.EMOJI_PICKER
        self.emoji_picker_source = source
        self.emoji_picker_message_reactions = list(message_reactions)
        self.emoji_picker_inline_colon_pos = None
        self.emoji_picker_query = ""
        self.emoji_picker_selected = 0
        self.filter_emoji_picker()
        self.dirty = True

    def filter_emoji_picker(self) -> None:
        self.emoji_picker_results = filter_emoji(
            self.emoji_picker_query,
            self.standard_emoji,
            self.emoji.custom_emoji,
            self.emoji_picker_source,
            self.emoji_picker_message_reactions,
        )
        self.emoji_picker_selected = 0

    def selected_message_reactions(self) -> list[tuple[str, bool]]:
        """Reactions on the focused message as (name, reacted by us)."""
        if self.focus is Focus.THREAD:
            thread = self.thread_messages()
            msg = thread[0] if thread else None
        else:
            msg = self.selected_message()
        if msg is None:
            return []
        return [(r.name, self.self_user_id in r.users) for r in msg.reactions]

    def open_user_picker(self) -> None:
        self.input_mode = InputMode.USER_PICKER
        self.user_picker_query = ""
        self.user_picker_selected = 0
        self.filter_user_picker()
        self.dirty = True

    def filter_user_picker(self) -> None:
        """Active human users matching the query, prefix matches first."""
        query = self.user_picker_query.lower()
        results = [
            (uid, user.display_name())
            for uid, user in self.user_cache.items()
            if not user.deleted
            and not user.is_bot
            and (
                not query
                or query in user.display_name().lower()
                or query in user.name.lower()
            )
        ]
        if query:
            results.sort(key=lambda r: (not r[1].lower().startswith(query), r[1]))
        else:
            results.sort(key=lambda r: r[1])
        self.user_picker_results = results
        self.user_picker_selected = 0

    # ----- sections --------------------------------------------------------

    def channels_by_section(self) -> list[Section]:
        return channels_by_section(self.channels, self.channel_sections, self.standard_emoji)

    def toggle_section_collapse(self, section_id: str) -> None:
        if section_id in self.collapsed_sections:
            self.collapsed_sections.discard(section_id)
        else:
            self.collapsed_sections.add(section_id)
        self.dirty = True