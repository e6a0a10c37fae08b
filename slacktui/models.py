"""Plain data types shared by the client state and its views."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


@dataclass(frozen=True)
class Rect:
    """A rectangular screen area in terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class UserProfile:
    display_name: str | None = None
    real_name: str | None = None
    image_48: str | None = None


@dataclass
class User:
    id: str
    name: str = ""
    real_name: str | None = None
    profile: UserProfile | None = None
    is_bot: bool = False
    deleted: bool = False
    color: str | None = None

    def display_name(self) -> str:
        """Best human-readable name: profile display name, then real name, then handle."""
        candidates = []
        if self.profile is not None:
            candidates += [self.profile.display_name, self.profile.real_name]
        candidates.append(self.real_name)
        return next((c for c in candidates if c), self.name)


@dataclass
class Channel:
    id: str
    name: str | None = None
    is_channel: bool = False
    is_im: bool = False
    is_mpim: bool = False
    is_private: bool = False
    is_member: bool = False
    user: str | None = None
    topic: Any = None
    purpose: Any = None
    last_read: str | None = None
    unread_count: int = 0
    unread_count_display: int = 0

    def display_name(self) -> str:
        """The channel name, or its id when it has none."""
        return self.name or self.id


@dataclass
class Reaction:
    name: str
    count: int = 0
    users: list[str] = field(default_factory=list)


@dataclass
class Message:
    text: str = ""
    ts: str = ""
    user: str | None = None
    thread_ts: str | None = None
    reply_count: int | None = None
    reactions: list[Reaction] = field(default_factory=list)
    edited: Any = None
    subtype: str | None = None
    bot_id: str | None = None
    username: str | None = None
    files: list[Any] = field(default_factory=list)


@dataclass
class ChannelIdsPage:
    channel_ids: list[str] = field(default_factory=list)


@dataclass
class ChannelSection:
    channel_section_id: str
    name: str = ""
    emoji: str = ""
    channel_ids_page: ChannelIdsPage = field(default_factory=ChannelIdsPage)
    is_collapsed: bool = False
    sort_order: int = 0


@dataclass
class CachedImage:
    """Encoded image data ready to be shown in the terminal."""

    png_data: bytes
    width: int
    height: int


@dataclass
class ImagePlacement:
    """Where an image goes, by virtual line within a scrollable panel."""

    url: str
    line: int
    col: int
    display_cols: int
    display_rows: int


@dataclass
class InlineEmojiPlacement:
    """An emoji image placed at absolute screen coordinates."""

    emoji_key: str
    screen_row: int
    screen_col: int
    display_cols: int = 2
    display_rows: int = 1


@dataclass
class RenderInfo:
    """Rendering metadata for a scrollable panel."""

    inner_x: int
    inner_y: int
    inner_height: int
    scroll_y: int


class EntryKind(Enum):
    CHANNEL = auto()
    SECTION_HEADER = auto()
    DM_MORE = auto()
    SPACER = auto()


@dataclass(frozen=True)
class ChannelListEntry:
    """One row of the rendered channel list."""

    kind: EntryKind
    index: int | None = None
    section_id: str | None = None

    @classmethod
    def channel(cls, index: int) -> ChannelListEntry:
        return cls(EntryKind.CHANNEL, index=index)

    @classmethod
    def section_header(cls, section_id: str) -> ChannelListEntry:
        return cls(EntryKind.SECTION_HEADER, section_id=section_id)

    @classmethod
    def dm_more(cls) -> ChannelListEntry:
        return cls(EntryKind.DM_MORE)

    @classmethod
    def spacer(cls) -> ChannelListEntry:
        return cls(EntryKind.SPACER)

    @property
    def is_channel(self) -> bool:
        return self.kind is EntryKind.CHANNEL

    @property
    def is_spacer(self) -> bool:
        return self.kind is EntryKind.SPACER


class InputMode(Enum):
    NORMAL = auto()
    INSERT = auto()
    SEARCH = auto()
    MESSAGE_SEARCH = auto()
    REACTION = auto()
    EMOJI_PICKER = auto()
    USER_PICKER = auto()
    GLOBAL_SEARCH = auto()
    FILE_PATH = auto()
    EMOJI_PREVIEW = auto()


class EmojiPickerSource(Enum):
    REACTION = auto()
    INSERT = auto()


class Focus(Enum):
    CHANNEL_LIST = auto()
    MESSAGES = auto()
    INPUT = auto()
    THREAD = auto()


_HEX_COLOR = re.compile(r"[0-9A-Fa-f]{6}")


def parse_hex_color(hex_color: str) -> tuple[int, int, int] | None:
    """Parse ``#rrggbb`` or ``rrggbb`` into an (r, g, b) tuple, or None if malformed."""
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_COLOR.fullmatch(digits):
        return None
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]