"""Grouping of channels into the sidebar sections."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from slacktui.emoji_table import emoji_for_runtime
from slacktui.models import Channel, ChannelSection

DEFAULT_SECTION_NAME = "Channels"
DM_SECTION_NAME = "Direct Messages"
# Room left in a header for a custom emoji image drawn over the text.
_CUSTOM_EMOJI_PLACEHOLDER = "   "


@dataclass
class Section:
    """A titled group of channels in the sidebar."""

    name: str
    section_id: str | None
    channel_indices: list[int] = field(default_factory=list)
    emoji: str | None = None


def _header_prefix(emoji_name: str | None, standard_emoji: Mapping[str, str]) -> str:
    if emoji_name is None:
        return ""
    unicode = emoji_for_runtime(emoji_name, standard_emoji)
    if unicode is None:
        return _CUSTOM_EMOJI_PLACEHOLDER
    return f"{unicode} "


def channels_by_section(
    channels: Sequence[Channel],
    channel_sections: Sequence[ChannelSection],
    standard_emoji: Mapping[str, str],
) -> list[Section]:
    """Group channel indices into sections.

    User-defined sections come first in their sort order, then channels in no
    section under "Channels", then all direct messages under "Direct Messages".
    Sections without channels are left out.
    """
    result: list[Section] = []
    section_of: dict[str, Section] = {}

    for section in sorted(channel_sections, key=lambda s: s.sort_order):
        emoji_name = section.emoji or None
        entry = Section(
            name=f"{_header_prefix(emoji_name, standard_emoji)}{section.name}",
            section_id=section.channel_section_id,
            emoji=emoji_name,
        )
        result.append(entry)
        for channel_id in section.channel_ids_page.channel_ids:
            section_of[channel_id] = entry

    default_channels: list[int] = []
    dm_channels: list[int] = []
    for idx, channel in enumerate(channels):
        if channel.is_im or channel.is_mpim:
            dm_channels.append(idx)
        elif channel.id in section_of:
            section_of[channel.id].channel_indices.append(idx)
        else:
            default_channels.append(idx)

    if default_channels:
        result.append(Section(DEFAULT_SECTION_NAME, None, default_channels))
    if dm_channels:
        result.append(Section(DM_SECTION_NAME, None, dm_channels))

    return [section for section in result if section.channel_indices]