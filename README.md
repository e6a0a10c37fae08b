# slacktui

The state and layout logic of a terminal chat client. It is written as plain
Python objects and functions. It draws nothing and opens no connections.

## What is in it

- `slacktui.app_state.AppState` holds the application state. This covers the
  channels and the messages of each channel, threads, reactions, per-channel
  drafts, input history, typing indicators and message search. It also holds the
  state of the emoji and user pickers, the channel sections, and navigation
  through the channel list.
- `slacktui.channel_data.ChannelData` stores the messages of one channel. It keeps
  at most 500 top-level messages, files thread replies under their parent, drops
  duplicates and records reactions.
- `slacktui.input_line.InputLine` is the text being composed. It has a cursor
  counted in characters, recall of earlier entries with a stash for the current
  text, and a kill ring that holds up to 16 entries.
- `slacktui.typing_tracker` has two parts. `TypingTracker` records who is typing
  in each channel and expires entries after 5 seconds. `format_typing` turns a list
  of names into a line such as `"Ann and 2 others are typing..."`.
- Emoji handling is spread over four modules:
  - `slacktui.emoji_table.emoji_for` and `emoji_for_runtime` map shortcodes to
    Unicode.
  - `slacktui.emoji_standard.all_standard_emoji` lists the picker's built-in
    emoji.
  - `slacktui.emoji.replace_emoji_shortcodes` and
    `replace_emoji_shortcodes_with_map` rewrite `:shortcode:` patterns in text.
    They remove skin-tone modifiers and leave unknown shortcodes as they are.
  - `slacktui.emoji_store.EmojiStore` resolves custom emoji aliases, with at most
    five hops. It also tracks loaded images and queues images for loading.
    `filter_emoji` computes the results of the emoji picker.
- `slacktui.sections.channels_by_section` groups channels into sidebar sections.
  User-defined sections come first, in their sort order. They are followed by
  "Channels" and then "Direct Messages".
- Layout helpers:
  - `slacktui.channel_list.build_channel_list` turns the state into a list of
    `ChannelRow` values. Each row carries its text and styling. The function also
    records the visual map and scroll offset in the state.
    `adjust_list_offset` and `truncate_str` are available on their own.
  - `slacktui.context_menu.overlay_rect` and `menu_lines` place the message
    actions menu and give its entries.
  - `slacktui.emoji_picker_view` places the emoji picker overlay and gives its
    text, through `centered_rect`, `overlay_rect`, `picker_title`, `status_text`
    and `visible_custom_emoji`.
- `slacktui.models` holds the data types used throughout. These are `Channel`,
  `Message`, `User`, `Reaction`, `ChannelSection`, `Rect` and
  `ChannelListEntry`, and the enums `InputMode`, `Focus` and `EmojiPickerSource`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from slacktui.emoji import replace_emoji_shortcodes

replace_emoji_shortcodes("ship it :rocket: now")         # 'ship it 🚀 now'
replace_emoji_shortcodes(":raised_hands::skin-tone-5:")  # '🙌'
replace_emoji_shortcodes("time is 12:30:00")             # unchanged
```

```python
from slacktui.app_state import AppState
from slacktui.models import Channel, Message

state = AppState()
state.set_channels([Channel(id="C1", name="general")])
state.push_message("C1", Message(user="U1", text="hello", ts="1700000000.000100"))

state.message_count()            # 1
state.selected_message().text    # 'hello'
```

```python
from slacktui.emoji_store import EmojiStore

store = EmojiStore()
store.custom_emoji["parrot"] = "https://example.com/parrot.gif"
store.custom_emoji["pp"] = "alias:parrot"
store.resolve_custom_emoji("pp")  # 'https://example.com/parrot.gif'
```

Alias chains stop after five hops, so a cycle resolves to `None`.

## What it does not do

This package is a library and has no command to run. It provides none of the
following:

- terminal drawing or keyboard and mouse handling;
- a connection to a chat service, whether an HTTP API or a live event stream;
- downloading or displaying images;
- persistent storage.

The layout helpers compute rows and rectangles. Putting them on a screen is left
to the caller.