import pytest

from slacktui.app_state import DEFAULT_USER_COLOR, AppState
from slacktui.models import (
    Channel,
    ChannelIdsPage,
    ChannelListEntry,
    ChannelSection,
    EmojiPickerSource,
    Focus,
    InputMode,
    Message,
    Reaction,
    RenderInfo,
    User,
    UserProfile,
)


def make_channel(cid, name, is_im=False, unread=0, user=None):
    return Channel(
        id=cid,
        name=name,
        is_channel=not is_im,
        is_im=is_im,
        is_member=True,
        user=user,
        unread_count_display=unread,
    )


def make_user(uid, name, display, **kwargs):
    return User(
        id=uid,
        name=name,
        real_name=display,
        profile=UserProfile(display_name=display, real_name=display),
        **kwargs,
    )


def msg(text, ts, thread_ts=None):
    return Message(text=text, ts=ts, user="U_TEST", thread_ts=thread_ts)


def state_with_messages(texts):
    state = AppState()
    state.channels = [make_channel("C1", "general")]
    state.set_history("C1", [msg(t, str(i)) for i, t in reversed(list(enumerate(texts)))], False)
    return state


def test_channels_by_section_no_sections():
    state = AppState()
    state.channels = [
        make_channel("C1", "general"),
        make_channel("C2", "random"),
        make_channel("D1", "dm1", is_im=True),
    ]
    sections = state.channels_by_section()
    assert len(sections) == 2
    assert sections[0].name == "Channels"
    assert len(sections[0].channel_indices) == 2
    assert sections[1].name == "Direct Messages"
    assert len(sections[1].channel_indices) == 1


def test_channels_by_section_with_user_sections():
    state = AppState()
    state.channels = [
        make_channel("C1", "general"),
        make_channel("C2", "random"),
        make_channel("C3", "eng"),
        make_channel("D1", "dm1", is_im=True),
    ]
    state.channel_sections = [
        ChannelSection("S1", "Important", channel_ids_page=ChannelIdsPage(["C1"]), sort_order=0),
        ChannelSection("S2", "Work", channel_ids_page=ChannelIdsPage(["C3"]), sort_order=1),
    ]
    sections = state.channels_by_section()
    assert [s.name for s in sections] == ["Important", "Work", "Channels", "Direct Messages"]
    assert len(sections[2].channel_indices) == 1


def test_resolve_custom_emoji_direct():
    state = AppState()
    state.emoji.custom_emoji["parrot"] = "https://example.com/parrot.gif"
    assert state.emoji.resolve_custom_emoji("parrot") == "https://example.com/parrot.gif"
    assert state.emoji.resolve_custom_emoji("unknown") is None


def test_resolve_custom_emoji_alias_chain_and_loop():
    state = AppState()
    state.emoji.custom_emoji.update(
        {"parrot": "https://example.com/parrot.gif", "party_parrot": "alias:parrot",
         "pp": "alias:party_parrot", "a": "alias:b", "b": "alias:a"}
    )
    assert state.emoji.resolve_custom_emoji("pp") == "https://example.com/parrot.gif"
    assert state.emoji.resolve_custom_emoji("a") is None


def test_toggle_section_collapse():
    state = AppState()
    state.toggle_section_collapse("S1")
    assert "S1" in state.collapsed_sections
    state.toggle_section_collapse("S1")
    assert "S1" not in state.collapsed_sections


def test_set_channels_sorts_and_keeps_selection():
    state = AppState()
    state.channels = [make_channel("C9", "zeta")]
    state.selected_channel_idx = 0
    state.channel_activity = {"C2": "200", "C3": "100"}
    state.set_channels(
        [
            make_channel("D1", "alice", is_im=True),
            make_channel("C1", "beta"),
            make_channel("C9", "zeta"),
            make_channel("C3", "gamma"),
            make_channel("C2", "delta"),
            make_channel("C4", "omega", unread=2),
            make_channel("C0", "alpha"),
        ]
    )
    assert [c.id for c in state.channels] == ["C4", "C2", "C3", "C0", "C1", "C9", "D1"]
    assert state.active_channel_id() == "C9"


def test_resort_after_activity():
    state = AppState()
    state.channels = [make_channel("C1", "a"), make_channel("C2", "b")]
    state.touch_channel_activity("C2", "5")
    state.resort_channels()
    assert [c.id for c in state.channels] == ["C2", "C1"]
    assert state.selected_channel_idx == 1
    assert state.channel_data_for("C2").last_activity == "5"


def test_filtered_channel_indices_uses_dm_user_name():
    state = AppState()
    state.user_cache["U1"] = make_user("U1", "alice", "Alice Smith")
    state.channels = [make_channel("C1", "general"), make_channel("D1", None, is_im=True, user="U1")]
    assert state.filtered_channel_indices() == [0, 1]
    state.channel_filter_active = True
    state.channel_filter = "SMITH"
    assert state.filtered_channel_indices() == [1]
    state.channel_filter = "gen"
    assert state.filtered_channel_indices() == [0]


def test_filtered_channel_next_prev():
    state = AppState()
    state.channels = [make_channel("C1", "ab"), make_channel("C2", "x"), make_channel("C3", "abc")]
    state.channel_filter_active = True
    state.channel_filter = "ab"
    state.selected_channel_idx = 1
    state.filtered_channel_next()
    assert state.selected_channel_idx == 0
    state.filtered_channel_next()
    assert state.selected_channel_idx == 2
    state.filtered_channel_next()
    assert state.selected_channel_idx == 0
    state.filtered_channel_prev()
    assert state.selected_channel_idx == 2


def test_set_history_and_selected_message():
    state = state_with_messages(["first", "second", "third"])
    assert [m.text for m in state.channel_messages()] == ["first", "second", "third"]
    assert state.selected_message().text == "third"
    assert state.channel_activity["C1"] == "2"
    assert state.message_select_older()
    assert state.selected_message().text == "second"
    assert state.message_select_older()
    assert not state.message_select_older()
    assert state.selected_message().text == "first"
    assert state.message_select_newer()
    assert state.selected_message().text == "second"


def test_prepend_history():
    state = state_with_messages(["c", "d"])
    state.selected_message_idx = 1
    state.channel_data_mut("C1").loading_more_history = True
    state.prepend_history("C1", [msg("b", "-1"), msg("a", "-2")], True)
    assert [m.text for m in state.channel_messages()] == ["a", "b", "c", "d"]
    assert state.selected_message_idx == 3
    data = state.channel_data_for("C1")
    assert data.has_more_history is True
    assert data.loading_more_history is False


def test_push_message_marks_activity():
    state = AppState()
    state.dirty = False
    state.push_message("C1", msg("hi", "10"))
    assert [m.text for m in state.channel_data_for("C1").messages] == ["hi"]
    assert state.channel_activity["C1"] == "10"
    assert state.dirty


def nav_state():
    state = AppState()
    state.channels = [make_channel("C1", "a"), make_channel("C2", "b"), make_channel("C3", "c")]
    state.channel_list_items = [
        ChannelListEntry.section_header("__channels__"),
        ChannelListEntry.channel(0),
        ChannelListEntry.channel(1),
        ChannelListEntry.spacer(),
        ChannelListEntry.section_header("__dm__"),
        ChannelListEntry.channel(2),
    ]
    return state


def test_channel_next_skips_spacer_and_wraps():
    state = nav_state()
    state.selected_visual_idx = 2
    state.channel_next()
    assert state.selected_visual_idx == 4
    state.channel_next()
    assert state.selected_visual_idx == 5
    assert state.selected_channel_idx == 2
    state.channel_next()
    assert state.selected_visual_idx == 0
    state.channel_prev()
    assert state.selected_visual_idx == 5


def test_channel_next_channel_skips_headers():
    state = nav_state()
    state.selected_visual_idx = 2
    state.channel_next_channel()
    assert state.selected_visual_idx == 5
    state.channel_next_channel()
    assert state.selected_visual_idx == 1
    assert state.selected_channel_idx == 0
    state.channel_prev_channel()
    assert state.selected_visual_idx == 5


def test_no_wrap_navigation():
    state = nav_state()
    state.selected_visual_idx = 5
    state.channel_next_no_wrap()
    assert state.selected_visual_idx == 5
    state.channel_prev_no_wrap()
    assert state.selected_visual_idx == 4
    state.channel_prev_no_wrap()
    assert state.selected_visual_idx == 2
    state.selected_visual_idx = 0
    state.channel_prev_no_wrap()
    assert state.selected_visual_idx == 0


def test_fallback_navigation_without_items():
    state = AppState()
    state.channels = [make_channel("C1", "a"), make_channel("C2", "b")]
    state.channel_prev()
    assert state.selected_channel_idx == 1
    state.channel_next()
    assert state.selected_channel_idx == 0
    state.channel_prev_no_wrap()
    assert state.selected_channel_idx == 0
    state.channel_next_no_wrap()
    state.channel_next_no_wrap()
    assert state.selected_channel_idx == 1


def test_visible_and_selected_entry():
    state = nav_state()
    assert state.visible_channel_indices() == [0, 1, 2]
    state.selected_visual_idx = 3
    assert state.selected_visual_entry() == ChannelListEntry.spacer()
    state.selected_visual_idx = 99
    assert state.selected_visual_entry() is None


def test_unread_navigation():
    state = nav_state()
    state.channels[2].unread_count_display = 3
    assert state.next_unread_channel()
    assert state.selected_channel_idx == 2
    assert state.selected_visual_idx == 5
    state.channels[2].unread_count_display = 0
    assert not state.prev_unread_channel()


def test_scrolling():
    state = AppState()
    state.max_scroll_offset = 10
    state.scroll_up()
    assert state.scroll_offset == 1
    state.scroll_half_page_up(30)
    assert state.scroll_offset == 10
    state.scroll_half_page_down(8)
    assert state.scroll_offset == 6
    state.scroll_down()
    assert state.scroll_offset == 5
    state.scroll_to_top()
    assert state.scroll_offset == 10
    state.selected_message_idx = 4
    state.scroll_to_bottom()
    assert (state.scroll_offset, state.selected_message_idx) == (0, 0)


def test_message_select_page():
    state = state_with_messages([str(i) for i in range(10)])
    assert state.message_select_page(-3)
    assert state.selected_message_idx == 3
    assert state.message_select_page(-50)
    assert state.selected_message_idx == 9
    assert state.message_select_page(4)
    assert state.selected_message_idx == 5
    assert state.message_select_page(40)
    assert not state.message_select_page(1)
    assert state.selected_message_idx == 0


def test_messages_scroll_lines():
    state = AppState()
    state.max_scroll_offset = 20
    state.messages_render_info = RenderInfo(0, 0, 10, 5)
    assert state.messages_scroll_lines(3)
    assert state.messages_scroll_override == 8
    assert state.messages_scroll_lines(-10)
    assert state.messages_scroll_override == 0
    assert not state.messages_scroll_lines(-1)
    assert state.messages_scroll_lines(100)
    assert state.messages_scroll_override == 20


def test_user_display_name_and_color():
    state = AppState()
    state.user_cache["U1"] = make_user("U1", "alice", "Alice", color="#ff8000")
    state.user_cache["U2"] = make_user("U2", "bob", "Bob", color="zz")
    assert state.user_display_name("U1") == "Alice"
    assert state.user_display_name("U9") == "U9"
    assert state.user_color("U1") == (255, 128, 0)
    assert state.user_color("U2") == DEFAULT_USER_COLOR
    assert state.user_color("U9") == DEFAULT_USER_COLOR


def test_mpim_display_name():
    state = AppState()
    state.user_cache = {
        "U1": make_user("U1", "alice", "Alice"),
        "U2": make_user("U2", "bob", "Bob"),
        "U3": make_user("U3", "me", "Me"),
    }
    state.self_user_id = "U3"
    channel = Channel(id="G1", name="mpdm-alice--bob--me-1", is_mpim=True)
    assert state.mpim_display_name(channel) == "Alice, Bob"
    other = Channel(id="G2", name="project")
    assert state.mpim_display_name(other) == "project"
    unknown = Channel(id="G3", name="mpdm-carol--dave-1")
    assert state.mpim_display_name(unknown) == "carol, dave"


def test_reactions_and_selected_message_reactions():
    state = state_with_messages(["a"])
    state.self_user_id = "U1"
    state.add_reaction("C1", "0", "fire", "U1")
    state.add_reaction("C1", "0", "fire", "U2")
    state.add_reaction("C1", "0", "tada", "U2")
    assert state.selected_message_reactions() == [("fire", True), ("tada", False)]
    state.remove_reaction("C1", "0", "tada", "U2")
    assert state.selected_message().reactions == [Reaction("fire", 2, ["U1", "U2"])]
    state.dirty = False
    state.add_reaction("C404", "0", "fire", "U1")
    assert not state.dirty


def test_mark_channel_read():
    state = AppState()
    state.channels = [make_channel("C1", "a", unread=4)]
    state.mark_channel_read("C1", "99")
    assert state.channels[0].unread_count_display == 0
    assert state.channels[0].last_read == "99"


def test_typing_display():
    state = AppState()
    state.channels = [make_channel("C1", "a")]
    state.self_user_id = "U0"
    state.user_cache["U1"] = make_user("U1", "alice", "Alice")
    assert state.typing_display() is None
    state.record_typing("C1", "U0")
    assert state.typing_display() is None
    state.record_typing("C1", "U1")
    assert state.typing_display() == "Alice is typing..."
    state.record_typing("C1", "U2")
    assert state.typing_display() == "Alice and U2 are typing..."
    state.expire_typing()
    assert state.typing_display() == "Alice and U2 are typing..."


def test_drafts_round_trip():
    state = AppState()
    state.channels = [make_channel("C1", "a"), make_channel("C2", "b")]
    state.input.text = "hello"
    state.input.cursor = 3
    state.reply_to_thread = True
    state.save_current_draft()
    state.selected_channel_idx = 1
    state.restore_draft_for_current()
    assert (state.input.text, state.input.cursor, state.reply_to_thread) == ("", 0, False)
    state.selected_channel_idx = 0
    state.restore_draft_for_current()
    assert (state.input.text, state.input.cursor, state.reply_to_thread) == ("hello", 3, True)
    state.save_input_to_history()
    assert state.input.history == ["hello"]
    assert state.input.text == ""
    assert "C1" not in state.channel_drafts


def test_threads():
    state = AppState()
    state.open_thread("C1", "100")
    assert state.focus is Focus.THREAD
    assert state.thread_messages() is None
    state.set_thread_messages("C1", "100", [msg("p", "100", "100"), msg("r", "101", "100")])
    assert state.thread_message_count() == 2
    state.self_user_id = "U1"
    state.thread_messages()[0].reactions.append(Reaction("eyes", 1, ["U1"]))
    assert state.selected_message_reactions() == [("eyes", True)]
    state.close_thread()
    assert state.focus is Focus.MESSAGES
    assert state.thread_message_count() == 0


def test_message_search():
    state = state_with_messages(["Deploy now", "lunch?", "deploy done"])
    state.message_search_query = "DEPLOY"
    state.perform_message_search()
    assert state.message_search_results == [0, 2]
    assert state.message_search_results_set == {0, 2}
    state.message_search_next()
    assert state.selected_message().text == "deploy done"
    state.message_search_next()
    assert state.selected_message().text == "Deploy now"
    state.message_search_prev()
    assert state.message_search_idx == 1
    state.clear_message_search()
    assert state.message_search_results == []
    assert not state.message_search_active


def test_emoji_picker_filtering():
    state = AppState()
    state.standard_emoji = {"rocket": "R", "rock": "r", "smile": "s"}
    state.emoji.custom_emoji = {"rockstar": "https://example.com/r.png", "cat": "alias:x"}
    state.open_emoji_picker(EmojiPickerSource.REACTION, [("rocket", True)])
    assert state.input_mode is InputMode.EMOJI_PICKER
    assert state.emoji_picker_results[0] == ("rocket", "R", False)
    state.emoji_picker_query = "rock"
    state.filter_emoji_picker()
    assert [r[0] for r in state.emoji_picker_results] == ["rocket", "rock", "rockstar"]
    state.emoji_picker_source = EmojiPickerSource.INSERT
    state.filter_emoji_picker()
    assert state.emoji_picker_results == [
        ("rock", "r", False),
        ("rocket", "R", False),
        ("rockstar", ":rockstar:", True),
    ]


def test_emoji_picker_falls_back_to_builtin_list():
    state = AppState()
    state.open_emoji_picker(EmojiPickerSource.INSERT, [])
    state.emoji_picker_query = "rocket"
    state.filter_emoji_picker()
    assert state.emoji_picker_results == [("rocket", "\U0001F680", False)]


def test_user_picker():
    state = AppState()
    state.user_cache = {
        "U1": make_user("U1", "zed", "Zed"),
        "U2": make_user("U2", "amy", "Amy"),
        "U3": make_user("U3", "bot", "Botty", is_bot=True),
        "U4": make_user("U4", "gone", "Gone", deleted=True),
        "U5": make_user("U5", "lizzy", "Liz"),
    }
    state.open_user_picker()
    assert state.input_mode is InputMode.USER_PICKER
    assert state.user_picker_results == [("U2", "Amy"), ("U5", "Liz"), ("U1", "Zed")]
    state.user_picker_query = "z"
    state.filter_user_picker()
    assert state.user_picker_results == [("U1", "Zed"), ("U5", "Liz")]


def test_avatars():
    state = AppState()
    state.user_cache["U1"] = User(
        id="U1", name="a", profile=UserProfile(image_48="https://example.com/a.png")
    )
    assert state.avatar_url("U1") == "https://example.com/a.png"
    assert state.avatar_url("U2") is None
    state.pending_avatar_images.add("U3")
    state.request_avatar("U1")
    state.request_avatar("U3")
    assert state.avatar_load_queue == ["U1"]


@pytest.mark.parametrize("channel_id", ["C1", "C2"])
def test_channel_data_mut_creates_once(channel_id):
    state = AppState()
    first = state.channel_data_mut(channel_id)
    first.has_more_history = True
    assert state.channel_data_mut(channel_id) is first
    assert state.channel_data_for("other") is None