import pytest

from slacktui.emoji import replace_emoji_shortcodes, replace_emoji_shortcodes_with_map


def test_basic_replacement():
    assert replace_emoji_shortcodes(":rocket:") == "\U0001F680"
    assert replace_emoji_shortcodes(":tada:") == "\U0001F389"


def test_inline_replacement():
    assert replace_emoji_shortcodes("ship it :rocket: now") == "ship it \U0001F680 now"


def test_multiple_emoji():
    assert replace_emoji_shortcodes(":fire::100:") == "\U0001F525\U0001F4AF"


def test_unknown_shortcode_left_alone():
    assert replace_emoji_shortcodes(":not_a_real_emoji:") == ":not_a_real_emoji:"


def test_skin_tone_stripped():
    assert replace_emoji_shortcodes(":raised_hands::skin-tone-5:") == "\U0001F64C"


def test_no_colons_content_unchanged():
    assert replace_emoji_shortcodes("hello world") == "hello world"


def test_thumbsup_aliases():
    assert replace_emoji_shortcodes(":+1:") == "\U0001F44D"
    assert replace_emoji_shortcodes(":thumbsup:") == "\U0001F44D"
    assert replace_emoji_shortcodes(":-1:") == "\U0001F44E"


def test_colons_in_non_shortcode_context():
    assert replace_emoji_shortcodes("time is 12:30:00") == "time is 12:30:00"


def test_mixed_known_and_unknown():
    assert (
        replace_emoji_shortcodes(":heart: and :mystery: and :fire:")
        == "\u2764\uFE0F and :mystery: and \U0001F525"
    )


def test_empty_colons():
    assert replace_emoji_shortcodes("::") == "::"


def test_trailing_colon():
    assert replace_emoji_shortcodes("hello:") == "hello:"


def test_failed_shortcode_closing_colon_can_open_next():
    assert replace_emoji_shortcodes(":foo:fire:") == ":foo\U0001F525"


def test_space_breaks_shortcode():
    assert replace_emoji_shortcodes(":fi re:") == ":fi re:"


@pytest.mark.parametrize("text", ["", "plain", "a:b", ":::", "x: y :z"])
def test_text_without_known_codes_is_unchanged(text):
    assert replace_emoji_shortcodes(text) == text


def test_overlong_shortcode_not_matched():
    code = "a" * 100
    assert replace_emoji_shortcodes(f":{code}:") == f":{code}:"


def test_map_overrides_builtin():
    mapping = {"rocket": "R"}
    assert replace_emoji_shortcodes_with_map(":rocket: go", mapping) == "R go"


def test_map_falls_back_to_builtin():
    assert replace_emoji_shortcodes_with_map(":tada:", {}) == "\U0001F389"


def test_map_adds_new_shortcodes():
    mapping = {"custom_thing": "CT"}
    assert replace_emoji_shortcodes_with_map("x :custom_thing: y", mapping) == "x CT y"
    assert replace_emoji_shortcodes("x :custom_thing: y") == "x :custom_thing: y"


def test_map_skin_tone_still_stripped():
    mapping = {"skin-tone-3": "SHOULD_NOT_APPEAR"}
    assert replace_emoji_shortcodes_with_map(":wave::skin-tone-3:", mapping) == "\U0001F44B"