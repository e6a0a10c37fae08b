from slacktui.emoji_standard import all_standard_emoji
from slacktui.emoji_table import emoji_for


def test_has_reasonable_number_of_entries():
    assert len(all_standard_emoji()) > 100


def test_every_entry_matches_emoji_for():
    mismatches = [
        (name, expected, emoji_for(name))
        for name, expected in all_standard_emoji()
        if emoji_for(name) != expected
    ]
    assert mismatches == []


def test_names_are_unique():
    names = [name for name, _ in all_standard_emoji()]
    assert len(names) == len(set(names))


def test_order_starts_and_ends_as_fixed():
    entries = all_standard_emoji()
    assert entries[0] == ("slightly_smiling_face", "\U0001F642")
    assert entries[-1] == ("bookmark", "\U0001F516")


def test_intentional_alias_pairs_present():
    entries = dict(all_standard_emoji())
    assert entries["+1"] == entries["thumbsup"] == "\U0001F44D"
    assert entries["-1"] == entries["thumbsdown"] == "\U0001F44E"


def test_returns_same_stable_sequence():
    assert list(all_standard_emoji()) == list(all_standard_emoji())
    assert ("rocket", "\U0001F680") in all_standard_emoji()