"""Built-in table of standard emoji shortcodes and their Unicode forms."""

from __future__ import annotations

from collections.abc import Mapping

# Each entry: whitespace-separated shortcode aliases, then the emoji text.
_ENTRIES: tuple[tuple[str, str], ...] = (
    # ---- Faces / people ----
    ("slightly_smiling_face", "\U0001F642"),
    ("smile", "\U0001F604"),
    ("grinning", "\U0001F600"),
    ("laughing satisfied", "\U0001F606"),
    ("joy", "\U0001F602"),
    ("rofl", "\U0001F923"),
    ("wink", "\U0001F609"),
    ("blush", "\U0001F60A"),
    ("innocent", "\U0001F607"),
    ("heart_eyes", "\U0001F60D"),
    ("star_struck star-struck", "\U0001F929"),
    ("kissing_heart", "\U0001F618"),
    ("thinking_face thinking", "\U0001F914"),
    ("face_with_raised_eyebrow raised_eyebrow", "\U0001F928"),
    ("neutral_face", "\U0001F610"),
    ("expressionless", "\U0001F611"),
    ("no_mouth", "\U0001F636"),
    ("face_with_rolling_eyes rolling_eyes", "\U0001F644"),
    ("smirk", "\U0001F60F"),
    ("persevere", "\U0001F623"),
    ("disappointed", "\U0001F61E"),
    ("sweat", "\U0001F613"),
    ("weary", "\U0001F629"),
    ("tired_face", "\U0001F62B"),
    ("cry", "\U0001F622"),
    ("sob", "\U0001F62D"),
    ("scream", "\U0001F631"),
    ("face_holding_back_tears", "\U0001F979"),
    ("rage pout", "\U0001F621"),
    ("angry", "\U0001F620"),
    ("skull", "\U0001F480"),
    ("ghost", "\U0001F47B"),
    ("robot_face robot", "\U0001F916"),
    ("clown_face clown", "\U0001F921"),
    ("poop hankey shit", "\U0001F4A9"),
    ("see_no_evil", "\U0001F648"),
    ("hear_no_evil", "\U0001F649"),
    ("speak_no_evil", "\U0001F64A"),
    # ---- Hands / gestures ----
    ("wave", "\U0001F44B"),
    ("raised_hands", "\U0001F64C"),
    ("clap", "\U0001F44F"),
    ("pray folded_hands", "\U0001F64F"),
    ("handshake", "\U0001F91D"),
    ("thumbsup +1 thumbs_up", "\U0001F44D"),
    ("thumbsdown -1 thumbs_down", "\U0001F44E"),
    ("fist fist_raised", "\u270A"),
    ("punch facepunch fist_oncoming", "\U0001F44A"),
    ("ok_hand", "\U0001F44C"),
    ("v", "\u270C\uFE0F"),
    ("metal", "\U0001F918"),
    ("pinching_hand", "\U0001F90F"),
    ("crossed_fingers", "\U0001F91E"),
    ("hand_with_index_finger_and_thumb_crossed love_you_gesture", "\U0001F91F"),
    ("point_up", "\u261D\uFE0F"),
    ("point_down", "\U0001F447"),
    ("point_left", "\U0001F448"),
    ("point_right", "\U0001F449"),
    ("muscle", "\U0001F4AA"),
    ("brain", "\U0001F9E0"),
    ("raised_hand hand", "\u270B"),
    ("raised_back_of_hand", "\U0001F91A"),
    ("open_hands", "\U0001F450"),
    ("palms_up_together", "\U0001F932"),
    ("writing_hand", "\u270D\uFE0F"),
    ("eyes", "\U0001F440"),
    ("eye", "\U0001F441\uFE0F"),
    # ---- Hearts / emotion ----
    ("heart red_heart", "\u2764\uFE0F"),
    ("purple_heart", "\U0001F49C"),
    ("blue_heart", "\U0001F499"),
    ("green_heart", "\U0001F49A"),
    ("yellow_heart", "\U0001F49B"),
    ("orange_heart", "\U0001F9E1"),
    ("white_heart", "\U0001F90D"),
    ("broken_heart", "\U0001F494"),
    ("heavy_heart_exclamation_mark_ornament heart_exclamation", "\u2763\uFE0F"),
    ("sparkling_heart", "\U0001F496"),
    ("revolving_hearts", "\U0001F49E"),
    ("two_hearts", "\U0001F495"),
    ("heartbeat", "\U0001F493"),
    ("heartpulse", "\U0001F497"),
    ("growing_heart", "\U0001F49D"),
    ("fire flame", "\U0001F525"),
    ("star", "\u2B50"),
    ("sparkles", "\u2728"),
    ("zap", "\u26A1"),
    ("boom collision", "\U0001F4A5"),
    ("sweat_drops", "\U0001F4A6"),
    # ---- Common objects ----
    ("rocket", "\U0001F680"),
    ("tada", "\U0001F389"),
    ("confetti_ball", "\U0001F38A"),
    ("balloon", "\U0001F388"),
    ("trophy", "\U0001F3C6"),
    ("medal sports_medal", "\U0001F3C5"),
    ("crown", "\U0001F451"),
    ("gem", "\U0001F48E"),
    ("bulb", "\U0001F4A1"),
    ("wrench", "\U0001F527"),
    ("hammer", "\U0001F528"),
    ("key", "\U0001F511"),
    ("lock", "\U0001F512"),
    ("unlock", "\U0001F513"),
    ("bell", "\U0001F514"),
    ("megaphone", "\U0001F4E3"),
    ("loudspeaker", "\U0001F4E2"),
    ("moneybag", "\U0001F4B0"),
    ("chart_with_upwards_trend", "\U0001F4C8"),
    ("chart_with_downwards_trend", "\U0001F4C9"),
    ("warning", "\u26A0\uFE0F"),
    ("no_entry", "\u26D4"),
    ("octagonal_sign stop_sign", "\U0001F6D1"),
    ("x", "\u274C"),
    ("white_check_mark", "\u2705"),
    ("heavy_check_mark", "\u2714\uFE0F"),
    ("heavy_multiplication_x", "\u2716\uFE0F"),
    ("bangbang", "\u203C\uFE0F"),
    ("question", "\u2753"),
    ("grey_question", "\u2754"),
    ("exclamation heavy_exclamation_mark", "\u2757"),
    ("red_circle", "\U0001F534"),
    ("large_blue_circle blue_circle", "\U0001F535"),
    ("white_circle", "\u26AA"),
    ("black_circle", "\u26AB"),
    ("checkered_flag", "\U0001F3C1"),
    # ---- Nature / animals ----
    ("dog dog_face", "\U0001F436"),
    ("cat cat_face", "\U0001F431"),
    ("bear", "\U0001F43B"),
    ("panda_face", "\U0001F43C"),
    ("monkey_face", "\U0001F435"),
    ("penguin", "\U0001F427"),
    ("chicken", "\U0001F414"),
    ("snake", "\U0001F40D"),
    ("bug", "\U0001F41B"),
    ("bee honeybee", "\U0001F41D"),
    ("butterfly", "\U0001F98B"),
    ("unicorn unicorn_face", "\U0001F984"),
    ("rainbow", "\U0001F308"),
    ("sun_with_face", "\U0001F31E"),
    ("full_moon_with_face", "\U0001F31D"),
    ("cloud", "\u2601\uFE0F"),
    ("umbrella", "\u2602\uFE0F"),
    ("snowflake", "\u2744\uFE0F"),
    ("ocean", "\U0001F30A"),
    # ---- Food / drink ----
    ("coffee", "\u2615"),
    ("beer", "\U0001F37A"),
    ("beers", "\U0001F37B"),
    ("wine_glass", "\U0001F377"),
    ("cocktail", "\U0001F378"),
    ("pizza", "\U0001F355"),
    ("hamburger", "\U0001F354"),
    ("taco", "\U0001F32E"),
    ("burrito", "\U0001F32F"),
    ("cake", "\U0001F370"),
    ("cookie", "\U0001F36A"),
    ("ice_cream", "\U0001F368"),
    ("doughnut", "\U0001F369"),
    ("apple", "\U0001F34E"),
    ("banana", "\U0001F34C"),
    # ---- Symbols / misc ----
    ("100", "\U0001F4AF"),
    ("heavy_plus_sign", "\u2795"),
    ("heavy_minus_sign", "\u2796"),
    ("heavy_division_sign", "\u2797"),
    ("infinity", "\u267E\uFE0F"),
    ("recycle", "\u267B\uFE0F"),
    ("copyright", "\u00A9\uFE0F"),
    ("registered", "\u00AE\uFE0F"),
    ("tm", "\u2122\uFE0F"),
    ("arrow_right", "\u27A1\uFE0F"),
    ("arrow_left", "\u2B05\uFE0F"),
    ("arrow_up", "\u2B06\uFE0F"),
    ("arrow_down", "\u2B07\uFE0F"),
    ("arrows_counterclockwise", "\U0001F504"),
    ("rewind", "\u23EA"),
    ("fast_forward", "\u23E9"),
    ("play_button arrow_forward", "\u25B6\uFE0F"),
    ("pause_button double_vertical_bar", "\u23F8\uFE0F"),
    ("stop_button", "\u23F9\uFE0F"),
    ("information_source", "\u2139\uFE0F"),
    ("abc", "\U0001F524"),
    ("atm", "\U0001F3E7"),
    ("new", "\U0001F195"),
    ("free", "\U0001F193"),
    ("sos", "\U0001F198"),
    ("link", "\U0001F517"),
    ("paperclip", "\U0001F4CE"),
    ("scissors", "\u2702\uFE0F"),
    ("pencil", "\U0001F4DD"),
    ("pencil2", "\u270F\uFE0F"),
    ("memo", "\U0001F4DD"),
    ("clipboard", "\U0001F4CB"),
    ("calendar", "\U0001F4C5"),
    ("pushpin", "\U0001F4CC"),
    ("round_pushpin", "\U0001F4CD"),
    ("triangular_flag_on_post", "\U0001F6A9"),
    ("page_facing_up", "\U0001F4C4"),
    ("page_with_curl", "\U0001F4C3"),
    ("bookmark", "\U0001F516"),
    ("dizzy", "\U0001F4AB"),
    ("star2", "\U0001F31F"),
    ("gift", "\U0001F381"),
    ("mega", "\U0001F4E3"),
    ("money_with_wings", "\U0001F4B8"),
    ("gear", "\u2699\uFE0F"),
    ("hourglass", "\u231B"),
    ("alarm_clock", "\u23F0"),
    ("stopwatch", "\u23F1\uFE0F"),
    ("mouse", "\U0001F42D"),
    ("frog", "\U0001F438"),
    ("turtle", "\U0001F422"),
    ("octopus", "\U0001F419"),
    ("crab", "\U0001F980"),
    ("popcorn", "\U0001F37F"),
    ("avocado", "\U0001F951"),
    ("sunny", "\u2600\uFE0F"),
    ("rose", "\U0001F339"),
    ("sunflower", "\U0001F33B"),
    ("herb", "\U0001F33F"),
    ("seedling", "\U0001F331"),
    ("fallen_leaf", "\U0001F342"),
    ("maple_leaf", "\U0001F341"),
    ("tree", "\U0001F333"),
    ("cactus", "\U0001F335"),
    ("earth_americas", "\U0001F30E"),
    ("negative_squared_cross_mark", "\u274E"),
    ("zzz", "\U0001F4A4"),
    ("speech_balloon", "\U0001F4AC"),
    ("thought_balloon", "\U0001F4AD"),
    ("wave_dash", "\u3030\uFE0F"),
    ("black_heart", "\U0001F5A4"),
    # ---- Keycap numbers / symbols ----
    ("zero", "0\uFE0F\u20E3"),
    ("one", "1\uFE0F\u20E3"),
    ("two", "2\uFE0F\u20E3"),
    ("three", "3\uFE0F\u20E3"),
    ("four", "4\uFE0F\u20E3"),
    ("five", "5\uFE0F\u20E3"),
    ("six", "6\uFE0F\u20E3"),
    ("seven", "7\uFE0F\u20E3"),
    ("eight", "8\uFE0F\u20E3"),
    ("nine", "9\uFE0F\u20E3"),
    ("keycap_ten ten", "\U0001F51F"),
    ("hash", "#\uFE0F\u20E3"),
    ("asterisk keycap_star", "*\uFE0F\u20E3"),
    # ---- Zodiac ----
    ("aries", "\u2648"),
    ("taurus", "\u2649"),
    ("gemini", "\u264A"),
    ("cancer", "\u264B"),
    ("leo", "\u264C"),
    ("virgo", "\u264D"),
    ("libra", "\u264E"),
    ("scorpius", "\u264F"),
    ("sagittarius", "\u2650"),
    ("capricorn", "\u2651"),
    ("aquarius", "\u2652"),
    ("pisces", "\u2653"),
    # ---- Arrows (additional) ----
    ("arrow_upper_right", "\u2197\uFE0F"),
    ("arrow_lower_right", "\u2198\uFE0F"),
    ("arrow_lower_left", "\u2199\uFE0F"),
    ("arrow_upper_left", "\u2196\uFE0F"),
    ("arrow_up_down", "\u2195\uFE0F"),
    ("left_right_arrow", "\u2194\uFE0F"),
    ("arrow_right_hook", "\u21AA\uFE0F"),
    ("leftwards_arrow_with_hook", "\u21A9\uFE0F"),
    ("arrow_heading_up", "\u2934\uFE0F"),
    ("arrow_heading_down", "\u2935\uFE0F"),
    ("twisted_rightwards_arrows", "\U0001F500"),
    ("repeat", "\U0001F501"),
    ("repeat_one", "\U0001F502"),
    ("back", "\U0001F519"),
    ("end", "\U0001F51A"),
    ("on", "\U0001F51B"),
    ("soon", "\U0001F51C"),
    ("top", "\U0001F51D"),
    # ---- Geometric / shapes ----
    ("orange_circle", "\U0001F7E0"),
    ("yellow_circle", "\U0001F7E1"),
    ("green_circle", "\U0001F7E2"),
    ("purple_circle", "\U0001F7E3"),
    ("brown_circle", "\U0001F7E4"),
    ("large_red_square red_square", "\U0001F7E5"),
    ("large_orange_square orange_square", "\U0001F7E7"),
    ("large_yellow_square yellow_square", "\U0001F7E8"),
    ("large_green_square green_square", "\U0001F7E9"),
    ("large_blue_square blue_square", "\U0001F7E6"),
    ("large_purple_square purple_square", "\U0001F7EA"),
    ("large_brown_square brown_square", "\U0001F7EB"),
    ("black_large_square", "\u2B1B"),
    ("white_large_square", "\u2B1C"),
    ("black_medium_square", "\u25FC\uFE0F"),
    ("white_medium_square", "\u25FB\uFE0F"),
    ("black_medium_small_square", "\u25FE"),
    ("white_medium_small_square", "\u25FD"),
    ("black_small_square", "\u25AA\uFE0F"),
    ("white_small_square", "\u25AB\uFE0F"),
    ("diamond_shape_with_a_dot_inside", "\U0001F4A0"),
    ("small_red_triangle", "\U0001F53A"),
    ("small_red_triangle_down", "\U0001F53B"),
    ("small_orange_diamond", "\U0001F538"),
    ("small_blue_diamond", "\U0001F539"),
    ("large_orange_diamond", "\U0001F536"),
    ("large_blue_diamond", "\U0001F537"),
    ("radio_button", "\U0001F518"),
    # ---- Additional ----
    ("partly_sunny sun_behind_cloud", "\u26C5"),
    ("snowman_without_snow", "\u26C4"),
    ("comet", "\u2604\uFE0F"),
    ("no_entry_sign", "\U0001F6AB"),
    ("o heavy_large_circle", "\u2B55"),
    ("grey_exclamation", "\u2755"),
    ("white_exclamation_mark", "\u2755"),
    ("white_question_mark", "\u2754"),
    ("interrobang", "\u2049\uFE0F"),
    ("low_brightness", "\U0001F505"),
    ("high_brightness", "\U0001F506"),
    ("mute", "\U0001F507"),
    ("speaker", "\U0001F508"),
    ("sound loud_sound", "\U0001F50A"),
    ("no_bell", "\U0001F515"),
    ("first_place_medal 1st_place_medal", "\U0001F947"),
    ("second_place_medal 2nd_place_medal", "\U0001F948"),
    ("third_place_medal 3rd_place_medal", "\U0001F949"),
    ("soccer", "\u26BD"),
    ("basketball", "\U0001F3C0"),
    ("football", "\U0001F3C8"),
    ("baseball", "\u26BE"),
    ("tennis", "\U0001F3BE"),
    ("dart", "\U0001F3AF"),
    ("bowling", "\U0001F3B3"),
    ("golf golfing", "\U0001F3CC\uFE0F"),
    ("video_game joystick", "\U0001F3AE"),
    ("slot_machine", "\U0001F3B0"),
    ("game_die", "\U0001F3B2"),
    ("musical_note", "\U0001F3B5"),
    ("notes musical_notes", "\U0001F3B6"),
    ("microphone", "\U0001F3A4"),
    ("headphones headphone", "\U0001F3A7"),
    ("guitar", "\U0001F3B8"),
    ("trumpet", "\U0001F3BA"),
    ("drum drum_with_drumsticks", "\U0001F941"),
    ("movie_camera", "\U0001F3A5"),
    ("clapper clapper_board", "\U0001F3AC"),
    ("tv television", "\U0001F4FA"),
    ("camera", "\U0001F4F7"),
    ("computer desktop_computer", "\U0001F4BB"),
    ("keyboard", "\u2328\uFE0F"),
    ("phone telephone", "\u260E\uFE0F"),
    ("mobile_phone iphone", "\U0001F4F1"),
    ("battery", "\U0001F50B"),
    ("electric_plug", "\U0001F50C"),
    ("light_bulb", "\U0001F4A1"),
    ("flashlight", "\U0001F526"),
    ("candle", "\U0001F56F\uFE0F"),
    ("wastebasket", "\U0001F5D1\uFE0F"),
    ("nut_and_bolt", "\U0001F529"),
    ("mag mag_right", "\U0001F50D"),
    ("microscope", "\U0001F52C"),
    ("telescope", "\U0001F52D"),
    ("crystal_ball", "\U0001F52E"),
    ("bomb", "\U0001F4A3"),
    ("knife hocho", "\U0001F52A"),
    ("shield", "\U0001F6E1\uFE0F"),
    ("skull_and_crossbones", "\u2620\uFE0F"),
    ("radioactive", "\u2622\uFE0F"),
    ("biohazard", "\u2623\uFE0F"),
    ("peace peace_symbol", "\u262E\uFE0F"),
    ("atom atom_symbol", "\u269B\uFE0F"),
    ("rainbow_flag", "\U0001F3F3\uFE0F\u200D\U0001F308"),
    ("tongue", "\U0001F445"),
    ("lips", "\U0001F444"),
    ("alien", "\U0001F47D"),
    ("jack_o_lantern", "\U0001F383"),
    ("christmas_tree", "\U0001F384"),
    ("santa", "\U0001F385"),
    ("fireworks", "\U0001F386"),
    ("door", "\U0001F6AA"),
    ("toilet", "\U0001F6BD"),
    ("shower", "\U0001F6BF"),
    ("car red_car automobile", "\U0001F697"),
    ("taxi", "\U0001F695"),
    ("bus", "\U0001F68C"),
    ("airplane", "\u2708\uFE0F"),
    ("sailboat", "\u26F5"),
    ("train railway_car", "\U0001F683"),
    ("house", "\U0001F3E0"),
    ("church", "\u26EA"),
    ("tent", "\u26FA"),
)


def _build_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for aliases, emoji in _ENTRIES:
        for alias in aliases.split():
            # The first entry naming a shortcode wins.
            table.setdefault(alias, emoji)
    return table


_TABLE: dict[str, str] = _build_table()


def emoji_for(shortcode: str) -> str | None:
    """Return the Unicode emoji for a shortcode from the built-in table, or None."""
    return _TABLE.get(shortcode)


def emoji_for_runtime(shortcode: str, standard_emoji: Mapping[str, str]) -> str | None:
    """Look up a shortcode in the runtime map first, then in the built-in table."""
    if shortcode in standard_emoji:
        return standard_emoji[shortcode]
    return emoji_for(shortcode)