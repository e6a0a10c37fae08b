"""Enumerable list of standard emoji used by the emoji picker."""

from __future__ import annotations

_STANDARD_EMOJI: tuple[tuple[str, str], ...] = (
    # Faces / people
    ("slightly_smiling_face", "\U0001F642"),
    ("smile", "\U0001F604"),
    ("grinning", "\U0001F600"),
    ("laughing", "\U0001F606"),
    ("joy", "\U0001F602"),
    ("rofl", "\U0001F923"),
    ("wink", "\U0001F609"),
    ("blush", "\U0001F60A"),
    ("innocent", "\U0001F607"),
    ("heart_eyes", "\U0001F60D"),
    ("star_struck", "\U0001F929"),
    ("kissing_heart", "\U0001F618"),
    ("thinking_face", "\U0001F914"),
    ("raised_eyebrow", "\U0001F928"),
    ("neutral_face", "\U0001F610"),
    ("expressionless", "\U0001F611"),
    ("no_mouth", "\U0001F636"),
    ("rolling_eyes", "\U0001F644"),
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
    ("rage", "\U0001F621"),
    ("angry", "\U0001F620"),
    ("skull", "\U0001F480"),
    ("ghost", "\U0001F47B"),
    ("robot_face", "\U0001F916"),
    ("clown_face", "\U0001F921"),
    ("poop", "\U0001F4A9"),
    ("see_no_evil", "\U0001F648"),
    ("hear_no_evil", "\U0001F649"),
    ("speak_no_evil", "\U0001F64A"),
    ("wave", "\U0001F44B"),
    ("raised_hands", "\U0001F64C"),
    ("clap", "\U0001F44F"),
    ("handshake", "\U0001F91D"),
    ("+1", "\U0001F44D"),
    ("thumbsup", "\U0001F44D"),
    ("-1", "\U0001F44E"),
    ("thumbsdown", "\U0001F44E"),
    ("fist", "\u270A"),
    ("punch", "\U0001F44A"),
    ("point_up", "\u261D\uFE0F"),
    ("point_down", "\U0001F447"),
    ("point_left", "\U0001F448"),
    ("point_right", "\U0001F449"),
    ("ok_hand", "\U0001F44C"),
    ("v", "\u270C\uFE0F"),
    ("crossed_fingers", "\U0001F91E"),
    ("metal", "\U0001F918"),
    ("muscle", "\U0001F4AA"),
    ("pray", "\U0001F64F"),
    ("eyes", "\U0001F440"),
    ("brain", "\U0001F9E0"),
    # Hearts / symbols
    ("heart", "\u2764\uFE0F"),
    ("orange_heart", "\U0001F9E1"),
    ("yellow_heart", "\U0001F49B"),
    ("green_heart", "\U0001F49A"),
    ("blue_heart", "\U0001F499"),
    ("purple_heart", "\U0001F49C"),
    ("black_heart", "\U0001F5A4"),
    ("broken_heart", "\U0001F494"),
    ("sparkling_heart", "\U0001F496"),
    ("100", "\U0001F4AF"),
    ("boom", "\U0001F4A5"),
    ("dizzy", "\U0001F4AB"),
    ("sparkles", "\u2728"),
    ("star", "\u2B50"),
    ("star2", "\U0001F31F"),
    ("zap", "\u26A1"),
    ("fire", "\U0001F525"),
    # Objects / celebration
    ("tada", "\U0001F389"),
    ("confetti_ball", "\U0001F38A"),
    ("balloon", "\U0001F388"),
    ("gift", "\U0001F381"),
    ("trophy", "\U0001F3C6"),
    ("medal", "\U0001F3C5"),
    ("crown", "\U0001F451"),
    ("gem", "\U0001F48E"),
    ("bell", "\U0001F514"),
    ("mega", "\U0001F4E3"),
    ("loudspeaker", "\U0001F4E2"),
    ("bulb", "\U0001F4A1"),
    ("money_with_wings", "\U0001F4B8"),
    ("moneybag", "\U0001F4B0"),
    ("key", "\U0001F511"),
    ("lock", "\U0001F512"),
    ("hammer", "\U0001F528"),
    ("wrench", "\U0001F527"),
    ("gear", "\u2699\uFE0F"),
    ("rocket", "\U0001F680"),
    ("hourglass", "\u231B"),
    ("alarm_clock", "\u23F0"),
    ("stopwatch", "\u23F1\uFE0F"),
    # Nature / animals
    ("dog", "\U0001F436"),
    ("cat", "\U0001F431"),
    ("mouse", "\U0001F42D"),
    ("bear", "\U0001F43B"),
    ("panda_face", "\U0001F43C"),
    ("penguin", "\U0001F427"),
    ("chicken", "\U0001F414"),
    ("frog", "\U0001F438"),
    ("bee", "\U0001F41D"),
    ("bug", "\U0001F41B"),
    ("snake", "\U0001F40D"),
    ("turtle", "\U0001F422"),
    ("octopus", "\U0001F419"),
    ("unicorn_face", "\U0001F984"),
    ("butterfly", "\U0001F98B"),
    ("crab", "\U0001F980"),
    # Food / drink
    ("coffee", "\u2615"),
    ("beer", "\U0001F37A"),
    ("beers", "\U0001F37B"),
    ("wine_glass", "\U0001F377"),
    ("pizza", "\U0001F355"),
    ("hamburger", "\U0001F354"),
    ("taco", "\U0001F32E"),
    ("burrito", "\U0001F32F"),
    ("popcorn", "\U0001F37F"),
    ("cake", "\U0001F370"),
    ("cookie", "\U0001F36A"),
    ("doughnut", "\U0001F369"),
    ("apple", "\U0001F34E"),
    ("banana", "\U0001F34C"),
    ("avocado", "\U0001F951"),
    # Nature
    ("sunny", "\u2600\uFE0F"),
    ("cloud", "\u2601\uFE0F"),
    ("umbrella", "\u2602\uFE0F"),
    ("snowflake", "\u2744\uFE0F"),
    ("rainbow", "\U0001F308"),
    ("ocean", "\U0001F30A"),
    ("rose", "\U0001F339"),
    ("sunflower", "\U0001F33B"),
    ("herb", "\U0001F33F"),
    ("seedling", "\U0001F331"),
    ("fallen_leaf", "\U0001F342"),
    ("maple_leaf", "\U0001F341"),
    ("tree", "\U0001F333"),
    ("cactus", "\U0001F335"),
    ("earth_americas", "\U0001F30E"),
    # Status / marks
    ("white_check_mark", "\u2705"),
    ("heavy_check_mark", "\u2714\uFE0F"),
    ("x", "\u274C"),
    ("negative_squared_cross_mark", "\u274E"),
    ("exclamation", "\u2757"),
    ("question", "\u2753"),
    ("warning", "\u26A0\uFE0F"),
    ("no_entry", "\u26D4"),
    ("zzz", "\U0001F4A4"),
    ("speech_balloon", "\U0001F4AC"),
    ("thought_balloon", "\U0001F4AD"),
    ("wave_dash", "\u3030\uFE0F"),
    ("recycle", "\u267B\uFE0F"),
    ("arrow_up", "\u2B06\uFE0F"),
    ("arrow_down", "\u2B07\uFE0F"),
    ("arrow_right", "\u27A1\uFE0F"),
    ("arrow_left", "\u2B05\uFE0F"),
    # Misc
    ("link", "\U0001F517"),
    ("paperclip", "\U0001F4CE"),
    ("scissors", "\u2702\uFE0F"),
    ("pencil", "\U0001F4DD"),
    ("memo", "\U0001F4DD"),
    ("clipboard", "\U0001F4CB"),
    ("calendar", "\U0001F4C5"),
    ("pushpin", "\U0001F4CC"),
    ("bookmark", "\U0001F516"),
)


def all_standard_emoji() -> tuple[tuple[str, str], ...]:
    """Return every standard emoji as (shortcode, unicode) pairs, in picker order."""
    return _STANDARD_EMOJI