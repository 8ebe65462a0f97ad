# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color names and the rich theme used when rendering matches.

`OneColors` holds hex codes from the One Dark palette as rich style strings, so
they can be dropped straight into markup: f"[{OneColors.CYAN}]text[/]".
"""
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"
    MAGENTA_b = f"bold {MAGENTA}"


def get_matches_theme() -> Theme:
    """Rich theme with named styles for the parts of a matches tree."""
    return Theme(
        {
            "matches.title": OneColors.BLUE_b,
            "matches.arg": OneColors.CYAN_b,
            "matches.count": OneColors.DARK_YELLOW,
            "matches.value": OneColors.GREEN,
            "matches.subcommand": OneColors.MAGENTA_b,
            "matches.external": OneColors.LIGHT_YELLOW,
            "matches.dim": OneColors.COMMENT_GREY,
            "matches.error": OneColors.DARK_RED,
        }
    )
