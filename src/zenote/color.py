# SPDX-License-Identifier: MIT

DEFAULT_TAG_COLOR = "stone"

# Tag palette, with the hex value used in the app and a Rich color for
# terminal output.
TAG_COLORS: dict[str, str] = {
    "terracotta": "#C25634",
    "gold": "#D4AF37",
    "forest": "#3D5A3D",
    "stone": "#8B8178",
    "indigo": "#4A5568",
    "clay": "#A67B5B",
    "sage": "#87A878",
    "plum": "#6B4C5A",
}

TAG_RICH_COLORS: dict[str, str] = {
    "terracotta": "dark_orange3",
    "gold": "gold3",
    "forest": "dark_sea_green4",
    "stone": "grey58",
    "indigo": "slate_blue3",
    "clay": "light_salmon3",
    "sage": "dark_sea_green",
    "plum": "plum4",
}

TITLE_COLOR = "sandy_brown"
MUTED_COLOR = "bright_black"
ERROR_COLOR = "red"


def is_tag_color(color: object) -> bool:
    return isinstance(color, str) and color in TAG_COLORS


def get_rich_color(color: str) -> str:
    return TAG_RICH_COLORS.get(color, TAG_RICH_COLORS[DEFAULT_TAG_COLOR])
