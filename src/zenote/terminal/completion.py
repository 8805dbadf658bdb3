# SPDX-License-Identifier: MIT

from zenote.color import TAG_COLORS
from zenote.terminal.validate import LOG_LEVELS


def complete_tag_color(incomplete: str) -> list[str]:
    """Return the tag palette for shell completion."""
    return [color for color in TAG_COLORS if color.startswith(incomplete)]


def complete_log_level(incomplete: str) -> list[str]:
    return [level for level in LOG_LEVELS if level.startswith(incomplete.upper())]
