# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from zenote.color import TAG_COLORS, is_tag_color

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_tag_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    if not is_tag_color(color):
        raise typer.BadParameter(
            f"Unknown tag color '{color}', valid inputs: {', '.join(TAG_COLORS)}"
        )
    return color


def validate_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    if level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"valid inputs: {', '.join(LOG_LEVELS)}")
    return level.upper()


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value <= 0:
        raise typer.BadParameter("Must be a positive number")
    return value
