# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

from zenote.codec.note import UNTITLED
from zenote.time import datetime_to_date_stamp, now_utc

MAX_FILENAME_LENGTH = 50


def get_sanitized_filename(title: str) -> str:
    """
    Sanitize a note title for use as a file name (without extension).

    Rules:
    - Keep ASCII letters, digits, hyphens, underscores and spaces
    - Replace whitespace runs with a hyphen
    - Max 50 chars
    - Untitled if empty
    """
    name = re.sub(r"[^a-zA-Z0-9\-_ ]", "", title)
    name = re.sub(r"\s+", "-", name)
    name = name[:MAX_FILENAME_LENGTH]

    if not name.strip("-"):
        return UNTITLED

    return name


def get_backup_filename(
    prefix: str, exported_at: Optional[pendulum.DateTime] = None
) -> str:
    return f"{prefix}-backup-{datetime_to_date_stamp(exported_at or now_utc())}.json"


def get_full_account_filename(
    prefix: str, exported_at: Optional[pendulum.DateTime] = None
) -> str:
    stamp = datetime_to_date_stamp(exported_at or now_utc())
    return f"{prefix}-account-{stamp}.json"


def get_markdown_export_filename(
    prefix: str, exported_at: Optional[pendulum.DateTime] = None
) -> str:
    return f"{prefix}-export-{datetime_to_date_stamp(exported_at or now_utc())}.md"


def get_note_filename(title: str, extension: str) -> str:
    return f"{get_sanitized_filename(title)}.{extension}"
