# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum
from pendulum.parsing.exceptions import ParserError

EXPORT_DATE_FORMAT = "YYYY-MM-DD"
DISPLAY_DATETIME_FORMAT = "YYYY-MM-DD HH:mm"


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    """ISO-8601 in UTC, the timestamp form written to every export document."""
    return datetime.in_tz("UTC").isoformat()


def datetime_from_untrusted(value: Any) -> Optional[pendulum.DateTime]:
    """
    Parse a timestamp read from an import file.

    Returns None for anything that is not an ISO-8601 date/time string.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = pendulum.parse(value.strip())
    except (ParserError, ValueError, OverflowError):
        return None
    if not isinstance(parsed, pendulum.DateTime):
        return None
    return parsed.in_tz("UTC")


def datetime_to_date_stamp(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("UTC").format(EXPORT_DATE_FORMAT)


def datetime_to_display_str(datetime: Optional[pendulum.DateTime]) -> str:
    if datetime is None:
        return ""
    return datetime.in_tz("local").format(DISPLAY_DATETIME_FORMAT)
