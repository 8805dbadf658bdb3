# SPDX-License-Identifier: MIT

"""Options shared by every report printed in one CLI invocation."""

from contextvars import ContextVar
from typing import Optional, TypedDict


class ReportOptions(TypedDict):
    show_header: bool
    # Characters of note text shown in a table's preview column
    preview_length: int


DEFAULT_PREVIEW_LENGTH = 60

_report_options: ContextVar[ReportOptions] = ContextVar(
    "report_options",
    default={"show_header": True, "preview_length": DEFAULT_PREVIEW_LENGTH},
)


def update_report_options(
    show_header: Optional[bool] = None, preview_length: Optional[int] = None
) -> None:
    options = ReportOptions(**_report_options.get())
    if show_header is not None:
        options["show_header"] = show_header
    if preview_length is not None:
        options["preview_length"] = preview_length
    _report_options.set(options)


def get_report_options() -> ReportOptions:
    return ReportOptions(**_report_options.get())
