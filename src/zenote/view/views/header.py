# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from zenote.color import MUTED_COLOR, TITLE_COLOR
from zenote.view.state import get_report_options


def header(sub_header: str, source: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        sub_header: Name of the report being shown
        source: Optional file the report was built from
    """
    if not get_report_options()["show_header"]:
        return

    print(Padding("[dark_orange]zenote[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[{TITLE_COLOR}]{sub_header}[/{TITLE_COLOR}]", (0, 1)))
    if source is not None:
        print(Padding(f"[{MUTED_COLOR}]{escape(source)}[/{MUTED_COLOR}]", (0, 1)))
