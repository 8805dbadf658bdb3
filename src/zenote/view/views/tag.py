# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from zenote.color import get_rich_color
from zenote.model.export import ExportedTag
from zenote.view.views.header import header


def format_tag_names(names: list[str]) -> str:
    """Format a list of tag names as a comma-separated string without brackets or quotes."""
    return ", ".join(names)


def tags_report(
    report_name: str, tags: list[ExportedTag], source: Optional[str] = None
) -> None:
    header(report_name, source)

    tags_table = Table(box=box.SIMPLE)
    tags_table.add_column("tag")
    tags_table.add_column("color")

    for tag in tags:
        rich_color = get_rich_color(tag["color"])
        tags_table.add_row(
            f"[{rich_color}]{escape(tag['name'])}[/{rich_color}]", tag["color"]
        )

    console = Console()
    console.print(tags_table)
