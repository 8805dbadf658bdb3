# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from zenote.codec.note import get_display_title
from zenote.model.import_report import PlannedNote
from zenote.model.note import Note
from zenote.time import datetime_to_display_str
from zenote.transcode.convert import markup_to_plain_text
from zenote.view.state import get_report_options
from zenote.view.views.header import header
from zenote.view.views.tag import format_tag_names


def _preview(markup: str) -> str:
    plain_text = markup_to_plain_text(markup)
    if plain_text == "":
        return ""
    first_line = plain_text.split("\n")[0].strip()
    length = get_report_options()["preview_length"]
    if len(first_line) > length:
        return first_line[: max(length - 1, 0)].rstrip() + "…"
    return first_line


def notes_report(
    report_name: str,
    notes: list[Note],
    source: Optional[str] = None,
    columns: list[str] = [
        "index",
        "title",
        "tags",
        "updated",
        "pinned",
        "preview",
    ],
) -> None:
    header(report_name, source)

    notes_table = Table(box=box.SIMPLE)
    for column in columns:
        if column == "preview":
            notes_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            notes_table.add_column(column)

    for index, note in enumerate(notes):
        row = []
        for column in columns:
            column_value = ""
            if column == "index":
                column_value = str(index)
            elif column == "title":
                column_value = get_display_title(note["title"])
            elif column == "tags":
                column_value = format_tag_names([tag["name"] for tag in note["tags"]])
            elif column == "created" or column == "updated":
                column_value = datetime_to_display_str(note[column])  # type: ignore[literal-required]
            elif column == "pinned":
                column_value = "✓" if note["pinned"] else ""
            elif column == "preview":
                column_value = _preview(note["content"])
            row.append(escape(column_value))
        notes_table.add_row(*row)

    console = Console()
    console.print(notes_table)


def planned_notes_report(
    report_name: str, notes: list[PlannedNote], source: Optional[str] = None
) -> None:
    header(report_name, source)

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("index")
    notes_table.add_column("title")
    notes_table.add_column("tags")
    notes_table.add_column("created")
    notes_table.add_column("preview", no_wrap=True, overflow="ellipsis")

    for index, note in enumerate(notes):
        notes_table.add_row(
            str(index),
            escape(get_display_title(note["title"])),
            escape(format_tag_names(note["tag_names"])),
            datetime_to_display_str(note["created"]),
            escape(_preview(note["content"])),
        )

    console = Console()
    console.print(notes_table)
