# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from zenote.model.clipboard import ClipboardPayload
from zenote.repository.configuration import CONFIGURATION_REPO
from zenote.service.clipboard import copy_note_to_clipboard, copy_note_with_formatting
from zenote.service.export import (
    export_note_json_file,
    export_note_markdown_file,
    write_export_file,
)
from zenote.terminal.custom_typer import AliasedTyperGroup
from zenote.terminal.library import get_note, load_library
from zenote.view.views.note import notes_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

SourceArgument = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, help="JSON export to read notes from"),
]
IndexOption = Annotated[int, typer.Option("--index", "-i", help="Note index, see note list")]
OutputDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--output-dir", "-o", file_okay=False, help="Write a file instead of printing"
    ),
]


class ConsoleClipboard:
    """Clipboard stand-in for the terminal: prints one representation of the payload."""

    def __init__(self, mime_type: str = "text/plain") -> None:
        self.mime_type = mime_type

    def write(self, payload: ClipboardPayload) -> None:
        if self.mime_type not in payload:
            raise ValueError(f"Clipboard payload has no {self.mime_type} entry")
        typer.echo(payload[self.mime_type])  # type: ignore[literal-required]


@app.command("list, ls")
def list_notes(source: SourceArgument) -> None:
    """List the notes of an export with their indexes."""
    notes, _ = load_library(source)
    notes_report("notes", notes, str(source))


@app.command("markdown, md")
def markdown(
    source: SourceArgument,
    index: IndexOption = 0,
    output_dir: OutputDirOption = None,
) -> None:
    """Export one note as a Markdown file."""
    notes, _ = load_library(source)
    export_file = export_note_markdown_file(get_note(notes, index))

    if output_dir is None:
        typer.echo(export_file["content"])
        return

    path = write_export_file(export_file, output_dir)
    Console().print(f"[green]Exported to {escape(str(path))}[/green]")


@app.command("json, j")
def json(
    source: SourceArgument,
    index: IndexOption = 0,
    output_dir: OutputDirOption = None,
) -> None:
    """Export one note as a JSON document."""
    config = CONFIGURATION_REPO.get_config()
    notes, _ = load_library(source)
    export_file = export_note_json_file(
        get_note(notes, index), indent=config["json_indent"]
    )

    if output_dir is None:
        typer.echo(export_file["content"])
        return

    path = write_export_file(export_file, output_dir)
    Console().print(f"[green]Exported to {escape(str(path))}[/green]")


@app.command("clip, cp")
def clip(
    source: SourceArgument,
    index: IndexOption = 0,
    html: Annotated[
        bool,
        typer.Option("--html", help="Print the rich representation instead of plain text"),
    ] = False,
) -> None:
    """Print the clipboard representation of one note."""
    notes, _ = load_library(source)
    note = get_note(notes, index)

    if html:
        copy_note_with_formatting(note, ConsoleClipboard("text/html"))
    else:
        copy_note_to_clipboard(note, ConsoleClipboard("text/plain"))
