# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from zenote.model.export import ExportFile
from zenote.model.share_link import Profile, ShareLink
from zenote.repository.configuration import CONFIGURATION_REPO
from zenote.service.export import (
    export_full_account_file,
    export_json_file,
    export_markdown_file,
    write_export_file,
)
from zenote.terminal.custom_typer import AliasedTyperGroup
from zenote.terminal.library import load_library

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

SourceArgument = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, help="JSON export to read notes from"),
]
OutputDirOption = Annotated[
    Path,
    typer.Option("--output-dir", "-o", file_okay=False, help="Directory to write to"),
]


def _write(export_file: ExportFile, output_dir: Path) -> None:
    path = write_export_file(export_file, output_dir)
    console = Console()
    console.print(f"[green]Exported to {escape(str(path))}[/green]")


@app.command("json, j")
def json(source: SourceArgument, output_dir: OutputDirOption = Path(".")) -> None:
    """Write a dated JSON backup."""
    config = CONFIGURATION_REPO.get_config()
    notes, tags = load_library(source)
    _write(
        export_json_file(
            notes, tags, config["export_prefix"], indent=config["json_indent"]
        ),
        output_dir,
    )


@app.command("markdown, md")
def markdown(source: SourceArgument, output_dir: OutputDirOption = Path(".")) -> None:
    """Write all notes as one combined Markdown document."""
    config = CONFIGURATION_REPO.get_config()
    notes, _ = load_library(source)
    _write(export_markdown_file(notes, config["export_prefix"]), output_dir)


@app.command("full, f")
def full(
    source: SourceArgument,
    output_dir: OutputDirOption = Path("."),
    display_name: Annotated[
        Optional[str], typer.Option("--display-name", "-n")
    ] = None,
    email: Annotated[Optional[str], typer.Option("--email", "-m")] = None,
) -> None:
    """Write a full-account backup (version 2, not importable)."""
    config = CONFIGURATION_REPO.get_config()
    notes, tags = load_library(source)
    profile: Profile = {"display_name": display_name, "email": email}
    share_links: list[ShareLink] = []
    _write(
        export_full_account_file(
            notes,
            tags,
            profile,
            share_links,
            config["export_prefix"],
            indent=config["json_indent"],
        ),
        output_dir,
    )
