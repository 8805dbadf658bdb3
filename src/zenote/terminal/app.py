# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from zenote.logger import configure_logging
from zenote.terminal import configuration, convert, export, importer, note
from zenote.terminal.custom_typer import RootTyperGroup
from zenote.view.state import update_report_options

app = typer.Typer(
    cls=RootTyperGroup,
    help="zenote: move notes between rich markup, Markdown and JSON exports",
    no_args_is_help=True,
)

# name, sub-app, help
_GROUPS = (
    ("import, i", importer.app, "Validate and inspect import files"),
    ("export, e", export.app, "Export all notes of a JSON export"),
    ("note, n", note.app, "Export, list or copy single notes"),
    ("convert, cv", convert.app, "Convert between markup, Markdown and text"),
    ("config, c", configuration.app, "Show or change settings"),
)
for name, group, group_help in _GROUPS:
    app.add_typer(group, name=name, help=group_help)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Suppress header output in reports"),
    ] = False,
    preview_length: Annotated[
        Optional[int],
        typer.Option(
            "--preview-length",
            min=1,
            help="Characters of note text shown in report previews",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every import and export step"),
    ] = False,
) -> None:
    """
    Options that apply to every command.
    """
    update_report_options(
        show_header=False if no_header else None, preview_length=preview_length
    )
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
