# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from zenote.errors import ValidationError
from zenote.model.import_report import ImportPlan
from zenote.model.tag import Tag
from zenote.repository.configuration import CONFIGURATION_REPO
from zenote.service.import_validation import build_import_report, get_report_error
from zenote.service.importer import JSON_EXTENSIONS, check_file_size, import_file
from zenote.terminal.custom_typer import AliasedTyperGroup
from zenote.terminal.library import fail_import, load_library, read_text_file
from zenote.transcode.convert import normalize_markup
from zenote.view.views.import_report import import_report_view
from zenote.view.views.note import planned_notes_report
from zenote.view.views.tag import tags_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _plan_import(path: Path, library: Optional[Path]) -> ImportPlan:
    config = CONFIGURATION_REPO.get_config()

    existing_tags: list[Tag] = []
    if library is not None:
        _, existing_tags = load_library(library)

    try:
        return import_file(
            path,
            normalize_markup,
            existing_tags=existing_tags,
            max_size=config["max_import_file_size"],
            default_color=config["default_tag_color"],
        )
    except ValidationError as e:
        fail_import(e)


@app.command("inspect, in")
def inspect(
    path: Annotated[
        Path, typer.Argument(exists=True, dir_okay=False, help="File to import")
    ],
    library: Annotated[
        Optional[Path],
        typer.Option(
            "--library",
            "-l",
            exists=True,
            dir_okay=False,
            help="JSON export whose tags the import is matched against",
        ),
    ] = None,
) -> None:
    """Show the notes and tags an import would create."""
    plan = _plan_import(path, library)

    planned_notes_report(f"import ({plan['source_format']})", plan["notes"], str(path))
    if plan["tags_to_create"]:
        tags_report("tags to create", plan["tags_to_create"])


@app.command("check, c")
def check(
    path: Annotated[
        Path, typer.Argument(exists=True, dir_okay=False, help="File to import")
    ],
) -> None:
    """Validate an import file and print the verdict."""
    console = Console()

    if path.name.lower().endswith(JSON_EXTENSIONS):
        config = CONFIGURATION_REPO.get_config()
        try:
            check_file_size(path.stat().st_size, config["max_import_file_size"])
            report = build_import_report(read_text_file(path))
        except ValidationError as e:
            fail_import(e)

        import_report_view(report, str(path))
        error = get_report_error(report)
        if error is not None:
            fail_import(ValidationError(error))
        note_count = len(report["results"])
    else:
        note_count = len(_plan_import(path, None)["notes"])

    console.print(f"[green]Import OK: {note_count} note(s)[/green]")
