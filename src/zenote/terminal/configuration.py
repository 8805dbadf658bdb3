# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from zenote.configuration import Configuration
from zenote.repository.configuration import CONFIGURATION_REPO
from zenote.terminal.completion import complete_log_level, complete_tag_color
from zenote.terminal.custom_typer import AliasedTyperGroup
from zenote.terminal.validate import (
    validate_log_level,
    validate_positive,
    validate_tag_color,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _config_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("export_prefix", config["export_prefix"])
    table.add_row("max_import_file_size", str(config["max_import_file_size"]))
    table.add_row("json_indent", str(config["json_indent"]))
    table.add_row("default_tag_color", config["default_tag_color"])
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(CONFIGURATION_REPO.path))
    return table


@app.command("show, v")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_config_table(config))

    yaml_library_type = "untested"
    try:
        from yaml import CSafeLoader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    export_prefix: Annotated[
        Optional[str],
        typer.Option("--export-prefix", help="Prefix of dated export file names"),
    ] = None,
    max_import_file_size: Annotated[
        Optional[int],
        typer.Option(
            "--max-import-file-size",
            callback=validate_positive,
            help="Largest accepted import file, in bytes",
        ),
    ] = None,
    json_indent: Annotated[
        Optional[int],
        typer.Option("--json-indent", min=0, help="Indentation of JSON exports"),
    ] = None,
    default_tag_color: Annotated[
        Optional[str],
        typer.Option(
            "--default-tag-color",
            callback=validate_tag_color,
            autocompletion=complete_tag_color,
            help="Colour of tags created on import when the file names none",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            autocompletion=complete_log_level,
            help="valid inputs: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        export_prefix=export_prefix,
        max_import_file_size=max_import_file_size,
        json_indent=json_indent,
        default_tag_color=default_tag_color,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_config_table(config, title="Updated Configuration"))
