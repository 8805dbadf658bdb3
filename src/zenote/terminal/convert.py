# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Callable, Optional

import typer

from zenote.terminal.custom_typer import AliasedTyperGroup
from zenote.terminal.library import read_text_file
from zenote.transcode.convert import (
    markdown_to_markup,
    markup_to_markdown,
    markup_to_plain_text,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

InputArgument = Annotated[Path, typer.Argument(exists=True, dir_okay=False)]
OutputOption = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", dir_okay=False, help="Write to a file instead of printing"),
]


def _convert(path: Path, output: Optional[Path], converter: Callable[[str], str]) -> None:
    result = converter(read_text_file(path))
    if output is None:
        typer.echo(result)
    else:
        output.write_text(result + "\n", encoding="utf-8")


@app.command("to-markdown, md")
def to_markdown(path: InputArgument, output: OutputOption = None) -> None:
    """Convert a rich markup file to Markdown."""
    _convert(path, output, markup_to_markdown)


@app.command("to-markup, html")
def to_markup(path: InputArgument, output: OutputOption = None) -> None:
    """Convert a Markdown file to rich markup."""
    _convert(path, output, markdown_to_markup)


@app.command("to-text, txt")
def to_text(path: InputArgument, output: OutputOption = None) -> None:
    """Convert a rich markup file to plain text."""
    _convert(path, output, markup_to_plain_text)
