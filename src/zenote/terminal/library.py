# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from zenote.color import ERROR_COLOR
from zenote.errors import ValidationError
from zenote.model.note import Note
from zenote.model.tag import Tag
from zenote.repository.configuration import CONFIGURATION_REPO
from zenote.service.export import build_library
from zenote.service.import_validation import parse_imported_json
from zenote.service.importer import check_file_size


def fail(message: str) -> NoReturn:
    console = Console(stderr=True)
    console.print(f"[{ERROR_COLOR}]{escape(message)}[/{ERROR_COLOR}]")
    raise typer.Exit(1)


def fail_import(error: ValidationError) -> NoReturn:
    fail(f"Import failed: {error.message}")


def read_text_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        fail(f"Unable to read {path}: {e}")


def load_library(path: Path) -> tuple[list[Note], list[Tag]]:
    """Load notes and tags from a JSON export document used as the note source."""
    config = CONFIGURATION_REPO.get_config()
    try:
        check_file_size(path.stat().st_size, config["max_import_file_size"])
        document = parse_imported_json(read_text_file(path))
    except ValidationError as e:
        fail_import(e)
    return build_library(document, config["default_tag_color"])


def get_note(notes: list[Note], index: int) -> Note:
    if index < 0 or index >= len(notes):
        fail(f"No note at index {index} ({len(notes)} notes available)")
    return notes[index]
