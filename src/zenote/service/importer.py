# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Callable, Literal, Optional

from zenote.codec.document import parse_combined_markdown
from zenote.codec.note import UNTITLED, parse_single_note_markdown
from zenote.color import DEFAULT_TAG_COLOR
from zenote.configuration import (
    DEFAULT_MAX_IMPORT_FILE_SIZE,
    MAX_IMPORT_NOTES,
    MAX_TAG_NAME_LENGTH,
    MAX_TITLE_LENGTH,
)
from zenote.errors import ValidationError
from zenote.model.export import ExportedTag, ParsedMarkdownNote
from zenote.model.import_report import ImportPlan, PlannedNote
from zenote.model.tag import Tag
from zenote.service.import_validation import parse_imported_json
from zenote.service.tag import resolve_import_tags
from zenote.time import datetime_from_untrusted
from zenote.transcode.convert import markdown_to_markup

logger = logging.getLogger(__name__)

type Sanitizer = Callable[[str], str]

JSON_EXTENSIONS = (".json",)
MARKDOWN_EXTENSIONS = (".md", ".markdown")


def check_file_size(size: int, max_size: int = DEFAULT_MAX_IMPORT_FILE_SIZE) -> None:
    if size > max_size:
        max_size_mb = round(max_size / (1024 * 1024))
        raise ValidationError(f"File too large. Maximum size is {max_size_mb}MB.")


def import_file(
    path: Path,
    sanitize: Sanitizer,
    existing_tags: Optional[list[Tag]] = None,
    max_size: int = DEFAULT_MAX_IMPORT_FILE_SIZE,
    default_color: str = DEFAULT_TAG_COLOR,
) -> ImportPlan:
    """
    Read an import file and turn it into an import plan.

    The size limit is checked before the file is read.
    """
    check_file_size(path.stat().st_size, max_size)
    _check_extension(path.name)

    try:
        content = path.read_bytes().decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ValidationError("Unable to read file: expected UTF-8 text")

    return import_content(
        content,
        path.name,
        sanitize,
        existing_tags=existing_tags,
        default_color=default_color,
    )


def import_content(
    content: str,
    filename: str,
    sanitize: Sanitizer,
    existing_tags: Optional[list[Tag]] = None,
    default_color: str = DEFAULT_TAG_COLOR,
) -> ImportPlan:
    _check_extension(filename)
    if existing_tags is None:
        existing_tags = []

    if filename.lower().endswith(JSON_EXTENSIONS):
        return _import_json(content, sanitize, existing_tags, default_color)
    return _import_markdown(content, filename, sanitize, existing_tags, default_color)


def _check_extension(filename: str) -> None:
    if not filename.lower().endswith(JSON_EXTENSIONS + MARKDOWN_EXTENSIONS):
        raise ValidationError("Unsupported file format. Please use .json or .md files.")


def _import_json(
    content: str,
    sanitize: Sanitizer,
    existing_tags: list[Tag],
    default_color: str,
) -> ImportPlan:
    document = parse_imported_json(content)
    records = document["notes"]

    tag_names, tags_to_create = resolve_import_tags(
        [record["tags"] for record in records],
        existing_tags,
        document["tags"],
        default_color,
    )

    notes: list[PlannedNote] = []
    for record, names in zip(records, tag_names):
        notes.append(
            {
                "title": record["title"],
                "content": sanitize(record["content"]),
                "tag_names": names,
                "created": datetime_from_untrusted(record["createdAt"]),
                "updated": datetime_from_untrusted(record["updatedAt"]),
            }
        )

    logger.info("Planned import of %d notes from JSON", len(notes))
    return {"source_format": "json", "notes": notes, "tags_to_create": tags_to_create}


def _import_markdown(
    content: str,
    filename: str,
    sanitize: Sanitizer,
    existing_tags: list[Tag],
    default_color: str,
) -> ImportPlan:
    source_format: Literal["combined_markdown", "markdown"]
    parsed = parse_combined_markdown(content)
    if parsed is not None:
        source_format = "combined_markdown"
    else:
        logger.debug("Not a combined document, reading %s as one note", filename)
        parsed = [parse_single_note_markdown(content, _get_stem(filename))]
        source_format = "markdown"

    if len(parsed) > MAX_IMPORT_NOTES:
        raise ValidationError(f"Too many notes: maximum {MAX_IMPORT_NOTES} allowed")

    no_document_tags: list[ExportedTag] = []
    tag_names, tags_to_create = resolve_import_tags(
        [_truncate_tag_names(note) for note in parsed],
        existing_tags,
        no_document_tags,
        default_color,
    )

    notes: list[PlannedNote] = []
    for note, names in zip(parsed, tag_names):
        notes.append(
            {
                "title": (note["title"] or UNTITLED)[:MAX_TITLE_LENGTH],
                "content": sanitize(markdown_to_markup(note["content"])),
                "tag_names": names,
                "created": None,
                "updated": None,
            }
        )

    logger.info("Planned import of %d notes from Markdown", len(notes))
    return {
        "source_format": source_format,
        "notes": notes,
        "tags_to_create": tags_to_create,
    }


def _truncate_tag_names(note: ParsedMarkdownNote) -> list[str]:
    return [name[:MAX_TAG_NAME_LENGTH] for name in note["tags"]]


def _get_stem(filename: str) -> str:
    lowered = filename.lower()
    for extension in MARKDOWN_EXTENSIONS:
        if lowered.endswith(extension):
            return filename[: -len(extension)] or UNTITLED
    return filename
