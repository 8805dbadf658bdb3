# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from zenote.codec.document import (
    deserialize_json,
    export_full_account_to_json,
    export_notes_to_json,
    serialize_markdown,
)
from zenote.codec.filename import (
    get_backup_filename,
    get_full_account_filename,
    get_markdown_export_filename,
    get_note_filename,
)
from zenote.codec.note import export_note_to_json, note_to_markdown_block
from zenote.color import DEFAULT_TAG_COLOR
from zenote.model.entity_id import generate_entity_id
from zenote.model.export import ExportDocument, ExportFile
from zenote.model.note import Note
from zenote.model.share_link import Profile, ShareLink
from zenote.model.tag import Tag
from zenote.service.tag import find_tag
from zenote.template.note import get_note_template
from zenote.template.tag import get_tag_template

logger = logging.getLogger(__name__)


def build_library(
    document: ExportDocument, default_color: str = DEFAULT_TAG_COLOR
) -> tuple[list[Note], list[Tag]]:
    """
    Turn a validated export document back into notes and tags.

    Tag names used by notes but missing from the document's tag list get a
    tag of the default colour.
    """
    tags: list[Tag] = []
    for exported_tag in document["tags"]:
        if find_tag(tags, exported_tag["name"]) is None:
            tag = get_tag_template()
            tag["id"] = generate_entity_id("tag")
            tag["name"] = exported_tag["name"]
            tag["color"] = exported_tag["color"]
            tags.append(tag)

    notes: list[Note] = []
    for data in deserialize_json(document):
        note_tags: list[Tag] = []
        for name in data["tag_names"]:
            tag_match = find_tag(tags, name)
            if tag_match is None:
                tag_match = get_tag_template()
                tag_match["id"] = generate_entity_id("tag")
                tag_match["name"] = name.strip()
                tag_match["color"] = default_color
                tags.append(tag_match)
            if tag_match not in note_tags:
                note_tags.append(tag_match)

        note = get_note_template()
        note["id"] = generate_entity_id("note")
        note["title"] = data["title"]
        note["content"] = data["content"]
        note["tags"] = note_tags
        if data["created"] is not None:
            note["created"] = data["created"]
        if data["updated"] is not None:
            note["updated"] = data["updated"]
        notes.append(note)

    return notes, tags


def export_json_file(
    notes: list[Note], tags: list[Tag], prefix: str, indent: int = 2
) -> ExportFile:
    return {
        "filename": get_backup_filename(prefix),
        "content": export_notes_to_json(notes, tags, indent=indent),
    }


def export_markdown_file(notes: list[Note], prefix: str) -> ExportFile:
    return {
        "filename": get_markdown_export_filename(prefix),
        "content": serialize_markdown(notes),
    }


def export_full_account_file(
    notes: list[Note],
    tags: list[Tag],
    profile: Profile,
    share_links: list[ShareLink],
    prefix: str,
    indent: int = 2,
) -> ExportFile:
    return {
        "filename": get_full_account_filename(prefix),
        "content": export_full_account_to_json(
            notes, tags, profile, share_links, indent=indent
        ),
    }


def export_note_markdown_file(note: Note) -> ExportFile:
    return {
        "filename": get_note_filename(note["title"], "md"),
        "content": note_to_markdown_block(note),
    }


def export_note_json_file(note: Note, indent: int = 2) -> ExportFile:
    return {
        "filename": get_note_filename(note["title"], "json"),
        "content": export_note_to_json(note, indent=indent),
    }


def write_export_file(
    export_file: ExportFile, directory: Path, filename: Optional[str] = None
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (filename or export_file["filename"])
    path.write_text(export_file["content"], encoding="utf-8")
    logger.info("Wrote %s", path)
    return path
