# SPDX-License-Identifier: MIT

import json
from typing import Optional

import pendulum

from zenote.model.export import (
    EXPORT_VERSION,
    ExportedNote,
    ExportedTag,
    ParsedMarkdownNote,
    SingleNoteExportDocument,
)
from zenote.model.note import Note, NoteData
from zenote.model.tag import Tag
from zenote.time import datetime_from_untrusted, datetime_to_iso_str, now_utc
from zenote.transcode.convert import markup_to_markdown

UNTITLED = "Untitled"
TAGS_PREFIX = "Tags:"


def get_display_title(title: str) -> str:
    """Single-line title for headers; empty titles become Untitled."""
    title = " ".join(title.split())
    return title or UNTITLED


def format_tag_line(tag_names: list[str]) -> str:
    return f"{TAGS_PREFIX} {', '.join(tag_names)}"


def parse_tag_line(tags: str) -> list[str]:
    return [name.strip() for name in tags.split(",") if name.strip()]


def note_to_markdown(note: Note) -> str:
    """Plain Markdown form of a note: title heading, optional tag line, body."""
    lines = [f"# {get_display_title(note['title'])}"]
    if note["tags"]:
        lines.append(format_tag_line([tag["name"] for tag in note["tags"]]))
    header = "\n".join(lines)

    body = markup_to_markdown(note["content"])
    if not body:
        return header
    return f"{header}\n\n{body}"


def note_to_markdown_block(note: Note) -> str:
    """Framed Markdown form used by single-note files and combined documents."""
    lines = ["---", f"# {get_display_title(note['title'])}"]
    if note["tags"]:
        lines.append(format_tag_line([tag["name"] for tag in note["tags"]]))
    lines.append("---")
    header = "\n".join(lines)

    body = markup_to_markdown(note["content"])
    return f"{header}\n\n{body}"


def parse_single_note_markdown(
    markdown: str, fallback_title: str
) -> ParsedMarkdownNote:
    """
    Read a plain Markdown file as one note.

    An optional first line "# title" gives the title, an optional following
    "Tags: a, b" line gives the tags; the rest is the body.
    """
    lines = markdown.replace("\r\n", "\n").split("\n")
    title = fallback_title
    tags: list[str] = []
    start = 0

    if lines and lines[0].startswith("# "):
        title = lines[0][2:].strip() or fallback_title
        start = 1

    # The tag line may follow the title directly or after one blank line
    tag_line = start
    if start == 1 and tag_line < len(lines) and lines[tag_line].strip() == "":
        tag_line += 1
    if tag_line < len(lines) and lines[tag_line].strip().startswith(TAGS_PREFIX):
        tags = parse_tag_line(lines[tag_line].strip()[len(TAGS_PREFIX) :])
        start = tag_line + 1

    if start < len(lines) and lines[start].strip() == "":
        start += 1

    return {
        "title": title,
        "tags": tags,
        "content": "\n".join(lines[start:]).strip(),
    }


def note_to_json_record(note: Note) -> ExportedNote:
    return {
        "title": note["title"],
        "content": note["content"],
        "tags": [tag["name"] for tag in note["tags"]],
        "createdAt": datetime_to_iso_str(note["created"]),
        "updatedAt": datetime_to_iso_str(note["updated"]),
    }


def note_from_json_record(record: ExportedNote) -> NoteData:
    """
    Decode an interchange record into note-shaped data.

    Tag names are passed through as names; this function never creates tags.
    """
    return {
        "title": record["title"],
        "content": record["content"],
        "tag_names": list(record.get("tags") or []),
        "created": datetime_from_untrusted(record.get("createdAt")),
        "updated": datetime_from_untrusted(record.get("updatedAt")),
    }


def tag_to_json_record(tag: Tag) -> ExportedTag:
    return {"name": tag["name"], "color": tag["color"]}


def note_to_export_document(
    note: Note, exported_at: Optional[pendulum.DateTime] = None
) -> SingleNoteExportDocument:
    return {
        "version": EXPORT_VERSION,
        "exportedAt": datetime_to_iso_str(exported_at or now_utc()),
        "note": note_to_json_record(note),
    }


def export_note_to_json(note: Note, indent: int = 2) -> str:
    return json.dumps(note_to_export_document(note), indent=indent, ensure_ascii=False)
