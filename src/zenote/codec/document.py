# SPDX-License-Identifier: MIT

import json
import logging
import re
from typing import Optional

import pendulum

from zenote.codec.note import (
    note_from_json_record,
    note_to_json_record,
    note_to_markdown_block,
    parse_tag_line,
    tag_to_json_record,
)
from zenote.model.export import (
    EXPORT_VERSION,
    FULL_ACCOUNT_EXPORT_VERSION,
    ExportDocument,
    ExportedAccountNote,
    ExportedShareLink,
    FullAccountExportDocument,
    ParsedMarkdownNote,
)
from zenote.model.note import Note, NoteData
from zenote.model.share_link import Profile, ShareLink
from zenote.model.tag import Tag
from zenote.time import datetime_to_iso_str, now_utc

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n---\n\n"
COMBINED_PREFIX = "---\n# "

# A separator only counts when the next note block starts right after it, so
# horizontal rules inside a body do not split the note.
_SEPARATOR = re.compile(r"\n\n---\n\n(?=---\n# )")
_NOTE_BLOCK = re.compile(
    r"^---\n# ([^\n]*)\n(?:Tags:([^\n]*)\n)?---(?:\n\n?(.*))?$", re.DOTALL
)
_FENCE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")


def serialize_markdown(notes: list[Note]) -> str:
    """Combine notes into one Markdown document."""
    return BLOCK_SEPARATOR.join(note_to_markdown_block(note) for note in notes)


def parse_combined_markdown(document: str) -> Optional[list[ParsedMarkdownNote]]:
    """
    Split a combined Markdown document back into notes.

    Returns None when the text is not a combined document. Blocks that do
    not match the note grammar are dropped; the others are kept in order.
    """
    document = document.replace("\r\n", "\n").lstrip("﻿")
    if not document.startswith(COMBINED_PREFIX):
        return None

    notes: list[ParsedMarkdownNote] = []
    for index, block in enumerate(_split_blocks(document)):
        match = _NOTE_BLOCK.match(block)
        if match is None:
            logger.info("Dropping unrecognised block %d of combined document", index)
            continue
        title, tags, content = match.groups()
        notes.append(
            {
                "title": title.strip(),
                "tags": parse_tag_line(tags) if tags is not None else [],
                "content": (content or "").strip(),
            }
        )

    if not notes:
        return None
    return notes


def _split_blocks(document: str) -> list[str]:
    """Split at note separators that are not inside a fenced code block."""
    blocks: list[str] = []
    block_start = 0
    scanned = 0
    fence: Optional[str] = None
    for match in _SEPARATOR.finditer(document):
        fence = _track_fence(document[scanned : match.start()], fence)
        scanned = match.start()
        if fence is not None:
            continue
        blocks.append(document[block_start : match.start()])
        block_start = scanned = match.end()
    blocks.append(document[block_start:])
    return blocks


def _track_fence(text: str, fence: Optional[str]) -> Optional[str]:
    """Return the fence still open after `text`, given the one open before it."""
    for line in text.split("\n"):
        match = _FENCE.match(line)
        if match is None:
            continue
        marker, rest = match.groups()
        if fence is None:
            # Backtick fences cannot carry backticks in their info string
            if marker[0] == "`" and "`" in rest:
                continue
            fence = marker
        elif marker[0] == fence[0] and len(marker) >= len(fence) and not rest.strip():
            fence = None
    return fence


def serialize_json(
    notes: list[Note],
    tags: list[Tag],
    exported_at: Optional[pendulum.DateTime] = None,
) -> ExportDocument:
    return {
        "version": EXPORT_VERSION,
        "exportedAt": datetime_to_iso_str(exported_at or now_utc()),
        "notes": [note_to_json_record(note) for note in notes],
        "tags": [tag_to_json_record(tag) for tag in tags],
    }


def export_notes_to_json(notes: list[Note], tags: list[Tag], indent: int = 2) -> str:
    return json.dumps(serialize_json(notes, tags), indent=indent, ensure_ascii=False)


def deserialize_json(document: ExportDocument) -> list[NoteData]:
    """Map an already validated export document to note-shaped data."""
    return [note_from_json_record(record) for record in document["notes"]]


def serialize_full_account(
    notes: list[Note],
    tags: list[Tag],
    profile: Profile,
    share_links: list[ShareLink],
    exported_at: Optional[pendulum.DateTime] = None,
) -> FullAccountExportDocument:
    account_notes: list[ExportedAccountNote] = []
    for note in notes:
        record = note_to_json_record(note)
        account_notes.append({**record, "pinned": note["pinned"]})

    links: list[ExportedShareLink] = [
        {
            "noteTitle": link["note_title"],
            "noteId": link["note_id"],
            "token": link["token"],
            "expiresAt": (
                datetime_to_iso_str(link["expires"]) if link["expires"] else None
            ),
            "createdAt": datetime_to_iso_str(link["created"]),
        }
        for link in share_links
    ]

    return {
        "version": FULL_ACCOUNT_EXPORT_VERSION,
        "exportedAt": datetime_to_iso_str(exported_at or now_utc()),
        "profile": {
            "displayName": profile["display_name"],
            "email": profile["email"],
        },
        "notes": account_notes,
        "tags": [tag_to_json_record(tag) for tag in tags],
        "shareLinks": links,
    }


def export_full_account_to_json(
    notes: list[Note],
    tags: list[Tag],
    profile: Profile,
    share_links: list[ShareLink],
    indent: int = 2,
) -> str:
    document = serialize_full_account(notes, tags, profile, share_links)
    return json.dumps(document, indent=indent, ensure_ascii=False)
