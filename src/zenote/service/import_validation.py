# SPDX-License-Identifier: MIT

"""
Validation of untrusted export documents.

Every field of an import document is checked on its own. Structural problems
reject the whole document; a malformed note is reported by index; cosmetic
fields (tag colours, dates, stray tag entries) are corrected in place.
"""

import json
import logging
from typing import Any, Optional

from zenote.color import DEFAULT_TAG_COLOR, is_tag_color
from zenote.configuration import (
    MAX_IMPORT_NOTES,
    MAX_TAG_NAME_LENGTH,
    MAX_TITLE_LENGTH,
)
from zenote.errors import ValidationError
from zenote.model.export import EXPORT_VERSION, ExportDocument, ExportedNote, ExportedTag
from zenote.model.import_report import (
    ImportAccepted,
    ImportRejected,
    ImportReport,
    NoteValidation,
)
from zenote.time import datetime_from_untrusted, datetime_to_iso_str, now_utc

logger = logging.getLogger(__name__)


def validate_note(index: int, raw: Any) -> NoteValidation:
    """Validate one note record; never raises."""
    if not isinstance(raw, dict):
        return _reject(index, f"Note at index {index} is invalid")

    title = raw.get("title")
    if not isinstance(title, str):
        return _reject(index, f"Note at index {index} has invalid title")

    content = raw.get("content")
    if not isinstance(content, str):
        return _reject(index, f"Note at index {index} has invalid content")

    # Empty titles are kept; they display as Untitled
    if len(title) > MAX_TITLE_LENGTH:
        logger.debug("Truncating title of note %d", index)
        title = title[:MAX_TITLE_LENGTH]

    note: ExportedNote = {
        "title": title,
        "content": content,
        "tags": _validate_note_tags(index, raw.get("tags")),
        "createdAt": _validate_date(index, "createdAt", raw.get("createdAt")),
        "updatedAt": _validate_date(index, "updatedAt", raw.get("updatedAt")),
    }
    accepted: ImportAccepted = {"status": "accepted", "index": index, "note": note}
    return accepted


def _reject(index: int, reason: str) -> ImportRejected:
    logger.warning(reason)
    return {"status": "rejected", "index": index, "reason": reason}


def _validate_note_tags(index: int, raw: Any) -> list[str]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.info("Ignoring non-array tags of note %d", index)
        return []

    names: list[str] = []
    for entry in raw:
        if not isinstance(entry, str):
            logger.debug("Dropping non-string tag entry of note %d", index)
            continue
        names.append(entry[:MAX_TAG_NAME_LENGTH])
    return names


def _validate_date(index: int, field: str, raw: Any) -> str:
    parsed = datetime_from_untrusted(raw)
    if parsed is None:
        if raw is not None:
            logger.info("Replacing invalid %s of note %d with the current time", field, index)
        parsed = now_utc()
    return datetime_to_iso_str(parsed)


def validate_tag(index: int, raw: Any) -> ExportedTag:
    if not isinstance(raw, dict):
        raise ValidationError(f"Tag at index {index} is invalid")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Tag at index {index} has invalid name")

    color = raw.get("color")
    if not is_tag_color(color):
        logger.debug("Defaulting colour of tag %d to %s", index, DEFAULT_TAG_COLOR)
        color = DEFAULT_TAG_COLOR

    return {"name": name.strip()[:MAX_TAG_NAME_LENGTH], "color": color}


def validate_tags(raw: Any) -> list[ExportedTag]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValidationError("Invalid export format: tags must be an array")
    return [validate_tag(index, entry) for index, entry in enumerate(raw)]


def build_import_report(json_string: str) -> ImportReport:
    """
    Validate an export document and report on every note in it.

    Raises ValidationError for structural problems only. Rejected notes and
    an invalid tag list are returned in the report.
    """
    try:
        data = json.loads(json_string)
    except (json.JSONDecodeError, RecursionError):
        raise ValidationError("Invalid JSON format")

    if not isinstance(data, dict):
        raise ValidationError("Invalid export format: expected an object")

    version = data.get("version")
    # JSON true compares equal to 1 in Python
    if isinstance(version, bool) or version != EXPORT_VERSION:
        raise ValidationError("Invalid or unsupported export version")

    notes = data.get("notes")
    if not isinstance(notes, list):
        raise ValidationError("Invalid export format: notes must be an array")
    if len(notes) > MAX_IMPORT_NOTES:
        raise ValidationError(f"Too many notes: maximum {MAX_IMPORT_NOTES} allowed")

    exported_at = data.get("exportedAt")
    results = [validate_note(index, raw) for index, raw in enumerate(notes)]

    # Tag problems are reported after note rejections
    tags: list[ExportedTag] = []
    tag_error: Optional[str] = None
    try:
        tags = validate_tags(data.get("tags"))
    except ValidationError as e:
        logger.warning(e.message)
        tag_error = e.message

    return {
        "version": EXPORT_VERSION,
        "exported_at": exported_at if isinstance(exported_at, str) else None,
        "results": results,
        "tags": tags,
        "tag_error": tag_error,
    }


def get_first_rejection(report: ImportReport) -> Optional[ImportRejected]:
    for result in report["results"]:
        if result["status"] == "rejected":
            return result
    return None


def get_report_error(report: ImportReport) -> Optional[str]:
    """The message that fails the import: the first rejected note, then any tag error."""
    rejection = get_first_rejection(report)
    if rejection is not None:
        return rejection["reason"]
    return report["tag_error"]


def parse_imported_json(json_string: str) -> ExportDocument:
    """
    Parse and validate an export document.

    Any rejected note fails the whole import with that note's message.
    """
    report = build_import_report(json_string)

    error = get_report_error(report)
    if error is not None:
        raise ValidationError(error)

    return {
        "version": EXPORT_VERSION,
        "exportedAt": report["exported_at"] or datetime_to_iso_str(now_utc()),
        "notes": [
            result["note"]
            for result in report["results"]
            if result["status"] == "accepted"
        ],
        "tags": report["tags"],
    }
