# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from zenote.model.export import ExportedNote, ExportedTag


class ImportAccepted(TypedDict):
    status: Literal["accepted"]
    index: int
    note: ExportedNote


class ImportRejected(TypedDict):
    status: Literal["rejected"]
    index: int
    reason: str


type NoteValidation = ImportAccepted | ImportRejected


class ImportReport(TypedDict):
    version: int
    exported_at: Optional[str]
    results: list[NoteValidation]
    tags: list[ExportedTag]
    tag_error: Optional[str]


class PlannedNote(TypedDict):
    title: str
    content: str
    tag_names: list[str]
    created: Optional[pendulum.DateTime]
    updated: Optional[pendulum.DateTime]


class ImportPlan(TypedDict):
    """Notes ready to hand to persistence, plus the tags that must be created first."""

    source_format: Literal["json", "combined_markdown", "markdown"]
    notes: list[PlannedNote]
    tags_to_create: list[ExportedTag]
