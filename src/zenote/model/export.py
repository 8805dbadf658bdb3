# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

EXPORT_VERSION = 1
FULL_ACCOUNT_EXPORT_VERSION = 2


class ExportedNote(TypedDict):
    title: str
    content: str
    tags: list[str]
    createdAt: str
    updatedAt: str


class ExportedTag(TypedDict):
    name: str
    color: str


class ExportDocument(TypedDict):
    version: Literal[1]
    exportedAt: str
    notes: list[ExportedNote]
    tags: list[ExportedTag]


class SingleNoteExportDocument(TypedDict):
    version: Literal[1]
    exportedAt: str
    note: ExportedNote


class ExportedAccountNote(ExportedNote):
    pinned: bool


class ExportedProfile(TypedDict):
    displayName: Optional[str]
    email: Optional[str]


class ExportedShareLink(TypedDict):
    noteTitle: str
    noteId: str
    token: str
    expiresAt: Optional[str]
    createdAt: str


class FullAccountExportDocument(TypedDict):
    version: Literal[2]
    exportedAt: str
    profile: ExportedProfile
    notes: list[ExportedAccountNote]
    tags: list[ExportedTag]
    shareLinks: list[ExportedShareLink]


class ParsedMarkdownNote(TypedDict):
    title: str
    tags: list[str]
    content: str


class ExportFile(TypedDict):
    filename: str
    content: str
