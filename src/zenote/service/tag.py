# SPDX-License-Identifier: MIT

from typing import Optional

from zenote.color import DEFAULT_TAG_COLOR, is_tag_color
from zenote.model.export import ExportedTag
from zenote.model.tag import Tag


def get_tag_key(name: str) -> str:
    """Tag names match case-insensitively and ignore outer whitespace."""
    return name.strip().casefold()


def find_tag(tags: list[Tag], name: str) -> Optional[Tag]:
    key = get_tag_key(name)
    for tag in tags:
        if get_tag_key(tag["name"]) == key:
            return tag
    return None


def resolve_import_tags(
    note_tag_names: list[list[str]],
    existing_tags: list[Tag],
    document_tags: list[ExportedTag],
    default_color: str = DEFAULT_TAG_COLOR,
) -> tuple[list[list[str]], list[ExportedTag]]:
    """
    Resolve the tag names of imported notes against the existing tags.

    Returns the per-note tag names, spelled as the matching existing tag where
    there is one and de-duplicated, and the tags that have to be created
    first. New tags take their colour from the import document when it lists
    them, else the default colour. The tags passed in are not modified.
    """
    if not is_tag_color(default_color):
        default_color = DEFAULT_TAG_COLOR

    canonical: dict[str, str] = {
        get_tag_key(tag["name"]): tag["name"] for tag in existing_tags
    }
    to_create: list[ExportedTag] = []

    def resolve(name: str, color: str) -> Optional[str]:
        key = get_tag_key(name)
        if not key:
            return None
        if key not in canonical:
            canonical[key] = name.strip()
            to_create.append({"name": name.strip(), "color": color})
        return canonical[key]

    # Tags listed by the document are created even when no note uses them
    for document_tag in document_tags:
        color = document_tag["color"]
        resolve(document_tag["name"], color if is_tag_color(color) else default_color)

    resolved: list[list[str]] = []
    for names in note_tag_names:
        note_names: list[str] = []
        for name in names:
            canonical_name = resolve(name, default_color)
            if canonical_name is not None and canonical_name not in note_names:
                note_names.append(canonical_name)
        resolved.append(note_names)

    return resolved, to_create
