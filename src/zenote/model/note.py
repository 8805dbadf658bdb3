# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from zenote.model.entity_id import EntityId
from zenote.model.tag import Tag


class Note(TypedDict):
    id: Optional[EntityId]
    title: str
    content: str
    tags: list[Tag]
    created: pendulum.DateTime
    updated: pendulum.DateTime
    pinned: bool
    deleted: Optional[pendulum.DateTime]


class NoteData(TypedDict):
    """
    Note-shaped data decoded from an interchange record.

    Tags are kept as names; resolving them against stored tags is up to the
    caller.
    """

    title: str
    content: str
    tag_names: list[str]
    created: Optional[pendulum.DateTime]
    updated: Optional[pendulum.DateTime]
