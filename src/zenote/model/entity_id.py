# SPDX-License-Identifier: MIT

import uuid
from typing import Literal

type EntityId = str
type EntityKind = Literal["note", "tag"]


def generate_entity_id(kind: EntityKind) -> EntityId:
    """Fresh id for a note or tag rebuilt from an export, e.g. "note-3f2a…"."""
    return f"{kind}-{uuid.uuid4().hex}"
