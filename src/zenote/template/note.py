# SPDX-License-Identifier: MIT

from zenote.model.note import Note
from zenote.time import now_utc


def get_note_template() -> Note:
    return {
        "id": None,
        "title": "",
        "content": "",
        "tags": [],
        "created": now_utc(),
        "updated": now_utc(),
        "pinned": False,
        "deleted": None,
    }
