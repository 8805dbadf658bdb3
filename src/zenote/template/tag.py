# SPDX-License-Identifier: MIT

from zenote.color import DEFAULT_TAG_COLOR
from zenote.model.tag import Tag
from zenote.time import now_utc


def get_tag_template() -> Tag:
    return {
        "id": None,
        "name": "",
        "color": DEFAULT_TAG_COLOR,
        "created": now_utc(),
    }
