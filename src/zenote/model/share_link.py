# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from zenote.model.entity_id import EntityId


class Profile(TypedDict):
    display_name: Optional[str]
    email: Optional[str]


class ShareLink(TypedDict):
    note_id: EntityId
    note_title: str
    token: str
    expires: Optional[pendulum.DateTime]
    created: pendulum.DateTime
