# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from zenote.model.entity_id import EntityId


class Tag(TypedDict):
    id: Optional[EntityId]
    name: str
    color: str
    created: pendulum.DateTime
