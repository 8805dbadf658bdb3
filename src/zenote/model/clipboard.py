# SPDX-License-Identifier: MIT

from typing import Protocol, TypedDict

ClipboardPayload = TypedDict(
    "ClipboardPayload", {"text/plain": str, "text/html": str}, total=False
)


class Clipboard(Protocol):
    def write(self, payload: ClipboardPayload) -> None: ...
