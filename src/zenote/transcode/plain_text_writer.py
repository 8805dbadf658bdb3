# SPDX-License-Identifier: MIT

import re

from zenote.model.document import Block
from zenote.transcode.tree import inline_plain_text

_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def write_plain_text(blocks: list[Block]) -> str:
    """Flatten the block tree to text, with list and quote glyphs."""
    text = _write_blocks(blocks)
    return _EXCESS_NEWLINES.sub("\n\n", text).strip()


def _write_blocks(blocks: list[Block]) -> str:
    parts = [_write_block(block) for block in blocks]
    return "\n\n".join(part for part in parts if part.strip())


def _write_block(block: Block) -> str:
    if block["type"] == "heading" or block["type"] == "paragraph":
        return inline_plain_text(block["children"])
    if block["type"] == "bullet_list":
        return "\n".join(f"• {inline_plain_text(item)}" for item in block["items"])
    if block["type"] == "ordered_list":
        return "\n".join(
            f"{index}. {inline_plain_text(item)}"
            for index, item in enumerate(block["items"], start=1)
        )
    if block["type"] == "task_list":
        return "\n".join(
            f"[{'x' if item['checked'] else ' '}] {item['text']}"
            for item in block["items"]
        )
    if block["type"] == "quote":
        inner = _write_blocks(block["children"])
        return "\n".join(f"> {line}" if line else ">" for line in inner.split("\n"))
    if block["type"] == "code_block":
        return block["value"]
    if block["type"] == "rule":
        return "---"
    return ""
