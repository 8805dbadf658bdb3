# SPDX-License-Identifier: MIT

import re
from typing import cast

from zenote.model.document import (
    Block,
    Inline,
    LineBreak,
    Text,
)

_WHITESPACE_RUN = re.compile(r"\s+")


def text(value: str) -> Text:
    return {"type": "text", "value": value}


def line_break() -> LineBreak:
    return {"type": "line_break"}


def normalize_space(value: str) -> str:
    return " ".join(value.split())


def merge_text(nodes: list[Inline]) -> list[Inline]:
    """Join adjacent text nodes and drop empty ones."""
    merged: list[Inline] = []
    for node in nodes:
        if node["type"] == "text":
            value = cast(Text, node)["value"]
            if not value:
                continue
            if merged and merged[-1]["type"] == "text":
                previous = cast(Text, merged[-1])
                merged[-1] = text(previous["value"] + value)
                continue
        merged.append(node)
    return merged


def trim_inlines(nodes: list[Inline]) -> list[Inline]:
    """Strip outer whitespace and outer line breaks from an inline run."""
    nodes = merge_text(nodes)

    while nodes and nodes[0]["type"] == "line_break":
        nodes = nodes[1:]
    while nodes and nodes[-1]["type"] == "line_break":
        nodes = nodes[:-1]

    if nodes and nodes[0]["type"] == "text":
        value = cast(Text, nodes[0])["value"].lstrip()
        nodes = ([text(value)] if value else []) + nodes[1:]
    if nodes and nodes[-1]["type"] == "text":
        value = cast(Text, nodes[-1])["value"].rstrip()
        nodes = nodes[:-1] + ([text(value)] if value else [])

    # Stripping may have exposed another break at either end
    if nodes and (
        nodes[0]["type"] == "line_break" or nodes[-1]["type"] == "line_break"
    ):
        return trim_inlines(nodes)
    return nodes


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE_RUN.sub(" ", value)


def inline_plain_text(nodes: list[Inline]) -> str:
    parts: list[str] = []
    for node in nodes:
        if node["type"] == "text" or node["type"] == "code":
            parts.append(node["value"])  # type: ignore[typeddict-item]
        elif node["type"] == "line_break":
            parts.append("\n")
        else:
            parts.append(inline_plain_text(node["children"]))  # type: ignore[typeddict-item]
    return "".join(parts)


def flatten_blocks(blocks: list[Block]) -> list[Inline]:
    """
    Reduce nested blocks to a single inline run, one line per block.

    Used for list items, which hold inline content only.
    """
    lines: list[list[Inline]] = []
    for block in blocks:
        if block["type"] == "heading" or block["type"] == "paragraph":
            lines.append(block["children"])
        elif block["type"] == "bullet_list" or block["type"] == "ordered_list":
            lines.extend(block["items"])
        elif block["type"] == "task_list":
            lines.extend([text(item["text"])] for item in block["items"])
        elif block["type"] == "quote":
            lines.append(flatten_blocks(block["children"]))
        elif block["type"] == "code_block":
            lines.append([text(block["value"])])

    flattened: list[Inline] = []
    for line in lines:
        if not line:
            continue
        if flattened:
            flattened.append(line_break())
        flattened.extend(line)
    return trim_inlines(flattened)
