# SPDX-License-Identifier: MIT

import re
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from zenote.model.document import (
    MAX_HEADING_LEVEL,
    Block,
    BulletList,
    Inline,
    TaskItem,
    TaskList,
    Text,
)
from zenote.transcode.tree import (
    flatten_blocks,
    line_break,
    merge_text,
    normalize_space,
    text,
    trim_inlines,
)

# Raw HTML is disabled: any markup in imported Markdown is read as text and
# escaped again when written out.
_MARKDOWN = MarkdownIt("commonmark", {"html": False}).enable("strikethrough")

_TASK_ITEM = re.compile(r"^\[([ xX])\](?:[ \t]+(.*))?$", re.DOTALL)
_UNDERLINE = re.compile(r"<u>(.+?)</u>", re.DOTALL)


def read_markdown(markdown: str) -> list[Block]:
    """Parse Markdown into the block tree. Never raises on bad input."""
    root = SyntaxTreeNode(_MARKDOWN.parse(markdown))
    return _read_blocks(root.children)


def _read_blocks(nodes: list[SyntaxTreeNode]) -> list[Block]:
    blocks: list[Block] = []
    for node in nodes:
        if node.type == "heading":
            children = trim_inlines(_read_inline_container(node))
            if children:
                level = min(int(node.tag[1:]), MAX_HEADING_LEVEL)
                blocks.append({"type": "heading", "level": level, "children": children})
        elif node.type == "paragraph":
            children = trim_inlines(_read_inline_container(node))
            if children:
                blocks.append({"type": "paragraph", "children": children})
        elif node.type == "bullet_list":
            blocks.extend(_read_bullet_list(node))
        elif node.type == "ordered_list":
            items = [_read_list_item(item) for item in node.children]
            items = [item for item in items if item]
            if items:
                blocks.append({"type": "ordered_list", "items": items})
        elif node.type == "blockquote":
            children = _read_blocks(node.children)
            if children:
                blocks.append({"type": "quote", "children": children})
        elif node.type == "fence" or node.type == "code_block":
            value = node.content.removesuffix("\n")
            if value.strip():
                blocks.append({"type": "code_block", "value": value})
        elif node.type == "hr":
            blocks.append({"type": "rule"})
        elif node.content.strip():
            blocks.append({"type": "paragraph", "children": [text(node.content)]})
    return blocks


def _read_bullet_list(node: SyntaxTreeNode) -> list[Block]:
    """
    Split a bullet list into runs of task items and plain items.

    Task items are recognised first, so a task list directly followed by a
    plain list (which Markdown reads as one list) is split back into two.
    """
    runs: list[Block] = []
    for item in node.children:
        task = _read_task_item(item)
        if task is not None:
            if runs and runs[-1]["type"] == "task_list":
                runs[-1]["items"].append(task)
            else:
                task_list: TaskList = {"type": "task_list", "items": [task]}
                runs.append(task_list)
            continue

        inlines = _read_list_item(item)
        if not inlines:
            continue
        if runs and runs[-1]["type"] == "bullet_list":
            runs[-1]["items"].append(inlines)
        else:
            bullet_list: BulletList = {"type": "bullet_list", "items": [inlines]}
            runs.append(bullet_list)
    return runs


def _read_task_item(item: SyntaxTreeNode) -> Optional[TaskItem]:
    if not item.children or item.children[0].type != "paragraph":
        return None
    inline = _inline_child(item.children[0])
    if inline is None:
        return None
    match = _TASK_ITEM.match(inline.content)
    if match is None:
        return None
    return {
        "checked": match.group(1) != " ",
        "text": _plain_inline(match.group(2) or ""),
    }


def _read_list_item(item: SyntaxTreeNode) -> list[Inline]:
    return flatten_blocks(_read_blocks(item.children))


def _plain_inline(source: str) -> str:
    parts: list[str] = []
    for token in _MARKDOWN.parseInline(source):
        for child in token.children or []:
            if child.type == "text" or child.type == "code_inline":
                parts.append(child.content)
            elif child.type == "softbreak" or child.type == "hardbreak":
                parts.append(" ")
    return normalize_space("".join(parts))


def _inline_child(node: SyntaxTreeNode) -> Optional[SyntaxTreeNode]:
    for child in node.children:
        if child.type == "inline":
            return child
    return None


def _read_inline_container(node: SyntaxTreeNode) -> list[Inline]:
    inline = _inline_child(node)
    if inline is None:
        return []
    return _read_inlines(inline.children)


def _read_inlines(nodes: list[SyntaxTreeNode]) -> list[Inline]:
    inlines: list[Inline] = []
    for node in nodes:
        if node.type == "text":
            inlines.append(text(node.content))
        elif node.type == "softbreak" or node.type == "hardbreak":
            inlines.append(line_break())
        elif node.type == "code_inline":
            inlines.append({"type": "code", "value": node.content})
        elif node.type == "strong":
            inlines.append({"type": "strong", "children": _read_inlines(node.children)})
        elif node.type == "em":
            inlines.append({"type": "em", "children": _read_inlines(node.children)})
        elif node.type == "s":
            inlines.append({"type": "strike", "children": _read_inlines(node.children)})
        elif node.type == "link":
            inlines.append(
                {
                    "type": "link",
                    "href": str(node.attrs.get("href", "")),
                    "children": _read_inlines(node.children),
                }
            )
        else:
            # Images and anything else are reduced to their text
            inlines.append(text(node.content))
    return _read_underline(merge_text(inlines))


def _read_underline(nodes: list[Inline]) -> list[Inline]:
    """Turn literal <u>...</u> text, as written for underline, back into underline nodes."""
    result: list[Inline] = []
    for node in nodes:
        if node["type"] != "text":
            result.append(node)
            continue
        value = node["value"]  # type: ignore[typeddict-item]
        position = 0
        for match in _UNDERLINE.finditer(value):
            if match.start() > position:
                result.append(text(value[position : match.start()]))
            inner: Text = text(match.group(1))
            result.append({"type": "underline", "children": [inner]})
            position = match.end()
        if position < len(value):
            result.append(text(value[position:]))
    return result
