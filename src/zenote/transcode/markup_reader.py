# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from zenote.model.document import (
    MAX_HEADING_LEVEL,
    Block,
    Inline,
    TaskItem,
    TaskList,
)
from zenote.transcode.tree import (
    collapse_whitespace,
    flatten_blocks,
    line_break,
    normalize_space,
    text,
    trim_inlines,
)

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
CONTAINER_TAGS = {
    "html",
    "body",
    "div",
    "section",
    "article",
    "main",
    "header",
    "footer",
    "aside",
    "nav",
    "figure",
    "details",
    "table",
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "li",
    "dl",
    "dt",
    "dd",
}
BLOCK_TAGS = HEADING_TAGS | CONTAINER_TAGS | {
    "p",
    "ul",
    "ol",
    "blockquote",
    "pre",
    "hr",
}
DROPPED_TAGS = {"script", "style", "template", "noscript", "head", "title"}
UNSAFE_LINK_SCHEMES = ("javascript:", "vbscript:", "data:")


def read_markup(markup: str) -> list[Block]:
    """Parse rich-document markup into the block tree. Never raises on bad markup."""
    soup = BeautifulSoup(markup, "html.parser")
    return _read_blocks(soup.children)


def _read_blocks(nodes: Iterable[PageElement]) -> list[Block]:
    blocks: list[Block] = []
    run: list[Inline] = []

    def flush_run() -> None:
        children = trim_inlines(run)
        if children:
            blocks.append({"type": "paragraph", "children": children})
        run.clear()

    for node in nodes:
        if isinstance(node, Tag) and node.name in BLOCK_TAGS:
            flush_run()
            blocks.extend(_read_block(node))
        else:
            run.extend(_read_inline(node))
    flush_run()
    return blocks


def _read_block(tag: Tag) -> list[Block]:
    name = tag.name

    if name in HEADING_TAGS:
        children = trim_inlines(_read_inline_children(tag))
        if not children:
            return []
        level = int(name[1])
        if level > MAX_HEADING_LEVEL:
            return [{"type": "paragraph", "children": children}]
        return [{"type": "heading", "level": level, "children": children}]

    if name == "p":
        children = trim_inlines(_read_inline_children(tag))
        if not children:
            return []
        return [{"type": "paragraph", "children": children}]

    # Task lists are checked before generic lists so that their items never
    # fall through to plain bullets
    if name == "ul" and _is_task_list(tag):
        task_list = _read_task_list(tag)
        return [task_list] if task_list["items"] else []

    if name == "ul" or name == "ol":
        items = [_read_list_item(li) for li in _list_items(tag)]
        items = [item for item in items if item]
        if not items:
            return []
        if name == "ol":
            return [{"type": "ordered_list", "items": items}]
        return [{"type": "bullet_list", "items": items}]

    if name == "blockquote":
        children = _read_blocks(tag.children)
        if not children:
            return []
        return [{"type": "quote", "children": children}]

    if name == "pre":
        value = tag.get_text().replace("\xa0", " ").strip("\n")
        if not value.strip():
            return []
        return [{"type": "code_block", "value": value}]

    if name == "hr":
        return [{"type": "rule"}]

    return _read_blocks(tag.children)


def _list_items(tag: Tag) -> list[Tag]:
    return [
        child for child in tag.find_all("li", recursive=False) if isinstance(child, Tag)
    ]


def _is_task_list(tag: Tag) -> bool:
    if tag.get("data-type") == "taskList":
        return True
    items = _list_items(tag)
    return bool(items) and all(li.get("data-type") == "taskItem" for li in items)


def _is_checked(li: Tag) -> bool:
    checked = li.get("data-checked")
    if checked is not None:
        return str(checked).lower() == "true"
    checkbox = li.find("input", attrs={"type": "checkbox"})
    return isinstance(checkbox, Tag) and checkbox.has_attr("checked")


def _read_task_list(tag: Tag) -> TaskList:
    items: list[TaskItem] = []
    for li in _list_items(tag):
        # Nested markup inside a task item is reduced to plain text
        label = normalize_space(li.get_text())
        items.append({"checked": _is_checked(li), "text": label})
    return {"type": "task_list", "items": items}


def _read_list_item(li: Tag) -> list[Inline]:
    return flatten_blocks(_read_blocks(li.children))


def _read_inline_children(tag: Tag) -> list[Inline]:
    inlines: list[Inline] = []
    for child in tag.children:
        inlines.extend(_read_inline(child))
    return inlines


def _read_inline(node: PageElement) -> list[Inline]:
    # Comments, doctypes, CDATA and processing instructions carry no text
    if isinstance(node, PreformattedString):
        return []
    if isinstance(node, NavigableString):
        value = collapse_whitespace(str(node)).replace("\xa0", " ")
        return [text(value)] if value else []
    if not isinstance(node, Tag):
        return []

    name = node.name
    if name in DROPPED_TAGS:
        return []
    if name == "br":
        return [line_break()]
    if name == "code":
        value = node.get_text().replace("\xa0", " ")
        return [{"type": "code", "value": value}] if value else []

    children = _read_inline_children(node)
    if not any(child["type"] != "line_break" for child in children):
        return children

    if name == "strong" or name == "b":
        return [{"type": "strong", "children": children}]
    if name == "em" or name == "i":
        return [{"type": "em", "children": children}]
    if name == "u":
        return [{"type": "underline", "children": children}]
    if name == "s" or name == "strike" or name == "del":
        return [{"type": "strike", "children": children}]
    if name == "a":
        href = _get_href(node)
        if href is not None:
            return [{"type": "link", "href": href, "children": children}]
    if name in BLOCK_TAGS:
        # Block inside inline content keeps its own line
        return [line_break(), *children, line_break()]

    # Unsupported construct: tag dropped, text kept
    return children


def _get_href(tag: Tag) -> Optional[str]:
    href = tag.get("href")
    if isinstance(href, list):
        href = " ".join(href)
    if not href or not href.strip():
        return None
    href = href.strip()
    if href.lower().startswith(UNSAFE_LINK_SCHEMES):
        return None
    return href
