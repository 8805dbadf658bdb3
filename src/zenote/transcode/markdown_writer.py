# SPDX-License-Identifier: MIT

import re

from zenote.model.document import Block, Inline

_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_ORDERED_MARKER = re.compile(r"^(\d+)([.)])(\s|$)")
_BLOCK_MARKER = re.compile(
    r"^(#{1,6}(\s|$)|[-+*](\s|$)|>|```|~~~|([-*_]\s*){3,}$|(=+|-+)\s*$)"
)
_ESCAPED_BACKSLASH = re.compile(r"\\(?=[!-/:-@\[-`{-~]|$)")
_ENTITY_LIKE = re.compile(r"&(?=#[0-9]{1,7};|#[xX][0-9a-fA-F]{1,6};|[A-Za-z][A-Za-z0-9]{1,31};)")
_CLOSING_HASHES = re.compile(r"(^|\s)(#+)$")
_BACKTICK_RUN = re.compile(r"`+")


def write_markdown(blocks: list[Block]) -> str:
    markdown = _write_blocks(blocks)
    markdown = _EXCESS_NEWLINES.sub("\n\n", markdown)
    return markdown.strip()


def _write_blocks(blocks: list[Block]) -> str:
    parts = [_write_block(block) for block in blocks]
    return "\n\n".join(part for part in parts if part.strip())


def _write_block(block: Block) -> str:
    if block["type"] == "heading":
        content = _write_inlines(block["children"]).replace("\n", " ").strip()
        # A trailing run of # would be read as the closing sequence
        content = _CLOSING_HASHES.sub(r"\1\\\2", content)
        return f"{'#' * block['level']} {content}"

    if block["type"] == "paragraph":
        content = _write_inlines(block["children"])
        return "\n".join(_escape_line_start(line) for line in content.split("\n"))

    if block["type"] == "task_list":
        return "\n".join(
            f"- [{'x' if item['checked'] else ' '}] {_escape_text(item['text'])}".rstrip()
            for item in block["items"]
        )

    if block["type"] == "ordered_list":
        # Renumbered from 1 whatever the source numbering was
        return "\n".join(
            _list_item(f"{index}. ", item)
            for index, item in enumerate(block["items"], start=1)
        )

    if block["type"] == "bullet_list":
        return "\n".join(_list_item("- ", item) for item in block["items"])

    if block["type"] == "quote":
        inner = _write_blocks(block["children"])
        return "\n".join(f"> {line}" if line else ">" for line in inner.split("\n"))

    if block["type"] == "code_block":
        longest = max((len(run) for run in _BACKTICK_RUN.findall(block["value"])), default=0)
        fence = "`" * max(3, longest + 1)
        return f"{fence}\n{block['value']}\n{fence}"

    if block["type"] == "rule":
        return "---"

    return ""


def _list_item(marker: str, item: list[Inline]) -> str:
    lines = _write_inlines(item).split("\n")
    indent = " " * len(marker)
    first = _escape_line_start(lines[0])
    rest = [f"{indent}{line}" if line.strip() else "" for line in lines[1:]]
    return "\n".join([f"{marker}{first}", *rest])


def _escape_line_start(line: str) -> str:
    """Keep a text line from being read back as a block marker."""
    stripped = line.lstrip()
    if not stripped:
        return line
    lead = line[: len(line) - len(stripped)]
    ordered = _ORDERED_MARKER.match(stripped)
    if ordered:
        return f"{lead}{ordered.group(1)}\\{stripped[len(ordered.group(1)) :]}"
    if _BLOCK_MARKER.match(stripped):
        return f"{lead}\\{stripped}"
    return line


def _escape_text(value: str) -> str:
    """Escape backslashes and entity-like runs that Markdown would otherwise decode."""
    value = _ESCAPED_BACKSLASH.sub(r"\\\\", value)
    return _ENTITY_LIKE.sub(r"\\&", value)


def _write_inlines(nodes: list[Inline]) -> str:
    return "".join(_write_inline(node) for node in nodes)


def _write_inline(node: Inline) -> str:
    if node["type"] == "text":
        return _escape_text(node["value"])
    if node["type"] == "line_break":
        return "\n"
    if node["type"] == "code":
        return _code_span(node["value"])
    if node["type"] == "strong":
        return _wrap("**", "**", node["children"])
    if node["type"] == "em":
        return _wrap("*", "*", node["children"])
    if node["type"] == "strike":
        return _wrap("~~", "~~", node["children"])
    if node["type"] == "underline":
        # Markdown has no underline; the tag is kept as written
        return _wrap("<u>", "</u>", node["children"])
    if node["type"] == "link":
        label = _write_inlines(node["children"]).replace("\n", " ")
        href = node["href"]
        if any(char in href for char in " ()<>"):
            href = f"<{href.replace('<', '%3C').replace('>', '%3E')}>"
        return f"[{label}]({href})"
    return ""


def _wrap(opening: str, closing: str, children: list[Inline]) -> str:
    """Wrap inline content, keeping outer whitespace outside the delimiters."""
    inner = _write_inlines(children)
    stripped = inner.strip()
    if not stripped:
        return inner
    lead = inner[: len(inner) - len(inner.lstrip())]
    trail = inner[len(inner.rstrip()) :]
    return f"{lead}{opening}{stripped}{closing}{trail}"


def _code_span(value: str) -> str:
    if "`" not in value:
        return f"`{value}`"
    return f"`` {value} ``"
