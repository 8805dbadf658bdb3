# SPDX-License-Identifier: MIT

from html import escape

from zenote.model.document import Block, Inline


def write_markup(blocks: list[Block]) -> str:
    return "".join(_write_block(block) for block in blocks)


def _write_block(block: Block) -> str:
    if block["type"] == "heading":
        tag = f"h{block['level']}"
        return f"<{tag}>{_write_inlines(block['children'])}</{tag}>"

    if block["type"] == "paragraph":
        return f"<p>{_write_inlines(block['children'])}</p>"

    if block["type"] == "task_list":
        items = "".join(
            f'<li data-type="taskItem" data-checked="{"true" if item["checked"] else "false"}">'
            f"{_escape_text(item['text'])}</li>"
            for item in block["items"]
        )
        return f'<ul data-type="taskList">{items}</ul>'

    if block["type"] == "bullet_list":
        items = "".join(f"<li>{_write_inlines(item)}</li>" for item in block["items"])
        return f"<ul>{items}</ul>"

    if block["type"] == "ordered_list":
        items = "".join(f"<li>{_write_inlines(item)}</li>" for item in block["items"])
        return f"<ol>{items}</ol>"

    if block["type"] == "quote":
        return f"<blockquote>{write_markup(block['children'])}</blockquote>"

    if block["type"] == "code_block":
        return f"<pre><code>{_escape_text(block['value'])}</code></pre>"

    if block["type"] == "rule":
        return "<hr>"

    return ""


def _write_inlines(nodes: list[Inline]) -> str:
    return "".join(_write_inline(node) for node in nodes)


def _write_inline(node: Inline) -> str:
    if node["type"] == "text":
        return _escape_text(node["value"])
    if node["type"] == "line_break":
        return "<br>"
    if node["type"] == "code":
        return f"<code>{_escape_text(node['value'])}</code>"
    if node["type"] == "strong":
        return f"<strong>{_write_inlines(node['children'])}</strong>"
    if node["type"] == "em":
        return f"<em>{_write_inlines(node['children'])}</em>"
    if node["type"] == "underline":
        return f"<u>{_write_inlines(node['children'])}</u>"
    if node["type"] == "strike":
        return f"<s>{_write_inlines(node['children'])}</s>"
    if node["type"] == "link":
        href = escape(node["href"], quote=True)
        return f'<a href="{href}">{_write_inlines(node["children"])}</a>'
    return ""


def _escape_text(value: str) -> str:
    return escape(value, quote=False)
