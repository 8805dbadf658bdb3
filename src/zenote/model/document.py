# SPDX-License-Identifier: MIT

"""
Block tree shared by the Markdown and rich-markup transcoders.

A document is a list of blocks; paragraph-like blocks hold inline nodes.
Nodes are plain dicts discriminated by their "type" key.
"""

from typing import Literal, TypedDict


class Text(TypedDict):
    type: Literal["text"]
    value: str


class Code(TypedDict):
    type: Literal["code"]
    value: str


class LineBreak(TypedDict):
    type: Literal["line_break"]


class Strong(TypedDict):
    type: Literal["strong"]
    children: list["Inline"]


class Emphasis(TypedDict):
    type: Literal["em"]
    children: list["Inline"]


class Underline(TypedDict):
    type: Literal["underline"]
    children: list["Inline"]


class Strike(TypedDict):
    type: Literal["strike"]
    children: list["Inline"]


class Link(TypedDict):
    type: Literal["link"]
    href: str
    children: list["Inline"]


type Inline = Text | Code | LineBreak | Strong | Emphasis | Underline | Strike | Link


class Heading(TypedDict):
    type: Literal["heading"]
    level: int
    children: list[Inline]


class Paragraph(TypedDict):
    type: Literal["paragraph"]
    children: list[Inline]


class BulletList(TypedDict):
    type: Literal["bullet_list"]
    items: list[list[Inline]]


class OrderedList(TypedDict):
    type: Literal["ordered_list"]
    items: list[list[Inline]]


class TaskItem(TypedDict):
    checked: bool
    text: str


class TaskList(TypedDict):
    type: Literal["task_list"]
    items: list[TaskItem]


class Quote(TypedDict):
    type: Literal["quote"]
    children: list["Block"]


class CodeBlock(TypedDict):
    type: Literal["code_block"]
    value: str


class Rule(TypedDict):
    type: Literal["rule"]


type Block = (
    Heading
    | Paragraph
    | BulletList
    | OrderedList
    | TaskList
    | Quote
    | CodeBlock
    | Rule
)

MAX_HEADING_LEVEL = 3
