# SPDX-License-Identifier: MIT

from zenote.transcode.markdown_reader import read_markdown
from zenote.transcode.markdown_writer import write_markdown
from zenote.transcode.markup_reader import read_markup
from zenote.transcode.markup_writer import write_markup
from zenote.transcode.plain_text_writer import write_plain_text


def markup_to_markdown(markup: str) -> str:
    """
    Convert stored rich-document markup to Markdown.

    Unsupported markup is stripped to its text rather than rejected.
    """
    return write_markdown(read_markup(markup))


def markdown_to_markup(markdown: str) -> str:
    """
    Convert Markdown to rich-document markup.

    Raw HTML in the Markdown is treated as text and comes out escaped, so
    the result contains only tags this function writes itself.
    """
    return write_markup(read_markdown(markdown))


def markup_to_plain_text(markup: str) -> str:
    return write_plain_text(read_markup(markup))


def normalize_markup(markup: str) -> str:
    """
    Rewrite markup through the block tree.

    The result only holds the tags the markup writer produces, with every
    attribute except link targets dropped.
    """
    return write_markup(read_markup(markup))
