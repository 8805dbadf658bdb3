# SPDX-License-Identifier: MIT

from html import escape

from zenote.codec.note import format_tag_line, get_display_title
from zenote.model.clipboard import Clipboard, ClipboardPayload
from zenote.model.note import Note
from zenote.transcode.convert import markup_to_plain_text

TAG_CAPTION_STYLE = "color: #666; font-size: 0.9em;"


def format_note_for_clipboard(note: Note) -> str:
    lines = [get_display_title(note["title"])]
    if note["tags"]:
        lines.append(format_tag_line([tag["name"] for tag in note["tags"]]))
    header = "\n".join(lines)

    body = markup_to_plain_text(note["content"])
    if not body:
        return header
    return f"{header}\n\n{body}"


def format_note_for_clipboard_html(note: Note) -> str:
    """Title as a heading, tags as a muted caption, then the stored markup as is."""
    parts = [f"<h1>{escape(get_display_title(note['title']), quote=False)}</h1>"]
    if note["tags"]:
        tag_line = format_tag_line([tag["name"] for tag in note["tags"]])
        parts.append(
            f'<p style="{TAG_CAPTION_STYLE}">{escape(tag_line, quote=False)}</p>'
        )
    parts.append(note["content"])
    return "".join(parts)


def build_clipboard_payload(note: Note) -> ClipboardPayload:
    return {
        "text/plain": format_note_for_clipboard(note),
        "text/html": format_note_for_clipboard_html(note),
    }


def copy_note_to_clipboard(note: Note, clipboard: Clipboard) -> None:
    payload: ClipboardPayload = {"text/plain": format_note_for_clipboard(note)}
    clipboard.write(payload)


def copy_note_with_formatting(note: Note, clipboard: Clipboard) -> None:
    """
    Copy both representations of a note in a single clipboard write.

    Errors from the clipboard propagate to the caller.
    """
    clipboard.write(build_clipboard_payload(note))
