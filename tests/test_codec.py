# SPDX-License-Identifier: MIT

import json
import unittest

import pendulum
from factories import make_note, make_tag

from zenote.codec.document import (
    export_full_account_to_json,
    export_notes_to_json,
    parse_combined_markdown,
    serialize_markdown,
)
from zenote.codec.filename import (
    get_backup_filename,
    get_markdown_export_filename,
    get_note_filename,
    get_sanitized_filename,
)
from zenote.codec.note import (
    export_note_to_json,
    note_from_json_record,
    note_to_markdown,
    note_to_markdown_block,
    parse_single_note_markdown,
)
from zenote.errors import ValidationError
from zenote.model.share_link import Profile, ShareLink
from zenote.service.import_validation import parse_imported_json


class SingleNoteMarkdownTest(unittest.TestCase):
    def test_plain_markdown_form(self) -> None:
        note = make_note(
            title="Plan",
            content="<p>Buy <strong>milk</strong></p>",
            tags=[make_tag("errands")],
        )
        self.assertEqual(note_to_markdown(note), "# Plan\nTags: errands\n\nBuy **milk**")

    def test_plain_markdown_without_tags_or_body(self) -> None:
        self.assertEqual(note_to_markdown(make_note(title="Plan", content="")), "# Plan")

    def test_framed_block(self) -> None:
        note = make_note(
            title="Plan",
            content="<p>Buy <strong>milk</strong></p>",
            tags=[make_tag("errands"), make_tag("home")],
        )
        self.assertEqual(
            note_to_markdown_block(note),
            "---\n# Plan\nTags: errands, home\n---\n\nBuy **milk**",
        )

    def test_empty_title_is_untitled(self) -> None:
        self.assertTrue(note_to_markdown_block(make_note(title="")).startswith("---\n# Untitled\n"))

    def test_parse_single_note_with_header(self) -> None:
        parsed = parse_single_note_markdown("# Title\nTags: a, b\n\nBody text", "fallback")
        self.assertEqual(parsed, {"title": "Title", "tags": ["a", "b"], "content": "Body text"})

    def test_parse_single_note_with_blank_line_before_tags(self) -> None:
        parsed = parse_single_note_markdown("# Title\n\nTags: a\n\nBody", "fallback")
        self.assertEqual(parsed["tags"], ["a"])
        self.assertEqual(parsed["content"], "Body")

    def test_parse_single_note_without_header(self) -> None:
        parsed = parse_single_note_markdown("Just text\n", "notes")
        self.assertEqual(parsed, {"title": "notes", "tags": [], "content": "Just text"})


class CombinedMarkdownTest(unittest.TestCase):
    def test_not_a_combined_document(self) -> None:
        self.assertIsNone(parse_combined_markdown("Just regular text"))
        self.assertIsNone(parse_combined_markdown("# Not the right format"))
        self.assertIsNone(parse_combined_markdown(""))

    def test_single_note(self) -> None:
        result = parse_combined_markdown("---\n# Note Title\n---\n\nContent here")
        self.assertEqual(result, [{"title": "Note Title", "tags": [], "content": "Content here"}])

    def test_tags_are_trimmed(self) -> None:
        result = parse_combined_markdown("---\n# Note\nTags:  tag1 ,  tag2 , tag3  \n---\n\nContent")
        assert result is not None
        self.assertEqual(result[0]["tags"], ["tag1", "tag2", "tag3"])

    def test_two_notes_in_source_order(self) -> None:
        document = (
            "---\n# First Note\n---\n\nFirst content"
            "\n\n---\n\n"
            "---\n# Second Note\n---\n\nSecond content"
        )
        result = parse_combined_markdown(document)
        assert result is not None
        self.assertEqual([note["title"] for note in result], ["First Note", "Second Note"])
        self.assertEqual(result[1]["content"], "Second content")

    def test_empty_content(self) -> None:
        result = parse_combined_markdown("---\n# Empty Note\n---\n\n")
        assert result is not None
        self.assertEqual(result[0]["content"], "")

    def test_windows_line_endings(self) -> None:
        result = parse_combined_markdown("---\r\n# Note\r\n---\r\n\r\nLine 1\r\nLine 2")
        assert result is not None
        self.assertEqual(result[0]["content"], "Line 1\nLine 2")

    def test_unrecognised_block_is_dropped(self) -> None:
        document = (
            "---\n# Good\n---\n\nBody"
            "\n\n---\n\n"
            "---\n# Broken\nno closing fence"
        )
        result = parse_combined_markdown(document)
        assert result is not None
        self.assertEqual([note["title"] for note in result], ["Good"])

    def test_no_recognised_block(self) -> None:
        self.assertIsNone(parse_combined_markdown("---\n# Broken\nno closing fence"))

    def test_rule_inside_body_does_not_split(self) -> None:
        notes = [
            make_note(title="One", content="<p>A</p><hr><p>B</p>"),
            make_note(title="Two", content="<p>C</p>"),
        ]
        result = parse_combined_markdown(serialize_markdown(notes))
        assert result is not None
        self.assertEqual(len(result), 2)
        self.assertEqual(result[0]["content"], "A\n\n---\n\nB")
        self.assertEqual(result[1]["content"], "C")

    def test_separator_inside_code_block_does_not_split(self) -> None:
        notes = [
            make_note(title="One", content="<pre><code>a\n\n---\n\n---\n# fake</code></pre>"),
            make_note(title="Two", content="<p>C</p>"),
        ]
        result = parse_combined_markdown(serialize_markdown(notes))
        assert result is not None
        self.assertEqual([note["title"] for note in result], ["One", "Two"])
        self.assertEqual(result[0]["content"], "```\na\n\n---\n\n---\n# fake\n```")

    def test_serialize_then_parse(self) -> None:
        notes = [
            make_note(title="First", content="<h2>Heading</h2><ul><li>x</li></ul>", tags=[make_tag("a")]),
            make_note(title="Second", content="", tags=[make_tag("b"), make_tag("c")]),
        ]
        result = parse_combined_markdown(serialize_markdown(notes))
        self.assertEqual(
            result,
            [
                {"title": "First", "tags": ["a"], "content": "## Heading\n\n- x"},
                {"title": "Second", "tags": ["b", "c"], "content": ""},
            ],
        )


class JsonCodecTest(unittest.TestCase):
    def test_export_empty(self) -> None:
        parsed = json.loads(export_notes_to_json([], []))
        self.assertEqual(parsed["version"], 1)
        self.assertIn("exportedAt", parsed)
        self.assertEqual(parsed["notes"], [])
        self.assertEqual(parsed["tags"], [])

    def test_export_note_fields(self) -> None:
        tag = make_tag("Tag1", "sage")
        note = make_note(title="Test Note", content="<p>Content</p>", tags=[tag])
        parsed = json.loads(export_notes_to_json([note], [tag]))

        self.assertEqual(
            parsed["notes"][0],
            {
                "title": "Test Note",
                "content": "<p>Content</p>",
                "tags": ["Tag1"],
                "createdAt": "2024-01-01T12:00:00+00:00",
                "updatedAt": "2024-01-02T12:00:00+00:00",
            },
        )
        self.assertEqual(parsed["tags"], [{"name": "Tag1", "color": "sage"}])

    def test_two_space_indentation(self) -> None:
        self.assertIn('\n  "version": 1', export_notes_to_json([], []))

    def test_json_round_trip(self) -> None:
        tags = [make_tag("work"), make_tag("home", "plum")]
        notes = [
            make_note(title="One", content="<p>Ünïcode</p>", tags=tags),
            make_note(title="Two", content="", tags=[]),
        ]
        document = parse_imported_json(export_notes_to_json(notes, tags))

        self.assertEqual([record["title"] for record in document["notes"]], ["One", "Two"])
        self.assertEqual(document["notes"][0]["tags"], ["work", "home"])
        self.assertEqual(document["notes"][0]["content"], "<p>Ünïcode</p>")
        self.assertEqual(document["tags"], [{"name": "work", "color": "stone"}, {"name": "home", "color": "plum"}])

    def test_titles_survive_round_trip(self) -> None:
        notes = [make_note(title=""), make_note(title="  Plan "), make_note(title="x" * 600)]
        document = parse_imported_json(export_notes_to_json(notes, []))

        self.assertEqual(
            [record["title"] for record in document["notes"]], ["", "  Plan ", "x" * 500]
        )

    def test_record_to_note_data(self) -> None:
        data = note_from_json_record(
            {
                "title": "T",
                "content": "<p>x</p>",
                "tags": ["a"],
                "createdAt": "2024-01-01T12:00:00Z",
                "updatedAt": "2024-01-02T12:00:00Z",
            }
        )
        self.assertEqual(data["tag_names"], ["a"])
        self.assertEqual(data["created"], pendulum.datetime(2024, 1, 1, 12, tz="UTC"))

    def test_single_note_document(self) -> None:
        note = make_note(title="Test", content="<p>Content</p>", tags=[make_tag("Work")])
        parsed = json.loads(export_note_to_json(note))
        self.assertEqual(parsed["version"], 1)
        self.assertIn("exportedAt", parsed)
        self.assertEqual(parsed["note"]["title"], "Test")
        self.assertEqual(parsed["note"]["tags"], ["Work"])

    def test_full_account_document(self) -> None:
        tag = make_tag("Work")
        note = make_note(title="Pinned", tags=[tag], pinned=True)
        profile: Profile = {"display_name": "Ada", "email": "ada@example.com"}
        share_links: list[ShareLink] = [
            {
                "note_id": "note-Pinned",
                "note_title": "Pinned",
                "token": "abc123",
                "expires": None,
                "created": pendulum.datetime(2024, 2, 1, tz="UTC"),
            }
        ]
        content = export_full_account_to_json([note], [tag], profile, share_links)
        parsed = json.loads(content)

        self.assertEqual(parsed["version"], 2)
        self.assertEqual(parsed["profile"], {"displayName": "Ada", "email": "ada@example.com"})
        self.assertTrue(parsed["notes"][0]["pinned"])
        self.assertEqual(parsed["shareLinks"][0]["token"], "abc123")
        self.assertIsNone(parsed["shareLinks"][0]["expiresAt"])

        with self.assertRaises(ValidationError) as cm:
            parse_imported_json(content)
        self.assertEqual(cm.exception.message, "Invalid or unsupported export version")


class FilenameTest(unittest.TestCase):
    def test_special_characters_are_removed(self) -> None:
        self.assertEqual(get_sanitized_filename("Test: Note! @#$%"), "Test-Note-")

    def test_long_names_are_cut(self) -> None:
        self.assertEqual(len(get_sanitized_filename("A" * 100)), 50)

    def test_untitled(self) -> None:
        self.assertEqual(get_sanitized_filename(""), "Untitled")
        self.assertEqual(get_sanitized_filename("!@#$%"), "Untitled")

    def test_dated_names(self) -> None:
        exported_at = pendulum.datetime(2024, 3, 5, 10, tz="UTC")
        self.assertEqual(get_backup_filename("zenote", exported_at), "zenote-backup-2024-03-05.json")
        self.assertEqual(
            get_markdown_export_filename("notes", exported_at), "notes-export-2024-03-05.md"
        )

    def test_note_filename(self) -> None:
        self.assertEqual(get_note_filename("My Plan", "md"), "My-Plan.md")


if __name__ == "__main__":
    unittest.main()
