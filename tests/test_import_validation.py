# SPDX-License-Identifier: MIT

import json
import unittest
from typing import Any

from factories import make_document, make_record

from zenote.configuration import MAX_IMPORT_NOTES, MAX_TAG_NAME_LENGTH, MAX_TITLE_LENGTH
from zenote.errors import ValidationError
from zenote.service.import_validation import (
    build_import_report,
    get_report_error,
    parse_imported_json,
    validate_note,
)
from zenote.time import datetime_from_untrusted, now_utc


def dumps(data: Any) -> str:
    return json.dumps(data)


class ParseImportedJsonTest(unittest.TestCase):
    def assertRejected(self, data: Any, message: str) -> None:
        payload = data if isinstance(data, str) else dumps(data)
        with self.assertRaises(ValidationError) as cm:
            parse_imported_json(payload)
        self.assertEqual(cm.exception.message, message)
        self.assertEqual(str(cm.exception), message)

    def test_valid_document(self) -> None:
        document = make_document(
            [make_record(title="Test", content="Content", tags=["tag1"])],
            [{"name": "tag1", "color": "terracotta"}],
        )
        result = parse_imported_json(dumps(document))

        self.assertEqual(result["version"], 1)
        self.assertEqual(result["exportedAt"], "2024-01-03T12:00:00Z")
        self.assertEqual(len(result["notes"]), 1)
        self.assertEqual(result["notes"][0]["title"], "Test")
        self.assertEqual(result["notes"][0]["tags"], ["tag1"])
        self.assertEqual(result["tags"], [{"name": "tag1", "color": "terracotta"}])

    def test_structural_errors(self) -> None:
        self.assertRejected("{not json", "Invalid JSON format")
        self.assertRejected([], "Invalid export format: expected an object")
        self.assertRejected("null", "Invalid export format: expected an object")
        self.assertRejected({"notes": [], "tags": []}, "Invalid or unsupported export version")
        self.assertRejected(
            {"version": 2, "notes": [], "tags": []}, "Invalid or unsupported export version"
        )
        self.assertRejected(
            {"version": True, "notes": [], "tags": []}, "Invalid or unsupported export version"
        )
        self.assertRejected(
            {"version": 1, "notes": "not array", "tags": []},
            "Invalid export format: notes must be an array",
        )

    def test_note_limit(self) -> None:
        notes = [make_record(title=f"Note {i}") for i in range(MAX_IMPORT_NOTES)]
        self.assertEqual(len(parse_imported_json(dumps(make_document(notes)))["notes"]), 1000)

        notes.append(make_record(title="One too many"))
        self.assertRejected(make_document(notes), "Too many notes: maximum 1000 allowed")

    def test_invalid_notes(self) -> None:
        self.assertRejected(make_document([None]), "Note at index 0 is invalid")
        self.assertRejected(make_document(["text"]), "Note at index 0 is invalid")
        self.assertRejected(make_document([make_record(title=123)]), "Note at index 0 has invalid title")
        self.assertRejected(
            make_document([make_record(), make_record(content=None)]),
            "Note at index 1 has invalid content",
        )

    def test_blank_titles_are_kept(self) -> None:
        result = parse_imported_json(
            dumps(make_document([make_record(title=""), make_record(title="   ")]))
        )
        self.assertEqual([note["title"] for note in result["notes"]], ["", "   "])

    def test_note_rejection_wins_over_tag_error(self) -> None:
        document = make_document([make_record(title=123)], [{"name": ""}])
        self.assertRejected(document, "Note at index 0 has invalid title")

        document = make_document([make_record()], [{"name": ""}])
        self.assertRejected(document, "Tag at index 0 has invalid name")

    def test_first_rejection_is_reported(self) -> None:
        document = make_document(
            [make_record(), make_record(title=1), make_record(content=5)]
        )
        self.assertRejected(document, "Note at index 1 has invalid title")

    def test_long_title_is_truncated(self) -> None:
        document = make_document([make_record(title="A" * (MAX_TITLE_LENGTH + 100))])
        result = parse_imported_json(dumps(document))
        self.assertEqual(len(result["notes"][0]["title"]), MAX_TITLE_LENGTH)

    def test_tag_name_boundary(self) -> None:
        exact = "B" * MAX_TAG_NAME_LENGTH
        over = "C" * (MAX_TAG_NAME_LENGTH + 1)
        document = make_document(
            [make_record(tags=[exact, over])],
            [{"name": exact, "color": "sage"}, {"name": over, "color": "sage"}],
        )
        result = parse_imported_json(dumps(document))

        self.assertEqual(result["notes"][0]["tags"], [exact, "C" * 20])
        self.assertEqual([tag["name"] for tag in result["tags"]], [exact, "C" * 20])

    def test_non_string_tag_entries_are_dropped(self) -> None:
        document = make_document([make_record(tags=["a", 1, None, {"name": "x"}, "b"])])
        result = parse_imported_json(dumps(document))
        self.assertEqual(result["notes"][0]["tags"], ["a", "b"])

    def test_missing_note_fields_get_defaults(self) -> None:
        before = now_utc().subtract(seconds=1)
        result = parse_imported_json(dumps(make_document([{"title": "Test", "content": ""}])))
        after = now_utc().add(seconds=1)

        note = result["notes"][0]
        self.assertEqual(note["tags"], [])
        self.assertTrue(before <= datetime_from_untrusted(note["createdAt"]) <= after)
        self.assertTrue(before <= datetime_from_untrusted(note["updatedAt"]) <= after)

    def test_invalid_dates_use_current_time(self) -> None:
        before = now_utc().subtract(seconds=1)
        document = make_document(
            [make_record(createdAt="invalid", updatedAt="also-invalid")]
        )
        result = parse_imported_json(dumps(document))
        after = now_utc().add(seconds=1)

        created = datetime_from_untrusted(result["notes"][0]["createdAt"])
        self.assertTrue(before <= created <= after)

    def test_valid_dates_are_kept(self) -> None:
        result = parse_imported_json(dumps(make_document([make_record()])))
        self.assertEqual(
            datetime_from_untrusted(result["notes"][0]["createdAt"]),
            datetime_from_untrusted("2024-01-01T12:00:00Z"),
        )

    def test_invalid_tag_color_defaults_to_stone(self) -> None:
        document = make_document([], [{"name": "Test", "color": "not-a-color"}])
        result = parse_imported_json(dumps(document))
        self.assertEqual(result["tags"], [{"name": "Test", "color": "stone"}])

    def test_tags(self) -> None:
        self.assertEqual(parse_imported_json(dumps(make_document([make_record()])))["tags"], [])
        missing = {"version": 1, "notes": [make_record()]}
        self.assertEqual(parse_imported_json(dumps(missing))["tags"], [])

        self.assertRejected(
            {"version": 1, "notes": [], "tags": "nope"},
            "Invalid export format: tags must be an array",
        )
        self.assertRejected(make_document([], ["name"]), "Tag at index 0 is invalid")
        self.assertRejected(
            make_document([], [{"name": "ok"}, {"name": "  "}]),
            "Tag at index 1 has invalid name",
        )


class ImportReportTest(unittest.TestCase):
    def test_every_note_is_reported(self) -> None:
        document = make_document(
            [make_record(title="Good"), make_record(title=None), make_record(content=[])]
        )
        report = build_import_report(dumps(document))

        self.assertEqual(
            [result["status"] for result in report["results"]],
            ["accepted", "rejected", "rejected"],
        )
        self.assertEqual(report["results"][1]["index"], 1)
        self.assertEqual(
            report["results"][2],
            {"status": "rejected", "index": 2, "reason": "Note at index 2 has invalid content"},
        )

    def test_validate_note_accepts(self) -> None:
        result = validate_note(4, make_record(title="  Padded  ", tags=["x"]))
        self.assertEqual(result["status"], "accepted")
        assert result["status"] == "accepted"
        self.assertEqual(result["index"], 4)
        self.assertEqual(result["note"]["title"], "  Padded  ")

    def test_tag_error_is_reported(self) -> None:
        report = build_import_report(
            dumps(make_document([make_record(title=None)], "not an array"))
        )
        self.assertEqual(report["results"][0]["status"], "rejected")
        self.assertEqual(report["tags"], [])
        self.assertEqual(report["tag_error"], "Invalid export format: tags must be an array")
        self.assertEqual(get_report_error(report), "Note at index 0 has invalid title")

    def test_structural_errors_still_raise(self) -> None:
        with self.assertRaises(ValidationError):
            build_import_report("[1, 2]")


if __name__ == "__main__":
    unittest.main()
