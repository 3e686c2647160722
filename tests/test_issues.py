from __future__ import annotations

import dataclasses
import re
import unittest

from marketcheck.validation.issues import (
    Custom,
    EmptyField,
    EmptyObjectField,
    NullField,
    RangeExceedance,
    UndefinedField,
    latitude_exceedance,
    longitude_exceedance,
)


class IssueRenderingTests(unittest.TestCase):
    def test_field_issue_messages(self) -> None:
        self.assertEqual(UndefinedField("title").render(), "Field 'title' cannot be undefined.")
        self.assertEqual(NullField("title").render(), "Field 'title' cannot be null.")
        self.assertEqual(EmptyField("url").render(), "Field 'url' cannot be empty.")
        self.assertEqual(
            EmptyObjectField("geometry").render(),
            "Field 'geometry' cannot be an empty object.",
        )

    def test_custom_issue_is_verbatim(self) -> None:
        self.assertEqual(str(Custom("Feature cannot be null.")), "Feature cannot be null.")

    def test_range_message_keeps_native_precision(self) -> None:
        issue = longitude_exceedance("coordinates[0]", 180.0001)
        self.assertEqual(
            issue.render(),
            "Field 'coordinates[0]' exceeds valid range of [-180:180]. Actual value is 180.0001.",
        )

    def test_range_message_fields_can_be_recovered(self) -> None:
        issue = RangeExceedance("zoom_level", 1, 18, 23)
        match = re.fullmatch(
            r"Field '(.+)' exceeds valid range of \[(.+):(.+)\]\. Actual value is (.+)\.",
            issue.render(),
        )
        self.assertIsNotNone(match)
        self.assertEqual(match.groups(), ("zoom_level", "1", "18", "23"))

    def test_latitude_helper_uses_latitude_bounds(self) -> None:
        issue = latitude_exceedance("coordinates[1]", -90)
        self.assertEqual((issue.minimum, issue.maximum, issue.actual), (-90, 90, -90))

    def test_issues_are_immutable(self) -> None:
        issue = NullField("location")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            issue.field_name = "title"  # type: ignore[misc]

    def test_as_dict_carries_code_and_bounds(self) -> None:
        payload = RangeExceedance("zoom_level", 1, 18, 0).as_dict()
        self.assertEqual(payload["code"], "range_exceedance")
        self.assertEqual(payload["field"], "zoom_level")
        self.assertEqual((payload["min"], payload["max"], payload["actual"]), (1, 18, 0))


if __name__ == "__main__":
    unittest.main()
