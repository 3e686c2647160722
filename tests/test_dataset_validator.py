from __future__ import annotations

import copy
import tempfile
import unittest
from pathlib import Path

from _datasets import VALID_FEATURE, make_dataset, make_feature, write_dataset
from marketcheck.errors import DocumentError
from marketcheck.validation.dataset import (
    dataset_name,
    load_document,
    validate_dataset,
    validate_dataset_file,
)


class DatasetValidatorTests(unittest.TestCase):
    def test_name_is_file_stem(self) -> None:
        self.assertEqual(dataset_name("cities/berlin.json"), "berlin")

    def test_valid_dataset_passes_without_issues(self) -> None:
        report = validate_dataset(make_dataset(), "berlin")
        self.assertTrue(report.passed)
        self.assertEqual(report.summary(), "Validation PASSED without warnings or errors.")

    def test_warnings_do_not_fail_dataset(self) -> None:
        report = validate_dataset(make_dataset([make_feature(location="")]), "berlin")
        self.assertTrue(report.passed)
        self.assertEqual(
            report.summary(), "Validation PASSED with 1 warning(s) and no errors."
        )

    def test_invalid_feature_type_fails_dataset(self) -> None:
        broken = copy.deepcopy(VALID_FEATURE)
        broken["type"] = "Place"
        report = validate_dataset(
            make_dataset([copy.deepcopy(VALID_FEATURE), broken]), "berlin"
        )
        self.assertFalse(report.passed)
        self.assertGreaterEqual(report.errors_count, 1)
        self.assertEqual(report.features.features[0].errors_count, 0)

    def test_counts_include_metadata(self) -> None:
        dataset = make_dataset(
            [make_feature(location=None), make_feature(title="")],
            metadata={"data_source": {"title": "Open Data", "url": ""}},
        )
        report = validate_dataset(dataset, "berlin")
        self.assertEqual((report.errors_count, report.warnings_count), (2, 1))
        self.assertEqual(
            report.summary(), "Validation done. 1 warning(s), 2 error(s) detected."
        )

    def test_empty_features_with_valid_data_source_passes(self) -> None:
        dataset = {
            "features": [],
            "metadata": {"data_source": {"title": "Open Data", "url": "https://example.org"}},
        }
        report = validate_dataset(dataset, "leipzig")
        self.assertTrue(report.passed)
        self.assertEqual(report.warnings_count, 0)

    def test_map_initialization_is_opt_in(self) -> None:
        dataset = make_dataset(metadata={"data_source": {"title": "t", "url": "u"}})
        self.assertTrue(validate_dataset(dataset, "berlin").passed)
        report = validate_dataset(dataset, "berlin", check_map_initialization=True)
        self.assertEqual(report.errors_count, 1)

    def test_validate_file_and_report_dict(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_dataset(Path(tmpdir), "berlin", make_dataset([make_feature(title=None)]))
            report = validate_dataset_file(path)

            self.assertEqual(report.name, "berlin")
            payload = report.as_dict()
            self.assertEqual(payload["status"], "fail")
            self.assertEqual(payload["counts"], {"features": 1, "errors": 1, "warnings": 0})
            self.assertEqual(
                payload["features"]["features"][0]["errors"][0]["message"],
                "Field 'title' cannot be null.",
            )

    def test_invalid_json_raises_document_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.json"
            path.write_text("{\"features\": [", encoding="utf-8")
            with self.assertRaises(DocumentError) as ctx:
                load_document(path)
            self.assertEqual(ctx.exception.path, path)

    def test_non_object_document_raises_document_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "list.json"
            path.write_text("[]", encoding="utf-8")
            with self.assertRaises(DocumentError):
                validate_dataset_file(path)


if __name__ == "__main__":
    unittest.main()
