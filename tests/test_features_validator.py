from __future__ import annotations

import copy
import unittest

from _datasets import VALID_FEATURE, make_feature
from marketcheck.validation.features import validate_features
from marketcheck.validation.issues import NullField, UndefinedField
from marketcheck.validation.result import MISSING


class FeaturesValidatorTests(unittest.TestCase):
    def test_counts_are_summed_across_features(self) -> None:
        broken = copy.deepcopy(VALID_FEATURE)
        broken["type"] = "Feat"
        broken["geometry"]["coordinates"] = [200, 100]
        features = [
            copy.deepcopy(VALID_FEATURE),
            make_feature(location=None),
            broken,
        ]

        report = validate_features(features, "hamburg")

        self.assertEqual(len(report.features), 3)
        self.assertEqual(report.errors_count, 3)
        self.assertEqual(report.warnings_count, 1)

    def test_reports_keep_input_order(self) -> None:
        features = [make_feature(title=f"Markt {i}") for i in range(4)]
        report = validate_features(features, "hamburg")
        self.assertEqual([r.index for r in report.features], [0, 1, 2, 3])
        self.assertEqual([r.title for r in report.features], [f"Markt {i}" for i in range(4)])

    def test_features_do_not_affect_each_other(self) -> None:
        report = validate_features([None, copy.deepcopy(VALID_FEATURE)], "hamburg")
        self.assertEqual(report.features[0].errors_count, 1)
        self.assertEqual(report.features[1].errors_count, 0)

    def test_empty_features_have_no_issues(self) -> None:
        report = validate_features([], "hamburg")
        self.assertEqual((report.errors_count, report.warnings_count), (0, 0))

    def test_missing_or_invalid_collection(self) -> None:
        self.assertEqual(
            list(validate_features(MISSING, "hamburg").collection.errors),
            [UndefinedField("features")],
        )
        self.assertEqual(
            list(validate_features(None, "hamburg").collection.errors),
            [NullField("features")],
        )
        report = validate_features({"type": "Feature"}, "hamburg")
        self.assertEqual(report.errors_count, 1)
        self.assertEqual(
            report.collection.errors[0].render(),
            "Field 'features' must be an array not object.",
        )


if __name__ == "__main__":
    unittest.main()
