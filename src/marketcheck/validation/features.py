from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from marketcheck.validation.fields import type_name
from marketcheck.validation.feature import FeatureReport, validate_feature
from marketcheck.validation.issues import Custom, NullField, UndefinedField
from marketcheck.validation.opening_hours import OpeningHoursGrammar
from marketcheck.validation.result import MISSING, ValidationResult


@dataclass(frozen=True)
class FeaturesReport:
    features: tuple[FeatureReport, ...] = ()
    # Problems with the 'features' collection itself.
    collection: ValidationResult = ValidationResult()

    @property
    def errors_count(self) -> int:
        return self.collection.errors_count + sum(
            report.errors_count for report in self.features
        )

    @property
    def warnings_count(self) -> int:
        return self.collection.warnings_count + sum(
            report.warnings_count for report in self.features
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "collection": self.collection.as_dict(),
            "features": [
                report.as_dict()
                for report in self.features
                if report.has_errors() or report.has_warnings()
            ],
        }


def validate_features(
    features: Any,
    dataset_name: str,
    grammar: OpeningHoursGrammar | None = None,
) -> FeaturesReport:
    if features is MISSING:
        return FeaturesReport(collection=ValidationResult.error(UndefinedField("features")))
    if features is None:
        return FeaturesReport(collection=ValidationResult.error(NullField("features")))
    if not isinstance(features, list):
        return FeaturesReport(
            collection=ValidationResult.error(
                Custom(f"Field 'features' must be an array not {type_name(features)}.")
            )
        )

    reports = tuple(
        validate_feature(feature, dataset_name, index=index, grammar=grammar)
        for index, feature in enumerate(features)
    )
    return FeaturesReport(features=reports)
