from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from marketcheck.errors import DocumentError
from marketcheck.validation.features import FeaturesReport, validate_features
from marketcheck.validation.metadata import validate_metadata
from marketcheck.validation.opening_hours import OpeningHoursGrammar
from marketcheck.validation.result import ValidationResult, lookup

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatasetReport:
    path: str
    name: str
    features: FeaturesReport
    metadata: ValidationResult

    @property
    def errors_count(self) -> int:
        return self.features.errors_count + self.metadata.errors_count

    @property
    def warnings_count(self) -> int:
        return self.features.warnings_count + self.metadata.warnings_count

    @property
    def passed(self) -> bool:
        return self.errors_count == 0

    @property
    def status(self) -> str:
        return "pass" if self.passed else "fail"

    def summary(self) -> str:
        if self.passed:
            if self.warnings_count == 0:
                return "Validation PASSED without warnings or errors."
            return f"Validation PASSED with {self.warnings_count} warning(s) and no errors."
        return (
            f"Validation done. {self.warnings_count} warning(s), "
            f"{self.errors_count} error(s) detected."
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "status": self.status,
            "counts": {
                "features": len(self.features.features),
                "errors": self.errors_count,
                "warnings": self.warnings_count,
            },
            "features": self.features.as_dict(),
            "metadata": self.metadata.as_dict(),
        }


def dataset_name(path: str | Path) -> str:
    return Path(path).stem


def load_document(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(p, f"cannot read file: {exc}") from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DocumentError(p, f"invalid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise DocumentError(p, "top-level value must be an object")
    return document


def validate_dataset(
    document: dict[str, Any],
    name: str,
    path: str = "",
    check_map_initialization: bool = False,
    grammar: OpeningHoursGrammar | None = None,
) -> DatasetReport:
    features = validate_features(lookup(document, "features"), name, grammar=grammar)
    metadata = validate_metadata(
        lookup(document, "metadata"),
        check_map_initialization=check_map_initialization,
    )
    report = DatasetReport(path=path, name=name, features=features, metadata=metadata)
    LOGGER.info(
        "dataset validated name=%s features=%d errors=%d warnings=%d",
        name,
        len(features.features),
        report.errors_count,
        report.warnings_count,
        extra={"context": {"dataset": name, "status": report.status}},
    )
    return report


def validate_dataset_file(
    path: str | Path,
    check_map_initialization: bool = False,
    grammar: OpeningHoursGrammar | None = None,
) -> DatasetReport:
    LOGGER.debug("loading dataset %s", path)
    document = load_document(path)
    return validate_dataset(
        document,
        dataset_name(path),
        path=str(path),
        check_map_initialization=check_map_initialization,
        grammar=grammar,
    )
