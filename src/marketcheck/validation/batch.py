from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from marketcheck.errors import DocumentError
from marketcheck.io.console import ConsoleReporter
from marketcheck.validation.dataset import DatasetReport, validate_dataset_file
from marketcheck.validation.opening_hours import OpeningHoursGrammar

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatasetOutcome:
    path: str
    report: DatasetReport | None = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.report is not None and self.report.passed

    def as_dict(self) -> dict[str, Any]:
        if self.report is not None:
            return self.report.as_dict()
        return {"path": self.path, "status": "fail", "document_error": self.error}


@dataclass(frozen=True)
class BatchResult:
    outcomes: tuple[DatasetOutcome, ...] = ()

    @property
    def total_files(self) -> int:
        return len(self.outcomes)

    @property
    def failing_files(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.passed)

    @property
    def exit_code(self) -> int:
        return 0 if self.failing_files == 0 else 1

    def as_dict(self) -> dict[str, Any]:
        return {
            "total_files": self.total_files,
            "failing_files": self.failing_files,
            "errors": sum(o.report.errors_count for o in self.outcomes if o.report),
            "warnings": sum(o.report.warnings_count for o in self.outcomes if o.report),
            "datasets": [outcome.as_dict() for outcome in self.outcomes],
        }


def list_dataset_files(directory: str | Path) -> list[Path]:
    """Regular files directly inside ``directory`` in file-system order."""
    with os.scandir(directory) as entries:
        return [Path(entry.path) for entry in entries if entry.is_file()]


def run_batch(
    directory: str | Path,
    reporter: ConsoleReporter,
    check_map_initialization: bool = False,
    fail_fast: bool = False,
    grammar: OpeningHoursGrammar | None = None,
) -> BatchResult:
    outcomes: list[DatasetOutcome] = []
    for path in list_dataset_files(directory):
        reporter.section(str(path))
        try:
            report = validate_dataset_file(
                path,
                check_map_initialization=check_map_initialization,
                grammar=grammar,
            )
        except DocumentError as exc:
            if fail_fast:
                raise
            LOGGER.warning("skipping unreadable dataset %s: %s", path, exc.reason)
            reporter.document_error(exc)
            outcomes.append(DatasetOutcome(path=str(path), error=str(exc)))
            continue

        reporter.dataset(report)
        outcomes.append(DatasetOutcome(path=str(path), report=report))

    result = BatchResult(outcomes=tuple(outcomes))
    LOGGER.info(
        "batch finished files=%d failing=%d",
        result.total_files,
        result.failing_files,
        extra={"context": {"directory": str(directory), "exit_code": result.exit_code}},
    )
    return result
