from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.theme import Theme

from marketcheck.errors import DocumentError
from marketcheck.validation.dataset import DatasetReport
from marketcheck.validation.feature import FeatureReport
from marketcheck.validation.issues import Severity
from marketcheck.validation.result import ValidationResult

THEME = Theme(
    {
        "section": "blue",
        "market": "yellow",
        "passed": "green",
        "error": "red",
    }
)

_PREFIX = {
    Severity.WARNING: "Warning",
    Severity.ERROR: "Error",
}


class ConsoleReporter:
    """Prints dataset reports: issues per feature, metadata issues, then a summary."""

    def __init__(self, file: IO[str] | None = None, color: bool = True) -> None:
        self._console = Console(
            file=file,
            theme=THEME,
            no_color=not color,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _line(self, text: str = "", style: str | None = None) -> None:
        self._console.print(text, style=style, markup=False, highlight=False)

    def section(self, path: str) -> None:
        self._line(f"\n===> Validating {path} ...", style="section")

    def _issues(self, result: ValidationResult) -> None:
        for severity, issue in result.iter_issues():
            self._line(f"{_PREFIX[severity]}: {issue.render()}")

    def feature(self, report: FeatureReport) -> None:
        for warning in report.result.warnings:
            self._line(f"Warning: {warning.render()}")
        if report.has_errors():
            self._line(f"\n{report.header()}", style="market")
        for error in report.result.errors:
            self._line(f"Error: {error.render()}")

    def dataset(self, report: DatasetReport) -> None:
        self._issues(report.features.collection)
        for feature_report in report.features.features:
            self.feature(feature_report)
        self._issues(report.metadata)
        self._line(f"\n{report.summary()}", style="passed" if report.passed else "error")
        self._line()

    def document_error(self, exc: DocumentError) -> None:
        self._line(f"\nValidation aborted. {exc}", style="error")
        self._line()

    def batch_summary(self, total: int, failing: int) -> None:
        if failing == 0:
            self._line(f"All {total} dataset(s) passed validation.", style="passed")
        else:
            self._line(f"{failing} of {total} dataset(s) failed validation.", style="error")
