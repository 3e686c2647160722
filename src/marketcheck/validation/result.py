from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from marketcheck.validation.issues import Issue, Severity


class _Missing:
    """Marker for keys absent from a parsed document."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def lookup(container: Any, key: str) -> Any:
    """Return ``container[key]``, or ``MISSING`` when the key is absent."""
    if isinstance(container, dict):
        return container.get(key, MISSING)
    return MISSING


def is_empty_object(value: Any) -> bool:
    return isinstance(value, dict) and len(value) == 0


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[Issue, ...] = ()
    warnings: tuple[Issue, ...] = ()

    @classmethod
    def error(cls, *issues: Issue) -> "ValidationResult":
        return cls(errors=tuple(issues))

    @classmethod
    def warning(cls, *issues: Issue) -> "ValidationResult":
        return cls(warnings=tuple(issues))

    def __add__(self, other: "ValidationResult") -> "ValidationResult":
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    @property
    def errors_count(self) -> int:
        return len(self.errors)

    @property
    def warnings_count(self) -> int:
        return len(self.warnings)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def iter_issues(self) -> Iterable[tuple[Severity, Issue]]:
        for issue in self.warnings:
            yield Severity.WARNING, issue
        for issue in self.errors:
            yield Severity.ERROR, issue

    def as_dict(self) -> dict[str, Any]:
        return {
            "errors": [issue.as_dict() for issue in self.errors],
            "warnings": [issue.as_dict() for issue in self.warnings],
        }
