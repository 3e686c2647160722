from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache

from opening_hours import OpeningHours


class OpeningHoursSyntaxError(ValueError):
    """Raised when an opening hours expression cannot be parsed."""


class OpeningHoursGrammar(ABC):
    @abstractmethod
    def check(self, expression: str) -> list[str]:
        """Parse the expression and return advisory warnings.

        Raises OpeningHoursSyntaxError when the expression is not valid.
        """


def advisory_warnings(expression: str) -> list[str]:
    warnings: list[str] = []
    if expression != expression.strip():
        warnings.append(
            f"Opening hours '{expression}' has leading or trailing whitespace."
        )
    if expression.rstrip().endswith(";"):
        warnings.append(f"Opening hours '{expression}' ends with a trailing ';'.")
    return warnings


def parseable_expression(expression: str) -> str:
    """Drop surrounding whitespace and one trailing ';', which only warn."""
    stripped = expression.strip()
    if stripped.endswith(";"):
        stripped = stripped[:-1].rstrip()
    return stripped


def _single_line(message: str) -> str:
    return " ".join(line.strip() for line in message.splitlines() if line.strip())


class OsmOpeningHoursGrammar(OpeningHoursGrammar):
    """OpenStreetMap opening_hours syntax backed by opening-hours-py."""

    def check(self, expression: str) -> list[str]:
        try:
            OpeningHours(parseable_expression(expression))
        except Exception as exc:
            raise OpeningHoursSyntaxError(
                f"Field 'opening_hours' is not a valid expression '{expression}': "
                f"{_single_line(str(exc))}"
            ) from exc
        return advisory_warnings(expression)


@lru_cache(maxsize=None)
def default_grammar() -> OpeningHoursGrammar:
    return OsmOpeningHoursGrammar()
