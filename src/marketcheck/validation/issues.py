"""Validation findings reported against markets datasets.

Each issue is an immutable value that knows how to render itself. Whether an
issue counts as an error or a warning is decided by the validator that files it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from marketcheck.validation.ranges import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Issue:
    def render(self) -> str:
        raise NotImplementedError

    @property
    def code(self) -> str:
        return _CODES.get(type(self), "issue")

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.render()}
        field_name = getattr(self, "field_name", None)
        if field_name is not None:
            payload["field"] = field_name
        return payload

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class UndefinedField(Issue):
    field_name: str

    def render(self) -> str:
        return f"Field '{self.field_name}' cannot be undefined."


@dataclass(frozen=True)
class NullField(Issue):
    field_name: str

    def render(self) -> str:
        return f"Field '{self.field_name}' cannot be null."


@dataclass(frozen=True)
class EmptyField(Issue):
    field_name: str

    def render(self) -> str:
        return f"Field '{self.field_name}' cannot be empty."


@dataclass(frozen=True)
class EmptyObjectField(Issue):
    field_name: str

    def render(self) -> str:
        return f"Field '{self.field_name}' cannot be an empty object."


@dataclass(frozen=True)
class RangeExceedance(Issue):
    field_name: str
    minimum: float
    maximum: float
    actual: Any

    def render(self) -> str:
        return (
            f"Field '{self.field_name}' exceeds valid range of "
            f"[{self.minimum}:{self.maximum}]. Actual value is {self.actual}."
        )

    def as_dict(self) -> dict[str, Any]:
        payload = super().as_dict()
        payload.update({"min": self.minimum, "max": self.maximum, "actual": self.actual})
        return payload


@dataclass(frozen=True)
class Custom(Issue):
    message: str

    def render(self) -> str:
        return self.message


_CODES: dict[type, str] = {
    UndefinedField: "undefined_field",
    NullField: "null_field",
    EmptyField: "empty_field",
    EmptyObjectField: "empty_object_field",
    RangeExceedance: "range_exceedance",
    Custom: "custom",
}


def latitude_exceedance(field_name: str, actual: Any) -> RangeExceedance:
    return RangeExceedance(field_name, MIN_LATITUDE, MAX_LATITUDE, actual)


def longitude_exceedance(field_name: str, actual: Any) -> RangeExceedance:
    return RangeExceedance(field_name, MIN_LONGITUDE, MAX_LONGITUDE, actual)
