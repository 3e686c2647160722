"""Rules for a single market feature.

A feature is checked in three independent parts (geometry, properties and the
``type`` discriminator). Only a missing parent object stops its children from
being checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from marketcheck.validation.fields import (
    check_coordinates,
    check_optional_text,
    check_required_text,
    display_value,
    type_name,
)
from marketcheck.validation.issues import (
    Custom,
    EmptyField,
    EmptyObjectField,
    NullField,
    UndefinedField,
)
from marketcheck.validation.opening_hours import (
    OpeningHoursGrammar,
    OpeningHoursSyntaxError,
    default_grammar,
)
from marketcheck.validation.result import (
    MISSING,
    ValidationResult,
    is_empty_object,
    lookup,
)

FEATURE_TYPE = "Feature"
GEOMETRY_TYPE = "Point"


@dataclass(frozen=True)
class FeatureReport:
    index: int
    dataset_name: str
    title: str | None
    result: ValidationResult

    @property
    def errors_count(self) -> int:
        return self.result.errors_count

    @property
    def warnings_count(self) -> int:
        return self.result.warnings_count

    def has_errors(self) -> bool:
        return self.result.has_errors()

    def has_warnings(self) -> bool:
        return self.result.has_warnings()

    def header(self) -> str:
        name = self.dataset_name.upper()
        if self.title is None:
            return name
        return f"{name}: {self.title}"

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"index": self.index, "title": self.title}
        payload.update(self.result.as_dict())
        return payload


def _reachable_title(feature: Any) -> str | None:
    title = lookup(lookup(feature, "properties"), "title")
    if isinstance(title, str):
        return title
    return None


def validate_type(value: Any) -> ValidationResult:
    if value != FEATURE_TYPE:
        return ValidationResult.error(
            Custom(f"Field 'type' must be '{FEATURE_TYPE}' not '{display_value(value)}'.")
        )
    return ValidationResult()


def validate_geometry_type(value: Any) -> ValidationResult:
    if value != GEOMETRY_TYPE:
        return ValidationResult.error(
            Custom(
                f"Field 'geometry.type' must be '{GEOMETRY_TYPE}' not '{display_value(value)}'."
            )
        )
    return ValidationResult()


def validate_geometry(geometry: Any) -> ValidationResult:
    if geometry is MISSING:
        return ValidationResult.error(UndefinedField("geometry"))
    if geometry is None:
        return ValidationResult.error(NullField("geometry"))
    if is_empty_object(geometry):
        return ValidationResult.error(EmptyObjectField("geometry"))
    if not isinstance(geometry, dict):
        return ValidationResult.error(
            Custom(f"Field 'geometry' must be an object not {type_name(geometry)}.")
        )
    return check_coordinates(lookup(geometry, "coordinates")) + validate_geometry_type(
        lookup(geometry, "type")
    )


def validate_opening_hours(
    opening_hours: Any,
    unclassified: Any,
    grammar: OpeningHoursGrammar,
) -> ValidationResult:
    if opening_hours is None:
        return _require_unclassified(unclassified)
    return _check_expression(opening_hours, grammar) + _require_unclassified_null(unclassified)


def _check_expression(opening_hours: Any, grammar: OpeningHoursGrammar) -> ValidationResult:
    if opening_hours is MISSING:
        return ValidationResult.error(UndefinedField("opening_hours"))
    if not isinstance(opening_hours, str):
        return ValidationResult.error(
            Custom(f"Field 'opening_hours' must be a string not {type_name(opening_hours)}.")
        )
    if len(opening_hours) == 0:
        return ValidationResult.error(EmptyField("opening_hours"))
    try:
        advisories = grammar.check(opening_hours)
    except OpeningHoursSyntaxError as exc:
        return ValidationResult.error(Custom(str(exc)))
    return ValidationResult.warning(*(Custom(message) for message in advisories))


def _require_unclassified(unclassified: Any) -> ValidationResult:
    if unclassified is MISSING:
        message = "cannot be undefined"
    elif unclassified is None:
        message = "cannot be null"
    elif not isinstance(unclassified, str):
        return ValidationResult.error(
            Custom(
                f"Field 'opening_hours_unclassified' must be a string not {type_name(unclassified)}."
            )
        )
    elif unclassified == "":
        message = "cannot be empty"
    else:
        return ValidationResult()
    return ValidationResult.error(
        Custom(f"Field 'opening_hours_unclassified' {message} when 'opening_hours' is null.")
    )


def _require_unclassified_null(unclassified: Any) -> ValidationResult:
    # Optional when 'opening_hours' carries the value.
    if unclassified is MISSING or unclassified is None:
        return ValidationResult()
    return ValidationResult.error(
        Custom("Field 'opening_hours_unclassified' must be null when 'opening_hours' is used.")
    )


def validate_properties(
    properties: Any,
    grammar: OpeningHoursGrammar,
) -> ValidationResult:
    if properties is MISSING:
        return ValidationResult.error(UndefinedField("properties"))
    if properties is None:
        return ValidationResult.error(NullField("properties"))
    if is_empty_object(properties):
        return ValidationResult.error(EmptyObjectField("properties"))
    if not isinstance(properties, dict):
        return ValidationResult.error(
            Custom(f"Field 'properties' must be an object not {type_name(properties)}.")
        )
    return (
        check_required_text(lookup(properties, "title"), "title")
        + check_optional_text(lookup(properties, "location"), "location")
        + validate_opening_hours(
            lookup(properties, "opening_hours"),
            lookup(properties, "opening_hours_unclassified"),
            grammar,
        )
    )


def validate_feature(
    feature: Any,
    dataset_name: str,
    index: int = 0,
    grammar: OpeningHoursGrammar | None = None,
) -> FeatureReport:
    grammar = grammar or default_grammar()

    if feature is MISSING:
        result = ValidationResult.error(Custom("Feature cannot be undefined."))
    elif feature is None:
        result = ValidationResult.error(Custom("Feature cannot be null."))
    elif is_empty_object(feature):
        result = ValidationResult.error(Custom("Feature cannot be an empty object."))
    elif not isinstance(feature, dict):
        result = ValidationResult.error(
            Custom(f"Feature must be an object not {type_name(feature)}.")
        )
    else:
        result = (
            validate_geometry(lookup(feature, "geometry"))
            + validate_properties(lookup(feature, "properties"), grammar)
            + validate_type(lookup(feature, "type"))
        )

    return FeatureReport(
        index=index,
        dataset_name=dataset_name,
        title=_reachable_title(feature),
        result=result,
    )
