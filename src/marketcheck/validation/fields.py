from __future__ import annotations

from typing import Any

from marketcheck.validation.issues import (
    Custom,
    EmptyField,
    NullField,
    UndefinedField,
    latitude_exceedance,
    longitude_exceedance,
)
from marketcheck.validation.ranges import latitude_in_range, longitude_in_range
from marketcheck.validation.result import MISSING, ValidationResult


def display_value(value: Any) -> str:
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return display_value(value)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_required_text(value: Any, field_name: str) -> ValidationResult:
    if value is MISSING:
        return ValidationResult.error(UndefinedField(field_name))
    if value is None:
        return ValidationResult.error(NullField(field_name))
    if not isinstance(value, str):
        return ValidationResult.error(
            Custom(f"Field '{field_name}' must be a string not {type_name(value)}.")
        )
    if len(value) == 0:
        return ValidationResult.error(EmptyField(field_name))
    return ValidationResult()


def check_optional_text(value: Any, field_name: str) -> ValidationResult:
    """Absence is an error; null or empty values are only warnings."""
    if value is MISSING:
        return ValidationResult.error(UndefinedField(field_name))
    if value is None:
        return ValidationResult.warning(NullField(field_name))
    if not isinstance(value, str):
        return ValidationResult.error(
            Custom(f"Field '{field_name}' must be a string not {type_name(value)}.")
        )
    if len(value) == 0:
        return ValidationResult.warning(EmptyField(field_name))
    return ValidationResult()


def check_coordinates(coordinates: Any, field_name: str = "coordinates") -> ValidationResult:
    if coordinates is MISSING:
        return ValidationResult.error(UndefinedField(field_name))
    if coordinates is None:
        return ValidationResult.error(NullField(field_name))
    if not isinstance(coordinates, list):
        return ValidationResult.error(
            Custom(f"Field '{field_name}' must be an array not {type_name(coordinates)}.")
        )
    if len(coordinates) != 2:
        return ValidationResult.error(
            Custom(f"Field '{field_name}' must contain two values not {len(coordinates)}.")
        )

    errors = []
    lon, lat = coordinates
    lon_name = f"{field_name}[0]"
    lat_name = f"{field_name}[1]"
    if not is_number(lon):
        errors.append(
            Custom(f"Field '{lon_name}' must be a number not '{display_value(lon)}'.")
        )
    elif not longitude_in_range(lon):
        errors.append(longitude_exceedance(lon_name, lon))
    if not is_number(lat):
        errors.append(
            Custom(f"Field '{lat_name}' must be a number not '{display_value(lat)}'.")
        )
    elif not latitude_in_range(lat):
        errors.append(latitude_exceedance(lat_name, lat))
    return ValidationResult(errors=tuple(errors))
