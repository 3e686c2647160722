from __future__ import annotations

from typing import Any

from marketcheck.validation.fields import (
    check_coordinates,
    check_required_text,
    is_number,
    type_name,
)
from marketcheck.validation.issues import Custom, NullField, RangeExceedance, UndefinedField
from marketcheck.validation.ranges import MAX_ZOOM_LEVEL, MIN_ZOOM_LEVEL, zoom_level_in_range
from marketcheck.validation.result import MISSING, ValidationResult, lookup


def _check_object(value: Any, field_name: str) -> ValidationResult | None:
    if value is MISSING:
        return ValidationResult.error(UndefinedField(field_name))
    if value is None:
        return ValidationResult.error(NullField(field_name))
    if not isinstance(value, dict):
        return ValidationResult.error(
            Custom(f"Field '{field_name}' must be an object not {type_name(value)}.")
        )
    return None


def validate_data_source(data_source: Any) -> ValidationResult:
    failed = _check_object(data_source, "data_source")
    if failed is not None:
        return failed
    return check_required_text(lookup(data_source, "title"), "title") + check_required_text(
        lookup(data_source, "url"), "url"
    )


def validate_zoom_level(zoom_level: Any) -> ValidationResult:
    if zoom_level is MISSING:
        return ValidationResult.error(UndefinedField("zoom_level"))
    if zoom_level is None:
        return ValidationResult.error(NullField("zoom_level"))
    if not is_number(zoom_level):
        return ValidationResult.error(
            Custom(f"Field 'zoom_level' must be a number not {type_name(zoom_level)}.")
        )
    if not zoom_level_in_range(zoom_level):
        return ValidationResult.error(
            RangeExceedance("zoom_level", MIN_ZOOM_LEVEL, MAX_ZOOM_LEVEL, zoom_level)
        )
    return ValidationResult()


def validate_map_initialization(map_initialization: Any) -> ValidationResult:
    """Check the default map view: center coordinates and zoom level."""
    failed = _check_object(map_initialization, "map_initialization")
    if failed is not None:
        return failed
    return check_coordinates(lookup(map_initialization, "coordinates")) + validate_zoom_level(
        lookup(map_initialization, "zoom_level")
    )


def validate_metadata(metadata: Any, check_map_initialization: bool = False) -> ValidationResult:
    """Validate the dataset metadata block.

    The map initialization block is only inspected when explicitly requested.
    """
    failed = _check_object(metadata, "metadata")
    if failed is not None:
        return failed

    result = validate_data_source(lookup(metadata, "data_source"))
    if check_map_initialization:
        result = result + validate_map_initialization(lookup(metadata, "map_initialization"))
    return result
