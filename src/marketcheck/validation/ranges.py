from __future__ import annotations

MAX_LATITUDE = 90
MIN_LATITUDE = -90
MAX_LONGITUDE = 180
MIN_LONGITUDE = -180

MIN_ZOOM_LEVEL = 1
MAX_ZOOM_LEVEL = 18


# Lower bound exclusive, upper bound inclusive.
def latitude_in_range(value: float) -> bool:
    return MIN_LATITUDE < value <= MAX_LATITUDE


def longitude_in_range(value: float) -> bool:
    return MIN_LONGITUDE < value <= MAX_LONGITUDE


def zoom_level_in_range(value: float) -> bool:
    return MIN_ZOOM_LEVEL <= value <= MAX_ZOOM_LEVEL
