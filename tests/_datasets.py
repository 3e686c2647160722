from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from marketcheck.validation.opening_hours import OpeningHoursGrammar, OpeningHoursSyntaxError

VALID_FEATURE: dict[str, Any] = {
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [13.404954, 52.520008]},
    "properties": {
        "title": "Winterfeldtplatz",
        "location": "Winterfeldtplatz, 10781 Berlin",
        "opening_hours": "Mo-Fr 08:00-18:00",
        "opening_hours_unclassified": None,
    },
}

VALID_METADATA: dict[str, Any] = {
    "data_source": {
        "title": "Berlin Open Data",
        "url": "https://daten.berlin.de",
    },
    "map_initialization": {
        "coordinates": [13.383333, 52.516667],
        "zoom_level": 12,
    },
}


def make_feature(**properties: Any) -> dict[str, Any]:
    feature = copy.deepcopy(VALID_FEATURE)
    feature["properties"].update(properties)
    return feature


def make_dataset(features: list[Any] | None = None, metadata: Any = None) -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [copy.deepcopy(VALID_FEATURE)] if features is None else features,
        "metadata": copy.deepcopy(VALID_METADATA) if metadata is None else metadata,
    }


def write_dataset(directory: Path, name: str, dataset: dict[str, Any]) -> Path:
    path = directory / f"{name}.json"
    path.write_text(json.dumps(dataset), encoding="utf-8")
    return path


class StubGrammar(OpeningHoursGrammar):
    """Accepts everything except expressions listed in ``invalid``."""

    def __init__(self, warnings: list[str] | None = None, invalid: set[str] | None = None) -> None:
        self._warnings = warnings or []
        self._invalid = invalid or set()

    def check(self, expression: str) -> list[str]:
        if expression in self._invalid:
            raise OpeningHoursSyntaxError(f"Cannot parse '{expression}'.")
        return list(self._warnings)
