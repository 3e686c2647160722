from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def deep_merge(base: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def prune_none(values: dict[str, Any]) -> dict[str, Any]:
    """Drop unset entries so they do not override configured values."""
    pruned: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, dict):
            nested = prune_none(value)
            if nested:
                pruned[key] = nested
        elif value is not None:
            pruned[key] = value
    return pruned


def write_json(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=True, indent=2), encoding="utf-8")
