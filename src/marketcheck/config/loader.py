from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from dynaconf import Dynaconf

from marketcheck.config.defaults import DEFAULT_CONFIG
from marketcheck.config.models import (
    AppConfig,
    DatasetsConfig,
    MonitoringConfig,
    OutputConfig,
    ValidationConfig,
)
from marketcheck.errors import ConfigError
from marketcheck.utils.config_io import deep_merge

SETTINGS_FILE_NAMES = (
    "marketcheck.toml",
    "marketcheck.yaml",
    "marketcheck.yml",
    "marketcheck.json",
)
SUPPORTED_EXTENSIONS = {".toml", ".yaml", ".yml", ".json"}


def _lower_keys(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_lower_keys(item) for item in obj]
    return obj


def _load_with_dynaconf(config_paths: list[Path]) -> dict[str, Any]:
    settings = Dynaconf(
        envvar_prefix="MARKETCHECK",
        settings_files=[str(path) for path in config_paths],
        merge_enabled=True,
        environments=False,
        load_dotenv=True,
    )
    return _lower_keys(settings.as_dict())


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _resolve_root_relative(path_value: str | None, root: Path) -> str | None:
    if not path_value:
        return path_value
    p = Path(path_value)
    if p.is_absolute():
        return str(p)
    return str((root / p).resolve())


def _normalize(data: dict[str, Any], root: Path) -> AppConfig:
    datasets_data = data.get("datasets", {})
    validation_data = data.get("validation", {})
    output_data = data.get("output", {})
    monitoring_data = data.get("monitoring", {})

    return AppConfig(
        datasets=DatasetsConfig(
            dir=_resolve_root_relative(str(datasets_data.get("dir", "cities")), root)
            or str(root),
        ),
        validation=ValidationConfig(
            check_map_initialization=_coerce_bool(
                validation_data.get("check_map_initialization", False)
            ),
            fail_fast=_coerce_bool(validation_data.get("fail_fast", False)),
        ),
        output=OutputConfig(
            color=_coerce_bool(output_data.get("color", True)),
            report=_resolve_root_relative(output_data.get("report"), root),
        ),
        monitoring=MonitoringConfig(
            json_logs=_coerce_bool(monitoring_data.get("json_logs", False)),
            log_level=str(monitoring_data.get("log_level", "WARNING")).upper(),
        ),
    )


def _default_config_copy() -> dict[str, Any]:
    return json.loads(json.dumps(DEFAULT_CONFIG))


def _settings_paths(root: Path, config_path: str | None) -> list[Path]:
    if config_path:
        path = Path(config_path)
        if not path.is_absolute():
            path = (root / path).resolve()
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            raise ConfigError(f"Unsupported config extension: {path.suffix}")
        return [path]
    return [root / name for name in SETTINGS_FILE_NAMES if (root / name).exists()]


def load_app_config(
    root: Path,
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Merge defaults, settings files, MARKETCHECK_* env vars and CLI overrides."""
    merged = _default_config_copy()
    deep_merge(merged, _load_with_dynaconf(_settings_paths(root, config_path)))

    if cli_overrides:
        deep_merge(merged, _lower_keys(cli_overrides))

    return _normalize(merged, root)
