from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DatasetsConfig:
    dir: str = "cities"


@dataclass
class ValidationConfig:
    check_map_initialization: bool = False
    fail_fast: bool = False


@dataclass
class OutputConfig:
    color: bool = True
    report: str | None = None


@dataclass
class MonitoringConfig:
    json_logs: bool = False
    log_level: str = "WARNING"


@dataclass
class AppConfig:
    datasets: DatasetsConfig = field(default_factory=DatasetsConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)

    def as_log_context(self) -> dict[str, Any]:
        return {
            "datasets_dir": self.datasets.dir,
            "check_map_initialization": self.validation.check_map_initialization,
            "fail_fast": self.validation.fail_fast,
            "color": self.output.color,
            "report": self.output.report,
            "json_logs": self.monitoring.json_logs,
        }
