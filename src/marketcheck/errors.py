from __future__ import annotations

from pathlib import Path


class DocumentError(ValueError):
    """Raised when a dataset file cannot be read or parsed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ConfigError(RuntimeError):
    """Raised when configuration files are missing or unsupported."""
