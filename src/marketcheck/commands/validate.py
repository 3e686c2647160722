from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from marketcheck.config import load_app_config
from marketcheck.errors import DocumentError
from marketcheck.io.console import ConsoleReporter
from marketcheck.monitoring import configure_logging
from marketcheck.utils.config_io import prune_none, write_json
from marketcheck.validation.batch import run_batch

LOGGER = logging.getLogger(__name__)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    return prune_none(
        {
            "datasets": {"dir": args.dir},
            "validation": {
                "check_map_initialization": True if args.check_map_initialization else None,
                "fail_fast": True if args.fail_fast else None,
            },
            "output": {
                "color": False if args.no_color else None,
                "report": args.report,
            },
            "monitoring": {
                "json_logs": True if args.json_logs else None,
                "log_level": args.log_level,
            },
        }
    )


def run_validate(args: argparse.Namespace, root: Path) -> int:
    try:
        config = load_app_config(
            root=root,
            config_path=args.config,
            cli_overrides=_cli_overrides(args),
        )
        configure_logging(config.monitoring.log_level, config.monitoring.json_logs)
        LOGGER.debug("configuration loaded", extra={"context": config.as_log_context()})

        datasets_dir = Path(config.datasets.dir)
        if not datasets_dir.is_dir():
            raise NotADirectoryError(f"Datasets directory not found: {datasets_dir}")

        reporter = ConsoleReporter(color=config.output.color)
        result = run_batch(
            datasets_dir,
            reporter,
            check_map_initialization=config.validation.check_map_initialization,
            fail_fast=config.validation.fail_fast,
        )
        reporter.batch_summary(result.total_files, result.failing_files)

        if config.output.report:
            write_json(Path(config.output.report), result.as_dict())
        return result.exit_code
    except DocumentError as exc:
        print(f"validation aborted: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"validate command failed: {exc}", file=sys.stderr)
        return 2
