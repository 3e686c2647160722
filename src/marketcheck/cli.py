from __future__ import annotations

import argparse
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marketcheck",
        description="Validate markets datasets (GeoJSON feature collections with metadata)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate every dataset file in a directory")
    validate.add_argument("--config", help="Path to TOML/YAML/JSON config file")
    validate.add_argument("--dir", help="Directory holding one dataset file per city")
    validate.add_argument(
        "--check-map-initialization",
        action="store_true",
        help="Also validate metadata.map_initialization (coordinates and zoom level)",
    )
    validate.add_argument(
        "--fail-fast",
        action="store_true",
        help="Abort the whole run on the first unreadable dataset file",
    )
    validate.add_argument("--report", help="Write a JSON report of all datasets to this path")
    validate.add_argument("--no-color", action="store_true", help="Disable colored console output")
    validate.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs")
    validate.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    root = Path.cwd()

    if args.command == "validate":
        from marketcheck.commands.validate import run_validate

        return run_validate(args, root)

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
