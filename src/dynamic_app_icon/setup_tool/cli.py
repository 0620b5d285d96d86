"""CLI entrypoint for dynamic app icon setup (setup/uninstall/status/validate)."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dynamic_app_icon.icon_config import IconConfigError
from dynamic_app_icon.logging_utils import configure_logging
from dynamic_app_icon.manifest import ManifestNotFoundError, ReconcileError

from .layout import load_layout
from .runner import SetupRunner

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dynamic app icon setup for Flutter Android projects")
    parser.add_argument("--project-root", default=None, help="Flutter project root (default: current directory)")
    parser.add_argument("--layout", default=None, help="Optional project layout profile YAML")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    setup = sub.add_parser("setup", help="Reconcile the manifest, copy icon resources and write the summary")
    setup.add_argument("config", help="Path to the icon configuration YAML")

    uninstall = sub.add_parser("uninstall", help="Restore the manifest and delete generated icon resources")
    uninstall.add_argument("--config", default=None, help="Icon configuration YAML (extra identifiers to clean)")

    sub.add_parser("status", help="Report which icons the manifest currently declares")

    validate = sub.add_parser("validate", help="Validate an icon configuration without touching the project")
    validate.add_argument("config", help="Path to the icon configuration YAML")
    validate.add_argument("--no-files", action="store_true", help="Skip icon file existence checks")
    return parser


def _emit(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, sort_keys=True, ensure_ascii=True))


def _cmd_setup(runner: SetupRunner, args: argparse.Namespace) -> int:
    report = runner.setup(args.config)
    _emit(report.as_dict())
    return 0 if report.ok() else 1


def _cmd_uninstall(runner: SetupRunner, args: argparse.Namespace) -> int:
    configuration = runner.load(args.config) if args.config else None
    report = runner.uninstall(configuration)
    _emit(report.as_dict())
    return 0


def _cmd_status(runner: SetupRunner, args: argparse.Namespace) -> int:
    _emit(runner.status().as_dict())
    return 0


def _cmd_validate(runner: SetupRunner, args: argparse.Namespace) -> int:
    configuration = runner.load(args.config)
    issues = runner.validate(configuration, check_filesystem=not args.no_files)
    _emit(
        {
            "config_path": args.config,
            "icons": configuration.available_identifiers(),
            "default_icon": configuration.resolved_default(),
            "issues": [issue.as_dict() for issue in issues],
        }
    )
    return 1 if issues else 0


_COMMANDS = {
    "setup": _cmd_setup,
    "uninstall": _cmd_uninstall,
    "status": _cmd_status,
    "validate": _cmd_validate,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_paths=[args.log_file] if args.log_file else None,
    )
    layout = load_layout(Path(args.layout) if args.layout else None, project_root=args.project_root)
    runner = SetupRunner(layout)
    command = _COMMANDS.get(args.command)
    if command is None:
        raise SystemExit("UNKNOWN_COMMAND")
    try:
        return command(runner, args)
    except (IconConfigError, ReconcileError, ManifestNotFoundError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        _emit({"status": "ERROR", "command": args.command, "error": str(exc), "error_type": type(exc).__name__})
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
