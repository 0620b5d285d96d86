"""Logging helpers shared by the setup tooling and the runtime selector."""

from __future__ import annotations

import logging
from pathlib import Path


def configure_logging(level: int = logging.INFO, log_paths: list[str] | None = None) -> None:
    """Install the console handler (plus an optional log file) for the setup CLI and the runtime selector.

    A no-op when the root logger already has handlers, so host applications keep their own setup.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    handlers: list[logging.Handler] = []
    handlers.append(logging.StreamHandler())

    log_path = log_paths[0] if log_paths else None
    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
