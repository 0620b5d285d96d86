from __future__ import annotations

import logging
from pathlib import Path

from dynamic_app_icon.logging_utils import configure_logging


def test_configure_logging_writes_to_log_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    log_path = tmp_path / "logs" / "setup.log"
    try:
        configure_logging(level=logging.DEBUG, log_paths=[str(log_path)])
        assert root.level == logging.DEBUG
        assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)
        logging.getLogger("dynamic_app_icon.setup_tool.runner").info("setup complete icons=christmas")
        for handler in root.handlers:
            handler.flush()
        text = log_path.read_text(encoding="utf-8")
        assert "[INFO] dynamic_app_icon.setup_tool.runner: setup complete icons=christmas" in text
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_configure_logging_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    existing = logging.NullHandler()
    root.addHandler(existing)
    before = list(root.handlers)
    try:
        configure_logging(level=logging.DEBUG)
        assert root.handlers == before
    finally:
        root.removeHandler(existing)
