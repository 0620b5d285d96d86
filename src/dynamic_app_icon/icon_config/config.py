"""Icon configuration loader (YAML documents)."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

import yaml

from .contracts import (
    IconConfiguration,
    IconEntry,
    InvalidShapeError,
    LongFormEntry,
    MissingFieldError,
    ShortFormEntry,
    SourceNotFoundError,
)

logger = logging.getLogger(__name__)

_SEARCH_DIRS: tuple[str, ...] = ("", "assets", "lib")


def parse_configuration(text: str) -> IconConfiguration:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidShapeError(f"invalid YAML document: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidShapeError("icon configuration must be a mapping")

    icons_payload = data.get("icons")
    if icons_payload is None:
        icons_payload = {}
    if not isinstance(icons_payload, dict):
        raise InvalidShapeError("icons must be a mapping of identifier to path or definition")

    entries: dict[str, IconEntry] = {}
    for key, value in icons_payload.items():
        if not isinstance(key, str):
            # YAML 1.1 reads bare on/off/yes/no as booleans
            raise InvalidShapeError(
                f"icon identifier {key!r} must be a string; quote it in the document",
                str(key),
            )
        identifier = key
        entries[identifier] = _parse_entry(identifier, value)

    default_icon = data.get("default_icon")
    if default_icon is not None and not isinstance(default_icon, str):
        raise InvalidShapeError(f"default_icon {default_icon!r} must be a string", str(default_icon))
    return IconConfiguration.from_entries(
        entries,
        default_icon=default_icon,
    )


def load_configuration(locator: str | Path, search_root: Path | None = None) -> IconConfiguration:
    path = resolve_configuration_path(locator, search_root)
    logger.debug("loading icon configuration from %s", path)
    return parse_configuration(path.read_text(encoding="utf-8"))


def resolve_configuration_path(locator: str | Path, search_root: Path | None = None) -> Path:
    raw = str(locator or "").strip()
    if not raw:
        raise SourceNotFoundError(str(locator), [])
    root = search_root or Path.cwd()
    candidates: list[Path] = [Path(raw)]
    for subdir in _SEARCH_DIRS:
        candidate = root / subdir / raw if subdir else root / raw
        if candidate not in candidates:
            candidates.append(candidate)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise SourceNotFoundError(raw, [str(item) for item in candidates])


class ConfigurationHolder:
    """Holds the active configuration; replacement is a single reference swap."""

    def __init__(self, configuration: IconConfiguration | None = None) -> None:
        self._lock = threading.Lock()
        self._configuration = configuration

    def current(self) -> IconConfiguration | None:
        return self._configuration

    def replace(self, configuration: IconConfiguration | None) -> IconConfiguration | None:
        with self._lock:
            previous = self._configuration
            self._configuration = configuration
        return previous


def _parse_entry(identifier: str, value: Any) -> IconEntry:
    if isinstance(value, str):
        return ShortFormEntry(path=value)
    if not isinstance(value, dict):
        raise InvalidShapeError(
            f"icon '{identifier}' must be a path string or a mapping, got {type(value).__name__}",
            identifier,
        )
    if value.get("path") is None:
        raise MissingFieldError(identifier, "path")
    path = value["path"]
    if not isinstance(path, str):
        raise InvalidShapeError(f"icon '{identifier}' path must be a string", identifier)

    sizes_payload = value.get("sizes")
    if sizes_payload is None:
        sizes_payload = {}
    if not isinstance(sizes_payload, dict):
        raise InvalidShapeError(f"icon '{identifier}' sizes must be a mapping of density to path", identifier)
    sizes: dict[str, str] = {}
    for density, size_path in sizes_payload.items():
        if not isinstance(size_path, str):
            raise InvalidShapeError(f"icon '{identifier}' size '{density}' must be a path string", identifier)
        sizes[str(density)] = size_path

    return LongFormEntry(
        path=path,
        sizes=sizes,
        label=_optional_text(value.get("label")),
        description=_optional_text(value.get("description")),
    )


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
