"""Project layout profile for the setup tooling."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class ProjectLayout(BaseModel):
    project_root: str = "."
    manifest_path: str = "android/app/src/main/AndroidManifest.xml"
    res_root: str = "android/app/src/main/res"
    summary_path: str = "DYNAMIC_ICONS_README.md"
    bundled_prefixes: list[str] = ["assets/"]
    baseline_activity: str = "MainActivity"

    def root(self) -> Path:
        return Path(self.project_root)

    def resolve(self, relative: str) -> Path:
        path = Path(relative)
        if path.is_absolute():
            return path
        return self.root() / path

    def manifest(self) -> Path:
        return self.resolve(self.manifest_path)

    def res(self) -> Path:
        return self.resolve(self.res_root)

    def summary(self) -> Path:
        return self.resolve(self.summary_path)


def _expand_str(value: str) -> str:
    def replacer(match: re.Match[str]) -> str:
        token = match.group(1)
        if ":-" in token:
            key, default = token.split(":-", 1)
            actual = os.getenv(key, "")
            return actual if actual.strip() else default
        actual = os.getenv(token, "")
        if not actual.strip():
            raise ValueError(f"missing environment variable: {token}")
        return actual

    return _VAR_PATTERN.sub(replacer, value)


def _expand_payload(value: Any) -> Any:
    if isinstance(value, str):
        return _expand_str(value)
    if isinstance(value, list):
        return [_expand_payload(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _expand_payload(item) for key, item in value.items()}
    return value


def load_layout(path: Path | None = None, *, project_root: str | None = None) -> ProjectLayout:
    """Load a layout profile; ``project_root`` overrides whatever the profile says."""
    data: dict[str, Any] = {}
    if path is not None:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is not None and not isinstance(payload, dict):
            raise ValueError(f"layout profile must be a mapping: {path}")
        data = _expand_payload(payload or {})
    if project_root is not None:
        data["project_root"] = project_root
    return ProjectLayout(**data)
