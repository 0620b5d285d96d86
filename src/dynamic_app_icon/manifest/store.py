"""AndroidManifest.xml file access: backup, atomic write, restore."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import shutil

from dynamic_app_icon.icon_config import BASELINE_ACTIVITY, IconConfiguration

from .aliases import managed_identifiers, reconcile_manifest, remove_managed_aliases

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".backup"


class ManifestNotFoundError(FileNotFoundError):
    """Raised when the manifest file does not exist."""


@dataclass(frozen=True)
class ManifestUpdate:
    path: str
    changed: bool
    backup_created: bool
    managed_identifiers: tuple[str, ...]


class ManifestStore:
    def __init__(self, path: Path, *, target_activity: str = BASELINE_ACTIVITY) -> None:
        self.path = path
        self.target_activity = target_activity

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + BACKUP_SUFFIX)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> str:
        if not self.path.is_file():
            raise ManifestNotFoundError(f"AndroidManifest.xml not found: {self.path}")
        with self.path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def write(self, content: str) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.replace(tmp_path, self.path)

    def backup(self) -> bool:
        """Copy the manifest aside unless a backup from an earlier run already exists."""
        if self.backup_path.exists():
            return False
        if not self.path.is_file():
            raise ManifestNotFoundError(f"AndroidManifest.xml not found: {self.path}")
        shutil.copyfile(self.path, self.backup_path)
        logger.info("manifest backup created at %s", self.backup_path)
        return True

    def has_backup(self) -> bool:
        return self.backup_path.is_file()

    def restore(self) -> bool:
        if not self.has_backup():
            return False
        shutil.copyfile(self.backup_path, self.path)
        self.backup_path.unlink()
        logger.info("manifest restored from %s", self.backup_path)
        return True

    def apply(self, configuration: IconConfiguration) -> ManifestUpdate:
        current = self.read()
        updated = reconcile_manifest(current, configuration, target_activity=self.target_activity)
        created = self.backup()
        changed = updated != current
        if changed:
            self.write(updated)
        identifiers = tuple(managed_identifiers(updated))
        logger.info("manifest reconciled path=%s changed=%s aliases=%s", self.path, changed, ",".join(identifiers))
        return ManifestUpdate(
            path=str(self.path),
            changed=changed,
            backup_created=created,
            managed_identifiers=identifiers,
        )

    def strip(self) -> bool:
        current = self.read()
        cleaned = remove_managed_aliases(current)
        if cleaned == current:
            return False
        self.write(cleaned)
        return True

    def configured_identifiers(self) -> list[str]:
        if not self.exists():
            return []
        return managed_identifiers(self.read())
