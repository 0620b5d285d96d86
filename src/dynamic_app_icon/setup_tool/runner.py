"""Setup / uninstall / status pipeline for a Flutter Android project."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

from dynamic_app_icon.icon_config import (
    IconConfiguration,
    ValidationIssue,
    load_configuration,
    validate_configuration,
)
from dynamic_app_icon.manifest import ManifestStore, ManifestUpdate

from .layout import ProjectLayout
from .resources import copy_icon_resources, remove_icon_resources
from .summary import render_summary

logger = logging.getLogger(__name__)

SETUP_OK = "OK"
SETUP_INVALID = "INVALID"

MANIFEST_RESTORED = "RESTORED"
MANIFEST_STRIPPED = "STRIPPED"
MANIFEST_UNCHANGED = "UNCHANGED"
MANIFEST_MISSING = "MISSING"


@dataclass(frozen=True)
class SetupReport:
    status: str
    config_path: str
    icons: tuple[str, ...]
    issues: tuple[ValidationIssue, ...] = ()
    previously_configured: tuple[str, ...] = ()
    manifest: ManifestUpdate | None = None
    resources: dict[str, Any] | None = None
    summary_path: str | None = None

    def ok(self) -> bool:
        return self.status == SETUP_OK

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "config_path": self.config_path,
            "icons": list(self.icons),
            "issues": [issue.as_dict() for issue in self.issues],
            "previously_configured": list(self.previously_configured),
            "manifest": None
            if self.manifest is None
            else {
                "path": self.manifest.path,
                "changed": self.manifest.changed,
                "backup_created": self.manifest.backup_created,
                "managed_identifiers": list(self.manifest.managed_identifiers),
            },
            "resources": self.resources,
            "summary_path": self.summary_path,
        }


@dataclass(frozen=True)
class UninstallReport:
    manifest_action: str
    removed_resources: tuple[str, ...]

    def as_dict(self) -> dict[str, Any]:
        return {"manifest_action": self.manifest_action, "removed_resources": list(self.removed_resources)}


@dataclass(frozen=True)
class StatusReport:
    manifest_path: str
    manifest_found: bool
    set_up: bool
    configured_icons: tuple[str, ...]
    backup_present: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "manifest_path": self.manifest_path,
            "manifest_found": self.manifest_found,
            "set_up": self.set_up,
            "configured_icons": list(self.configured_icons),
            "backup_present": self.backup_present,
        }


class SetupRunner:
    def __init__(self, layout: ProjectLayout) -> None:
        self.layout = layout
        self.store = ManifestStore(layout.manifest(), target_activity=layout.baseline_activity)

    def load(self, config_path: str | Path) -> IconConfiguration:
        return load_configuration(config_path, self.layout.root())

    def validate(
        self,
        configuration: IconConfiguration,
        *,
        check_filesystem: bool = True,
        skip_bundled: bool = True,
    ) -> list[ValidationIssue]:
        """Validate against the project tree; ``skip_bundled=False`` also checks bundled asset paths."""
        return validate_configuration(
            configuration,
            check_filesystem=check_filesystem,
            project_root=self.layout.root(),
            bundled_prefixes=self.layout.bundled_prefixes if skip_bundled else (),
            baseline_activity=self.layout.baseline_activity,
        )

    def setup(self, config_path: str | Path) -> SetupReport:
        previously = tuple(self.store.configured_identifiers())
        if previously:
            logger.warning(
                "project already set up (icons: %s); existing configuration will be overwritten",
                ",".join(previously),
            )

        configuration = self.load(config_path)
        icons = tuple(configuration.available_identifiers())
        # bundled asset paths are copied into res/ as well
        issues = self.validate(configuration, skip_bundled=False)
        if issues:
            for issue in issues:
                logger.error("configuration issue [%s] %s", issue.kind, issue.message)
            return SetupReport(
                status=SETUP_INVALID,
                config_path=str(config_path),
                icons=icons,
                issues=tuple(issues),
                previously_configured=previously,
            )

        update = self.store.apply(configuration)
        stale = [identifier for identifier in previously if not configuration.contains(identifier)]
        if stale:
            remove_icon_resources(self.layout, stale)
        resources = copy_icon_resources(configuration, self.layout)

        summary_path = self.layout.summary()
        summary_path.parent.mkdir(parents=True, exist_ok=True)
        summary_path.write_text(render_summary(configuration), encoding="utf-8")
        logger.info("setup complete icons=%s summary=%s", ",".join(icons), summary_path)

        return SetupReport(
            status=SETUP_OK,
            config_path=str(config_path),
            icons=icons,
            previously_configured=previously,
            manifest=update,
            resources=resources.summary(),
            summary_path=str(summary_path),
        )

    def uninstall(self, configuration: IconConfiguration | None = None) -> UninstallReport:
        identifiers = list(self.store.configured_identifiers())
        if configuration is not None:
            identifiers.extend(
                identifier for identifier in configuration.available_identifiers() if identifier not in identifiers
            )

        if not self.store.exists():
            logger.info("AndroidManifest.xml not found at %s; skipping manifest cleanup", self.store.path)
            action = MANIFEST_MISSING
        elif self.store.restore():
            action = MANIFEST_RESTORED
        elif self.store.strip():
            action = MANIFEST_STRIPPED
        else:
            action = MANIFEST_UNCHANGED

        removed = remove_icon_resources(self.layout, identifiers)
        logger.info("uninstall complete manifest=%s removed_resources=%d", action, len(removed))
        return UninstallReport(manifest_action=action, removed_resources=tuple(str(path) for path in removed))

    def status(self) -> StatusReport:
        found = self.store.exists()
        identifiers = tuple(self.store.configured_identifiers()) if found else ()
        return StatusReport(
            manifest_path=str(self.store.path),
            manifest_found=found,
            set_up=bool(identifiers),
            configured_icons=identifiers,
            backup_present=self.store.has_backup(),
        )
