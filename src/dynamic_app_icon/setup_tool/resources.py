"""Copy icon bitmaps into the density-specific mipmap folders."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
import shutil
from typing import Iterable

from dynamic_app_icon.icon_config import DEFAULT_ICON_SENTINEL, DENSITY_TAGS, IconConfiguration

from .layout import ProjectLayout

logger = logging.getLogger(__name__)

BASELINE_RESOURCE = "ic_launcher.png"


@dataclass
class ResourceCopyReport:
    copied: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    def summary(self) -> dict[str, object]:
        return {
            "copied_total": len(self.copied),
            "missing_total": len(self.missing),
            "missing": sorted(set(self.missing)),
        }


def resource_file_name(identifier: str) -> str:
    if identifier == DEFAULT_ICON_SENTINEL:
        return BASELINE_RESOURCE
    return f"ic_launcher_{identifier}.png"


def density_dir(layout: ProjectLayout, density: str) -> Path:
    return layout.res() / f"mipmap-{density}"


def copy_icon_resources(configuration: IconConfiguration, layout: ProjectLayout) -> ResourceCopyReport:
    report = ResourceCopyReport()
    for icon in configuration.icons.values():
        target_name = resource_file_name(icon.identifier)
        for density in DENSITY_TAGS:
            source = layout.resolve(icon.path_for_density(density))
            if not source.is_file():
                logger.warning("source icon not found for %s/%s: %s", icon.identifier, density, source)
                report.missing.append(str(source))
                continue
            target_dir = density_dir(layout, density)
            target_dir.mkdir(parents=True, exist_ok=True)
            target = target_dir / target_name
            shutil.copyfile(source, target)
            report.copied.append(str(target))
            logger.debug("copied %s to mipmap-%s/%s", icon.identifier, density, target_name)
    logger.info("icon resources copied=%d missing=%d", len(report.copied), len(report.missing))
    return report


def remove_icon_resources(layout: ProjectLayout, identifiers: Iterable[str]) -> list[Path]:
    """Delete generated ``ic_launcher_<id>.png`` files; the baseline ``ic_launcher.png`` stays."""
    names = {resource_file_name(identifier) for identifier in identifiers if identifier != DEFAULT_ICON_SENTINEL}
    removed: list[Path] = []
    for density in DENSITY_TAGS:
        directory = density_dir(layout, density)
        if not directory.is_dir():
            continue
        for name in sorted(names):
            path = directory / name
            if path.is_file():
                path.unlink()
                removed.append(path)
    logger.info("removed %d generated icon resources", len(removed))
    return removed
