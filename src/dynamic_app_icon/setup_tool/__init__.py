"""Setup tooling: manifest reconciliation, icon resources and summary generation."""

from .layout import ProjectLayout, load_layout
from .resources import ResourceCopyReport, copy_icon_resources, remove_icon_resources, resource_file_name
from .runner import (
    MANIFEST_MISSING,
    MANIFEST_RESTORED,
    MANIFEST_STRIPPED,
    MANIFEST_UNCHANGED,
    SETUP_INVALID,
    SETUP_OK,
    SetupReport,
    SetupRunner,
    StatusReport,
    UninstallReport,
)
from .summary import render_summary

__all__ = [
    "MANIFEST_MISSING",
    "MANIFEST_RESTORED",
    "MANIFEST_STRIPPED",
    "MANIFEST_UNCHANGED",
    "SETUP_INVALID",
    "SETUP_OK",
    "ProjectLayout",
    "ResourceCopyReport",
    "SetupReport",
    "SetupRunner",
    "StatusReport",
    "UninstallReport",
    "copy_icon_resources",
    "load_layout",
    "remove_icon_resources",
    "render_summary",
    "resource_file_name",
]
