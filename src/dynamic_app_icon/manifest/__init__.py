"""Manifest reconciliation for activity-alias icon entries."""

from .aliases import (
    MissingAnchorError,
    ReconcileError,
    component_name,
    icon_resource,
    is_set_up,
    managed_identifiers,
    reconcile_manifest,
    remove_managed_aliases,
    render_alias_block,
)
from .store import BACKUP_SUFFIX, ManifestNotFoundError, ManifestStore, ManifestUpdate

__all__ = [
    "BACKUP_SUFFIX",
    "ManifestNotFoundError",
    "ManifestStore",
    "ManifestUpdate",
    "MissingAnchorError",
    "ReconcileError",
    "component_name",
    "icon_resource",
    "is_set_up",
    "managed_identifiers",
    "reconcile_manifest",
    "remove_managed_aliases",
    "render_alias_block",
]
