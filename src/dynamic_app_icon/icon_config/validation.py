"""Icon configuration validation.

Validation collects every issue instead of stopping at the first one, so a
single setup run reports all missing files and malformed identifiers.

Identifier policy: identifiers become both a component class suffix
(`.<id>Activity`) and a resource file name (`ic_launcher_<id>.png`). Android
resource names only allow lowercase letters, digits and underscores, so
identifiers must match ``^[a-z][a-z0-9_]*$``; anything else is reported as
``INVALID_IDENTIFIER`` rather than sanitized.

Default icon policy: ``default_icon`` may be omitted or set to the
``"default"`` sentinel (both select the baseline activity). Any other value
must name a configured icon, otherwise ``UNKNOWN_DEFAULT_ICON`` is reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Iterable

from .contracts import (
    BASELINE_ACTIVITY,
    DEFAULT_ICON_SENTINEL,
    DENSITY_TAGS,
    IconConfiguration,
    IconDefinition,
)

ISSUE_EMPTY_IDENTIFIER = "EMPTY_IDENTIFIER"
ISSUE_EMPTY_PATH = "EMPTY_PATH"
ISSUE_FILE_NOT_FOUND = "FILE_NOT_FOUND"
ISSUE_INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
ISSUE_RESERVED_IDENTIFIER = "RESERVED_IDENTIFIER"
ISSUE_UNKNOWN_DENSITY = "UNKNOWN_DENSITY"
ISSUE_UNKNOWN_DEFAULT_ICON = "UNKNOWN_DEFAULT_ICON"

BUNDLED_ASSET_PREFIXES: tuple[str, ...] = ("assets/",)

_IDENTIFIER_PATTERN = re.compile(r"[a-z][a-z0-9_]*")


class IconValidationError(ValueError):
    """Raised when a caller asks for validation issues to be fatal."""

    def __init__(self, issues: list["ValidationIssue"]) -> None:
        self.issues = list(issues)
        lines = "\n".join(f"- {issue.message}" for issue in self.issues)
        super().__init__(f"configuration validation failed:\n{lines}")


@dataclass(frozen=True)
class ValidationIssue:
    kind: str
    identifier: str | None
    message: str

    def as_dict(self) -> dict[str, str | None]:
        return {"kind": self.kind, "identifier": self.identifier, "message": self.message}


def validate_configuration(
    configuration: IconConfiguration,
    *,
    check_filesystem: bool,
    project_root: Path | None = None,
    bundled_prefixes: Iterable[str] = BUNDLED_ASSET_PREFIXES,
    baseline_activity: str = BASELINE_ACTIVITY,
) -> list[ValidationIssue]:
    prefixes = tuple(bundled_prefixes)
    root = project_root or Path.cwd()
    issues: list[ValidationIssue] = []

    default_icon = configuration.default_icon
    if default_icon is not None and default_icon != DEFAULT_ICON_SENTINEL:
        if not configuration.contains(default_icon):
            known = ", ".join(configuration.available_identifiers()) or "none"
            issues.append(
                ValidationIssue(
                    kind=ISSUE_UNKNOWN_DEFAULT_ICON,
                    identifier=default_icon,
                    message=f"default_icon '{default_icon}' references a non-existent icon (available: {known})",
                )
            )

    for identifier, icon in configuration.icons.items():
        issues.extend(_validate_icon(identifier, icon, check_filesystem, root, prefixes, baseline_activity))
    return issues


def raise_for_issues(issues: list[ValidationIssue]) -> None:
    if issues:
        raise IconValidationError(issues)


def is_valid_identifier(identifier: str) -> bool:
    return _IDENTIFIER_PATTERN.fullmatch(identifier or "") is not None


def _validate_icon(
    identifier: str,
    icon: IconDefinition,
    check_filesystem: bool,
    root: Path,
    prefixes: tuple[str, ...],
    baseline_activity: str,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not identifier:
        issues.append(ValidationIssue(ISSUE_EMPTY_IDENTIFIER, identifier, "identifier cannot be empty"))
    elif not is_valid_identifier(identifier):
        issues.append(
            ValidationIssue(
                ISSUE_INVALID_IDENTIFIER,
                identifier,
                f"identifier '{identifier}' must match [a-z][a-z0-9_]* to be usable as a component and resource name",
            )
        )
    elif identifier != DEFAULT_ICON_SENTINEL and f"{identifier}Activity" == baseline_activity:
        issues.append(
            ValidationIssue(
                ISSUE_RESERVED_IDENTIFIER,
                identifier,
                f"identifier '{identifier}' collides with the baseline component {baseline_activity}",
            )
        )

    if not icon.image_path:
        issues.append(ValidationIssue(ISSUE_EMPTY_PATH, identifier, f"icon '{identifier}' path cannot be empty"))
    elif check_filesystem:
        issue = _check_file(identifier, icon.image_path, root, prefixes)
        if issue is not None:
            issues.append(issue)

    for density, size_path in icon.size_overrides.items():
        if density not in DENSITY_TAGS:
            issues.append(
                ValidationIssue(
                    ISSUE_UNKNOWN_DENSITY,
                    identifier,
                    f"icon '{identifier}' size '{density}' is not one of {', '.join(DENSITY_TAGS)}",
                )
            )
        if check_filesystem and size_path.strip():
            issue = _check_file(identifier, size_path, root, prefixes)
            if issue is not None:
                issues.append(issue)
    return issues


def _check_file(identifier: str, path: str, root: Path, prefixes: tuple[str, ...]) -> ValidationIssue | None:
    if any(path.startswith(prefix) for prefix in prefixes):
        return None
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = root / candidate
    if candidate.is_file():
        return None
    return ValidationIssue(ISSUE_FILE_NOT_FOUND, identifier, f"icon file not found: {path}")
