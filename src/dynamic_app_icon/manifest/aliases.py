"""Activity-alias rendering and manifest reconciliation (pure text transforms)."""

from __future__ import annotations

import re

from dynamic_app_icon.icon_config import (
    BASELINE_ACTIVITY,
    DEFAULT_ICON_SENTINEL,
    IconConfiguration,
    IconDefinition,
)

ALIAS_INDENT = " " * 8

_APPLICATION_CLOSE = re.compile(r"</application\s*>")
_MANAGED_BLOCK = re.compile(
    r"^[ \t]*<!-- Activity alias for (?P<identifier>[^\r\n]*?) icon -->[ \t]*\r?\n"
    r"[ \t]*<activity-alias\b[^>]*(?<!/)>.*?</activity-alias>[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE | re.DOTALL,
)


class ReconcileError(ValueError):
    """Raised when a manifest cannot be reconciled with a configuration."""


class MissingAnchorError(ReconcileError):
    """Raised when the manifest has no closing </application> tag."""


def component_name(identifier: str) -> str:
    return f".{identifier}Activity"


def icon_resource(identifier: str) -> str:
    return f"@mipmap/ic_launcher_{identifier}"


def render_alias_block(
    definition: IconDefinition,
    *,
    target_activity: str = BASELINE_ACTIVITY,
    indent: str = ALIAS_INDENT,
    newline: str = "\n",
) -> str:
    identifier = definition.identifier
    if identifier == DEFAULT_ICON_SENTINEL:
        # the baseline activity already carries the default icon
        return ""
    lines = [
        f"<!-- Activity alias for {identifier} icon -->",
        "<activity-alias",
        f'    android:name="{component_name(identifier)}"',
        '    android:enabled="false"',
        '    android:exported="true"',
        f'    android:icon="{icon_resource(identifier)}"',
        f'    android:targetActivity=".{target_activity}">',
        "    <intent-filter>",
        '        <action android:name="android.intent.action.MAIN" />',
        '        <category android:name="android.intent.category.LAUNCHER" />',
        "    </intent-filter>",
        "</activity-alias>",
    ]
    return "".join(f"{indent}{line}{newline}" for line in lines)


def remove_managed_aliases(text: str) -> str:
    return _MANAGED_BLOCK.sub("", text)


def reconcile_manifest(
    text: str,
    configuration: IconConfiguration,
    *,
    target_activity: str = BASELINE_ACTIVITY,
) -> str:
    cleaned = remove_managed_aliases(text)
    anchor = _find_anchor(cleaned)
    newline = _detect_newline(cleaned)
    blocks = "".join(
        render_alias_block(icon, target_activity=target_activity, newline=newline)
        for icon in configuration.alias_definitions()
    )
    if not blocks:
        return cleaned

    line_start = cleaned.rfind("\n", 0, anchor) + 1
    if cleaned[line_start:anchor].strip():
        # closing tag shares its line with other content; break the line so re-runs match
        return cleaned[:anchor] + newline + blocks + cleaned[anchor:]
    return cleaned[:line_start] + blocks + cleaned[line_start:]


def managed_identifiers(text: str) -> list[str]:
    seen: list[str] = []
    for match in _MANAGED_BLOCK.finditer(text):
        identifier = match.group("identifier")
        if identifier not in seen:
            seen.append(identifier)
    return seen


def is_set_up(text: str) -> bool:
    return _MANAGED_BLOCK.search(text) is not None


def _find_anchor(text: str) -> int:
    last = None
    for last in _APPLICATION_CLOSE.finditer(text):
        pass
    if last is None:
        raise MissingAnchorError("could not find </application> tag in AndroidManifest.xml")
    return last.start()


def _detect_newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"
