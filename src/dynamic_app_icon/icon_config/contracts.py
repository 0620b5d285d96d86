"""Icon configuration contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_ICON_SENTINEL = "default"
BASELINE_ACTIVITY = "MainActivity"
DENSITY_TAGS: tuple[str, ...] = ("mdpi", "hdpi", "xhdpi", "xxhdpi", "xxxhdpi")


class IconConfigError(ValueError):
    """Raised when an icon configuration document cannot be turned into a configuration."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class SourceNotFoundError(IconConfigError):
    """Raised when a configuration locator does not resolve to a readable document."""

    def __init__(self, locator: str, tried: list[str]) -> None:
        super().__init__(f"configuration not found: {locator} (tried: {', '.join(tried)})")
        self.locator = locator
        self.tried = list(tried)


class InvalidShapeError(IconConfigError):
    """Raised when a document value has the wrong type."""


class MissingFieldError(IconConfigError):
    """Raised when a long-form icon entry lacks a required field."""

    def __init__(self, identifier: str, field_name: str) -> None:
        super().__init__(f"icon '{identifier}' is missing required '{field_name}' field", identifier)
        self.field_name = field_name


@dataclass(frozen=True)
class IconDefinition:
    identifier: str
    image_path: str
    size_overrides: dict[str, str] = field(default_factory=dict)
    label: str | None = None
    description: str | None = None

    def path_for_density(self, density: str | None = None) -> str:
        if density and density in self.size_overrides:
            return self.size_overrides[density]
        return self.image_path

    def display_label(self) -> str:
        return self.label or self.identifier

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"identifier": self.identifier, "path": self.image_path}
        if self.size_overrides:
            payload["sizes"] = dict(self.size_overrides)
        if self.label is not None:
            payload["label"] = self.label
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass(frozen=True)
class ShortFormEntry:
    """`<identifier>: <path>`"""

    path: str

    def to_definition(self, identifier: str) -> IconDefinition:
        return IconDefinition(identifier=identifier, image_path=self.path)


@dataclass(frozen=True)
class LongFormEntry:
    """`<identifier>: {path, sizes, label, description}`"""

    path: str
    sizes: dict[str, str] = field(default_factory=dict)
    label: str | None = None
    description: str | None = None

    def to_definition(self, identifier: str) -> IconDefinition:
        return IconDefinition(
            identifier=identifier,
            image_path=self.path,
            size_overrides=dict(self.sizes),
            label=self.label,
            description=self.description,
        )


IconEntry = ShortFormEntry | LongFormEntry


@dataclass(frozen=True)
class IconConfiguration:
    icons: dict[str, IconDefinition] = field(default_factory=dict)
    default_icon: str | None = None

    @classmethod
    def from_entries(
        cls, entries: Mapping[str, IconEntry], default_icon: str | None = None
    ) -> "IconConfiguration":
        icons = {identifier: entry.to_definition(identifier) for identifier, entry in entries.items()}
        return cls(icons=icons, default_icon=default_icon)

    def available_identifiers(self) -> list[str]:
        return list(self.icons)

    def lookup(self, identifier: str) -> IconDefinition | None:
        return self.icons.get(identifier)

    def contains(self, identifier: str) -> bool:
        return identifier in self.icons

    def resolved_default(self) -> str:
        """Configured default icon, or the baseline sentinel when none is set."""
        text = str(self.default_icon or "").strip()
        return text or DEFAULT_ICON_SENTINEL

    def alias_definitions(self) -> list[IconDefinition]:
        """Icons that are represented by an activity alias (everything but the baseline)."""
        return [icon for identifier, icon in self.icons.items() if identifier != DEFAULT_ICON_SENTINEL]

    def as_dict(self) -> dict[str, Any]:
        return {
            "default_icon": self.default_icon,
            "icons": {identifier: icon.as_dict() for identifier, icon in self.icons.items()},
        }
