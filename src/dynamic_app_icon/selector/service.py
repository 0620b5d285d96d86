"""Application-facing icon service: configuration lifecycle + selection."""

from __future__ import annotations

import logging
from pathlib import Path

from dynamic_app_icon.icon_config import (
    BASELINE_ACTIVITY,
    ConfigurationHolder,
    IconConfiguration,
    load_configuration,
    parse_configuration,
    raise_for_issues,
    validate_configuration,
)

from .capability import ComponentController, NoExecutionContextError
from .selector import IconSelector

logger = logging.getLogger(__name__)


class NotInitializedError(RuntimeError):
    """Raised when the icon service is used before a configuration was installed."""


class DynamicAppIcon:
    def __init__(
        self,
        controller: ComponentController,
        *,
        baseline_activity: str = BASELINE_ACTIVITY,
        holder: ConfigurationHolder | None = None,
    ) -> None:
        self.selector = IconSelector(controller, baseline_activity=baseline_activity)
        self.holder = holder or ConfigurationHolder()

    def initialize(
        self,
        locator: str | Path,
        *,
        validate_files: bool = True,
        search_root: Path | None = None,
        set_default_icon: bool = False,
    ) -> IconConfiguration:
        """Load, validate and install a configuration; ``set_default_icon`` then applies its default best-effort."""
        configuration = load_configuration(locator, search_root)
        self._install(configuration, validate_files=validate_files, project_root=search_root)
        if set_default_icon:
            self.set_default_icon()
        return configuration

    def initialize_from_string(
        self,
        text: str,
        *,
        validate_files: bool = False,
        set_default_icon: bool = False,
    ) -> IconConfiguration:
        configuration = self._install(parse_configuration(text), validate_files=validate_files, project_root=None)
        if set_default_icon:
            self.set_default_icon()
        return configuration

    @property
    def is_initialized(self) -> bool:
        return self.holder.current() is not None

    @property
    def configuration(self) -> IconConfiguration | None:
        return self.holder.current()

    @property
    def available_icons(self) -> list[str]:
        configuration = self.holder.current()
        if configuration is None:
            return []
        return configuration.available_identifiers()

    def is_valid_icon(self, identifier: str) -> bool:
        configuration = self.holder.current()
        return configuration is not None and configuration.contains(identifier)

    def change_icon(self, identifier: str | None) -> bool:
        configuration = self._require()
        return self.selector.select(
            identifier,
            configuration.available_identifiers(),
            configuration.resolved_default(),
        )

    def current_icon(self) -> str | None:
        try:
            return self.selector.current_selection(self.available_icons)
        except NoExecutionContextError as exc:
            logger.warning("cannot read current icon: %s", exc)
            return None

    def reset_to_default(self) -> bool:
        return self.selector.reset_to_baseline(self.available_icons)

    def reset_for_development(self) -> bool:
        return self.selector.development_reset(self.available_icons)

    def set_default_icon(self) -> bool:
        configuration = self._require()
        if configuration.default_icon is None:
            logger.info("no default icon configured")
            return False
        try:
            return self.change_icon(configuration.default_icon)
        except NoExecutionContextError as exc:
            logger.warning("could not set default icon %r: %s", configuration.default_icon, exc)
            return False

    def reset(self) -> None:
        self.holder.replace(None)

    def _install(
        self,
        configuration: IconConfiguration,
        *,
        validate_files: bool,
        project_root: Path | None,
    ) -> IconConfiguration:
        issues = validate_configuration(
            configuration,
            check_filesystem=validate_files,
            project_root=project_root,
            baseline_activity=self.selector.baseline_activity,
        )
        raise_for_issues(issues)
        self.holder.replace(configuration)
        logger.info("icon configuration installed: %s", ",".join(configuration.available_identifiers()))
        return configuration

    def _require(self) -> IconConfiguration:
        configuration = self.holder.current()
        if configuration is None:
            raise NotInitializedError("icon service has not been initialized; call initialize() first")
        return configuration
