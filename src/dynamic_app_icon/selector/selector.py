"""Runtime icon selection over activity-alias components.

Exactly one of {baseline} + {alias per icon} is enabled in steady state. The
disable-all/enable-one sequence is not atomic at the platform level, so every
toggle sequence runs under a single lock; callers sharing a controller across
selectors must serialize themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
from typing import Iterable

from dynamic_app_icon.icon_config import BASELINE_ACTIVITY, DEFAULT_ICON_SENTINEL

from .capability import TOGGLE_NOT_FOUND, ComponentController, ComponentToggleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionPlan:
    requested: str | None
    resolved: str
    enable: str
    disable: tuple[str, ...]
    fell_back: bool


def alias_component(identifier: str) -> str:
    return f"{identifier}Activity"


def alias_identifiers(available: Iterable[str]) -> list[str]:
    """Identifiers that own an alias component, deduplicated in the given order."""
    aliases: list[str] = []
    for identifier in available:
        text = str(identifier or "")
        if text and text != DEFAULT_ICON_SENTINEL and text not in aliases:
            aliases.append(text)
    return aliases


def plan_selection(
    requested: str | None,
    available: Iterable[str],
    default_icon: str | None,
    *,
    baseline_activity: str = BASELINE_ACTIVITY,
) -> SelectionPlan:
    aliases = alias_identifiers(available)
    default = str(default_icon or "").strip() or DEFAULT_ICON_SENTINEL
    target = requested if requested is not None and requested.strip() else default
    fell_back = False
    if target != DEFAULT_ICON_SENTINEL and target not in aliases:
        if target != default:
            logger.warning("unknown icon identifier %r; defaulting to %r", requested, default)
            fell_back = True
            target = default
        if target not in aliases:
            # default icon without an alias of its own is served by the baseline
            target = DEFAULT_ICON_SENTINEL
    enable = baseline_activity if target == DEFAULT_ICON_SENTINEL else alias_component(target)
    disable = (baseline_activity, *(alias_component(identifier) for identifier in aliases))
    return SelectionPlan(
        requested=requested,
        resolved=target,
        enable=enable,
        disable=disable,
        fell_back=fell_back,
    )


class IconSelector:
    def __init__(self, controller: ComponentController, *, baseline_activity: str = BASELINE_ACTIVITY) -> None:
        self.controller = controller
        self.baseline_activity = baseline_activity
        self._lock = threading.Lock()

    def select(
        self,
        requested: str | None,
        available: Iterable[str],
        default_icon: str | None = DEFAULT_ICON_SENTINEL,
    ) -> bool:
        plan = plan_selection(requested, available, default_icon, baseline_activity=self.baseline_activity)
        with self._lock:
            try:
                for name in plan.disable:
                    self._toggle(name, enabled=False)
                outcome = self._toggle(plan.enable, enabled=True)
            except ComponentToggleError:
                logger.exception("failed to change icon to %r", plan.resolved)
                self._restore_baseline()
                return False
            if outcome == TOGGLE_NOT_FOUND and plan.enable != self.baseline_activity:
                logger.warning("alias %s is not declared in the manifest; keeping the default icon", plan.enable)
                self._restore_baseline()
                return False
        logger.info("icon changed to %s (%s enabled)", plan.resolved, plan.enable)
        return True

    def current_selection(self, available: Iterable[str]) -> str:
        aliases = alias_identifiers(available)
        with self._lock:
            if self.controller.is_component_enabled(self.baseline_activity):
                return DEFAULT_ICON_SENTINEL
            for identifier in aliases:
                if self.controller.is_component_enabled(alias_component(identifier)):
                    return identifier
        return DEFAULT_ICON_SENTINEL

    def reset_to_baseline(self, available: Iterable[str]) -> bool:
        return self.select(DEFAULT_ICON_SENTINEL, available, DEFAULT_ICON_SENTINEL)

    def development_reset(self, available: Iterable[str]) -> bool:
        """Enable the baseline and every alias so the app stays launchable from any icon."""
        names = [self.baseline_activity, *(alias_component(identifier) for identifier in alias_identifiers(available))]
        failed: list[str] = []
        with self._lock:
            for name in names:
                try:
                    self._toggle(name, enabled=True)
                except ComponentToggleError:
                    logger.exception("failed to enable %s for development", name)
                    failed.append(name)
        if failed:
            logger.warning("development reset incomplete; still disabled: %s", ",".join(failed))
            return False
        logger.info("all activities enabled for development: %s", ",".join(names))
        return True

    def _toggle(self, name: str, *, enabled: bool) -> str:
        if enabled:
            outcome = self.controller.enable_component(name)
        else:
            outcome = self.controller.disable_component(name)
        if outcome == TOGGLE_NOT_FOUND:
            logger.debug("component %s not found, skipping", name)
        return outcome

    def _restore_baseline(self) -> None:
        try:
            self.controller.enable_component(self.baseline_activity)
        except ComponentToggleError:
            logger.error("could not re-enable %s after a failed icon change", self.baseline_activity)
