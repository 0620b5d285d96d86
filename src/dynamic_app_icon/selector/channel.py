"""Method-call dispatch for the icon selector (platform channel surface)."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Mapping

from dynamic_app_icon.icon_config import DEFAULT_ICON_SENTINEL

from .capability import ComponentToggleError, NoExecutionContextError
from .selector import IconSelector

logger = logging.getLogger(__name__)

RESULT_SUCCESS = "success"
RESULT_ERROR = "error"
RESULT_NOT_IMPLEMENTED = "not_implemented"

ERROR_NO_ACTIVITY = "NO_ACTIVITY"
ERROR_CHANGE_ICON = "CHANGE_ICON_ERROR"
ERROR_GET_ICON = "GET_ICON_ERROR"
ERROR_RESET_ICON = "RESET_ICON_ERROR"
ERROR_RESET_DEV = "RESET_DEV_ERROR"


@dataclass(frozen=True)
class MethodResult:
    status: str
    value: Any = None
    code: str | None = None
    message: str | None = None

    @classmethod
    def success(cls, value: Any = None) -> "MethodResult":
        return cls(status=RESULT_SUCCESS, value=value)

    @classmethod
    def error(cls, code: str, message: str) -> "MethodResult":
        return cls(status=RESULT_ERROR, code=code, message=message)

    @classmethod
    def not_implemented(cls) -> "MethodResult":
        return cls(status=RESULT_NOT_IMPLEMENTED)

    def ok(self) -> bool:
        return self.status == RESULT_SUCCESS


class IconMethodHandler:
    def __init__(self, selector: IconSelector, *, available_icons: list[str] | None = None) -> None:
        self.selector = selector
        self.available_icons = list(available_icons or [])
        self._handlers: dict[str, Callable[[dict[str, Any]], MethodResult]] = {
            "changeIcon": self._change_icon,
            "isSupported": lambda _args: MethodResult.success(True),
            "getCurrentIcon": self._current_icon,
            "resetToDefault": self._reset_to_default,
            "resetForDevelopment": self._reset_for_development,
            "getAvailableIcons": lambda args: MethodResult.success(self._available(args)),
        }

    def handle(self, method: str, arguments: Mapping[str, Any] | None = None) -> MethodResult:
        handler = self._handlers.get(method)
        if handler is None:
            return MethodResult.not_implemented()
        try:
            return handler(dict(arguments or {}))
        except NoExecutionContextError:
            return MethodResult.error(ERROR_NO_ACTIVITY, "Activity is not available")

    def _change_icon(self, args: dict[str, Any]) -> MethodResult:
        raw = args.get("iconIdentifier")
        identifier = None if raw is None else str(raw)
        default_icon = args.get("defaultIcon") or DEFAULT_ICON_SENTINEL
        if self.selector.select(identifier, self._available(args), default_icon):
            return MethodResult.success(True)
        return MethodResult.error(ERROR_CHANGE_ICON, f"Failed to change icon to {identifier!r}")

    def _current_icon(self, args: dict[str, Any]) -> MethodResult:
        try:
            return MethodResult.success(self.selector.current_selection(self._available(args)))
        except ComponentToggleError as exc:
            logger.error("error getting current icon: %s", exc)
            return MethodResult.error(ERROR_GET_ICON, f"Failed to get current icon: {exc}")

    def _reset_to_default(self, args: dict[str, Any]) -> MethodResult:
        if self.selector.reset_to_baseline(self._available(args)):
            return MethodResult.success(True)
        return MethodResult.error(ERROR_RESET_ICON, "Failed to reset icon")

    def _reset_for_development(self, args: dict[str, Any]) -> MethodResult:
        if self.selector.development_reset(self._available(args)):
            return MethodResult.success(True)
        return MethodResult.error(ERROR_RESET_DEV, "Failed to reset for development")

    def _available(self, args: dict[str, Any]) -> list[str]:
        payload = args.get("availableIcons")
        if isinstance(payload, list):
            return [str(item) for item in payload]
        return list(self.available_icons)
