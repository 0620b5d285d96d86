"""Component toggle capability interface + in-memory adapter."""

from __future__ import annotations

from typing import Iterable, Protocol

TOGGLE_APPLIED = "APPLIED"
TOGGLE_NOT_FOUND = "NOT_FOUND"


class NoExecutionContextError(RuntimeError):
    """Raised when no execution context is attached to perform component changes."""


class ComponentToggleError(RuntimeError):
    """Raised when the platform rejects a component change for any reason other than a missing component."""


class ComponentController(Protocol):
    """Enable/disable named components of the current application package.

    Names are package-relative class names such as ``MainActivity`` or
    ``christmasActivity``. Toggling a component the package does not declare
    returns ``TOGGLE_NOT_FOUND``; querying one returns False.
    """

    def enable_component(self, name: str) -> str:
        ...

    def disable_component(self, name: str) -> str:
        ...

    def is_component_enabled(self, name: str) -> bool:
        ...


class InMemoryComponentController:
    """Local component-enabled-state table; mirrors the package manager for tests and simulation."""

    def __init__(
        self,
        package_name: str,
        components: dict[str, bool] | None = None,
        *,
        attached: bool = True,
    ) -> None:
        self.package_name = package_name
        self._components: dict[str, bool] = dict(components or {})
        self._attached = attached
        self.calls: list[tuple[str, str]] = []

    @classmethod
    def for_manifest(
        cls,
        package_name: str,
        identifiers: Iterable[str],
        *,
        baseline_activity: str = "MainActivity",
    ) -> "InMemoryComponentController":
        """Initial state after install: baseline enabled, every alias disabled."""
        components = {baseline_activity: True}
        for identifier in identifiers:
            components[f"{identifier}Activity"] = False
        return cls(package_name, components)

    def attach(self) -> None:
        self._attached = True

    def detach(self) -> None:
        self._attached = False

    def enable_component(self, name: str) -> str:
        return self._set(name, True)

    def disable_component(self, name: str) -> str:
        return self._set(name, False)

    def is_component_enabled(self, name: str) -> bool:
        self._require_context()
        return bool(self._components.get(name, False))

    def enabled_components(self) -> list[str]:
        return [name for name, enabled in self._components.items() if enabled]

    def _set(self, name: str, enabled: bool) -> str:
        self._require_context()
        self.calls.append(("enable" if enabled else "disable", name))
        if name not in self._components:
            return TOGGLE_NOT_FOUND
        self._components[name] = enabled
        return TOGGLE_APPLIED

    def _require_context(self) -> None:
        if not self._attached:
            raise NoExecutionContextError(f"no execution context attached for {self.package_name}")
