"""Runtime icon selection through a component toggle capability."""

from .capability import (
    TOGGLE_APPLIED,
    TOGGLE_NOT_FOUND,
    ComponentController,
    ComponentToggleError,
    InMemoryComponentController,
    NoExecutionContextError,
)
from .channel import IconMethodHandler, MethodResult
from .selector import IconSelector, SelectionPlan, alias_component, alias_identifiers, plan_selection
from .service import DynamicAppIcon, NotInitializedError

__all__ = [
    "TOGGLE_APPLIED",
    "TOGGLE_NOT_FOUND",
    "ComponentController",
    "ComponentToggleError",
    "DynamicAppIcon",
    "IconMethodHandler",
    "IconSelector",
    "InMemoryComponentController",
    "MethodResult",
    "NoExecutionContextError",
    "NotInitializedError",
    "SelectionPlan",
    "alias_component",
    "alias_identifiers",
    "plan_selection",
]
