from __future__ import annotations

from pathlib import Path

import pytest

from dynamic_app_icon.icon_config import IconValidationError, SourceNotFoundError
from dynamic_app_icon.selector import DynamicAppIcon, InMemoryComponentController, NotInitializedError

_CONFIG = """
default_icon: default
icons:
  default: assets/icons/default.png
  christmas:
    path: assets/icons/christmas.png
    label: Christmas
  halloween: assets/icons/halloween.png
"""


def _service() -> tuple[DynamicAppIcon, InMemoryComponentController]:
    controller = InMemoryComponentController.for_manifest("com.example.app", ["christmas", "halloween"])
    return DynamicAppIcon(controller), controller


def test_change_icon_requires_initialization() -> None:
    service, _ = _service()
    assert not service.is_initialized
    assert service.available_icons == []
    with pytest.raises(NotInitializedError):
        service.change_icon("christmas")


def test_change_icon_and_current_icon() -> None:
    service, controller = _service()
    service.initialize_from_string(_CONFIG)
    assert service.is_valid_icon("christmas")
    assert not service.is_valid_icon("easter")

    assert service.change_icon("christmas")
    assert service.current_icon() == "christmas"
    assert controller.enabled_components() == ["christmasActivity"]

    assert service.change_icon("easter")
    assert service.current_icon() == "default"


def test_reset_and_development_reset() -> None:
    service, controller = _service()
    service.initialize_from_string(_CONFIG)
    service.change_icon("halloween")
    assert service.reset_to_default()
    assert controller.enabled_components() == ["MainActivity"]
    assert service.reset_for_development()
    assert len(controller.enabled_components()) == 3


def test_set_default_icon_uses_configured_default() -> None:
    service, controller = _service()
    service.initialize_from_string("default_icon: halloween\nicons:\n  halloween: h.png\n")
    assert service.set_default_icon()
    assert controller.enabled_components() == ["halloweenActivity"]


def test_set_default_icon_without_default_returns_false() -> None:
    service, _ = _service()
    service.initialize_from_string("icons:\n  halloween: h.png\n")
    assert not service.set_default_icon()


def test_current_icon_without_context_returns_none() -> None:
    service, controller = _service()
    service.initialize_from_string(_CONFIG)
    controller.detach()
    assert service.current_icon() is None
    assert not service.set_default_icon()


def test_initialize_rejects_invalid_configuration() -> None:
    service, _ = _service()
    with pytest.raises(IconValidationError):
        service.initialize_from_string("default_icon: easter\nicons:\n  christmas: b.png\n")
    assert not service.is_initialized


def test_initialize_from_file_checks_icon_files(tmp_path: Path) -> None:
    (tmp_path / "icons").mkdir()
    (tmp_path / "icons" / "summer.png").write_bytes(b"png")
    (tmp_path / "icon_config.yaml").write_text("icons:\n  summer: icons/summer.png\n", encoding="utf-8")
    service, _ = _service()
    config = service.initialize("icon_config.yaml", search_root=tmp_path)
    assert config.available_identifiers() == ["summer"]
    assert service.configuration is config

    (tmp_path / "broken.yaml").write_text("icons:\n  winter: icons/winter.png\n", encoding="utf-8")
    with pytest.raises(IconValidationError):
        service.initialize("broken.yaml", search_root=tmp_path)
    assert service.configuration is config


def test_initialize_missing_file(tmp_path: Path) -> None:
    service, _ = _service()
    with pytest.raises(SourceNotFoundError):
        service.initialize("nope.yaml", search_root=tmp_path)


def test_reset_clears_configuration() -> None:
    service, _ = _service()
    service.initialize_from_string(_CONFIG)
    service.reset()
    assert not service.is_initialized


def test_initialize_can_apply_configured_default() -> None:
    service, controller = _service()
    service.initialize_from_string("default_icon: halloween\nicons:\n  halloween: h.png\n", set_default_icon=True)
    assert controller.enabled_components() == ["halloweenActivity"]


def test_initialize_set_default_is_best_effort_without_context(tmp_path: Path) -> None:
    (tmp_path / "icon_config.yaml").write_text("default_icon: christmas\nicons:\n  christmas: c.png\n", encoding="utf-8")
    service, controller = _service()
    controller.detach()
    config = service.initialize("icon_config.yaml", validate_files=False, search_root=tmp_path, set_default_icon=True)
    assert service.configuration is config
    controller.attach()
    assert controller.enabled_components() == ["MainActivity"]
