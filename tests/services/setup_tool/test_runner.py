from __future__ import annotations

import json
from pathlib import Path

import pytest

from dynamic_app_icon.setup_tool import (
    MANIFEST_MISSING,
    MANIFEST_RESTORED,
    MANIFEST_STRIPPED,
    SETUP_INVALID,
    SetupRunner,
    load_layout,
)
from dynamic_app_icon.setup_tool.cli import main

_MANIFEST = """<manifest xmlns:android="http://schemas.android.com/apk/res/android">
    <application android:label="demo" android:icon="@mipmap/ic_launcher">
        <activity android:name=".MainActivity" android:exported="true" />
    </application>
</manifest>
"""

_CONFIG = """default_icon: default
icons:
  default: assets/icons/default.png
  christmas:
    path: assets/icons/christmas.png
    label: Christmas
    description: Festive icon
    sizes:
      mdpi: assets/icons/christmas_48.png
"""

_DENSITIES = ("mdpi", "hdpi", "xhdpi", "xxhdpi", "xxxhdpi")


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    manifest = tmp_path / "android" / "app" / "src" / "main" / "AndroidManifest.xml"
    manifest.parent.mkdir(parents=True)
    manifest.write_text(_MANIFEST, encoding="utf-8")
    icons = tmp_path / "assets" / "icons"
    icons.mkdir(parents=True)
    (icons / "default.png").write_bytes(b"default")
    (icons / "christmas.png").write_bytes(b"christmas")
    (icons / "christmas_48.png").write_bytes(b"christmas-48")
    (tmp_path / "icon_config.yaml").write_text(_CONFIG, encoding="utf-8")
    return tmp_path


def _runner(project: Path) -> SetupRunner:
    return SetupRunner(load_layout(project_root=str(project)))


def _mipmap(project: Path, density: str) -> Path:
    return project / "android" / "app" / "src" / "main" / "res" / f"mipmap-{density}"


def test_setup_reconciles_manifest_copies_resources_and_writes_summary(project: Path) -> None:
    report = _runner(project).setup("icon_config.yaml")
    assert report.ok()
    assert report.icons == ("default", "christmas")
    assert report.manifest is not None
    assert report.manifest.managed_identifiers == ("christmas",)
    assert report.manifest.backup_created
    assert report.resources == {"copied_total": 10, "missing_total": 0, "missing": []}

    assert (_mipmap(project, "mdpi") / "ic_launcher_christmas.png").read_bytes() == b"christmas-48"
    assert (_mipmap(project, "xxhdpi") / "ic_launcher_christmas.png").read_bytes() == b"christmas"
    for density in _DENSITIES:
        assert (_mipmap(project, density) / "ic_launcher.png").read_bytes() == b"default"

    summary = (project / "DYNAMIC_ICONS_README.md").read_text(encoding="utf-8")
    assert "- **christmas**: Christmas" in summary
    assert "  - Festive icon" in summary

    status = _runner(project).status()
    assert status.set_up
    assert status.configured_icons == ("christmas",)
    assert status.backup_present


def test_setup_aborts_on_validation_issues(project: Path) -> None:
    (project / "bad.yaml").write_text("icons:\n  summer: art/summer.png\n", encoding="utf-8")
    report = _runner(project).setup("bad.yaml")
    assert report.status == SETUP_INVALID
    assert [issue.kind for issue in report.issues] == ["FILE_NOT_FOUND"]
    manifest = project / "android" / "app" / "src" / "main" / "AndroidManifest.xml"
    assert manifest.read_text(encoding="utf-8") == _MANIFEST
    assert not _mipmap(project, "mdpi").exists()


def test_setup_checks_bundled_asset_files_exist(project: Path) -> None:
    (project / "assets" / "icons" / "christmas.png").unlink()
    report = _runner(project).setup("icon_config.yaml")
    assert report.status == SETUP_INVALID
    assert [(issue.kind, issue.identifier) for issue in report.issues] == [("FILE_NOT_FOUND", "christmas")]
    manifest = project / "android" / "app" / "src" / "main" / "AndroidManifest.xml"
    assert manifest.read_text(encoding="utf-8") == _MANIFEST
    assert not _mipmap(project, "hdpi").exists()


def test_validate_skips_bundled_assets_by_default(project: Path) -> None:
    (project / "assets" / "icons" / "christmas.png").unlink()
    runner = _runner(project)
    assert runner.validate(runner.load("icon_config.yaml")) == []


def test_setup_again_removes_stale_icon_resources(project: Path) -> None:
    runner = _runner(project)
    runner.setup("icon_config.yaml")
    (project / "assets" / "icons" / "summer.png").write_bytes(b"summer")
    (project / "next.yaml").write_text("icons:\n  summer: assets/icons/summer.png\n", encoding="utf-8")
    report = runner.setup("next.yaml")
    assert report.previously_configured == ("christmas",)
    assert report.manifest is not None
    assert report.manifest.managed_identifiers == ("summer",)
    assert not report.manifest.backup_created
    assert not (_mipmap(project, "hdpi") / "ic_launcher_christmas.png").exists()
    assert (_mipmap(project, "hdpi") / "ic_launcher_summer.png").read_bytes() == b"summer"


def test_uninstall_restores_backup_and_removes_generated_resources(project: Path) -> None:
    runner = _runner(project)
    runner.setup("icon_config.yaml")
    foreground = _mipmap(project, "hdpi") / "ic_launcher_foreground.png"
    foreground.write_bytes(b"adaptive")

    report = runner.uninstall()
    assert report.manifest_action == MANIFEST_RESTORED
    assert len(report.removed_resources) == 5
    manifest = project / "android" / "app" / "src" / "main" / "AndroidManifest.xml"
    assert manifest.read_text(encoding="utf-8") == _MANIFEST
    assert foreground.exists()
    assert (_mipmap(project, "hdpi") / "ic_launcher.png").exists()
    assert not runner.status().set_up


def test_uninstall_without_backup_strips_managed_aliases(project: Path) -> None:
    runner = _runner(project)
    runner.setup("icon_config.yaml")
    runner.store.backup_path.unlink()
    report = runner.uninstall(runner.load("icon_config.yaml"))
    assert report.manifest_action == MANIFEST_STRIPPED
    assert runner.store.read() == _MANIFEST


def test_uninstall_without_manifest(tmp_path: Path) -> None:
    report = _runner(tmp_path).uninstall()
    assert report.manifest_action == MANIFEST_MISSING
    assert report.removed_resources == ()


def test_layout_profile_expands_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    profile = tmp_path / "layout.yaml"
    profile.write_text(
        "project_root: ${ICON_PROJECT_ROOT}\nsummary_path: ${ICON_SUMMARY:-docs/ICONS.md}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("ICON_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("ICON_SUMMARY", raising=False)
    layout = load_layout(profile)
    assert layout.summary() == tmp_path / "docs" / "ICONS.md"
    assert layout.manifest() == tmp_path / "android" / "app" / "src" / "main" / "AndroidManifest.xml"

    monkeypatch.delenv("ICON_PROJECT_ROOT")
    with pytest.raises(ValueError):
        load_layout(profile)


def test_cli_setup_status_and_uninstall(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--project-root", str(project), "setup", "icon_config.yaml"]) == 0
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["status"] == "OK"
    assert payload["manifest"]["managed_identifiers"] == ["christmas"]

    assert main(["--project-root", str(project), "status"]) == 0
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["configured_icons"] == ["christmas"]

    assert main(["--project-root", str(project), "uninstall"]) == 0
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["manifest_action"] == "RESTORED"


def test_cli_validate_and_errors(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (project / "bad.yaml").write_text("icons: {a: 5}\n", encoding="utf-8")
    assert main(["--project-root", str(project), "validate", "bad.yaml"]) == 1
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["error_type"] == "InvalidShapeError"

    (project / "typo.yaml").write_text("default_icon: easter\nicons:\n  christmas: x.png\n", encoding="utf-8")
    assert main(["--project-root", str(project), "validate", "typo.yaml", "--no-files"]) == 1
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert [issue["kind"] for issue in payload["issues"]] == ["UNKNOWN_DEFAULT_ICON"]

    (project / "android" / "app" / "src" / "main" / "AndroidManifest.xml").write_text("<manifest />", encoding="utf-8")
    assert main(["--project-root", str(project), "setup", "icon_config.yaml"]) == 1
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["error_type"] == "MissingAnchorError"
