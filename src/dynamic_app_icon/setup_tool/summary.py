"""Human-readable summary of the configured icons."""

from __future__ import annotations

from dynamic_app_icon.icon_config import IconConfiguration


def render_summary(configuration: IconConfiguration) -> str:
    lines = [
        "## Dynamic App Icons Setup",
        "",
        "This project uses dynamic app icons. The following icons are available:",
        "",
    ]
    for icon in configuration.icons.values():
        lines.append(f"- **{icon.identifier}**: {icon.display_label()}")
        if icon.description:
            lines.append(f"  - {icon.description}")
        lines.append(f"  - Icon file: `{icon.image_path}`")
        for density, path in icon.size_overrides.items():
            lines.append(f"  - {density}: `{path}`")
        lines.append("")

    first = next(iter(configuration.icons), configuration.resolved_default())
    lines.extend(
        [
            f"Default icon: `{configuration.resolved_default()}`",
            "",
            "### Usage",
            "",
            "```python",
            "# change to a specific icon",
            f"icons.change_icon({first!r})",
            "",
            "# reset to default",
            "icons.reset_to_default()",
            "```",
        ]
    )
    return "\n".join(lines) + "\n"
