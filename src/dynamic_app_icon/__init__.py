"""
Top-level package for the dynamic_app_icon project.

Icon configuration lives in `icon_config`, manifest reconciliation in
`manifest`, runtime component selection in `selector` and the setup/uninstall
tooling in `setup_tool`.
"""

__all__: list[str] = []
