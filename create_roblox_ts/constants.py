"""Package-wide constants."""

from pathlib import Path

VERSION = "1.0.0"

PACKAGE_ROOT = Path(__file__).parent

# Scope prepended to the package name for the package template
RBXTS_SCOPE = "@rbxts"

TEMPLATES_DIR = PACKAGE_ROOT / "templates"
