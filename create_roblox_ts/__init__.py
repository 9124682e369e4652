"""create-roblox-ts: scaffold roblox-ts projects from bundled templates."""

from .constants import VERSION

__version__ = VERSION

__all__ = ["__version__"]
