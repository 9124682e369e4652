"""Configuration package.

Precedence (highest to lowest):
1. Explicit overrides
2. Environment variables (CREATE_RBXTS_*)
3. Defaults
"""

from .config_loader import ENV_VARS, ConfigLoader, load_config
from .models import ScaffoldConfig

__all__ = ["ConfigLoader", "ENV_VARS", "ScaffoldConfig", "load_config"]
