"""Settings loading from environment and explicit overrides."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..cli.errors import ConfigurationError
from ..scaffold_logging import get_logger
from .models import ScaffoldConfig

logger = get_logger()

ENV_VARS = {
    "templates_dir": "CREATE_RBXTS_TEMPLATES_DIR",
    "package_scope": "CREATE_RBXTS_SCOPE",
    "log_format": "CREATE_RBXTS_LOG_FORMAT",
    "log_file": "CREATE_RBXTS_LOG_FILE",
}


class ConfigLoader:
    """Builds a ScaffoldConfig from all sources."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self.environ = os.environ if environ is None else environ

    def load(self, **overrides: Any) -> ScaffoldConfig:
        """Load configuration.

        Precedence (highest to lowest):
        1. Explicit overrides (None values are ignored)
        2. Environment variables
        3. Defaults
        """
        config_dict: dict[str, Any] = {}

        env_count = 0
        for key, env_var in ENV_VARS.items():
            value = self.environ.get(env_var)
            if value:
                config_dict[key] = value
                env_count += 1
        if env_count > 0:
            logger.debug(f"Applied {env_count} environment variables")

        explicit = {k: v for k, v in overrides.items() if v is not None}
        config_dict.update(explicit)
        if explicit:
            logger.debug(f"Applied {len(explicit)} explicit overrides")

        try:
            return ScaffoldConfig(**config_dict)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {problems}") from e


def load_config(**overrides: Any) -> ScaffoldConfig:
    """Load configuration from the process environment."""
    return ConfigLoader().load(**overrides)
