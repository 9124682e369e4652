"""Settings model for the scaffolder."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ..constants import RBXTS_SCOPE, TEMPLATES_DIR


class ScaffoldConfig(BaseModel):
    """Tool-level settings, independent of any single invocation."""

    templates_dir: Path = Field(default=TEMPLATES_DIR)
    package_scope: str = Field(default=RBXTS_SCOPE)

    # Logging
    log_format: Literal["text", "json"] = Field(default="text")
    log_file: Path | None = Field(default=None)

    @field_validator("package_scope")
    @classmethod
    def validate_scope(cls, v: str) -> str:
        if not v.startswith("@") or len(v) < 2 or "/" in v:
            raise ValueError(f"package scope must look like '@name', got {v!r}")
        return v

    @field_validator("templates_dir")
    @classmethod
    def expand_templates_dir(cls, v: Path) -> Path:
        return Path(v).expanduser()
