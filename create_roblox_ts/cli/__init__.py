"""CLI utilities package for create-roblox-ts.

Modules:
    output: OutputManager for consistent CLI output with color/quiet support
    errors: Structured error types with recovery suggestions
"""

from .errors import (
    CLIError,
    CollisionError,
    CommandError,
    ConfigurationError,
    ErrorCategory,
    NotADirectoryTargetError,
    ValidationError,
    handle_exception,
)
from .output import OutputConfig, OutputManager, should_use_color

__all__ = [
    # Output
    "OutputConfig",
    "OutputManager",
    "should_use_color",
    # Errors
    "CLIError",
    "ErrorCategory",
    "ValidationError",
    "NotADirectoryTargetError",
    "CollisionError",
    "CommandError",
    "ConfigurationError",
    "handle_exception",
]
