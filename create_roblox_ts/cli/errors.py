"""Structured error types for CLI with recovery suggestions.

Every failure that ends a run is one of these. The CLI boundary formats it
into a single error block and exits with its exit code.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories of CLI errors for organization and handling."""

    CONFIGURATION = "configuration"  # Invalid settings or environment
    FILE_SYSTEM = "file_system"  # Collisions
    VALIDATION = "validation"  # Invalid arguments or target path
    COMMAND = "command"  # External tool failures
    RUNTIME = "runtime"  # Unexpected errors


@dataclass
class CLIError(Exception):
    """Base class for structured CLI errors with recovery suggestions.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        suggestion: Optional actionable recovery suggestion.
        details: Optional additional details dict.
        exit_code: Exit code to use when this error causes termination.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)
    exit_code: int = 1

    def __post_init__(self) -> None:
        """Initialize the exception with the message."""
        super().__init__(self.message)

    def format(self, use_color: bool = True) -> str:
        """Format the error for display.

        Args:
            use_color: Whether to include ANSI color codes.

        Returns:
            Formatted error string with suggestion if available.
        """
        red = "\033[91m" if use_color else ""
        cyan = "\033[96m" if use_color else ""
        dim = "\033[2m" if use_color else ""
        reset = "\033[0m" if use_color else ""

        lines = [f"create-roblox-ts {red}error{reset}: {self.message}"]

        if self.suggestion:
            lines.append(f"{cyan}Suggestion:{reset} {self.suggestion}")

        if self.details:
            for key, value in self.details.items():
                lines.append(f"{dim}  {key}: {value}{reset}")

        return "\n".join(lines)

    def __str__(self) -> str:
        """Return the formatted error message."""
        return self.format(use_color=False)


class ValidationError(CLIError):
    """Error for invalid CLI arguments or input."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            category=ErrorCategory.VALIDATION,
            message=message,
            suggestion=suggestion,
            details=None,
            exit_code=1,
        )


class NotADirectoryTargetError(ValidationError):
    """Error when the project path exists but is not a directory."""

    def __init__(self, path: str):
        super().__init__(
            f"{path} is not a directory!",
            suggestion="Choose a new or existing directory for the project",
        )
        self.path = path


class CollisionError(CLIError):
    """Error when provisioning would overwrite existing files."""

    def __init__(self, paths: Sequence[str]):
        listing = "".join(f"  - {path}\n" for path in paths)
        super().__init__(
            category=ErrorCategory.FILE_SYSTEM,
            message=f"Cannot initialize project, process could overwrite:\n{listing}",
            suggestion="Use an empty directory or remove the listed paths",
            details=None,
            exit_code=1,
        )
        self.paths = list(paths)


class CommandError(CLIError):
    """Error when an external command exits non-zero or cannot be spawned."""

    def __init__(
        self,
        command: str,
        exit_code: int | None,
        output: str = "",
        suggestion: str | None = None,
    ):
        if exit_code is None:
            message = f'Command "{command}" could not be started'
        else:
            message = f'Command "{command}" exited with code {exit_code}'
        if output:
            message = f"{message}\n\n{output}"
        super().__init__(
            category=ErrorCategory.COMMAND,
            message=message,
            suggestion=suggestion,
            details=None,
            exit_code=1,
        )
        self.command = command
        self.command_exit_code = exit_code
        self.output = output

    def with_suggestion(self, suggestion: str) -> CommandError:
        """Return a copy of this error carrying extra guidance."""
        return CommandError(
            self.command, self.command_exit_code, self.output, suggestion=suggestion
        )


class ConfigurationError(CLIError):
    """Error in settings or environment overrides."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion=suggestion
            or "Check the CREATE_RBXTS_* environment variables",
            details=None,
            exit_code=1,
        )


def handle_exception(
    error: Exception,
    use_color: bool = True,
    verbose: bool = False,
) -> tuple[str, int]:
    """Convert any exception to formatted output and exit code.

    Args:
        error: The exception to handle.
        use_color: Whether to use color in output.
        verbose: Whether to include full traceback.

    Returns:
        Tuple of (formatted_message, exit_code).
    """
    import traceback

    if isinstance(error, CLIError):
        message = error.format(use_color=use_color)
        exit_code = error.exit_code
    else:
        red = "\033[91m" if use_color else ""
        reset = "\033[0m" if use_color else ""
        message = f"create-roblox-ts {red}error{reset}: {error}"
        exit_code = 1

    if verbose:
        message += "\n\nTraceback:\n" + "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )

    return message, exit_code
