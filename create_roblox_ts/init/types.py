"""Type definitions for the init module."""

from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType


class TemplateKind(Enum):
    """Project archetype; selects the template tree and package.json shape."""

    GAME = "game"
    MODEL = "model"
    PLUGIN = "plugin"
    PACKAGE = "package"

    @classmethod
    def parse(cls, value: str) -> "TemplateKind":
        """Parse a template name, accepting `place` as an alias of `game`."""
        if value == "place":
            return cls.GAME
        return cls(value)


class PackageManager(Enum):
    """Supported package managers, in the order they are offered."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


PRIMARY_PACKAGE_MANAGER = PackageManager.NPM


class Tool(Enum):
    """External command-line tools the probe looks for."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    GIT = "git"

    @classmethod
    def for_package_manager(cls, manager: PackageManager) -> "Tool":
        return cls(manager.value)


@dataclass(frozen=True)
class RawOptions:
    """Invocation options as parsed; None means "not specified"."""

    template: TemplateKind | None = None  # None when invoked as generic init
    directory: str | None = None
    yes: bool = False
    git: bool | None = None
    eslint: bool | None = None
    prettier: bool | None = None
    vscode: bool | None = None
    package_manager: PackageManager | None = None
    compiler_version: str | None = None
    skip_build: bool | None = None


@dataclass(frozen=True)
class ToolAvailability:
    """Which tools were found on the host at probe time."""

    tools: Mapping[Tool, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tools", MappingProxyType(dict(self.tools)))

    @classmethod
    def all_available(cls, tools: Iterable[Tool] = tuple(Tool)) -> "ToolAvailability":
        return cls({tool: True for tool in tools})

    def is_available(self, tool: Tool) -> bool:
        return self.tools.get(tool, False)

    def available_package_managers(self) -> list[PackageManager]:
        """Available package managers in offer order."""
        return [
            manager
            for manager in PackageManager
            if self.is_available(Tool.for_package_manager(manager))
        ]


@dataclass(frozen=True)
class ResolvedConfiguration:
    """Fully concrete provisioning choices for one run."""

    template: TemplateKind
    directory: Path
    git: bool
    eslint: bool
    prettier: bool
    vscode: bool
    package_manager: PackageManager
    compiler_version: str | None = None
    skip_build: bool = False


@dataclass(frozen=True)
class Resolved:
    """Resolution succeeded."""

    configuration: ResolvedConfiguration


@dataclass(frozen=True)
class Cancelled:
    """The user cancelled a prompt."""


@dataclass(frozen=True)
class Invalid:
    """Options failed validation before any prompting."""

    detail: str


ResolutionOutcome = Resolved | Cancelled | Invalid


@dataclass(frozen=True)
class ProvisioningStep:
    """A named unit of provisioning work."""

    label: str
    action: Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class StepTiming:
    """Elapsed time of a completed step."""

    label: str
    duration_ms: float


@dataclass(frozen=True)
class PathInventory:
    """Ordered, deduplicated absolute paths a run will write to."""

    paths: tuple[Path, ...] = ()

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> "PathInventory":
        return cls(tuple(dict.fromkeys(paths)))

    def __iter__(self):
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)


class InitStatus(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    PLANNED = "planned"  # dry run: checked and planned, nothing written


@dataclass
class InitResult:
    """Outcome of one init run."""

    status: InitStatus
    configuration: ResolvedConfiguration | None = None
    timings: list[StepTiming] = field(default_factory=list)
    planned_steps: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is not InitStatus.CANCELLED

    @property
    def total_duration_ms(self) -> float:
        return sum(t.duration_ms for t in self.timings)
