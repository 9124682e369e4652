"""Init module: resolve options, guard against collisions, provision a project."""

from .collision import CollisionGuard
from .manager import InitManager
from .probe import ToolAvailabilityProbe
from .resolver import ConfigurationResolver
from .sequencer import StepSequencer
from .steps import StepPlanner
from .types import (
    InitResult,
    InitStatus,
    PackageManager,
    RawOptions,
    ResolvedConfiguration,
    TemplateKind,
    Tool,
    ToolAvailability,
)

__all__ = [
    "CollisionGuard",
    "ConfigurationResolver",
    "InitManager",
    "InitResult",
    "InitStatus",
    "PackageManager",
    "RawOptions",
    "ResolvedConfiguration",
    "StepPlanner",
    "StepSequencer",
    "TemplateKind",
    "Tool",
    "ToolAvailability",
    "ToolAvailabilityProbe",
]
