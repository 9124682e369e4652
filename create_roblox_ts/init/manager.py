"""Main orchestrator for project initialization."""

from pathlib import Path

from ..cli.errors import ValidationError
from ..cli.output import OutputManager
from ..config.models import ScaffoldConfig
from ..scaffold_logging import get_logger
from .collision import CollisionGuard
from .commands import CommandRunner, SubprocessCommandRunner
from .filesystem import FileSink, LocalFileSink
from .interaction import ClickInteractionSource, InteractionSource
from .probe import ToolAvailabilityProbe
from .resolver import ConfigurationResolver
from .sequencer import StepSequencer
from .steps import StepPlanner
from .templates import TemplateRepository
from .types import (
    Cancelled,
    InitResult,
    InitStatus,
    Invalid,
    RawOptions,
    ResolvedConfiguration,
)

logger = get_logger()


class InitManager:
    """Orchestrates the complete project initialization process.

    probe tools -> resolve options -> collision check -> run steps
    """

    def __init__(
        self,
        options: RawOptions,
        config: ScaffoldConfig | None = None,
        *,
        interaction: InteractionSource | None = None,
        runner: CommandRunner | None = None,
        file_sink: FileSink | None = None,
        probe: ToolAvailabilityProbe | None = None,
        output: OutputManager | None = None,
        cwd: Path | None = None,
    ):
        """Initialize the manager.

        Args:
            options: Parsed invocation options.
            config: Tool settings; defaults when omitted.
            interaction: Prompt answers; the terminal when omitted.
            runner: Runs package manager and git commands.
            file_sink: Filesystem access.
            probe: Tool detection.
            output: Progress and result reporting.
            cwd: Directory relative paths are resolved and reported against.
        """
        self.options = options
        self.config = config or ScaffoldConfig()
        self.interaction = interaction or ClickInteractionSource()
        self.runner = runner or SubprocessCommandRunner()
        self.file_sink = file_sink or LocalFileSink()
        self.probe = probe or ToolAvailabilityProbe()
        self.output = output or OutputManager()
        self.cwd = Path(cwd) if cwd else Path.cwd()

        self.templates = TemplateRepository(self.file_sink, self.config.templates_dir)
        self.guard = CollisionGuard(self.file_sink, self.templates, cwd=self.cwd)

    async def resolve(self) -> ResolvedConfiguration | None:
        """Probe tools and resolve options; None when the user cancelled.

        Raises:
            ValidationError: Options were rejected before prompting.
        """
        availability = await self.probe.probe()
        resolver = ConfigurationResolver(self.interaction, cwd=self.cwd)
        outcome = resolver.resolve(self.options, availability)

        if isinstance(outcome, Invalid):
            raise ValidationError(outcome.detail)
        if isinstance(outcome, Cancelled):
            return None
        return outcome.configuration

    def planner(self, configuration: ResolvedConfiguration) -> StepPlanner:
        return StepPlanner(
            configuration,
            self.runner,
            self.file_sink,
            self.templates,
            package_scope=self.config.package_scope,
        )

    async def run(self, dry_run: bool = False) -> InitResult:
        """Execute the full initialization sequence.

        Raises:
            CLIError: Validation, collision or command failure.
        """
        configuration = await self.resolve()
        if configuration is None:
            return InitResult(status=InitStatus.CANCELLED)

        logger.info(
            f"Initializing {configuration.template.value} project in {configuration.directory}"
        )
        steps = self.planner(configuration).plan()

        self.guard.check(configuration, dry_run=dry_run)
        planned = [step.label for step in steps]
        if dry_run:
            return InitResult(
                status=InitStatus.PLANNED,
                configuration=configuration,
                planned_steps=planned,
            )

        timings = await StepSequencer(self.output).run(steps)
        return InitResult(
            status=InitStatus.COMPLETED,
            configuration=configuration,
            timings=timings,
            planned_steps=planned,
        )
