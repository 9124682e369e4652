"""Sequential execution of provisioning steps with progress reporting."""

import time
from collections.abc import Callable, Sequence

from ..cli.output import OutputManager
from ..scaffold_logging import get_logger
from ..timing import PerformanceTimer
from .types import ProvisioningStep, StepTiming

logger = get_logger()


class StepSequencer:
    """Runs steps one after another, stopping at the first failure.

    Nothing is rolled back: steps that already completed leave their
    changes in place when a later step fails.
    """

    def __init__(
        self,
        output: OutputManager | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.output = output or OutputManager()
        self.clock = clock

    async def run(self, steps: Sequence[ProvisioningStep]) -> list[StepTiming]:
        """Execute `steps` in order.

        Returns:
            Timing of every step, in execution order.

        Raises:
            Exception: Whatever the failing step raised, unchanged.
        """
        timings: list[StepTiming] = []
        for index, step in enumerate(steps, start=1):
            self.output.step_started(step.label)
            logger.debug(f"Step {index}/{len(steps)}: {step.label}")
            with PerformanceTimer(step.label, clock=self.clock) as timer:
                await step.action()
            self.output.step_finished(step.label, timer.duration_ms)
            timings.append(StepTiming(step.label, timer.duration_ms))
        return timings
