"""Detection of external tools installed on the host."""

import asyncio
import shutil
from collections.abc import Callable, Sequence

from ..scaffold_logging import get_logger
from .types import Tool, ToolAvailability

logger = get_logger()

# npm ships with node but can be uninstalled and replaced, so it is probed too
DEFAULT_TOOLS: tuple[Tool, ...] = (Tool.NPM, Tool.PNPM, Tool.YARN, Tool.GIT)


class ToolAvailabilityProbe:
    """Looks up every tool concurrently and waits for all lookups to settle."""

    def __init__(self, lookup: Callable[[str], str | None] = shutil.which):
        """Initialize the probe.

        Args:
            lookup: Resolves a command name to a path, or None when the
                command is not installed.
        """
        self._lookup = lookup

    async def probe(self, tools: Sequence[Tool] = DEFAULT_TOOLS) -> ToolAvailability:
        """Return which of the given tools are available.

        A None lookup result means "not found". Any other lookup error
        counts as available: the probe only narrows prompts, and a wrong
        guess surfaces later as a clear command failure.
        """
        results = await asyncio.gather(
            *(asyncio.to_thread(self._lookup, tool.value) for tool in tools),
            return_exceptions=True,
        )

        availability: dict[Tool, bool] = {}
        for tool, result in zip(tools, results, strict=True):
            if isinstance(result, BaseException):
                logger.debug(f"Lookup for {tool.value} failed, assuming available: {result}")
                availability[tool] = True
            else:
                availability[tool] = result is not None
                logger.debug(f"Tool {tool.value}: {result or 'not found'}")

        return ToolAvailability(availability)
