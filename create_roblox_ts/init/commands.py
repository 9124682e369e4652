"""Running external commands as child processes."""

import asyncio
from pathlib import Path
from typing import Protocol

from ..cli.errors import CommandError
from ..scaffold_logging import get_logger

logger = get_logger()


class CommandRunner(Protocol):
    """Runs a shell command line and returns its combined output."""

    async def run(self, command: str, cwd: Path) -> str: ...


class SubprocessCommandRunner:
    """CommandRunner spawning a shell with stdout and stderr merged."""

    async def run(self, command: str, cwd: Path) -> str:
        """Run `command` in `cwd` and wait for it to exit.

        Raises:
            CommandError: The command could not be spawned or exited non-zero.
        """
        logger.debug(f"Running: {command} (cwd={cwd})")
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise CommandError(command, None, str(e)) from e

        stdout, _ = await process.communicate()
        output = stdout.decode("utf-8", errors="replace") if stdout else ""

        if process.returncode != 0:
            logger.debug(
                f"Command failed: {command}",
                extra={"command": command, "exit_code": process.returncode},
            )
            raise CommandError(command, process.returncode, output)
        return output
