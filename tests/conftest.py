"""
Shared fixtures for the create-roblox-ts test suite.

Provides test doubles for:
- Prompt answers (scripted instead of a terminal)
- External commands (recorded instead of spawned)
- Filesystem writes (recorded on top of the real tmp_path filesystem)
- Tool detection (a fixed set of installed tools)
"""

import json
from io import StringIO
from pathlib import Path
from typing import Any

import pytest

from create_roblox_ts.cli.errors import CommandError
from create_roblox_ts.cli.output import OutputConfig, OutputManager
from create_roblox_ts.init.filesystem import LocalFileSink
from create_roblox_ts.init.interaction import PROMPT_CANCELLED, PromptSpec
from create_roblox_ts.init.probe import ToolAvailabilityProbe


class ScriptedInteractionSource:
    """Answers prompts from a dict keyed by prompt name.

    An answer of PROMPT_CANCELLED simulates the user aborting that prompt.
    Asking a prompt with no scripted answer fails the test.
    """

    def __init__(self, answers: dict[str, Any] | None = None):
        self.answers = dict(answers or {})
        self.asked: list[str] = []

    def ask(self, prompt: PromptSpec) -> Any:
        self.asked.append(prompt.name)
        if prompt.name not in self.answers:
            raise LookupError(f"Unexpected prompt: {prompt.name}")
        return self.answers[prompt.name]


class RecordingFileSink(LocalFileSink):
    """Real filesystem access that also records every mutation."""

    def __init__(self) -> None:
        self.writes: list[Path] = []
        self.created_dirs: list[Path] = []
        self.copies: list[tuple[Path, Path]] = []

    @property
    def mutations(self) -> int:
        return len(self.writes) + len(self.created_dirs) + len(self.copies)

    def write_file(self, path: Path, content: str) -> None:
        self.writes.append(Path(path))
        super().write_file(path, content)

    def ensure_directory(self, path: Path) -> None:
        self.created_dirs.append(Path(path))
        super().ensure_directory(path)

    def copy_tree(self, source: Path, destination: Path) -> None:
        self.copies.append((Path(source), Path(destination)))
        super().copy_tree(source, destination)


class FakeCommandRunner:
    """Records commands instead of running them.

    Init commands write a minimal package.json, as a package manager would.
    Commands starting with any prefix in `fail_on` raise CommandError.
    """

    def __init__(self, fail_on: tuple[str, ...] = (), exit_code: int | None = 1):
        self.commands: list[tuple[str, Path]] = []
        self.fail_on = fail_on
        self.exit_code = exit_code

    async def run(self, command: str, cwd: Path) -> str:
        self.commands.append((command, Path(cwd)))
        if command.startswith(self.fail_on):
            raise CommandError(command, self.exit_code, "simulated failure")
        if " init" in command and not command.startswith("git"):
            (Path(cwd) / "package.json").write_text(
                json.dumps({"name": Path(cwd).name, "version": "1.0.0"})
            )
        return ""

    @property
    def command_lines(self) -> list[str]:
        return [command for command, _ in self.commands]


def make_probe(*installed: str) -> ToolAvailabilityProbe:
    """Probe that finds exactly the named tools."""
    return ToolAvailabilityProbe(
        lookup=lambda name: f"/usr/bin/{name}" if name in installed else None
    )


@pytest.fixture()
def file_sink() -> RecordingFileSink:
    return RecordingFileSink()


@pytest.fixture()
def runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture()
def output_stream() -> StringIO:
    return StringIO()


@pytest.fixture()
def output(output_stream: StringIO) -> OutputManager:
    """Colorless output manager writing into `output_stream`."""
    return OutputManager(
        OutputConfig(use_color=False, stream=output_stream, err_stream=output_stream)
    )


@pytest.fixture()
def all_tools_probe() -> ToolAvailabilityProbe:
    return make_probe("npm", "pnpm", "yarn", "git")


__all__ = [
    "FakeCommandRunner",
    "PROMPT_CANCELLED",
    "RecordingFileSink",
    "ScriptedInteractionSource",
    "make_probe",
]
