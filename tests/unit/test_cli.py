"""Tests for the click command-line interface."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner
from conftest import FakeCommandRunner

from create_roblox_ts.constants import VERSION
from create_roblox_ts.init.types import PackageManager, TemplateKind
from create_roblox_ts.main import build_raw_options, cli
from create_roblox_ts.scaffold_logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to CliRunner's temporary streams."""
    yield
    logging.getLogger(LOGGER_NAME).handlers.clear()


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def fake_commands(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace real package manager and git invocations."""
    monkeypatch.setattr(
        "create_roblox_ts.init.manager.SubprocessCommandRunner", FakeCommandRunner
    )


class TestBuildRawOptions:
    """Tests for mapping CLI parameters to RawOptions."""

    def test_missing_params_unspecified(self):
        options = build_raw_options({}, None)
        assert options.template is None
        assert options.yes is False
        assert options.git is None
        assert options.package_manager is None
        assert options.skip_build is None

    def test_explicit_params(self):
        options = build_raw_options(
            {
                "directory": "proj",
                "yes": True,
                "git": False,
                "package_manager": "pnpm",
                "compiler_version": "1.2.3",
                "skip_build": True,
            },
            TemplateKind.MODEL,
        )
        assert options.template is TemplateKind.MODEL
        assert options.directory == "proj"
        assert options.git is False
        assert options.package_manager is PackageManager.PNPM
        assert options.compiler_version == "1.2.3"
        assert options.skip_build is True


class TestCli:
    """Tests for CLI invocations."""

    def test_version(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output

    def test_help_lists_templates(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("init", "game", "place", "model", "plugin", "package"):
            assert name in result.output

    def test_invalid_compiler_version(self, cli_runner: CliRunner, tmp_path: Path):
        result = cli_runner.invoke(
            cli,
            ["--yes", "--no-color", "--dir", str(tmp_path / "p"), "--compilerVersion", "1.2"],
        )
        assert result.exit_code == 1
        assert "create-roblox-ts error: Invalid --compilerVersion" in result.output
        assert not (tmp_path / "p").exists()

    def test_unknown_package_manager(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["--packageManager", "bun"])
        assert result.exit_code == 2

    def test_dry_run(self, cli_runner: CliRunner, tmp_path: Path):
        """A dry run lists the planned steps and creates nothing."""
        target = tmp_path / "proj"
        result = cli_runner.invoke(
            cli, ["model", "--yes", "--no-color", "--dry-run", "--dir", str(target)]
        )
        assert result.exit_code == 0, result.output
        assert "would create model project" in result.output
        assert "[SKIP] Initializing package.json.." in result.output
        assert "[SKIP] Compiling.." in result.output
        assert not target.exists()

    def test_place_alias(self, cli_runner: CliRunner, tmp_path: Path):
        result = cli_runner.invoke(
            cli, ["place", "-y", "--no-color", "--dry-run", "--dir", str(tmp_path / "p")]
        )
        assert result.exit_code == 0, result.output
        assert "would create game project" in result.output

    def test_group_options_apply_to_subcommand(self, cli_runner: CliRunner, tmp_path: Path):
        result = cli_runner.invoke(
            cli,
            [
                "--yes",
                "--no-color",
                "--dry-run",
                "--skipBuild",
                "plugin",
                "--dir",
                str(tmp_path / "p"),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "would create plugin project" in result.output
        assert "Compiling.." not in result.output

    def test_collision(self, cli_runner: CliRunner, tmp_path: Path):
        target = tmp_path / "proj"
        target.mkdir()
        (target / ".eslintrc").write_text("{}")

        result = cli_runner.invoke(cli, ["game", "-y", "--no-color", "--dir", str(target)])

        assert result.exit_code == 1
        assert "Cannot initialize project, process could overwrite:" in result.output
        assert ".eslintrc" in result.output

    def test_cancelled_prompt_exits_silently(self, cli_runner: CliRunner):
        """End of input at a prompt cancels with exit code 1 and no error."""
        result = cli_runner.invoke(cli, ["--no-color"], input="")
        assert result.exit_code == 1
        assert "error" not in result.output

    def test_full_run(self, cli_runner: CliRunner, tmp_path: Path, fake_commands: None):
        target = tmp_path / "m"
        result = cli_runner.invoke(
            cli,
            ["model", "-y", "--no-color", "--packageManager", "npm", "--dir", str(target)],
        )

        assert result.exit_code == 0, result.output
        assert "[OK] Copying template files.." in result.output
        assert "Created model project" in result.output
        assert (target / "package.json").exists()
        assert (target / "src" / "init.ts").exists()

    def test_quiet_run(self, cli_runner: CliRunner, tmp_path: Path, fake_commands: None):
        """Quiet mode prints only the final result."""
        result = cli_runner.invoke(
            cli,
            ["game", "-y", "-q", "--no-color", "--packageManager", "yarn", "--dir", str(tmp_path / "q")],
        )

        assert result.exit_code == 0, result.output
        assert "Installing dependencies.." not in result.output
        assert "Created game project" in result.output

    def test_yes_still_asks_for_template(self, cli_runner: CliRunner, tmp_path: Path):
        """`--yes` fills recommended defaults but leaves the template to the user."""
        result = cli_runner.invoke(
            cli, ["-y", "--no-color", "--dry-run", "--dir", str(tmp_path / "p")], input="model\n"
        )
        assert result.exit_code == 0, result.output
        assert "Select template" in result.output
        assert "would create model project" in result.output

    def test_failed_step_prints_one_error(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """A failing step ends the run with a single error block and no timing noise."""
        monkeypatch.setattr(
            "create_roblox_ts.init.manager.SubprocessCommandRunner",
            lambda: FakeCommandRunner(fail_on=("npm install",)),
        )
        result = cli_runner.invoke(
            cli,
            [
                "package",
                "--yes",
                "--skipBuild",
                "--no-color",
                "--packageManager",
                "npm",
                "--dir",
                str(tmp_path / "p"),
            ],
        )

        assert result.exit_code == 1
        assert result.output.count("create-roblox-ts error:") == 1
        assert "[PERF]" not in result.output
        assert "ERROR" not in result.output
