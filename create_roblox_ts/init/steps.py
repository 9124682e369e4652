"""The canonical provisioning steps for a resolved configuration."""

import json
from pathlib import Path

from ..cli.errors import CommandError
from ..constants import RBXTS_SCOPE
from .commands import CommandRunner
from .filesystem import FileSink
from .generators import (
    PrettierConfig,
    build_editor_config,
    build_eslint_config,
    render_gitignore,
    render_package_json,
)
from .package_managers import commands_for
from .templates import TemplateRepository
from .types import ProvisioningStep, ResolvedConfiguration

GIT_MISSING_HINT = (
    "Do you not have Git installed? Git CLI is required to use Git functionality. "
    'If you do not wish to use Git, answer no to "Configure Git".'
)


def dev_dependencies(configuration: ResolvedConfiguration) -> list[str]:
    """Packages passed to the package manager's dev install."""
    version = configuration.compiler_version
    dependencies = [
        "roblox-ts" + (f"@{version}" if version else ""),
        "@rbxts/compiler-types" + (f"@compiler-{version}" if version else ""),
        "typescript",
    ]

    if configuration.prettier:
        dependencies.append("prettier")

    if configuration.eslint:
        dependencies.extend(
            [
                "eslint",
                "@typescript-eslint/eslint-plugin",
                "@typescript-eslint/parser",
                "eslint-plugin-roblox-ts",
            ]
        )
        if configuration.prettier:
            dependencies.extend(["eslint-config-prettier", "eslint-plugin-prettier"])

    return dependencies


class StepPlanner:
    """Builds the ordered step list for one run.

    Order: package.json, Git, dependencies, ESLint, prettier, VSCode,
    template copy, build. Config files are written before the template copy
    so the copy never overwrites them; the build runs last.
    """

    def __init__(
        self,
        configuration: ResolvedConfiguration,
        runner: CommandRunner,
        file_sink: FileSink,
        templates: TemplateRepository,
        package_scope: str = RBXTS_SCOPE,
    ):
        self.configuration = configuration
        self.runner = runner
        self.file_sink = file_sink
        self.templates = templates
        self.package_scope = package_scope
        self.commands = commands_for(configuration.package_manager)

    @property
    def cwd(self) -> Path:
        return self.configuration.directory

    def plan(self) -> list[ProvisioningStep]:
        config = self.configuration
        steps = [ProvisioningStep("Initializing package.json..", self.init_package_json)]
        if config.git:
            steps.append(ProvisioningStep("Initializing Git..", self.init_git))
        steps.append(ProvisioningStep("Installing dependencies..", self.install_dependencies))
        if config.eslint:
            steps.append(ProvisioningStep("Configuring ESLint..", self.write_eslint_config))
        if config.prettier:
            steps.append(ProvisioningStep("Configuring prettier..", self.write_prettier_config))
        if config.vscode:
            steps.append(ProvisioningStep("Configuring vscode..", self.write_vscode_config))
        steps.append(ProvisioningStep("Copying template files..", self.copy_template))
        if not config.skip_build:
            steps.append(ProvisioningStep("Compiling..", self.build))
        return steps

    async def init_package_json(self) -> None:
        await self.runner.run(self.commands.init, self.cwd)
        path = self.cwd / "package.json"
        descriptor = render_package_json(
            json.loads(self.file_sink.read_file(path)),
            self.configuration.template,
            self.commands.build,
            self.package_scope,
        )
        self.file_sink.write_file(
            path, json.dumps(descriptor, indent=2, ensure_ascii=False)
        )

    async def init_git(self) -> None:
        try:
            await self.runner.run("git init", self.cwd)
        except CommandError as e:
            raise e.with_suggestion(GIT_MISSING_HINT) from e
        self.file_sink.write_file(self.cwd / ".gitignore", render_gitignore())

    async def install_dependencies(self) -> None:
        packages = " ".join(dev_dependencies(self.configuration))
        await self.runner.run(f"{self.commands.dev_install} {packages}", self.cwd)

    async def write_eslint_config(self) -> None:
        config = build_eslint_config(prettier=self.configuration.prettier)
        self.file_sink.write_file(self.cwd / ".eslintrc", config.to_json())

    async def write_prettier_config(self) -> None:
        self.file_sink.write_file(self.cwd / ".prettierrc", PrettierConfig().to_json())

    async def write_vscode_config(self) -> None:
        settings, extensions = build_editor_config(
            eslint=self.configuration.eslint, prettier=self.configuration.prettier
        )
        vscode_dir = self.cwd / ".vscode"
        self.file_sink.write_file(vscode_dir / "extensions.json", extensions.to_json())
        self.file_sink.write_file(vscode_dir / "settings.json", settings.to_json())

    async def copy_template(self) -> None:
        self.templates.copy_to(self.configuration.template, self.cwd)

    async def build(self) -> None:
        await self.runner.run(self.commands.build, self.cwd)
