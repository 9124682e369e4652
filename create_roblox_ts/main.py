"""Click-based CLI for create-roblox-ts."""

import asyncio
import sys
from collections.abc import Callable
from typing import Any

import click
from click.core import ParameterSource

from .cli.errors import CLIError, handle_exception
from .cli.output import OutputConfig, OutputManager
from .config import load_config
from .constants import VERSION
from .init.manager import InitManager
from .init.types import InitResult, InitStatus, PackageManager, RawOptions, TemplateKind
from .scaffold_logging import setup_logging

GAME_DESCRIPTION = "Generate a Roblox place"
MODEL_DESCRIPTION = "Generate a Roblox model"
PLUGIN_DESCRIPTION = "Generate a Roblox Studio plugin"
PACKAGE_DESCRIPTION = "Generate a roblox-ts npm package"

# Parameters that map onto RawOptions; None when not given on the command line
OPTION_FIELDS = (
    "directory",
    "yes",
    "git",
    "eslint",
    "prettier",
    "vscode",
    "package_manager",
    "compiler_version",
    "skip_build",
)
FLAG_FIELDS = ("verbose", "quiet", "no_color", "dry_run")


def init_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by the default command and every template subcommand."""
    decorators = [
        click.option("--dir", "directory", help="Project directory"),
        click.option("--yes", "-y", "yes", is_flag=True, help="Use recommended options"),
        click.option("--git/--no-git", "git", default=False, help="Configure Git"),
        click.option("--eslint/--no-eslint", "eslint", default=False, help="Configure ESLint"),
        click.option(
            "--prettier/--no-prettier", "prettier", default=False, help="Configure Prettier"
        ),
        click.option(
            "--vscode/--no-vscode",
            "vscode",
            default=False,
            help="Configure VSCode Project Settings",
        ),
        click.option(
            "--packageManager",
            "package_manager",
            type=click.Choice([m.value for m in PackageManager]),
            help="Choose an alternative package manager",
        ),
        click.option(
            "--compilerVersion", "compiler_version", help="roblox-ts compiler version"
        ),
        click.option("--skipBuild", "skip_build", is_flag=True, help="Do not run build script"),
        click.option("--dry-run", "dry_run", is_flag=True, help="Check and plan without writing"),
        click.option("--verbose", "-v", is_flag=True, help="Show detailed output"),
        click.option("--quiet", "-q", is_flag=True, help="Minimal output"),
        click.option("--no-color", "no_color", is_flag=True, help="Disable colored output"),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def _given(ctx: click.Context | None, names: tuple[str, ...]) -> dict[str, Any]:
    """Parameters actually passed on the command line (not defaults)."""
    if ctx is None:
        return {}
    given = {}
    for name in names:
        source = ctx.get_parameter_source(name)
        if source is not None and source is not ParameterSource.DEFAULT:
            given[name] = ctx.params[name]
    return given


def _merged_params(ctx: click.Context) -> dict[str, Any]:
    """Group-level options overridden by subcommand-level ones."""
    names = OPTION_FIELDS + FLAG_FIELDS
    parent = ctx.parent if ctx.parent is not None and ctx.parent.parent is None else None
    return {**_given(parent, names), **_given(ctx, names)}


def build_raw_options(params: dict[str, Any], template: TemplateKind | None) -> RawOptions:
    package_manager = params.get("package_manager")
    return RawOptions(
        template=template,
        directory=params.get("directory"),
        yes=bool(params.get("yes", False)),
        git=params.get("git"),
        eslint=params.get("eslint"),
        prettier=params.get("prettier"),
        vscode=params.get("vscode"),
        package_manager=PackageManager(package_manager) if package_manager else None,
        compiler_version=params.get("compiler_version"),
        skip_build=params.get("skip_build"),
    )


def _display_result(result: InitResult, output: OutputManager) -> None:
    configuration = result.configuration
    if configuration is None:
        return

    if result.status is InitStatus.PLANNED:
        output.header(
            f"Dry run: would create {configuration.template.value} project "
            f"in {configuration.directory}"
        )
        for label in result.planned_steps:
            output.step_planned(label)
        return

    output.plain("")
    output.success(
        f"Created {configuration.template.value} project in {configuration.directory}",
        force=True,
    )


def run_init(ctx: click.Context, template: TemplateKind | None) -> None:
    """Run one init invocation and exit with its status code."""
    params = _merged_params(ctx)
    verbose = bool(params.get("verbose", False))
    quiet = bool(params.get("quiet", False))
    output_config = OutputConfig.from_flags(
        verbose=verbose, quiet=quiet, no_color=bool(params.get("no_color", False))
    )
    output = OutputManager(output_config)

    try:
        config = load_config()
        setup_logging(
            quiet=quiet,
            verbose=verbose,
            log_file=config.log_file,
            log_format=config.log_format,
        )
        manager = InitManager(build_raw_options(params, template), config, output=output)
        result = asyncio.run(manager.run(dry_run=bool(params.get("dry_run", False))))
    except CLIError as e:
        message, exit_code = handle_exception(
            e, use_color=output_config.use_color, verbose=verbose
        )
        output.error(message)
        sys.exit(exit_code)
    except Exception as e:
        message, exit_code = handle_exception(
            e, use_color=output_config.use_color, verbose=True
        )
        output.error(message)
        sys.exit(exit_code)

    if result.status is InitStatus.CANCELLED:
        sys.exit(1)

    _display_result(result, output)
    sys.exit(0)


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="create-roblox-ts")
@init_options
@click.pass_context
def cli(ctx: click.Context, **_: Any) -> None:
    """Create a roblox-ts project from a template."""
    if ctx.invoked_subcommand is None:
        run_init(ctx, None)


@cli.command("init")
@init_options
@click.pass_context
def init(ctx: click.Context, **_: Any) -> None:
    """Create a project from a template"""
    run_init(ctx, None)


def _template_command(kind: TemplateKind, description: str) -> click.Command:
    @click.command(kind.value, help=description)
    @init_options
    @click.pass_context
    def command(ctx: click.Context, **_: Any) -> None:
        run_init(ctx, kind)

    return command


game = _template_command(TemplateKind.GAME, GAME_DESCRIPTION)
cli.add_command(game)
cli.add_command(game, name="place")
cli.add_command(_template_command(TemplateKind.MODEL, MODEL_DESCRIPTION))
cli.add_command(_template_command(TemplateKind.PLUGIN, PLUGIN_DESCRIPTION))
cli.add_command(_template_command(TemplateKind.PACKAGE, PACKAGE_DESCRIPTION))


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
