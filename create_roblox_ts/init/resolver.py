"""Merging of explicit options, defaults and interactive answers."""

import re
from pathlib import Path
from typing import Any, TypeVar

from ..scaffold_logging import get_logger
from .interaction import (
    PROMPT_CANCELLED,
    Choice,
    InteractionSource,
    PromptKind,
    PromptSpec,
    ask_if_applicable,
)
from .types import (
    PRIMARY_PACKAGE_MANAGER,
    Cancelled,
    Invalid,
    PackageManager,
    RawOptions,
    Resolved,
    ResolutionOutcome,
    ResolvedConfiguration,
    TemplateKind,
    Tool,
    ToolAvailability,
)

logger = get_logger()

T = TypeVar("T")

COMPILER_VERSION_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")

INVALID_COMPILER_VERSION = (
    "Invalid --compilerVersion. You must specify a version in the form of X.X.X. "
    "(i.e. --compilerVersion 1.2.3)"
)

# Offered in this order; the first is preselected
TEMPLATE_CHOICES = (
    TemplateKind.GAME,
    TemplateKind.MODEL,
    TemplateKind.PLUGIN,
    TemplateKind.PACKAGE,
)


def is_valid_compiler_version(value: str) -> bool:
    return COMPILER_VERSION_PATTERN.fullmatch(value) is not None


class _ResolutionCancelled(Exception):
    pass


class ConfigurationResolver:
    """Produces a ResolvedConfiguration from options, tools and answers.

    Precedence for each field, highest first:
    1. Explicit value in RawOptions
    2. Recommended default when `yes` is set (not for directory or template)
    3. The interaction source, unless the prompt does not apply
       (e.g. Git without a git binary), in which case a safe default
    """

    def __init__(self, interaction: InteractionSource, cwd: Path | None = None):
        self.interaction = interaction
        self.cwd = Path(cwd) if cwd else Path.cwd()

    def resolve(
        self, options: RawOptions, availability: ToolAvailability
    ) -> ResolutionOutcome:
        """Resolve every field, or report cancellation/invalid options."""
        if options.compiler_version is not None and not is_valid_compiler_version(
            options.compiler_version
        ):
            return Invalid(INVALID_COMPILER_VERSION)

        try:
            configuration = self._resolve_all(options, availability)
        except _ResolutionCancelled:
            logger.debug("Resolution cancelled by user")
            return Cancelled()

        logger.debug(f"Resolved configuration: {configuration}")
        return Resolved(configuration)

    def _ask(self, prompt: PromptSpec) -> Any:
        answer = ask_if_applicable(self.interaction, prompt)
        if answer is PROMPT_CANCELLED:
            raise _ResolutionCancelled()
        return answer

    def _field(
        self, explicit: T | None, yes: bool, recommended: T, prompt: PromptSpec
    ) -> T:
        if explicit is not None:
            return explicit
        if yes:
            return recommended
        return self._ask(prompt)

    def _resolve_all(
        self, options: RawOptions, availability: ToolAvailability
    ) -> ResolvedConfiguration:
        yes = options.yes

        # Directory and template are asked for even with `yes`
        if options.directory is not None:
            directory_answer = options.directory
        else:
            directory_answer = self._ask(
                PromptSpec(
                    name="directory",
                    message="Project directory",
                    kind=PromptKind.TEXT,
                    initial=".",
                )
            )
        directory = (self.cwd / (directory_answer or ".")).resolve()

        template = options.template
        if template is None:
            template = self._ask(
                PromptSpec(
                    name="template",
                    message="Select template",
                    kind=PromptKind.SELECT,
                    choices=[Choice(kind.value, kind) for kind in TEMPLATE_CHOICES],
                    initial=TEMPLATE_CHOICES[0],
                )
            )

        git_available = availability.is_available(Tool.GIT)
        git = self._field(
            options.git,
            yes,
            git_available,
            PromptSpec(
                name="git",
                message="Configure Git",
                kind=PromptKind.CONFIRM,
                initial=True,
                applies=lambda: git_available,
                fallback=False,
            ),
        )

        eslint = self._field(
            options.eslint,
            yes,
            True,
            PromptSpec(
                name="eslint",
                message="Configure ESLint",
                kind=PromptKind.CONFIRM,
                initial=True,
            ),
        )
        prettier = self._field(
            options.prettier,
            yes,
            True,
            PromptSpec(
                name="prettier",
                message="Configure Prettier",
                kind=PromptKind.CONFIRM,
                initial=True,
            ),
        )
        vscode = self._field(
            options.vscode,
            yes,
            True,
            PromptSpec(
                name="vscode",
                message="Configure VSCode Project Settings",
                kind=PromptKind.CONFIRM,
                initial=True,
            ),
        )

        package_manager = self._resolve_package_manager(options, availability)

        return ResolvedConfiguration(
            template=template,
            directory=directory,
            git=bool(git),
            eslint=bool(eslint),
            prettier=bool(prettier),
            vscode=bool(vscode),
            package_manager=package_manager,
            compiler_version=options.compiler_version,
            skip_build=bool(options.skip_build),
        )

    def _resolve_package_manager(
        self, options: RawOptions, availability: ToolAvailability
    ) -> PackageManager:
        if options.package_manager is not None:
            return options.package_manager

        available = availability.available_package_managers()
        # A single installed manager is used without asking, even with --yes
        if len(available) == 1:
            return available[0]
        if options.yes:
            return PRIMARY_PACKAGE_MANAGER

        return self._ask(
            PromptSpec(
                name="package_manager",
                message="Multiple package managers detected. Select package manager:",
                kind=PromptKind.SELECT,
                choices=[Choice(m.name, m) for m in available],
                initial=PRIMARY_PACKAGE_MANAGER,
                applies=lambda: len(available) > 1,
                fallback=PRIMARY_PACKAGE_MANAGER,
            )
        )
