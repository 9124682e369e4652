"""Interactive prompting behind a swappable interface.

The resolver never talks to a terminal directly; it asks an
InteractionSource. `ClickInteractionSource` prompts on the terminal,
tests pass a scripted source instead.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

import click


class PromptKind(Enum):
    TEXT = "text"
    CONFIRM = "confirm"
    SELECT = "select"


class _PromptCancelled(Enum):
    TOKEN = "cancelled"


# Returned by InteractionSource.ask when the user aborts a prompt
PROMPT_CANCELLED = _PromptCancelled.TOKEN


@dataclass(frozen=True)
class Choice:
    title: str
    value: Any


@dataclass(frozen=True)
class PromptSpec:
    """One question for the user.

    Attributes:
        name: Field the answer resolves.
        message: Text shown to the user.
        kind: Text entry, yes/no confirmation or single selection.
        choices: Options for SELECT prompts, in display order.
        initial: Pre-selected answer.
        applies: Whether the prompt should be shown at all.
        fallback: Value used without interaction when it does not apply.
    """

    name: str
    message: str
    kind: PromptKind
    choices: Sequence[Choice] = ()
    initial: Any = None
    applies: Callable[[], bool] = field(default=lambda: True)
    fallback: Any = None


class InteractionSource(Protocol):
    """Answers prompts, or returns PROMPT_CANCELLED."""

    def ask(self, prompt: PromptSpec) -> Any: ...


def ask_if_applicable(source: InteractionSource, prompt: PromptSpec) -> Any:
    """Ask `prompt` when it applies, otherwise return its fallback silently."""
    if not prompt.applies():
        return prompt.fallback
    return source.ask(prompt)


class ClickInteractionSource:
    """Terminal prompts via click; Ctrl-C or EOF cancels."""

    def ask(self, prompt: PromptSpec) -> Any:
        try:
            if prompt.kind is PromptKind.CONFIRM:
                return click.confirm(prompt.message, default=bool(prompt.initial))

            if prompt.kind is PromptKind.SELECT:
                by_title = {choice.title: choice.value for choice in prompt.choices}
                titles = list(by_title)
                default = next(
                    (c.title for c in prompt.choices if c.value == prompt.initial),
                    titles[0],
                )
                title = click.prompt(
                    prompt.message,
                    type=click.Choice(titles),
                    default=default,
                    show_choices=True,
                )
                return by_title[title]

            return click.prompt(prompt.message, default=prompt.initial, type=str)
        except click.Abort:
            return PROMPT_CANCELLED
