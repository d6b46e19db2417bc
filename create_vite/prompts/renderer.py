"""Terminal question rendering.

The prompt flow only talks to a :class:`Prompter`.  :class:`RichPrompter` is
the interactive implementation built on ``rich.prompt``; tests substitute a
scripted one.  Both signal cancellation by letting ``KeyboardInterrupt`` or
``EOFError`` escape.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.text import Text

from create_vite.utils import console as default_console


@dataclass(frozen=True)
class Choice:
    """One entry of a select question."""

    title: str
    value: Any
    style: str = "default"


class Prompter(Protocol):
    """Capability that asks a single question and returns the answer."""

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        on_state: Callable[[str], None] | None = None,
    ) -> str:
        ...

    def select(self, message: str, choices: Sequence[Choice], *, default: int = 0) -> Any:
        ...

    def reject(self, message: str) -> None:
        ...


class RichPrompter:
    """Asks questions on the terminal with ``rich.prompt.Prompt``.

    Line-based input has no per-keystroke state, so ``on_state`` fires once
    with the submitted value.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        on_state: Callable[[str], None] | None = None,
    ) -> str:
        kwargs: dict[str, Any] = {}
        if default is not None:
            kwargs["default"] = default
        value = Prompt.ask(escape(message), console=self.console, **kwargs)
        if on_state is not None:
            on_state(value)
        return value

    def select(self, message: str, choices: Sequence[Choice], *, default: int = 0) -> Any:
        self.console.print(f"[bold]{escape(message)}[/bold]")
        for index, choice in enumerate(choices, start=1):
            self.console.print(Text.assemble(f"  {index}. ", (choice.title, choice.style)))
        answer = Prompt.ask(
            "Choose",
            choices=[str(i) for i in range(1, len(choices) + 1)],
            default=str(default + 1),
            show_choices=False,
            console=self.console,
        )
        return choices[int(answer) - 1].value

    def reject(self, message: str) -> None:
        self.console.print(f"[bold red]{escape(message)}[/bold red]")
