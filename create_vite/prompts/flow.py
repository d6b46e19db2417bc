"""Generic executor for a chain of dependent questions.

Each question is described by a :class:`Step`: whether it applies, what to
ask, and how its answer is folded into the shared :class:`FlowContext`.
Every callable on a step receives the context as built by the steps before
it, so applicability, messages and choices can depend on earlier answers but
never on later ones.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Any, Optional

from create_vite.errors import UserCancelled
from create_vite.models import OverwriteDecision
from create_vite.prompts.renderer import Choice, Prompter
from create_vite.scaffolder.catalog import TemplateFamily


class StepKind(str, Enum):
    """How a step obtains its answer."""
    TEXT = "text"
    SELECT = "select"
    GATE = "gate"  # no input, only checks earlier answers


@dataclass
class FlowContext:
    """Answers accumulated while the chain runs.

    Seeded with the command line inputs, then filled in step by step.
    """

    cwd: Path
    target_dir: str
    default_target_dir: str
    arg_template: Optional[str] = None
    arg_overwrite: Optional[OverwriteDecision] = None

    overwrite: Optional[OverwriteDecision] = None
    package_name: Optional[str] = None
    family: Optional[TemplateFamily] = None
    variant: Optional[str] = None

    @property
    def root(self) -> Path:
        return self.cwd / self.target_dir

    def project_name(self) -> str:
        """Name of the project directory (the cwd's name for ``.``)."""
        if self.target_dir == ".":
            return self.cwd.resolve().name
        return self.target_dir


@dataclass(frozen=True)
class Step:
    """Descriptor for one question in the chain.

    Attributes:
        name: Identifier used in error messages and tests.
        kind: TEXT and SELECT ask the prompter; GATE only runs ``reduce``.
        applies: Returns ``False`` to skip the step entirely.
        reduce: Stores the answer on the context (or raises for a GATE).
        message: Builds the question text.
        initial: Default text (TEXT) or default choice index (SELECT).
        choices: Options for a SELECT step.
        validate: Returns ``True`` or an error message; TEXT steps repeat
            until the answer validates.
        on_state: Called with the current input as the user types.
        override: Returns an externally supplied answer, or ``None`` to ask.
    """

    name: str
    kind: StepKind
    applies: Callable[[FlowContext], bool]
    reduce: Callable[[FlowContext, Any], None]
    message: Callable[[FlowContext], str] = lambda ctx: ""
    initial: Optional[Callable[[FlowContext], Any]] = None
    choices: Optional[Callable[[FlowContext], Sequence[Choice]]] = None
    validate: Optional[Callable[[str], "bool | str"]] = None
    on_state: Optional[Callable[[FlowContext, str], None]] = None
    override: Optional[Callable[[FlowContext], Any]] = None


class PromptFlowEngine:
    """Runs a fixed, ordered sequence of :class:`Step` descriptors."""

    def __init__(self, prompter: Prompter, steps: Sequence[Step]) -> None:
        self.prompter = prompter
        self.steps = tuple(steps)

    def run(self, ctx: FlowContext) -> FlowContext:
        """Resolve every applicable step against *ctx*.

        Raises:
            UserCancelled: If the prompter is interrupted or a gate rejects
                the answers so far.  No further step runs.
        """
        try:
            for step in self.steps:
                if not step.applies(ctx):
                    continue
                step.reduce(ctx, self._answer(step, ctx))
        except (KeyboardInterrupt, EOFError) as exc:
            raise UserCancelled() from exc
        return ctx

    def _answer(self, step: Step, ctx: FlowContext) -> Any:
        if step.kind is StepKind.GATE:
            return None

        if step.override is not None:
            supplied = step.override(ctx)
            if supplied is not None:
                return supplied

        message = step.message(ctx)
        if step.kind is StepKind.SELECT:
            if step.choices is None:
                raise ValueError(f"select step {step.name!r} has no choices")
            default = step.initial(ctx) if step.initial else 0
            return self.prompter.select(message, step.choices(ctx), default=default)

        default = step.initial(ctx) if step.initial else None
        on_state = partial(step.on_state, ctx) if step.on_state else None
        while True:
            value = self.prompter.text(message, default=default, on_state=on_state)
            verdict = step.validate(value) if step.validate else True
            if verdict is True:
                return value
            self.prompter.reject(verdict if isinstance(verdict, str) else f"Invalid {step.name}")
