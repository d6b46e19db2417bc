"""Shared pytest fixtures for the create-vite test suite.

Provides reusable fixtures for:
- A scripted prompter that replays answers instead of reading the terminal
- A temporary working directory to scaffold into
- Configs pointing at the bundled templates
- A small throwaway templates directory for materializer tests
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from create_vite.config import ScaffoldConfig
from create_vite.prompts.renderer import Choice

BUNDLED_TEMPLATES = Path(__file__).resolve().parent.parent / "create_vite" / "scaffolder" / "templates"


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------

INTERRUPT = object()
"""Scripted answer that makes the prompter raise ``KeyboardInterrupt``."""

ACCEPT = None
"""Scripted answer that accepts the default of a text question."""


class ScriptedPrompter:
    """``Prompter`` replaying a fixed list of answers.

    Text answers are fed to ``on_state`` one character at a time, like a user
    typing.  Select answers may be a choice index, a choice value, or the
    ``id`` of a choice value (template families).
    """

    def __init__(self, *answers: Any) -> None:
        self.answers = list(answers)
        self.asked: list[tuple[str, str]] = []
        self.choices: list[list[Choice]] = []
        self.defaults: list[Any] = []
        self.rejections: list[str] = []

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.asked]

    def _next(self) -> Any:
        if not self.answers:
            raise AssertionError(f"no scripted answer left for {self.asked[-1]!r}")
        answer = self.answers.pop(0)
        if answer is INTERRUPT:
            raise KeyboardInterrupt
        return answer

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        on_state: Callable[[str], None] | None = None,
    ) -> str:
        self.asked.append(("text", message))
        self.defaults.append(default)
        answer = self._next()
        value = default if answer is ACCEPT else answer
        if on_state is not None:
            for end in range(1, len(value) + 1):
                on_state(value[:end])
        return value

    def select(self, message: str, choices: Sequence[Choice], *, default: int = 0) -> Any:
        self.asked.append(("select", message))
        self.choices.append(list(choices))
        self.defaults.append(default)
        answer = self._next()
        if isinstance(answer, int):
            return choices[answer].value
        for choice in choices:
            if choice.value == answer or getattr(choice.value, "id", None) == answer:
                return choice.value
        raise AssertionError(f"{answer!r} is not among the choices for {message!r}")

    def reject(self, message: str) -> None:
        self.rejections.append(message)


@pytest.fixture
def scripted() -> Callable[..., ScriptedPrompter]:
    """Factory for :class:`ScriptedPrompter` instances."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Paths & configs
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Working directory the scaffolder resolves targets against."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def make_config(workspace: Path) -> Callable[..., ScaffoldConfig]:
    """Factory for configs rooted at :func:`workspace` using bundled templates."""

    def _make(user_agent: str | None = None, **overrides: Any) -> ScaffoldConfig:
        kwargs: dict[str, Any] = {
            "cwd": workspace,
            "templates_dir": BUNDLED_TEMPLATES,
            "user_agent": user_agent,
        }
        kwargs.update(overrides)
        return ScaffoldConfig(**kwargs)

    return _make


@pytest.fixture
def tiny_templates(tmp_path: Path) -> Path:
    """Templates directory with a single ``template-demo-ts`` skeleton."""
    root = tmp_path / "templates" / "template-demo-ts"
    (root / "src" / "nested").mkdir(parents=True)
    (root / "_gitignore").write_text("node_modules\n", encoding="utf-8")
    (root / "index.html").write_text("<div id=\"app\"></div>\n", encoding="utf-8")
    (root / "src" / "main.ts").write_text("console.log('hi')\n", encoding="utf-8")
    (root / "src" / "nested" / "_keep").write_text("", encoding="utf-8")
    (root / "vite.config.ts").write_text(
        "import react from '@vitejs/plugin-react'\n", encoding="utf-8"
    )
    manifest = {
        "name": "demo",
        "private": True,
        "devDependencies": {"@vitejs/plugin-react": "^4.3.4", "vite": "^6.0.5"},
    }
    (root / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return root.parent


def snapshot(directory: Path) -> dict[str, bytes]:
    """Map of relative path -> content for every file under *directory*."""
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }
