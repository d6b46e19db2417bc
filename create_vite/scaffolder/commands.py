"""Delegating command synthesis and execution.

Some catalog variants do not ship a skeleton; they hand off to another
generator (``npm create vue@latest TARGET_DIR``).  Catalog commands are
written against npm and rewritten here for the package manager that invoked
create-vite, so ``pnpm create vite`` leads to ``pnpm create vue@latest``.
"""

from __future__ import annotations

import re
import shlex
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from rich.markup import escape

from create_vite.errors import ScaffoldError
from create_vite.package_manager import PackageManagerInfo
from create_vite.utils import console, print_warning, run_command

TARGET_DIR_PLACEHOLDER = "TARGET_DIR"


class DelegatedCommand(BaseModel):
    """A concrete command line ready to spawn."""

    model_config = ConfigDict(frozen=True)

    program: str = Field(..., min_length=1)
    args: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    @property
    def display(self) -> str:
        """Shell-quoted rendering for log output."""
        return shlex.join(self.argv)


def _rewrite_create(pm: PackageManagerInfo) -> str:
    if pm.name == "bun":
        return "bun x create-"
    return f"{pm.name} create "


def _rewrite_exec(pm: PackageManagerInfo) -> str:
    if pm.name == "pnpm":
        return "pnpm dlx"
    if pm.name == "yarn" and not pm.is_yarn1:
        return "yarn dlx"
    if pm.name == "bun":
        return "bun x"
    # npm exec covers yarn 1.x and any other npm-compatible client
    return "npm exec"


def rewrite_command(template: str, package_manager: PackageManagerInfo) -> str:
    """Rewrite an npm-flavoured command template for *package_manager*.

    Examples (``TARGET_DIR`` left in place)::

        rewrite_command("npm create vue@latest TARGET_DIR", pnpm)
            -> "pnpm create vue@latest TARGET_DIR"
        rewrite_command("npm create vue@latest TARGET_DIR", yarn 1.22)
            -> "yarn create vue TARGET_DIR"
        rewrite_command("npm exec nuxi init TARGET_DIR", bun)
            -> "bun x nuxi init TARGET_DIR"
    """
    command = re.sub(r"^npm create ", lambda _: _rewrite_create(package_manager), template)
    if package_manager.is_yarn1:
        command = command.replace("@latest", "")
    return re.sub(r"^npm exec", lambda _: _rewrite_exec(package_manager), command)


def synthesize_command(
    template: str,
    package_manager: PackageManagerInfo,
    target_dir: str,
) -> DelegatedCommand:
    """Turn a catalog command template into a :class:`DelegatedCommand`.

    The template is split before ``TARGET_DIR`` is substituted, so a target
    directory containing spaces stays a single argument.
    """
    program, *args = rewrite_command(template, package_manager).split()
    return DelegatedCommand(
        program=program,
        args=tuple(arg.replace(TARGET_DIR_PLACEHOLDER, target_dir) for arg in args),
    )


async def run_delegated_command(command: DelegatedCommand, cwd: str | Path | None = None) -> int:
    """Spawn *command* with inherited stdio and return its exit status.

    Raises:
        ScaffoldError: If the program is not installed.
    """
    console.print(f"[dim]$ {escape(command.display)}[/dim]")
    try:
        returncode, _, _ = await run_command(command.argv, cwd=cwd, capture=False)
    except FileNotFoundError as exc:
        raise ScaffoldError(f"Command not found: {command.program}") from exc
    if returncode != 0:
        print_warning(f"{command.program} exited with status {returncode}")
    return returncode
