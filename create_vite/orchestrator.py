"""create-vite orchestrator and command line entry point.

A run has two phases:

1. COLLECT  -- answer the question chain (synchronously, before any event
   loop exists, so Ctrl+C lands directly in the prompt).
2. SCAFFOLD -- prepare the target directory, then either run the variant's
   delegating generator or copy the bundled template and print next steps.

Nothing touches the filesystem until phase 1 has fully resolved.

Usage::

    create-vite
    create-vite my-app --template vue-ts
    python -m create_vite . --overwrite ignore -t react-swc-ts
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

from rich.markup import escape

from create_vite.config import ScaffoldConfig
from create_vite.errors import ScaffoldError, UserCancelled
from create_vite.models import OverwriteDecision, ResolvedSelection
from create_vite.naming import format_target_dir
from create_vite.prompts import FlowContext, PromptFlowEngine, Prompter, RichPrompter
from create_vite.prompts import build_steps, resolve_selection
from create_vite.scaffolder import (
    DEFAULT_CATALOG,
    ScaffoldMaterializer,
    TemplateCatalog,
    run_delegated_command,
    synthesize_command,
)
from create_vite.utils import console, print_error, print_success

# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldOrchestrator:
    """Wires the prompt flow, command synthesis and materializer together.

    Attributes:
        config: Run configuration (cwd, templates directory, user agent).
        prompter: Question renderer; a ``RichPrompter`` unless injected.
        catalog: Templates offered to the user.
        materializer: Writes template skeletons into the target directory.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        prompter: Prompter | None = None,
        catalog: TemplateCatalog = DEFAULT_CATALOG,
    ) -> None:
        self.config = config
        self.prompter = prompter or RichPrompter()
        self.catalog = catalog
        self.materializer = ScaffoldMaterializer(config.templates_dir)
        self.package_manager = config.package_manager

    # ------------------------------------------------------------------
    # Phase 1: COLLECT
    # ------------------------------------------------------------------

    def collect(
        self,
        arg_target_dir: str | None = None,
        arg_template: str | None = None,
        arg_overwrite: OverwriteDecision | None = None,
    ) -> ResolvedSelection:
        """Run the question chain against the command line inputs.

        Raises:
            UserCancelled: If the user aborts at any question.
        """
        target_dir = format_target_dir(arg_target_dir)
        ctx = FlowContext(
            cwd=self.config.cwd,
            target_dir=target_dir or self.config.default_target_dir,
            default_target_dir=self.config.default_target_dir,
            arg_template=arg_template,
            arg_overwrite=arg_overwrite,
        )
        steps = build_steps(self.catalog, project_name_given=bool(target_dir))
        ctx = PromptFlowEngine(self.prompter, steps).run(ctx)
        return resolve_selection(ctx)

    # ------------------------------------------------------------------
    # Phase 2: SCAFFOLD
    # ------------------------------------------------------------------

    def project_root(self, selection: ResolvedSelection) -> Path:
        return Path(os.path.normpath(self.config.cwd / selection.target_dir))

    async def scaffold(self, selection: ResolvedSelection) -> int:
        """Create the project described by *selection*.

        Returns:
            The delegated generator's exit status, or ``0`` once the
            template has been copied.
        """
        root = self.project_root(selection)
        await self.materializer.prepare(root, selection.overwrite)

        variant = self.catalog.find_variant(selection.template_id)
        if variant is not None and variant.custom_command:
            command = synthesize_command(
                variant.custom_command, self.package_manager, selection.target_dir
            )
            return await run_delegated_command(command, cwd=self.config.cwd)

        console.print(f"\nScaffolding project in {escape(str(root))}...")
        await self.materializer.materialize(
            root,
            selection.template_id,
            selection.package_name,
            is_swc=selection.is_swc,
        )

        console.print()
        print_success("Done. Now run:")
        console.print()
        for line in self.next_steps(root):
            console.print(f"  {escape(line)}")
        console.print()
        return 0

    def next_steps(self, root: Path) -> list[str]:
        """Commands the user should run after scaffolding into *root*."""
        lines: list[str] = []
        cwd = Path(os.path.normpath(self.config.cwd))
        if root != cwd:
            relative = os.path.relpath(root, cwd)
            lines.append(f'cd "{relative}"' if " " in relative else f"cd {relative}")

        pm = self.package_manager.name
        if pm == "yarn":
            lines.extend(["yarn", "yarn dev"])
        else:
            lines.extend([f"{pm} install", f"{pm} run dev"])
        return lines

    # ------------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------------

    def run(
        self,
        arg_target_dir: str | None = None,
        arg_template: str | None = None,
        arg_overwrite: OverwriteDecision | None = None,
    ) -> int:
        """Collect answers, scaffold, and return the process exit status.

        A cancelled run, whether during the questions or while scaffolding,
        prints the cancellation notice and exits with status 0.
        """
        try:
            selection = self.collect(arg_target_dir, arg_template, arg_overwrite)
            return asyncio.run(self.scaffold(selection))
        except UserCancelled as exc:
            print_error(f"✖ {exc}")
            return 0
        except KeyboardInterrupt:
            print_error(f"✖ {UserCancelled()}")
            return 0
        except (ScaffoldError, OSError) as exc:
            console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
            return 1


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


class _HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Raw description formatter with a capitalised ``Usage:`` heading."""

    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


def build_parser(catalog: TemplateCatalog = DEFAULT_CATALOG) -> argparse.ArgumentParser:
    """Argument parser for ``create-vite``."""
    templates = "\n".join(f"  {line}" for line in catalog.help_lines())
    parser = argparse.ArgumentParser(
        prog="create-vite",
        usage="create-vite [OPTION]... [DIRECTORY]",
        description=(
            "Create a new Vite project in JavaScript or TypeScript.\n"
            "With no arguments, start the CLI in interactive mode."
        ),
        formatter_class=_HelpFormatter,
        epilog=f"Available templates:\n{templates}\n",
    )

    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Project directory (prompted for when omitted)",
    )
    parser.add_argument(
        "--template", "-t",
        nargs="?",
        const="",
        default=None,
        metavar="NAME",
        help="use a specific template",
    )
    parser.add_argument(
        "--overwrite",
        nargs="?",
        const=OverwriteDecision.IGNORE.value,
        choices=[decision.value for decision in OverwriteDecision],
        default=None,
        help="answer the non-empty directory question (bare flag: ignore)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-vite`` and ``python -m create_vite``."""
    args = build_parser().parse_args(argv)

    overwrite = OverwriteDecision(args.overwrite) if args.overwrite else None
    orchestrator = ScaffoldOrchestrator(ScaffoldConfig.from_env())
    sys.exit(orchestrator.run(args.directory, args.template, overwrite))


if __name__ == "__main__":
    main()
