"""The create-vite question chain.

Order matters: later steps read the answers of earlier ones.

1. project_name    -- only when no directory was given on the command line
2. overwrite       -- only when the target directory has content
3. overwrite_check -- aborts the run if the user chose to cancel
4. package_name    -- only when the project name is not a valid package name
5. framework       -- only when ``--template`` is missing or unknown
6. variant         -- only when the chosen framework offers a choice
"""

from __future__ import annotations

from typing import Any

from create_vite.errors import ScaffoldError, UserCancelled
from create_vite.models import OverwriteDecision, ResolvedSelection
from create_vite.naming import format_target_dir, is_valid_package_name, to_valid_package_name
from create_vite.prompts.flow import FlowContext, Step, StepKind
from create_vite.prompts.renderer import Choice
from create_vite.scaffolder.catalog import TemplateCatalog, split_swc
from create_vite.scaffolder.probe import DirectoryState, classify

OVERWRITE_CHOICES: tuple[Choice, ...] = (
    Choice("Remove existing files and continue", OverwriteDecision.REMOVE),
    Choice("Cancel operation", OverwriteDecision.CANCEL),
    Choice("Ignore files and continue", OverwriteDecision.IGNORE),
)


def _update_target_dir(ctx: FlowContext, value: str) -> None:
    ctx.target_dir = format_target_dir(value) or ctx.default_target_dir


def _overwrite_message(ctx: FlowContext) -> str:
    where = "Current directory" if ctx.target_dir == "." else f'Target directory "{ctx.target_dir}"'
    return f"{where} is not empty. Please choose how to proceed:"


def _check_overwrite(ctx: FlowContext, _: Any) -> None:
    if ctx.overwrite is OverwriteDecision.CANCEL:
        raise UserCancelled()


def _set_overwrite(ctx: FlowContext, answer: Any) -> None:
    ctx.overwrite = OverwriteDecision(answer)


def _set_package_name(ctx: FlowContext, answer: str) -> None:
    ctx.package_name = answer


def _set_variant(ctx: FlowContext, answer: str) -> None:
    ctx.variant = answer


def build_steps(catalog: TemplateCatalog, *, project_name_given: bool) -> list[Step]:
    """Create the step chain for one run.

    Args:
        catalog: Templates offered by the framework and variant steps.
        project_name_given: ``True`` when a target directory came from the
            command line, which skips the project name question.
    """

    def framework_message(ctx: FlowContext) -> str:
        if ctx.arg_template and not catalog.is_known(ctx.arg_template):
            return f"\"{ctx.arg_template}\" isn't a valid template. Please choose from below: "
        return "Select a framework:"

    def set_family(ctx: FlowContext, answer: Any) -> None:
        ctx.family = answer

    return [
        Step(
            name="project_name",
            kind=StepKind.TEXT,
            applies=lambda ctx: not project_name_given,
            message=lambda ctx: "Project name:",
            initial=lambda ctx: ctx.default_target_dir,
            on_state=_update_target_dir,
            reduce=_update_target_dir,
        ),
        Step(
            name="overwrite",
            kind=StepKind.SELECT,
            applies=lambda ctx: classify(ctx.root) is DirectoryState.NON_EMPTY,
            message=_overwrite_message,
            initial=lambda ctx: 0,
            choices=lambda ctx: OVERWRITE_CHOICES,
            override=lambda ctx: ctx.arg_overwrite,
            reduce=_set_overwrite,
        ),
        Step(
            name="overwrite_check",
            kind=StepKind.GATE,
            applies=lambda ctx: True,
            reduce=_check_overwrite,
        ),
        Step(
            name="package_name",
            kind=StepKind.TEXT,
            applies=lambda ctx: not is_valid_package_name(ctx.project_name()),
            message=lambda ctx: "Package name:",
            initial=lambda ctx: to_valid_package_name(ctx.project_name()),
            validate=lambda value: is_valid_package_name(value) or "Invalid package.json name",
            reduce=_set_package_name,
        ),
        Step(
            name="framework",
            kind=StepKind.SELECT,
            applies=lambda ctx: not catalog.is_known(ctx.arg_template),
            message=framework_message,
            initial=lambda ctx: 0,
            choices=lambda ctx: [
                Choice(family.display_name, family, family.color)
                for family in catalog.families()
            ],
            reduce=set_family,
        ),
        Step(
            name="variant",
            kind=StepKind.SELECT,
            applies=lambda ctx: ctx.family is not None and ctx.family.has_variant_choice,
            message=lambda ctx: "Select a variant:",
            initial=lambda ctx: 0,
            choices=lambda ctx: [
                Choice(variant.display_name, variant.id, variant.color)
                for variant in ctx.family.variants
            ],
            reduce=_set_variant,
        ),
    ]


def resolve_selection(ctx: FlowContext) -> ResolvedSelection:
    """Collapse a finished :class:`FlowContext` into a :class:`ResolvedSelection`.

    The template is the chosen variant, else the only variant of the chosen
    family, else the ``--template`` value itself.
    """
    template = ctx.variant
    if template is None and ctx.family is not None:
        template = ctx.family.variants[0].id
    if template is None:
        template = ctx.arg_template
    if not template:
        raise ScaffoldError("No template selected")

    template_id, is_swc = split_swc(template)
    return ResolvedSelection(
        target_dir=ctx.target_dir,
        package_name=ctx.package_name or ctx.project_name(),
        template_id=template_id,
        is_swc=is_swc,
        overwrite=ctx.overwrite,
    )
