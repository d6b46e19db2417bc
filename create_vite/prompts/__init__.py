"""Interactive question chain for create-vite.

Quick usage::

    from create_vite.prompts import FlowContext, PromptFlowEngine, RichPrompter, build_steps

    steps = build_steps(DEFAULT_CATALOG, project_name_given=False)
    ctx = PromptFlowEngine(RichPrompter(), steps).run(
        FlowContext(cwd=Path.cwd(), target_dir="vite-project", default_target_dir="vite-project")
    )
    selection = resolve_selection(ctx)
"""

from create_vite.prompts.flow import FlowContext, PromptFlowEngine, Step, StepKind
from create_vite.prompts.renderer import Choice, Prompter, RichPrompter
from create_vite.prompts.steps import build_steps, resolve_selection

__all__ = [
    "Choice",
    "FlowContext",
    "PromptFlowEngine",
    "Prompter",
    "RichPrompter",
    "Step",
    "StepKind",
    "build_steps",
    "resolve_selection",
]
