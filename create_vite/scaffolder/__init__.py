"""create-vite scaffolder -- turns a resolved selection into files on disk.

Either copies a bundled ``templates/template-<id>`` skeleton into the target
directory, or synthesizes the delegating command of a catalog variant for the
invoking package manager.

Quick usage::

    from create_vite.scaffolder import DEFAULT_CATALOG, ScaffoldMaterializer

    materializer = ScaffoldMaterializer(templates_dir)
    await materializer.prepare(root, overwrite=None)
    await materializer.materialize(root, "vue-ts", "my-app")
"""

from create_vite.scaffolder.catalog import (
    DEFAULT_CATALOG,
    TemplateCatalog,
    TemplateFamily,
    TemplateVariant,
    split_swc,
)
from create_vite.scaffolder.commands import DelegatedCommand, run_delegated_command, synthesize_command
from create_vite.scaffolder.materializer import ScaffoldMaterializer
from create_vite.scaffolder.probe import DirectoryState, classify, empty_dir

__all__ = [
    "DEFAULT_CATALOG",
    "DelegatedCommand",
    "DirectoryState",
    "ScaffoldMaterializer",
    "TemplateCatalog",
    "TemplateFamily",
    "TemplateVariant",
    "classify",
    "empty_dir",
    "run_delegated_command",
    "split_swc",
    "synthesize_command",
]
