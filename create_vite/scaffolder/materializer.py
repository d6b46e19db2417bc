"""Copies a bundled template into the target directory.

Takes a resolved template id and writes the ``template-<id>`` skeleton into
the project root, rewriting the manifest name and, for SWC variants, patching
the React plugin references.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from create_vite.errors import TemplateNotFoundError
from create_vite.models import OverwriteDecision
from create_vite.scaffolder.probe import empty_dir
from create_vite.utils import copy_path, dump_json, edit_file, ensure_dir, load_json

MANIFEST = "package.json"

# Names npm would mangle or drop when publishing the templates.
RENAME_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}

REACT_PLUGIN = "@vitejs/plugin-react"
REACT_SWC_PLUGIN = "@vitejs/plugin-react-swc"
REACT_SWC_PLUGIN_VERSION = "^3.5.0"


class ScaffoldMaterializer:
    """Writes template skeletons to disk.

    Filesystem work is pushed to worker threads with ``asyncio.to_thread``;
    calls are still awaited one after another so the on-disk state only ever
    moves forward in order.
    """

    def __init__(self, templates_dir: str | Path) -> None:
        self.templates_dir = Path(templates_dir)

    # -- Public API --------------------------------------------------------

    def template_root(self, template_id: str) -> Path:
        """Directory holding the skeleton for *template_id*.

        Raises:
            TemplateNotFoundError: If no such directory is bundled.
        """
        root = self.templates_dir / f"template-{template_id}"
        if not root.is_dir():
            raise TemplateNotFoundError(template_id, root)
        return root

    async def prepare(self, root: Path, overwrite: OverwriteDecision | None) -> None:
        """Get *root* ready to receive files.

        ``REMOVE`` wipes everything except ``.git``.  Otherwise a missing
        directory is created along with its parents; existing content is left
        alone.
        """
        if overwrite is OverwriteDecision.REMOVE:
            await asyncio.to_thread(empty_dir, root)
        elif not root.exists():
            await asyncio.to_thread(ensure_dir, root)

    async def materialize(
        self,
        root: Path,
        template_id: str,
        package_name: str,
        *,
        is_swc: bool = False,
    ) -> list[Path]:
        """Copy the template for *template_id* into *root*.

        Args:
            root: Prepared project directory.
            template_id: Catalog id with any ``-swc`` marker already stripped.
            package_name: Value written to the manifest ``name`` field.
            is_swc: Apply the React SWC patches after copying.

        Returns:
            The top-level paths written, manifest last.
        """
        template_dir = self.template_root(template_id)

        written: list[Path] = []
        for entry in sorted(template_dir.iterdir()):
            if entry.name == MANIFEST:
                continue
            dest = root / RENAME_FILES.get(entry.name, entry.name)
            await asyncio.to_thread(copy_path, entry, dest)
            written.append(dest)

        written.append(await self._write_manifest(template_dir, root, package_name))

        if is_swc:
            await self._setup_react_swc(root, is_ts=template_id.endswith("-ts"))

        return written

    # -- Internal helpers --------------------------------------------------

    async def _write_manifest(self, template_dir: Path, root: Path, package_name: str) -> Path:
        manifest = await asyncio.to_thread(load_json, template_dir / MANIFEST)
        manifest["name"] = package_name
        dest = root / MANIFEST
        await asyncio.to_thread(dest.write_text, dump_json(manifest), "utf-8")
        return dest

    async def _setup_react_swc(self, root: Path, *, is_ts: bool) -> None:
        await asyncio.to_thread(
            edit_file,
            root / MANIFEST,
            rf'"{REACT_PLUGIN}": ".+?"',
            f'"{REACT_SWC_PLUGIN}": "{REACT_SWC_PLUGIN_VERSION}"',
            pattern=True,
        )
        config_file = root / f"vite.config.{'ts' if is_ts else 'js'}"
        await asyncio.to_thread(edit_file, config_file, REACT_PLUGIN, REACT_SWC_PLUGIN)
