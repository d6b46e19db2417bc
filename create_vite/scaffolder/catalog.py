"""Registry of the template families and variants create-vite offers.

A variant either maps onto a bundled ``templates/template-<id>`` skeleton or
carries a ``custom_command`` that delegates scaffolding to another generator
(``create-vue``, ``nuxi``, ...).  The catalog is immutable and validated once
at construction so an id can never be ambiguous.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

SWC_MARKER = "-swc"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TemplateVariant(BaseModel):
    """One selectable template."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Value accepted by --template")
    display_name: str = Field(..., description="Label shown in the variant prompt")
    color: str = Field(default="default", description="Rich style for the label")
    custom_command: str | None = Field(
        default=None,
        description="Delegating command with a TARGET_DIR placeholder, e.g. "
        "'npm create vue@latest TARGET_DIR'",
    )

    @property
    def is_delegating(self) -> bool:
        return self.custom_command is not None


class TemplateFamily(BaseModel):
    """A framework and its ordered variants."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    display_name: str
    color: str = Field(default="default")
    variants: tuple[TemplateVariant, ...]

    @field_validator("variants")
    @classmethod
    def _require_variants(cls, value: tuple[TemplateVariant, ...]) -> tuple[TemplateVariant, ...]:
        if not value:
            raise ValueError("a template family needs at least one variant")
        return value

    @property
    def has_variant_choice(self) -> bool:
        """A family of one resolves to its variant without asking."""
        return len(self.variants) > 1


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Immutable lookup over an ordered sequence of :class:`TemplateFamily`."""

    def __init__(self, families: Iterable[TemplateFamily]) -> None:
        self._families: tuple[TemplateFamily, ...] = tuple(families)
        if not self._families:
            raise ValueError("a template catalog needs at least one family")

        self._variants: dict[str, TemplateVariant] = {}
        for family in self._families:
            for variant in family.variants:
                if variant.id in self._variants:
                    raise ValueError(f"duplicate template id: {variant.id!r}")
                self._variants[variant.id] = variant

    def families(self) -> tuple[TemplateFamily, ...]:
        return self._families

    def flattened_ids(self, *, delegating: bool = True) -> list[str]:
        """Every variant id, in family then variant order.

        With ``delegating=False`` only ids backed by a bundled skeleton are
        returned.
        """
        return [
            variant.id
            for variant in self._variants.values()
            if delegating or not variant.is_delegating
        ]

    def is_known(self, template_id: str | None) -> bool:
        return bool(template_id) and template_id in self.flattened_ids()

    def find_variant(self, template_id: str) -> TemplateVariant | None:
        return self._variants.get(template_id)

    def help_lines(self) -> list[str]:
        """Template ids that can be passed to ``--template``, one family per line.

        Only variants backed by a bundled skeleton are listed; delegating
        variants are reachable through the interactive prompt.
        """
        local = self.flattened_ids(delegating=False)
        lines: list[str] = []
        for family in self._families:
            ids = [v.id for v in family.variants if v.id in local]
            if ids:
                lines.append("  ".join(f"{tid:<13}" for tid in ids).rstrip())
        return lines


def split_swc(template_id: str) -> tuple[str, bool]:
    """Strip the SWC marker from *template_id*.

    ``"react-swc-ts"`` becomes ``("react-ts", True)``; ids without the
    marker come back unchanged with ``False``.
    """
    if SWC_MARKER in template_id:
        return template_id.replace(SWC_MARKER, "", 1), True
    return template_id, False


# ---------------------------------------------------------------------------
# Default catalog
# ---------------------------------------------------------------------------

FRAMEWORKS: Sequence[TemplateFamily] = (
    TemplateFamily(
        id="vanilla",
        display_name="Vanilla",
        color="yellow",
        variants=(
            TemplateVariant(id="vanilla-ts", display_name="TypeScript", color="blue"),
            TemplateVariant(id="vanilla", display_name="JavaScript", color="yellow"),
        ),
    ),
    TemplateFamily(
        id="vue",
        display_name="Vue",
        color="green",
        variants=(
            TemplateVariant(id="vue-ts", display_name="TypeScript", color="blue"),
            TemplateVariant(id="vue", display_name="JavaScript", color="yellow"),
            TemplateVariant(
                id="custom-create-vue",
                display_name="Customize with create-vue ↗",
                color="green",
                custom_command="npm create vue@latest TARGET_DIR",
            ),
            TemplateVariant(
                id="custom-nuxt",
                display_name="Nuxt ↗",
                color="bright_green",
                custom_command="npm exec nuxi init TARGET_DIR",
            ),
        ),
    ),
    TemplateFamily(
        id="react",
        display_name="React",
        color="cyan",
        variants=(
            TemplateVariant(id="react-ts", display_name="TypeScript", color="blue"),
            TemplateVariant(id="react-swc-ts", display_name="TypeScript + SWC", color="blue"),
            TemplateVariant(id="react", display_name="JavaScript", color="yellow"),
            TemplateVariant(id="react-swc", display_name="JavaScript + SWC", color="yellow"),
            TemplateVariant(
                id="custom-react-router",
                display_name="React Router v7 ↗",
                color="cyan",
                custom_command="npm create react-router@latest TARGET_DIR",
            ),
        ),
    ),
    TemplateFamily(
        id="others",
        display_name="Others",
        color="default",
        variants=(
            TemplateVariant(
                id="create-vite-extra",
                display_name="create-vite-extra ↗",
                custom_command="npm create vite-extra@latest TARGET_DIR",
            ),
            TemplateVariant(
                id="create-electron-vite",
                display_name="create-electron-vite ↗",
                custom_command="npm create electron-vite@latest TARGET_DIR",
            ),
        ),
    ),
)

DEFAULT_CATALOG = TemplateCatalog(FRAMEWORKS)
