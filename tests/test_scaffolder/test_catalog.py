"""Unit tests for the template catalog (create_vite.scaffolder.catalog).

Tests cover:
- Default catalog contents and ordering
- Lookups: flattened_ids, find_variant, is_known
- Construction-time validation (duplicate ids, empty families)
- help_lines listing
- split_swc
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import BUNDLED_TEMPLATES
from create_vite.scaffolder.catalog import (
    DEFAULT_CATALOG,
    TemplateCatalog,
    TemplateFamily,
    TemplateVariant,
    split_swc,
)

pytestmark = pytest.mark.unit


def _family(family_id: str, *variant_ids: str) -> TemplateFamily:
    return TemplateFamily(
        id=family_id,
        display_name=family_id.title(),
        variants=tuple(TemplateVariant(id=v, display_name=v) for v in variant_ids),
    )


class TestDefaultCatalog:
    def test_family_order(self):
        assert [f.id for f in DEFAULT_CATALOG.families()] == ["vanilla", "vue", "react", "others"]

    def test_flattened_ids_order(self):
        ids = DEFAULT_CATALOG.flattened_ids()
        assert ids[:2] == ["vanilla-ts", "vanilla"]
        assert ids.index("vue-ts") < ids.index("react-ts") < ids.index("create-vite-extra")
        assert len(ids) == len(set(ids))

    def test_local_ids_exclude_delegating_variants(self):
        local = DEFAULT_CATALOG.flattened_ids(delegating=False)
        assert local == [
            "vanilla-ts", "vanilla", "vue-ts", "vue",
            "react-ts", "react-swc-ts", "react", "react-swc",
        ]

    def test_local_variants_have_bundled_templates(self):
        for variant_id in DEFAULT_CATALOG.flattened_ids(delegating=False):
            template_id, _ = split_swc(variant_id)
            assert (BUNDLED_TEMPLATES / f"template-{template_id}" / "package.json").is_file()

    def test_delegating_commands_use_target_placeholder(self):
        for variant_id in DEFAULT_CATALOG.flattened_ids():
            variant = DEFAULT_CATALOG.find_variant(variant_id)
            if variant.is_delegating:
                assert "TARGET_DIR" in variant.custom_command
                assert variant.custom_command.startswith(("npm create ", "npm exec "))

    def test_find_variant(self):
        variant = DEFAULT_CATALOG.find_variant("custom-nuxt")
        assert variant.custom_command == "npm exec nuxi init TARGET_DIR"
        assert DEFAULT_CATALOG.find_variant("angular") is None

    @pytest.mark.parametrize("value,expected", [
        ("vue-ts", True),
        ("react-swc-ts", True),
        ("vue", True),
        ("custom-create-vue", True),
        ("unknown", False),
        ("", False),
        (None, False),
    ])
    def test_is_known(self, value, expected):
        assert DEFAULT_CATALOG.is_known(value) is expected

    def test_help_lines_only_list_local_templates(self):
        text = "\n".join(DEFAULT_CATALOG.help_lines())
        assert "vue-ts" in text
        assert "react-swc-ts" in text
        assert "custom-nuxt" not in text
        assert len(DEFAULT_CATALOG.help_lines()) == 3

    def test_help_lines_cover_every_local_id(self):
        listed = " ".join(DEFAULT_CATALOG.help_lines()).split()
        assert listed == DEFAULT_CATALOG.flattened_ids(delegating=False)


class TestCatalogValidation:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="duplicate template id"):
            TemplateCatalog([_family("a", "x", "y"), _family("b", "y")])

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError):
            TemplateCatalog([])

    def test_family_needs_variants(self):
        with pytest.raises(ValidationError):
            TemplateFamily(id="empty", display_name="Empty", variants=())

    def test_family_of_one_offers_no_choice(self):
        assert _family("lit", "lit").has_variant_choice is False
        assert _family("vue", "vue-ts", "vue").has_variant_choice is True

    def test_models_are_frozen(self):
        variant = TemplateVariant(id="x", display_name="X")
        with pytest.raises(ValidationError):
            variant.id = "y"


class TestSplitSwc:
    @pytest.mark.parametrize("value,expected", [
        ("react-swc-ts", ("react-ts", True)),
        ("react-swc", ("react", True)),
        ("react-ts", ("react-ts", False)),
        ("vue", ("vue", False)),
    ])
    def test_split(self, value, expected):
        assert split_swc(value) == expected
