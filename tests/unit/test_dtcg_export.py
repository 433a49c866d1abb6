"""
Unit tests for DTCG token export.
"""

import json

import pytest

from tintscale.core.dtcg_export import (
    BRAND_TOKENS_FILE,
    build_brand_tokens,
    build_palette_tokens,
    export_brand_theme,
    write_tokens_file,
)
from tintscale.core.ir.palette import BrandScaleDefinition, BrandTheme, ExplicitScaleDefinition


@pytest.fixture
def primitive_batch(fake_generator, blue_chroma):
    return fake_generator.generate_all(
        {"blue": ExplicitScaleDefinition(hue=250, chroma_by_shade=blue_chroma)}
    )


@pytest.fixture
def theme():
    return BrandTheme(
        label="Acme",
        output_dirs=("themes/acme-light", "themes/acme-dark"),
        colors={
            "gray": BrandScaleDefinition(hex="#808080", label="Gray: neutral"),
            "plain": BrandScaleDefinition(hex="#404040"),
        },
    )


@pytest.fixture
def brand_batch(fake_generator, theme):
    return fake_generator.generate_all(theme.colors)


# =============================================================================
# Primitive palette
# =============================================================================


class TestPaletteTokens:
    """Tests for the primitive palette token tree."""

    def test_structure(self, primitive_batch):
        tokens = build_palette_tokens(primitive_batch)
        color = tokens["color"]
        assert color["$type"] == "color"
        assert "OKLCH" in color["$description"]
        assert list(color["blue"]) == [str(step) for step in range(10)]

    def test_values_are_scale_hexes(self, primitive_batch):
        blue = build_palette_tokens(primitive_batch)["color"]["blue"]
        assert [blue[str(i)]["$value"] for i in range(10)] == primitive_batch.scales["blue"].hexes

    def test_step_descriptions(self, primitive_batch):
        blue = build_palette_tokens(primitive_batch)["color"]["blue"]
        assert blue["0"]["$description"] == "blue 0 - lightest"
        assert blue["6"]["$description"] == "blue 6 - primary"
        assert blue["9"]["$description"] == "blue 9 - darkest"
        assert "$description" not in blue["3"]

    def test_special_colors(self, primitive_batch):
        color = build_palette_tokens(primitive_batch)["color"]
        assert color["white"] == {"$value": "oklch(100% 0 0)", "$description": "Pure white"}
        assert color["black"]["$value"] == "oklch(0% 0 0)"
        assert color["transparent"]["$value"] == "transparent"


# =============================================================================
# Brand palette
# =============================================================================


class TestBrandTokens:
    """Tests for the brand palette token tree."""

    def test_structure(self, brand_batch, theme):
        tokens = build_brand_tokens(brand_batch, theme)
        assert tokens["$description"].startswith("Acme brand palette.")
        assert set(tokens["brand"]["palette"]) == {"gray", "plain"}

    def test_pinned_step_description(self, brand_batch, theme):
        gray = build_brand_tokens(brand_batch, theme)["brand"]["palette"]["gray"]
        pinned = brand_batch.scales["gray"].pinned_step
        assert gray[str(pinned)] == {
            "$value": "#808080",
            "$type": "color",
            "$description": (
                f"Gray: neutral. Base color (step {pinned}, pinned to official brand hex)."
            ),
        }

    def test_tint_step_description(self, brand_batch, theme):
        gray = build_brand_tokens(brand_batch, theme)["brand"]["palette"]["gray"]
        assert gray["0"]["$description"] == "Gray: neutral. Tint step 0."

    def test_label_falls_back_to_name(self, brand_batch, theme):
        plain = build_brand_tokens(brand_batch, theme)["brand"]["palette"]["plain"]
        assert plain["0"]["$description"] == "plain. Tint step 0."

    def test_failed_colors_omitted(self, fake_generator, theme):
        broken = theme.model_copy(
            update={"colors": {**theme.colors, "bad": BrandScaleDefinition(hex="#12")}}
        )
        batch = fake_generator.generate_all(broken.colors)
        palette = build_brand_tokens(batch, broken)["brand"]["palette"]
        assert "bad" not in palette


# =============================================================================
# Writing
# =============================================================================


class TestWriteTokens:
    """Tests for writing token files."""

    def test_write_format(self, tmp_path):
        path = write_tokens_file({"a": {"$value": "#FFFFFF"}}, tmp_path / "out" / "t.json")
        text = path.read_text()
        assert text.endswith("}\n")
        assert '    "a": {' in text
        assert json.loads(text) == {"a": {"$value": "#FFFFFF"}}

    def test_export_brand_theme(self, tmp_path, brand_batch, theme):
        paths = export_brand_theme(brand_batch, theme, tmp_path)
        assert paths == [
            tmp_path / "themes/acme-light" / BRAND_TOKENS_FILE,
            tmp_path / "themes/acme-dark" / BRAND_TOKENS_FILE,
        ]
        first, second = (json.loads(p.read_text()) for p in paths)
        assert first == second
        assert first == build_brand_tokens(brand_batch, theme)
