"""
Built-in palette presets.

Primitive colors carry accessibility-tuned chroma tables: shade 6+ reaches
4.5:1 against white, shade 5 reaches 3:1, and every step stays inside
sRGB. Brand themes list official brand hexes per theme.
"""

from __future__ import annotations

from .ir.palette import (
    BrandScaleDefinition,
    BrandTheme,
    ExplicitScaleDefinition,
    LightnessCurve,
    PaletteConfig,
)

# =============================================================================
# Primitive palette
# =============================================================================

PRIMITIVE_COLORS: dict[str, ExplicitScaleDefinition] = {
    # Neutrals: very low chroma, flat curve
    "gray": ExplicitScaleDefinition(
        hue=260,
        chroma_by_shade=(0.005, 0.008, 0.010, 0.012, 0.012, 0.012, 0.010, 0.010, 0.008, 0.005),
    ),
    "dark": ExplicitScaleDefinition(
        hue=280,
        chroma_by_shade=(0.008, 0.012, 0.015, 0.018, 0.018, 0.018, 0.015, 0.015, 0.012, 0.010),
    ),
    # High-contrast hues support higher chroma
    "blue": ExplicitScaleDefinition(
        hue=250,
        chroma_by_shade=(0.03, 0.06, 0.10, 0.14, 0.17, 0.18, 0.17, 0.14, 0.11, 0.08),
    ),
    "indigo": ExplicitScaleDefinition(
        hue=270,
        chroma_by_shade=(0.03, 0.06, 0.09, 0.13, 0.15, 0.16, 0.15, 0.13, 0.10, 0.07),
    ),
    "violet": ExplicitScaleDefinition(
        hue=290,
        chroma_by_shade=(0.04, 0.08, 0.12, 0.16, 0.18, 0.19, 0.17, 0.14, 0.11, 0.08),
    ),
    "grape": ExplicitScaleDefinition(
        hue=310,
        chroma_by_shade=(0.04, 0.08, 0.12, 0.15, 0.17, 0.18, 0.16, 0.13, 0.10, 0.07),
    ),
    "red": ExplicitScaleDefinition(
        hue=27,
        chroma_by_shade=(0.03, 0.07, 0.11, 0.15, 0.17, 0.18, 0.16, 0.13, 0.10, 0.07),
    ),
    "pink": ExplicitScaleDefinition(
        hue=350,
        chroma_by_shade=(0.03, 0.07, 0.10, 0.13, 0.15, 0.16, 0.14, 0.12, 0.09, 0.06),
    ),
    "cyan": ExplicitScaleDefinition(
        hue=200,
        chroma_by_shade=(0.02, 0.05, 0.08, 0.10, 0.11, 0.12, 0.11, 0.09, 0.07, 0.05),
    ),
    "teal": ExplicitScaleDefinition(
        hue=180,
        chroma_by_shade=(0.02, 0.04, 0.07, 0.09, 0.10, 0.11, 0.10, 0.08, 0.06, 0.04),
    ),
    # Hues that lose contrast quickly get constrained chroma
    "orange": ExplicitScaleDefinition(
        hue=55,
        chroma_by_shade=(0.03, 0.07, 0.11, 0.14, 0.16, 0.15, 0.13, 0.11, 0.08, 0.06),
    ),
    "yellow": ExplicitScaleDefinition(
        hue=95,
        chroma_by_shade=(0.03, 0.06, 0.09, 0.11, 0.11, 0.10, 0.08, 0.07, 0.06, 0.04),
    ),
    "lime": ExplicitScaleDefinition(
        hue=130,
        chroma_by_shade=(0.03, 0.06, 0.10, 0.13, 0.14, 0.13, 0.11, 0.09, 0.07, 0.05),
    ),
    "green": ExplicitScaleDefinition(
        hue=145,
        chroma_by_shade=(0.03, 0.07, 0.11, 0.14, 0.15, 0.14, 0.13, 0.11, 0.08, 0.06),
    ),
}

# Singletons emitted next to the scales in the primitive token file
SPECIAL_COLORS: dict[str, tuple[str, str]] = {
    "white": ("oklch(100% 0 0)", "Pure white"),
    "black": ("oklch(0% 0 0)", "Pure black"),
    "transparent": ("transparent", "Fully transparent"),
}


# =============================================================================
# Brand themes
# =============================================================================

BRAND_THEMES: dict[str, BrandTheme] = {
    "ccui-30": BrandTheme(
        label="CCUI 3.0",
        output_dirs=("src/themes/ccui-30-light", "src/themes/ccui-30-dark"),
        colors={
            "whiteGold": BrandScaleDefinition(
                hex="#F4EBD7", label="White Gold: warm cream neutral"
            ),
            "brass": BrandScaleDefinition(hex="#C3B497", label="Brass: muted warm accent"),
            "alloy": BrandScaleDefinition(
                hex="#FFA680", label="Alloy: warm highlight, lighter companion to Copper"
            ),
            "copper": BrandScaleDefinition(hex="#FF7A52", label="Copper: signature accent"),
            "bronze": BrandScaleDefinition(hex="#6C3A2A", label="Bronze: deep earthy anchor"),
            "verdigris": BrandScaleDefinition(
                hex="#9EB4AB", label="Verdigris: nature-inspired supporting color"
            ),
            "steel": BrandScaleDefinition(
                hex="#697771", label="Steel: balanced mid-tone neutral"
            ),
            "pewter": BrandScaleDefinition(hex="#A1B4BA", label="Pewter: cool light neutral"),
            "castIron": BrandScaleDefinition(
                hex="#37352A", label="Cast Iron: primary dark neutral"
            ),
        },
    ),
    "ccui-21": BrandTheme(
        label="CCUI 2.1",
        output_dirs=("src/themes/ccui-21-light",),
        colors={
            "navyBlue": BrandScaleDefinition(hex="#254677", label="Navy Blue: primary logo color"),
            "skyBlue": BrandScaleDefinition(
                hex="#55BAEA", label="Sky Blue: secondary logo color"
            ),
            "purple": BrandScaleDefinition(hex="#822275", label="Purple: typography accent"),
            "yellow": BrandScaleDefinition(hex="#E6E651", label="Yellow: decorative highlight"),
        },
    ),
}


def default_palette_config() -> PaletteConfig:
    """Return a PaletteConfig holding every built-in preset."""
    return PaletteConfig(
        curve=LightnessCurve(),
        colors=dict(PRIMITIVE_COLORS),
        themes=dict(BRAND_THEMES),
    )
