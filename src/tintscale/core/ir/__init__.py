"""
tintscale intermediate representation types.

Color values, palette definitions/configuration, and generated scales.
All types are re-exported from this package.
"""

from .color import (
    OKLCH,
    HexColor,
    hex_to_rgb255,
    is_hex_color,
    normalize_hex,
    normalize_hue,
    channel_to_byte,
    rgb_to_hex,
    round_half_up,
)
from .palette import (
    CANONICAL_LIGHTNESS,
    STEP_COUNT,
    BrandScaleDefinition,
    BrandTheme,
    ExplicitScaleDefinition,
    LightnessCurve,
    PaletteConfig,
    ScaleDefinition,
)
from .scale import (
    AccessibilityIssue,
    BatchResult,
    ContrastIssue,
    GamutIssue,
    GeneratedScale,
    ScaleEntry,
    ScaleFailure,
    ScaleSource,
)

__all__ = [
    # Color values
    "OKLCH",
    "HexColor",
    "hex_to_rgb255",
    "is_hex_color",
    "normalize_hex",
    "normalize_hue",
    "rgb_to_hex",
    "channel_to_byte",
    "round_half_up",
    # Definitions and configuration
    "CANONICAL_LIGHTNESS",
    "STEP_COUNT",
    "BrandScaleDefinition",
    "BrandTheme",
    "ExplicitScaleDefinition",
    "LightnessCurve",
    "PaletteConfig",
    "ScaleDefinition",
    # Generated scales
    "AccessibilityIssue",
    "BatchResult",
    "ContrastIssue",
    "GamutIssue",
    "GeneratedScale",
    "ScaleEntry",
    "ScaleFailure",
    "ScaleSource",
]
