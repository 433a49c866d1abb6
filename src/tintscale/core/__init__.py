"""Core tintscale functionality: color model, gamut mapping, curves, scale generation, validation."""

from . import ir
from .accessibility import (
    ValidationReport,
    contrast_ratio,
    relative_luminance,
    validate_batch,
    validate_scale,
)
from .color_model import ColorAideModel, ColorModel, default_model, parse_color, to_hex
from .curve import canonical_curve, closest_step, pinned_curve
from .errors import (
    ErrorContext,
    GamutSearchDegenerate,
    PaletteConfigError,
    ParseError,
    ScaleDefinitionError,
    TintscaleError,
)
from .gamut import GamutMapResult, is_displayable, map_to_gamut, map_to_gamut_detailed
from .palette_loader import load_palette_config, save_palette_config, scaffold_palette_config
from .scale import ScaleGenerator, generate_explicit, generate_from_brand

__all__ = [
    "ir",
    # Errors
    "TintscaleError",
    "ErrorContext",
    "ParseError",
    "GamutSearchDegenerate",
    "ScaleDefinitionError",
    "PaletteConfigError",
    # Color model
    "ColorModel",
    "ColorAideModel",
    "default_model",
    "parse_color",
    "to_hex",
    # Gamut
    "GamutMapResult",
    "is_displayable",
    "map_to_gamut",
    "map_to_gamut_detailed",
    # Curves
    "canonical_curve",
    "closest_step",
    "pinned_curve",
    # Generation
    "ScaleGenerator",
    "generate_explicit",
    "generate_from_brand",
    # Validation
    "ValidationReport",
    "contrast_ratio",
    "relative_luminance",
    "validate_batch",
    "validate_scale",
    # Config
    "load_palette_config",
    "save_palette_config",
    "scaffold_palette_config",
]
