"""
tintscale - perceptual OKLCH color scales for design-token pipelines.

Generates deterministic, gamut-mapped, accessibility-checked 10-step
color ramps from explicit hue/chroma tables or from single brand colors.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    GamutSearchDegenerate,
    PaletteConfigError,
    ParseError,
    ScaleDefinitionError,
    TintscaleError,
)
from .core.scale import ScaleGenerator, generate_explicit, generate_from_brand


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("tintscale")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "TintscaleError",
    "ParseError",
    "GamutSearchDegenerate",
    "ScaleDefinitionError",
    "PaletteConfigError",
    "ScaleGenerator",
    "generate_explicit",
    "generate_from_brand",
]
