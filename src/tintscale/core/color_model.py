"""
Color model capability: parsing, OKLCH conversion, hex output, gamut test.

The generator and gamut mapper only talk to the :class:`ColorModel`
protocol, so they can run against any implementation. The default,
:class:`ColorAideModel`, is backed by coloraide.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

from coloraide import Color

from .errors import ParseError
from .ir.color import OKLCH, HexColor, is_hex_color, normalize_hex, rgb_to_hex

logger = logging.getLogger(__name__)

SRGB = tuple[float, float, float]

# coloraide's own default fit tolerance for in_gamut checks
DEFAULT_GAMUT_TOLERANCE = 0.000075

# Chroma below this is treated as achromatic (hue forced to 0)
ACHROMATIC_THRESHOLD = 1e-7

TRANSPARENT = OKLCH(0.0, 0.0, 0.0, alpha=0.0)


class ColorModel(Protocol):
    """Protocol abstracting color parsing and OKLCH <-> sRGB conversion."""

    def parse(self, text: str) -> OKLCH: ...

    def to_oklch(self, rgb: SRGB) -> OKLCH: ...

    def to_srgb(self, color: OKLCH) -> SRGB: ...

    def to_hex(self, color: OKLCH) -> HexColor: ...

    def in_gamut(self, color: OKLCH) -> bool: ...


class ColorAideModel:
    """Default color model built on coloraide.

    Args:
        gamut_tolerance: Channel overshoot still counted as inside sRGB.
    """

    def __init__(self, gamut_tolerance: float = DEFAULT_GAMUT_TOLERANCE) -> None:
        self.gamut_tolerance = gamut_tolerance

    def parse(self, text: str) -> OKLCH:
        """Parse a hex, ``transparent``, named or CSS color expression into OKLCH.

        Raises:
            ParseError: If the input is not a recognized color.
        """
        if not isinstance(text, str) or not text.strip():
            raise ParseError(f"Expected a color string, got {text!r}")
        value = text.strip()
        if value.lower() == "transparent":
            return TRANSPARENT
        if value.startswith("#") and not is_hex_color(value):
            # coloraide also accepts #RGBA/#RRGGBBAA, which are not valid inputs here
            raise ParseError(f"Invalid hex color: {text!r}")
        try:
            color = Color(normalize_hex(value) if value.startswith("#") else value)
        except ValueError as e:
            raise ParseError(f"Unrecognized color: {text!r}") from e
        return self._from_coloraide(color)

    def to_oklch(self, rgb: SRGB) -> OKLCH:
        """Convert sRGB channels in [0, 1] to OKLCH."""
        return self._from_coloraide(Color("srgb", list(rgb)))

    def to_srgb(self, color: OKLCH) -> SRGB:
        """Convert OKLCH to unclipped sRGB channels."""
        srgb = self._to_coloraide(color).convert("srgb")
        return (srgb[0], srgb[1], srgb[2])

    def to_hex(self, color: OKLCH) -> HexColor:
        """Render OKLCH as uppercase ``#RRGGBB``.

        Channels are clamped, so callers must gamut-map first when the
        chroma is not already known to be displayable.
        """
        return rgb_to_hex(*self.to_srgb(color))

    def in_gamut(self, color: OKLCH) -> bool:
        """Check whether *color* renders in sRGB.

        Channels may overshoot [0, 1] by up to ``gamut_tolerance`` and still
        count as inside; :meth:`to_hex` clamps that overshoot, which moves a
        channel by far less than one 8-bit step (0.000075 * 255 < 0.02).
        Pass ``gamut_tolerance=0`` for a check with no clamping at all.
        """
        return self._to_coloraide(color).in_gamut("srgb", tolerance=self.gamut_tolerance)

    @staticmethod
    def _to_coloraide(color: OKLCH) -> Color:
        return Color("oklch", [color.l, color.c, color.h], color.alpha)

    @staticmethod
    def _from_coloraide(color: Color) -> OKLCH:
        oklch = color.convert("oklch")
        l, c, h, alpha = oklch[0], oklch[1], oklch[2], oklch[3]  # noqa: E741
        if math.isnan(c) or c < ACHROMATIC_THRESHOLD:
            c, h = 0.0, 0.0
        elif math.isnan(h):
            h = 0.0
        if math.isnan(alpha):
            alpha = 1.0
        # Round-off can push white a hair above 1
        l = max(0.0, min(1.0, 0.0 if math.isnan(l) else l))  # noqa: E741
        return OKLCH(l, c, h, alpha)


_default_model: ColorModel | None = None


def default_model() -> ColorModel:
    """Return the shared default color model."""
    global _default_model
    if _default_model is None:
        _default_model = ColorAideModel()
    return _default_model


def parse_color(text: str, model: ColorModel | None = None) -> OKLCH:
    """Parse *text* into OKLCH using *model* (default: coloraide)."""
    return (model or default_model()).parse(text)


def to_hex(color: OKLCH, model: ColorModel | None = None) -> HexColor:
    """Render an in-gamut OKLCH color as uppercase ``#RRGGBB``."""
    return (model or default_model()).to_hex(color)
