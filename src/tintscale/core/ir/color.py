"""
Color value types: OKLCH triples and canonical sRGB hex strings.

OKLCH lightness is stored 0-1 internally and reported as a 0-100
percentage in human-facing output.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace

from ..errors import ParseError

HexColor = str

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hue(h: float) -> float:
    """Normalize a hue angle into [0, 360); NaN (achromatic) becomes 0."""
    if math.isnan(h):
        return 0.0
    return h % 360.0


@dataclass(frozen=True)
class OKLCH:
    """Immutable OKLCH color.

    Attributes:
        l: Lightness (0-1).
        c: Chroma (>= 0, unitless).
        h: Hue in degrees [0, 360). Achromatic colors use 0.
        alpha: Opacity (0-1).
    """

    l: float  # noqa: E741
    c: float
    h: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    @property
    def lightness_percent(self) -> float:
        return self.l * 100.0

    def with_chroma(self, c: float) -> OKLCH:
        """Return a copy with chroma replaced, L and H untouched."""
        return replace(self, c=c)

    def with_lightness(self, l: float) -> OKLCH:  # noqa: E741
        return replace(self, l=l)

    def to_css(self) -> str:
        """Format as a CSS ``oklch()`` string, e.g. ``oklch(97% 0.030 250)``."""
        L_fmt = f"{self.lightness_percent:g}"
        C_fmt = f"{self.c:.3f}"
        H_fmt = f"{self.h:g}"
        if self.alpha < 1.0:
            return f"oklch({L_fmt}% {C_fmt} {H_fmt} / {self.alpha:.2f})"
        return f"oklch({L_fmt}% {C_fmt} {H_fmt})"

    def describe(self) -> str:
        """Format for swatch documentation, e.g. ``62.3% 0.1234 40.1°``."""
        return f"{self.lightness_percent:.1f}% {self.c:.4f} {self.h:.1f}°"


def is_hex_color(value: str) -> bool:
    """Check whether *value* is a ``#RGB`` or ``#RRGGBB`` string."""
    return isinstance(value, str) and _HEX_RE.match(value.strip()) is not None


def normalize_hex(value: str) -> HexColor:
    """Normalize a hex color to canonical ``#RRGGBB`` uppercase.

    Args:
        value: ``#RGB`` or ``#RRGGBB`` (any case, surrounding whitespace ignored).

    Returns:
        Canonical uppercase six-digit hex string.

    Raises:
        ParseError: If *value* is not a 3- or 6-digit hex color.
    """
    if not isinstance(value, str):
        raise ParseError(f"Expected a hex color string, got {type(value).__name__}")
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise ParseError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


def hex_to_rgb255(value: str) -> tuple[int, int, int]:
    """Split a hex color into 8-bit channels."""
    digits = normalize_hex(value)[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, .5 going up."""
    return int(value + 0.5)


def channel_to_byte(value: float) -> int:
    """Clamp an sRGB channel to [0, 1] and scale it to 0-255."""
    return round_half_up(max(0.0, min(1.0, value)) * 255)


def rgb_to_hex(r: float, g: float, b: float) -> HexColor:
    """Format sRGB channels in [0, 1] as ``#RRGGBB``.

    Channels are clamped and rounded half up to the nearest 8-bit value.
    """
    r_i, g_i, b_i = channel_to_byte(r), channel_to_byte(g), channel_to_byte(b)
    return f"#{r_i:02X}{g_i:02X}{b_i:02X}"
