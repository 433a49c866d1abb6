"""Deterministic stand-in for the real color model."""

from __future__ import annotations

from tintscale.core.errors import ParseError
from tintscale.core.ir.color import OKLCH, hex_to_rgb255, is_hex_color, rgb_to_hex


class FakeColorModel:
    """Color model with a simple analytic gamut.

    - displayable iff 0 <= l <= 1 and c <= max_chroma * (1 - |2l - 1|)
    - hex output is the gray level of l (chroma and hue are ignored)
    - hex input decodes to a gray whose lightness is the mean channel,
      unless the hex is registered in ``known``
    """

    def __init__(self, max_chroma: float = 0.2, known: dict[str, OKLCH] | None = None) -> None:
        self.max_chroma = max_chroma
        self.known = {k.upper(): v for k, v in (known or {}).items()}
        self.gamut_checks = 0

    def chroma_limit(self, l: float) -> float:  # noqa: E741
        return self.max_chroma * (1.0 - abs(2.0 * l - 1.0))

    def parse(self, text: str) -> OKLCH:
        if not isinstance(text, str) or not is_hex_color(text):
            raise ParseError(f"Unrecognized color: {text!r}")
        if text.upper() in self.known:
            return self.known[text.upper()]
        r, g, b = hex_to_rgb255(text)
        return OKLCH((r + g + b) / (3 * 255), 0.0, 0.0)

    def to_oklch(self, rgb: tuple[float, float, float]) -> OKLCH:
        return OKLCH(sum(rgb) / 3, 0.0, 0.0)

    def to_srgb(self, color: OKLCH) -> tuple[float, float, float]:
        return (color.l, color.l, color.l)

    def to_hex(self, color: OKLCH) -> str:
        return rgb_to_hex(*self.to_srgb(color))

    def in_gamut(self, color: OKLCH) -> bool:
        self.gamut_checks += 1
        if not 0.0 <= color.l <= 1.0:
            return False
        return color.c <= self.chroma_limit(color.l)
