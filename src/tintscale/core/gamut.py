"""
sRGB gamut mapping for OKLCH colors.

Out-of-gamut colors are brought into sRGB by reducing chroma with a
binary search while holding lightness and hue fixed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .color_model import ColorModel, default_model
from .errors import GamutSearchDegenerate
from .ir.color import OKLCH

logger = logging.getLogger(__name__)

# Safety cap on bisection steps; 32 halvings of a 0.4 interval is < 1e-10
MAX_ITERATIONS = 32

# Stop once the chroma bracket is narrower than this; far below what
# changes an 8-bit channel
CHROMA_TOLERANCE = 1e-7


@dataclass(frozen=True)
class GamutMapResult:
    """Outcome of mapping one color into sRGB.

    Attributes:
        requested: Input color.
        color: Displayable color (equal to ``requested`` when nothing changed).
        reduced: True if chroma had to be reduced.
        iterations: Bisection steps performed.
    """

    requested: OKLCH
    color: OKLCH
    reduced: bool
    iterations: int = 0


def is_displayable(l: float, c: float, h: float, model: ColorModel | None = None) -> bool:  # noqa: E741
    """Return True if OKLCH (l, c, h) renders in sRGB without channel clamping."""
    return (model or default_model()).in_gamut(OKLCH(l, c, h))


def map_to_gamut_detailed(
    l: float,  # noqa: E741
    c: float,
    h: float,
    model: ColorModel | None = None,
    *,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = CHROMA_TOLERANCE,
) -> GamutMapResult:
    """Map OKLCH (l, c, h) into sRGB, reporting whether chroma was reduced.

    Args:
        l, c, h: Requested OKLCH coordinates (l in 0-1, h in degrees).
        model: Color model providing the gamut test.
        max_iterations: Upper bound on bisection steps.
        tolerance: Stop when the chroma bracket is narrower than this.

    Returns:
        GamutMapResult whose ``color`` has the same L and H and the largest
        chroma in [0, c] found to be displayable.

    Raises:
        GamutSearchDegenerate: If even zero chroma is not displayable.
    """
    model = model or default_model()
    requested = OKLCH(l, c, h)

    if model.in_gamut(requested):
        return GamutMapResult(requested=requested, color=requested, reduced=False)

    if c <= 0.0:
        # Nothing to search; hand the achromatic color back as-is
        logger.warning(f"Achromatic color L={l:.4f} is outside sRGB, returning unchanged")
        return GamutMapResult(requested=requested, color=requested.with_chroma(0.0), reduced=False)

    if not model.in_gamut(requested.with_chroma(0.0)):
        raise GamutSearchDegenerate(
            f"No displayable chroma for L={l:.4f} H={requested.h:.1f}: "
            "lightness is outside the sRGB range"
        )

    lo, hi = 0.0, c
    iterations = 0
    while iterations < max_iterations and hi - lo >= tolerance:
        mid = (lo + hi) / 2
        if model.in_gamut(requested.with_chroma(mid)):
            lo = mid
        else:
            hi = mid
        iterations += 1

    logger.debug(
        f"Gamut mapped L={l:.4f} H={requested.h:.1f}: C {c:.4f} -> {lo:.4f} "
        f"in {iterations} iterations"
    )
    return GamutMapResult(
        requested=requested,
        color=requested.with_chroma(lo),
        reduced=True,
        iterations=iterations,
    )


def map_to_gamut(
    l: float,  # noqa: E741
    c: float,
    h: float,
    model: ColorModel | None = None,
    *,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = CHROMA_TOLERANCE,
) -> OKLCH:
    """Return (l, c', h) with the largest displayable chroma c' <= c.

    The input is returned unchanged when already displayable.
    """
    return map_to_gamut_detailed(
        l, c, h, model, max_iterations=max_iterations, tolerance=tolerance
    ).color
