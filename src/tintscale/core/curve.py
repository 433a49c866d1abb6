"""
Reference lightness curves for 10-step color scales.

Supplies the canonical curve shared by every scale and builds custom
curves that pin a brand lightness at a chosen step, interpolating the
other steps around it.
"""

from __future__ import annotations

from .errors import ScaleDefinitionError
from .ir.palette import CANONICAL_LIGHTNESS, STEP_COUNT, LightnessCurve

_CANONICAL = LightnessCurve(values=CANONICAL_LIGHTNESS)


def canonical_curve() -> LightnessCurve:
    """Return the fixed canonical curve (97% ... 22%)."""
    return _CANONICAL


def check_step(step: int) -> int:
    """Validate a step index (0-9)."""
    if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step < STEP_COUNT:
        raise ScaleDefinitionError(f"Step must be an integer 0-{STEP_COUNT - 1}, got {step!r}")
    return step


def pinned_curve(
    base_l: float,
    pin_step: int,
    reference: LightnessCurve | None = None,
) -> LightnessCurve:
    """Build a curve with ``curve[pin_step] == base_l`` exactly.

    Steps ``0..pin_step`` interpolate linearly from ``reference[0]`` down to
    ``base_l``; steps ``pin_step..9`` from ``base_l`` down to ``reference[9]``.
    A pin at either end leaves only one segment.

    The result is lightest-first only while *base_l* lies between
    ``reference[9]`` and ``reference[0]``. A brand lighter than step 0 or
    darker than step 9 of the reference bends the curve at the pin, so
    the neighbouring steps end up darker (or lighter) than the brand color.

    Args:
        base_l: Brand lightness (0-1).
        pin_step: Step receiving ``base_l``.
        reference: Curve supplying the end points (default: canonical).

    Returns:
        LightnessCurve with ``pinned_step`` set.
    """
    check_step(pin_step)
    if not 0.0 <= base_l <= 1.0:
        raise ScaleDefinitionError(f"Lightness must be 0-1, got {base_l}")
    ref = reference if reference is not None else canonical_curve()
    top = ref[0]
    bottom = ref[len(ref) - 1]
    last = len(ref) - 1

    values: list[float] = []
    for i in range(len(ref)):
        if i == pin_step:
            values.append(base_l)
        elif i < pin_step:
            t = i / pin_step
            values.append(top + (base_l - top) * t)
        else:
            t = (i - pin_step) / (last - pin_step)
            values.append(base_l + (bottom - base_l) * t)

    return LightnessCurve(values=tuple(values), pinned_step=pin_step)


def closest_step(l: float, curve: LightnessCurve | None = None) -> int:  # noqa: E741
    """Return the index of the curve value nearest *l*.

    Ties go to the lower index (first minimum in a left-to-right scan).
    """
    ref = curve if curve is not None else canonical_curve()
    best = 0
    best_dist = abs(ref[0] - l)
    for i in range(1, len(ref)):
        d = abs(ref[i] - l)
        if d < best_dist:
            best_dist = d
            best = i
    return best
