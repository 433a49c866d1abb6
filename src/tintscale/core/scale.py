"""
10-step color scale generation.

Two modes:

- explicit: canonical lightness per step, a per-step chroma table, fixed hue
  (the primitive palette: blue, red, gray, ...)
- brand: a single official hex decomposed to OKLCH; the hex is pinned
  verbatim at one step and the other steps keep its chroma and hue while
  following the lightness curve
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from .color_model import ColorModel, default_model
from .curve import canonical_curve, check_step, closest_step, pinned_curve
from .errors import ScaleDefinitionError, TintscaleError, with_context
from .gamut import CHROMA_TOLERANCE, MAX_ITERATIONS, map_to_gamut_detailed
from .ir.color import OKLCH, normalize_hex
from .ir.palette import (
    STEP_COUNT,
    BrandScaleDefinition,
    ExplicitScaleDefinition,
    LightnessCurve,
    ScaleDefinition,
)
from .ir.scale import BatchResult, GeneratedScale, ScaleEntry, ScaleFailure

logger = logging.getLogger(__name__)


def _check_chroma_table(chroma_by_shade: Sequence[float]) -> tuple[float, ...]:
    values = tuple(float(c) for c in chroma_by_shade)
    if len(values) != STEP_COUNT:
        raise ScaleDefinitionError(
            f"chroma_by_shade must have {STEP_COUNT} values, got {len(values)}"
        )
    for i, c in enumerate(values):
        if c < 0.0:
            raise ScaleDefinitionError(f"chroma_by_shade[{i}] is negative: {c}")
    return values


class ScaleGenerator:
    """Generates color scales against an injected color model and curve.

    Args:
        model: Color model used for parsing, gamut tests and hex output.
        curve: Reference lightness curve (default: canonical).
        max_iterations: Bisection cap for gamut mapping.
        tolerance: Chroma convergence tolerance for gamut mapping.
    """

    def __init__(
        self,
        model: ColorModel | None = None,
        curve: LightnessCurve | None = None,
        *,
        max_iterations: int = MAX_ITERATIONS,
        tolerance: float = CHROMA_TOLERANCE,
    ) -> None:
        self.model = model or default_model()
        self.curve = curve if curve is not None else canonical_curve()
        self.max_iterations = max_iterations
        self.tolerance = tolerance

    def _render(self, step: int, l: float, c: float, h: float) -> ScaleEntry:  # noqa: E741
        result = map_to_gamut_detailed(
            l,
            c,
            h,
            self.model,
            max_iterations=self.max_iterations,
            tolerance=self.tolerance,
        )
        return ScaleEntry(
            step=step,
            hex=self.model.to_hex(result.color),
            pinned=False,
            requested=result.requested,
            oklch=result.color,
            gamut_mapped=result.reduced,
        )

    def generate_explicit(
        self,
        hue: float,
        chroma_by_shade: Sequence[float],
        name: str = "",
    ) -> GeneratedScale:
        """Generate a scale from a hue and one chroma value per step.

        Step i uses ``curve[i]`` for lightness, ``chroma_by_shade[i]`` for
        chroma, and *hue* throughout. No step is pinned.
        """
        chroma = _check_chroma_table(chroma_by_shade)
        entries = tuple(
            self._render(step, self.curve[step], chroma[step], hue) for step in range(STEP_COUNT)
        )
        logger.debug(f"Generated explicit scale {name or '<unnamed>'} (H={hue})")
        return GeneratedScale(name=name, entries=entries, source="explicit")

    def generate_from_brand(
        self,
        hex_value: str,
        pin_step: int | None = None,
        name: str = "",
    ) -> GeneratedScale:
        """Generate a scale around an official brand hex.

        Without *pin_step* the brand color lands on the curve step whose
        lightness is closest to its own and the curve is used as-is. With
        *pin_step* a custom curve is built through the brand lightness at
        that step. The pinned step always carries the normalized input hex
        verbatim.

        Raises:
            ParseError: If *hex_value* is not a valid hex color.
            ScaleDefinitionError: If *pin_step* is outside 0-9.
        """
        brand_hex = normalize_hex(hex_value)
        base = decompose(brand_hex, self.model)

        if pin_step is None:
            pinned = closest_step(base.l, self.curve)
            curve = self.curve
        else:
            pinned = check_step(pin_step)
            curve = pinned_curve(base.l, pinned, self.curve)

        entries: list[ScaleEntry] = []
        for step in range(STEP_COUNT):
            if step == pinned:
                entries.append(
                    ScaleEntry(
                        step=step,
                        hex=brand_hex,
                        pinned=True,
                        requested=base,
                        oklch=base,
                    )
                )
            else:
                entries.append(self._render(step, curve[step], base.c, base.h))

        logger.debug(f"Generated brand scale {name or brand_hex} pinned at step {pinned}")
        return GeneratedScale(
            name=name,
            entries=tuple(entries),
            source="brand",
            pinned_step=pinned,
        )

    def generate(self, definition: ScaleDefinition, name: str = "") -> GeneratedScale:
        """Generate a scale from either definition form."""
        if isinstance(definition, ExplicitScaleDefinition):
            return self.generate_explicit(definition.hue, definition.chroma_by_shade, name=name)
        if isinstance(definition, BrandScaleDefinition):
            return self.generate_from_brand(definition.hex, definition.pin_step, name=name)
        raise ScaleDefinitionError(f"Unsupported scale definition: {type(definition).__name__}")

    def generate_all(self, definitions: Mapping[str, ScaleDefinition]) -> BatchResult:
        """Generate every definition independently.

        A definition that fails (bad hex, degenerate gamut search, ...) is
        recorded in ``failures`` and does not stop the others.
        """
        result = BatchResult()
        for name, definition in definitions.items():
            try:
                result.scales[name] = self.generate(definition, name=name)
            except TintscaleError as e:
                error = with_context(e, name)
                logger.warning(f"Skipping color {name}: {error.message}")
                result.failures.append(ScaleFailure(name=name, error=error))
        return result


def generate_explicit(
    hue: float,
    chroma_by_shade: Sequence[float],
    model: ColorModel | None = None,
    curve: LightnessCurve | None = None,
) -> GeneratedScale:
    """Generate an explicit-form scale with a one-off generator."""
    return ScaleGenerator(model, curve).generate_explicit(hue, chroma_by_shade)


def generate_from_brand(
    hex_value: str,
    pin_step: int | None = None,
    model: ColorModel | None = None,
    curve: LightnessCurve | None = None,
) -> GeneratedScale:
    """Generate a brand-form scale with a one-off generator."""
    return ScaleGenerator(model, curve).generate_from_brand(hex_value, pin_step)


def decompose(hex_value: str, model: ColorModel | None = None) -> OKLCH:
    """Return the OKLCH decomposition of a brand hex."""
    return (model or default_model()).parse(normalize_hex(hex_value))
