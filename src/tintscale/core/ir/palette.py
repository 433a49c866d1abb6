"""
Palette definition IR types for declarative color-scale configuration.

Defines the structure of palettes.yaml: the reference lightness curve,
explicit primitive color definitions (hue + per-step chroma table), and
brand themes whose colors are derived from a single hex each.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Number of steps in every generated scale (step 0 lightest, step 9 darkest)
STEP_COUNT = 10

# Canonical reference lightness curve, lightest first.
# Fixed constants: changing them shifts every generated swatch.
CANONICAL_LIGHTNESS: tuple[float, ...] = (
    0.97,  # 0 - very light
    0.91,
    0.82,
    0.72,
    0.61,
    0.52,  # 5 - UI components
    0.45,  # 6 - primary
    0.37,
    0.29,
    0.22,  # 9 - very dark
)


# =============================================================================
# Lightness curve
# =============================================================================


class LightnessCurve(BaseModel):
    """Ordered 10-step lightness curve, index 0 lightest.

    Canonical curves must be monotonically non-increasing. Curves built
    around a pinned brand lightness record ``pinned_step`` and may bend
    where the brand color sits outside the reference range.
    """

    model_config = ConfigDict(frozen=True)

    values: tuple[float, ...] = Field(
        default=CANONICAL_LIGHTNESS,
        description="Lightness per step (0-1), lightest first",
    )
    pinned_step: int | None = Field(
        default=None,
        ge=0,
        lt=STEP_COUNT,
        description="Step whose lightness was pinned to a brand color",
    )

    @model_validator(mode="before")
    @classmethod
    def _accept_sequence(cls, data: Any) -> Any:
        if isinstance(data, list | tuple):
            return {"values": tuple(data)}
        return data

    @field_validator("values")
    @classmethod
    def _check_values(cls, values: tuple[float, ...]) -> tuple[float, ...]:
        if len(values) != STEP_COUNT:
            raise ValueError(f"curve must have {STEP_COUNT} values, got {len(values)}")
        for i, v in enumerate(values):
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"curve[{i}] = {v} is outside 0-1")
        return values

    @model_validator(mode="after")
    def _check_monotonic(self) -> LightnessCurve:
        if self.pinned_step is None:
            for i in range(1, len(self.values)):
                if self.values[i] > self.values[i - 1]:
                    raise ValueError(
                        f"curve must be non-increasing: curve[{i}] = {self.values[i]} "
                        f"> curve[{i - 1}] = {self.values[i - 1]}"
                    )
        return self

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)


# =============================================================================
# Scale definitions
# =============================================================================


class ExplicitScaleDefinition(BaseModel):
    """Primitive palette color: fixed hue with an explicit chroma per step."""

    model_config = ConfigDict(frozen=True)

    hue: float = Field(ge=0.0, le=360.0, description="OKLCH hue (0-360)")
    chroma_by_shade: tuple[float, ...] = Field(
        description="Chroma for each of the 10 steps, lightest first",
    )

    @field_validator("chroma_by_shade")
    @classmethod
    def _check_chroma(cls, values: tuple[float, ...]) -> tuple[float, ...]:
        if len(values) != STEP_COUNT:
            raise ValueError(f"chroma_by_shade must have {STEP_COUNT} values, got {len(values)}")
        if any(v < 0.0 for v in values):
            raise ValueError("chroma_by_shade values must be non-negative")
        return values


class BrandScaleDefinition(BaseModel):
    """Brand color: a single official hex, optionally pinned at a given step.

    The hex is kept as written; it is parsed during generation so that a
    malformed value fails only its own scale.
    """

    model_config = ConfigDict(frozen=True)

    hex: str = Field(min_length=1, description="Official brand color (#RGB or #RRGGBB)")
    pin_step: int | None = Field(
        default=None,
        ge=0,
        lt=STEP_COUNT,
        description="Step to pin the brand color at (default: closest by lightness)",
    )
    label: str = Field(default="", description="Human-readable description")


ScaleDefinition = ExplicitScaleDefinition | BrandScaleDefinition


# =============================================================================
# Configuration
# =============================================================================


class BrandTheme(BaseModel):
    """A named set of brand colors written to one or more theme directories."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="", description="Theme display name")
    output_dirs: tuple[str, ...] = Field(
        default=(),
        description="Directories receiving brand-palette.tokens.json",
    )
    colors: dict[str, BrandScaleDefinition] = Field(default_factory=dict)


class PaletteConfig(BaseModel):
    """Root of palettes.yaml."""

    model_config = ConfigDict(frozen=True)

    curve: LightnessCurve = Field(
        default_factory=LightnessCurve,
        description="Reference lightness curve shared by every scale",
    )
    colors: dict[str, ExplicitScaleDefinition] = Field(
        default_factory=dict,
        description="Primitive palette colors",
    )
    themes: dict[str, BrandTheme] = Field(
        default_factory=dict,
        description="Brand themes keyed by theme id",
    )
