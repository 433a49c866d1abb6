"""
Generated scale and accessibility finding types.

These are pure computed values: created on demand from a definition,
never mutated, and handed to the token export layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .color import OKLCH, HexColor

ScaleSource = Literal["explicit", "brand"]


@dataclass(frozen=True)
class ScaleEntry:
    """One step of a generated scale.

    Attributes:
        step: Step index, 0 lightest to 9 darkest.
        hex: Final sRGB hex, uppercase.
        pinned: True for the brand color emitted verbatim.
        requested: OKLCH asked for before gamut mapping.
        oklch: OKLCH actually rendered (after gamut mapping).
        gamut_mapped: True if ``requested`` lay outside sRGB and chroma was reduced.
    """

    step: int
    hex: HexColor
    pinned: bool
    requested: OKLCH
    oklch: OKLCH
    gamut_mapped: bool = False


@dataclass(frozen=True)
class GeneratedScale:
    """Ordered 10-step color ramp.

    Entries run lightest (step 0) to darkest (step 9). The one exception is
    a brand scale with an explicit pin whose brand lightness lies outside
    the reference curve range; see :func:`tintscale.core.curve.pinned_curve`.
    """

    name: str
    entries: tuple[ScaleEntry, ...]
    source: ScaleSource
    pinned_step: int | None = None

    def __getitem__(self, step: int) -> ScaleEntry:
        return self.entries[step]

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def hexes(self) -> list[HexColor]:
        return [entry.hex for entry in self.entries]


@dataclass(frozen=True)
class AccessibilityIssue:
    """Advisory finding on a generated scale step."""

    step: int
    message: str

    def __str__(self) -> str:
        return f"Shade {self.step}: {self.message}"


@dataclass(frozen=True)
class GamutIssue(AccessibilityIssue):
    """The step's requested color was outside sRGB before mapping."""


@dataclass(frozen=True)
class ContrastIssue(AccessibilityIssue):
    """The step's contrast against the background is below its threshold."""

    ratio: float = 0.0
    threshold: float = 0.0


@dataclass
class ScaleFailure:
    """A definition that could not be generated, with the error raised."""

    name: str
    error: Exception

    def __str__(self) -> str:
        return str(self.error)


@dataclass
class BatchResult:
    """Outcome of generating many definitions independently."""

    scales: dict[str, GeneratedScale] = field(default_factory=dict)
    failures: list[ScaleFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
