"""
WCAG contrast checks for generated color scales.

Validation is advisory: it reports findings on steps 5-9 and never
changes or blocks a scale. The caller decides whether findings fail a
build.

Thresholds (against the background, white by default):
- step 5: 3:1 (UI components, large text)
- steps 6-9: 4.5:1 (normal text, WCAG AA)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .ir.color import HexColor, hex_to_rgb255
from .ir.scale import (
    AccessibilityIssue,
    BatchResult,
    ContrastIssue,
    GamutIssue,
    GeneratedScale,
)

logger = logging.getLogger(__name__)

WHITE: HexColor = "#FFFFFF"

WCAG_AA_LARGE = 3.0
WCAG_AA = 4.5
WCAG_AAA = 7.0

# First step checked by the validator
FIRST_VALIDATED_STEP = 5


def _channel_to_linear(value: int) -> float:
    c = value / 255.0
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_value: str) -> float:
    """WCAG 2.1 relative luminance of an sRGB hex color (0-1)."""
    r, g, b = (_channel_to_linear(v) for v in hex_to_rgb255(hex_value))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(foreground: str, background: str) -> float:
    """WCAG 2.1 contrast ratio between two hex colors (1-21)."""
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_wcag_aa(foreground: str, background: str) -> bool:
    return contrast_ratio(foreground, background) >= WCAG_AA


def meets_wcag_aa_large(foreground: str, background: str) -> bool:
    return contrast_ratio(foreground, background) >= WCAG_AA_LARGE


def meets_wcag_aaa(foreground: str, background: str) -> bool:
    return contrast_ratio(foreground, background) >= WCAG_AAA


def required_contrast(step: int) -> float | None:
    """Minimum contrast required at *step*, or None if the step is not checked."""
    if step < FIRST_VALIDATED_STEP:
        return None
    if step == FIRST_VALIDATED_STEP:
        return WCAG_AA_LARGE
    return WCAG_AA


def validate_scale(
    scale: GeneratedScale,
    background: str = WHITE,
) -> list[AccessibilityIssue]:
    """Check steps 5-9 of *scale* for gamut and contrast problems.

    Args:
        scale: Generated scale to inspect.
        background: Background hex the contrast is measured against.

    Returns:
        GamutIssue for each step whose requested color was outside sRGB
        before mapping; ContrastIssue for each step below its threshold.
    """
    issues: list[AccessibilityIssue] = []

    for entry in scale.entries[FIRST_VALIDATED_STEP:]:
        if entry.gamut_mapped:
            issues.append(GamutIssue(step=entry.step, message="Out of sRGB gamut"))

        threshold = required_contrast(entry.step)
        if threshold is None:
            continue
        ratio = contrast_ratio(entry.hex, background)
        if ratio < threshold:
            usage = "UI components" if threshold == WCAG_AA_LARGE else "text"
            issues.append(
                ContrastIssue(
                    step=entry.step,
                    message=f"Contrast {ratio:.2f} < {threshold:g}:1 ({usage})",
                    ratio=ratio,
                    threshold=threshold,
                )
            )

    if issues:
        logger.debug(f"{scale.name or '<unnamed>'}: {len(issues)} accessibility issue(s)")
    return issues


@dataclass
class ValidationReport:
    """Accessibility findings for a batch of scales."""

    issues: dict[str, list[AccessibilityIssue]] = field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        return not any(self.issues.values())

    @property
    def issue_count(self) -> int:
        return sum(len(found) for found in self.issues.values())

    def format_lines(self) -> list[str]:
        """Render findings as ``NAME:`` headers followed by indented issues."""
        lines: list[str] = []
        for name, found in self.issues.items():
            if not found:
                continue
            lines.append(f"{name.upper()}:")
            lines.extend(f"  - {issue}" for issue in found)
        return lines


def validate_batch(batch: BatchResult, background: str = WHITE) -> ValidationReport:
    """Validate every successfully generated scale in *batch*."""
    report = ValidationReport()
    for name, scale in batch.scales.items():
        report.issues[name] = validate_scale(scale, background)
    return report
