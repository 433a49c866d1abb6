"""
Unit tests for reference lightness curves.
"""

import pytest
from pydantic import ValidationError

from tintscale.core.curve import canonical_curve, check_step, closest_step, pinned_curve
from tintscale.core.errors import ScaleDefinitionError
from tintscale.core.ir.palette import CANONICAL_LIGHTNESS, LightnessCurve

# Exact binary fractions so tie-break distances compare equal
HALVES_CURVE = LightnessCurve(values=(1.0, 0.75, 0.5, 0.25, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0))


# =============================================================================
# LightnessCurve model
# =============================================================================


class TestLightnessCurve:
    """Tests for curve validation."""

    def test_default_is_canonical(self):
        assert LightnessCurve().values == CANONICAL_LIGHTNESS

    def test_accepts_plain_list(self):
        curve = LightnessCurve.model_validate([0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1, 0.0])
        assert curve[0] == 0.9
        assert curve[9] == 0.0

    def test_wrong_length(self):
        with pytest.raises(ValidationError, match="10 values"):
            LightnessCurve(values=(0.9, 0.5, 0.1))

    def test_out_of_range(self):
        with pytest.raises(ValidationError, match="outside 0-1"):
            LightnessCurve(values=(1.2, 0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1))

    def test_must_be_non_increasing(self):
        with pytest.raises(ValidationError, match="non-increasing"):
            LightnessCurve(values=(0.9, 0.95, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1))

    def test_pinned_curve_may_bend(self):
        curve = LightnessCurve(
            values=(0.9, 0.95, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1),
            pinned_step=1,
        )
        assert curve.pinned_step == 1

    def test_frozen(self):
        with pytest.raises(ValidationError):
            canonical_curve().pinned_step = 3  # type: ignore[misc]


# =============================================================================
# Canonical curve
# =============================================================================


class TestCanonicalCurve:
    """Tests for the canonical curve constants."""

    def test_values(self):
        curve = canonical_curve()
        assert curve.values == (0.97, 0.91, 0.82, 0.72, 0.61, 0.52, 0.45, 0.37, 0.29, 0.22)
        assert len(curve) == 10
        assert curve.pinned_step is None

    def test_monotonic(self):
        values = canonical_curve().values
        assert all(a >= b for a, b in zip(values, values[1:], strict=False))

    def test_shared_instance(self):
        assert canonical_curve() is canonical_curve()


# =============================================================================
# Pinned curve
# =============================================================================


class TestPinnedCurve:
    """Tests for curves pinned to a brand lightness."""

    @pytest.mark.parametrize("pin_step", range(10))
    def test_pinned_value_exact(self, pin_step):
        curve = pinned_curve(0.6, pin_step)
        assert curve[pin_step] == 0.6
        assert curve.pinned_step == pin_step

    def test_pin_at_first_step(self):
        curve = pinned_curve(0.5, 0)
        assert curve[0] == 0.5
        assert curve[9] == pytest.approx(0.22)

    def test_pin_at_last_step(self):
        curve = pinned_curve(0.5, 9)
        assert curve[9] == 0.5
        assert curve[0] == pytest.approx(0.97)

    def test_interpolates_both_segments(self):
        curve = pinned_curve(0.6, 4)
        assert curve[0] == pytest.approx(0.97)
        assert curve[2] == pytest.approx(0.785)
        assert curve[9] == pytest.approx(0.22)
        # (0.6 - 0.22) spread over five steps
        assert curve[5] == pytest.approx(0.6 - 0.076)

    def test_monotonic_when_base_in_range(self):
        values = pinned_curve(0.6, 4).values
        assert all(a >= b for a, b in zip(values, values[1:], strict=False))

    def test_base_lighter_than_reference_allowed(self):
        curve = pinned_curve(0.99, 5)
        assert curve[5] == 0.99
        assert curve[0] < curve[5]

    def test_custom_reference(self):
        curve = pinned_curve(0.5, 2, HALVES_CURVE)
        assert curve[0] == 1.0
        assert curve[1] == 0.75
        assert curve[9] == 0.0

    @pytest.mark.parametrize("pin_step", [-1, 10, 4.0, True, None])
    def test_invalid_step(self, pin_step):
        with pytest.raises(ScaleDefinitionError):
            pinned_curve(0.5, pin_step)  # type: ignore[arg-type]

    @pytest.mark.parametrize("base_l", [-0.1, 1.5])
    def test_invalid_lightness(self, base_l):
        with pytest.raises(ScaleDefinitionError):
            pinned_curve(base_l, 4)

    def test_check_step_returns_step(self):
        assert check_step(7) == 7


# =============================================================================
# Closest step
# =============================================================================


class TestClosestStep:
    """Tests for finding the curve step nearest a lightness."""

    @pytest.mark.parametrize(
        "lightness,expected",
        [(0.97, 0), (1.0, 0), (0.45, 6), (0.22, 9), (0.0, 9), (0.70, 3), (0.5, 5)],
    )
    def test_canonical(self, lightness, expected):
        assert closest_step(lightness) == expected

    def test_tie_goes_to_lower_index(self):
        assert closest_step(0.625, HALVES_CURVE) == 1

    def test_repeated_values_pick_first(self):
        assert closest_step(0.0, HALVES_CURVE) == 4

    def test_custom_curve(self):
        assert closest_step(0.3, HALVES_CURVE) == 3
