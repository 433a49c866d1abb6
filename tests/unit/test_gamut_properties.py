"""
Property-based tests for gamut mapping and scale generation.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from tintscale.core.color_model import ColorAideModel
from tintscale.core.curve import pinned_curve
from tintscale.core.gamut import is_displayable, map_to_gamut
from tintscale.core.scale import ScaleGenerator

_MODEL = ColorAideModel()

lightness = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)
chroma = st.floats(min_value=0.0, max_value=0.4, allow_nan=False)
hue = st.floats(min_value=0.0, max_value=360.0, exclude_max=True, allow_nan=False)
hex_colors = st.integers(min_value=0, max_value=0xFFFFFF).map(lambda v: f"#{v:06X}")


@settings(max_examples=1000, deadline=None)
@given(lightness, chroma, hue)
def test_mapped_color_is_displayable(l, c, h):  # noqa: E741
    color = map_to_gamut(l, c, h, _MODEL)
    assert is_displayable(color.l, color.c, color.h, _MODEL)
    assert color.c <= c
    assert color.l == l


@settings(max_examples=100, deadline=None)
@given(hex_colors, st.integers(min_value=0, max_value=9))
def test_pinned_step_keeps_brand_hex(hex_value, pin_step):
    scale = ScaleGenerator(_MODEL).generate_from_brand(hex_value, pin_step)
    assert scale[pin_step].hex == hex_value
    assert sum(entry.pinned for entry in scale.entries) == 1


@settings(max_examples=100, deadline=None)
@given(hex_colors)
def test_generated_hexes_round_trip(hex_value):
    scale = ScaleGenerator(_MODEL).generate_from_brand(hex_value)
    for entry in scale.entries:
        assert _MODEL.to_hex(_MODEL.parse(entry.hex)) == entry.hex


@settings(max_examples=200, deadline=None)
@given(lightness, st.integers(min_value=0, max_value=9))
def test_pinned_curve_hits_base(base_l, pin_step):
    curve = pinned_curve(base_l, pin_step)
    assert curve[pin_step] == base_l
    assert len(curve) == 10
