"""Fixtures for unit tests: real and fake color models, generators."""

from __future__ import annotations

import pytest
from fakes import FakeColorModel

from tintscale.core.color_model import ColorAideModel
from tintscale.core.scale import ScaleGenerator

# Accessibility-tuned blue from the primitive presets
BLUE_CHROMA = (0.03, 0.06, 0.10, 0.14, 0.17, 0.18, 0.17, 0.14, 0.11, 0.08)


@pytest.fixture
def model() -> ColorAideModel:
    return ColorAideModel()


@pytest.fixture
def fake_model() -> FakeColorModel:
    return FakeColorModel()


@pytest.fixture
def generator(model: ColorAideModel) -> ScaleGenerator:
    return ScaleGenerator(model)


@pytest.fixture
def fake_generator(fake_model: FakeColorModel) -> ScaleGenerator:
    return ScaleGenerator(fake_model)


@pytest.fixture
def blue_chroma() -> tuple[float, ...]:
    return BLUE_CHROMA
