"""Shared fixtures for geolab tests."""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from geolab.palettes import PALETTES, Dimensions
from geolab.params import StyleParams, defaults
from geolab.prng import rng_from_seed


@pytest.fixture
def palette():
    return PALETTES[0]


@pytest.fixture
def rng():
    return rng_from_seed("fixture-seed")


@pytest.fixture
def small_dims():
    """Small non-square canvas; keeps geometry sampling quick."""
    return Dimensions(240, 320)


@pytest.fixture
def make_params():
    """Build StyleParams for a style with defaults plus overrides."""
    def _make(style, use_gradient=True, **overrides):
        values = defaults(style)
        values.update(overrides)
        return StyleParams(use_gradient=use_gradient, values=values)
    return _make
