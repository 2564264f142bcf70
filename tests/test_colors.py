import pytest

from geolab.colors import RGBA, hex_to_rgb, lighten, pick_colors, to_rgba, with_alpha
from geolab.palettes import PALETTES, Palette
from geolab.prng import rng_from_seed


def test_hex_to_rgb_forms():
    assert hex_to_rgb("#1F3BFF") == (31, 59, 255)
    assert hex_to_rgb("1f3bff") == (31, 59, 255)
    assert hex_to_rgb("#abc") == (170, 187, 204)


@pytest.mark.parametrize("bad", ["", "#12", "#GGGGGG", "#1234567", None, 42])
def test_hex_to_rgb_malformed_is_black(bad):
    assert hex_to_rgb(bad) == (0, 0, 0)


def test_lighten_rounds_and_clamps():
    assert lighten("#000000", 0.5) == RGBA(128, 128, 128, 1.0)
    assert lighten("#FFFFFF", 0.2) == RGBA(255, 255, 255, 1.0)
    assert lighten("#FFFFFF", -2) == RGBA(0, 0, 0, 1.0)
    assert lighten("#808080", 0.0) == RGBA(128, 128, 128, 1.0)


def test_lighten_keeps_alpha():
    assert lighten(RGBA(10, 20, 30, 0.5), -1).a == 0.5


def test_with_alpha_clamped():
    assert with_alpha("#FF0000", 0.3) == RGBA(255, 0, 0, 0.3)
    assert with_alpha("#FF0000", 4).a == 1.0
    assert with_alpha("#FF0000", -1).a == 0.0


def test_rgba_formatting():
    c = to_rgba("#0a0b1a")
    assert c.hex() == "#0A0B1A"
    assert with_alpha(c, 0.5).css() == "rgba(10, 11, 26, 0.5)"


@pytest.mark.parametrize("pal", PALETTES, ids=lambda p: p.name)
def test_pick_colors_never_background(pal):
    r = rng_from_seed(pal.name)
    for n in range(1, 6):
        picked = pick_colors(r, pal, n)
        assert len(picked) == n
        assert set(picked) <= set(pal.accents)


def test_pick_colors_caps_at_accent_count():
    assert len(pick_colors(rng_from_seed("x"), PALETTES[0], 9)) == 5


def test_palette_needs_six_colors():
    with pytest.raises(ValueError):
        Palette("short", ("#000000", "#FFFFFF"))
