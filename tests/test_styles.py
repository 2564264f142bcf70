import math

import pytest

from geolab.colors import WHITE, lighten
from geolab.palettes import ASPECT_RATIOS, PALETTES, Dimensions
from geolab.params import StyleParams, clamp_params
from geolab.primitives import Circle, Polygon, Rect, circle_from_3_points, covers
from geolab.prng import rng_from_seed
from geolab.registry import GENERATORS, Style
from geolab.styles.curves import ribbon_taper
from geolab.styles.ml import attention_weights
from geolab.styles.tiles import cube_faces

# styles whose blends or glows ignore the gradient toggle
ALWAYS_SHADED = {"xOverlay", "perspectiveGrid"}


def run(style, dims, seed="seed", palette=PALETTES[0], use_gradient=True, **params):
    p = StyleParams(use_gradient=use_gradient, values=clamp_params(style, params))
    return GENERATORS[Style(style)](dims, rng_from_seed(seed), palette, p)


@pytest.mark.parametrize("style", list(Style), ids=str)
@pytest.mark.parametrize("aspect", sorted(ASPECT_RATIOS))
def test_every_style_deterministic(style, aspect):
    dims = ASPECT_RATIOS[aspect].dimensions
    first = run(style, dims, seed="det")
    second = run(style, dims, seed="det")
    assert first == second


@pytest.mark.parametrize("style", list(Style), ids=str)
def test_every_style_flat_fill(style):
    out = run(style, Dimensions(300, 400), use_gradient=False)
    if style.value not in ALWAYS_SHADED:
        assert all(not hasattr(p.fill, "stops") for p in out)


@pytest.mark.parametrize("style", list(Style), ids=str)
def test_every_style_tiny_canvas(style):
    assert isinstance(run(style, Dimensions(8, 8)), list)


def test_concentric_inset_grows(small_dims):
    out = run("concentric", small_dims)
    assert 10 <= len(out) <= 16
    xs = [r.x for r in out]
    assert all(b > a for a, b in zip(xs, xs[1:]))
    assert all(r.w >= 0 and r.h >= 0 for r in out)
    assert all(r.w > 0 and r.h > 0 for r in out[:-1])


def test_bands_stack_to_height(small_dims):
    rects = run("bands", small_dims, seed="b")
    assert rects[0].y == 0
    assert max(r.y + r.h for r in rects) == small_dims.height


def test_orb_trail_count_clamped():
    out = run("orbTrail", Dimensions(1200, 1600), count=999)
    assert len(out) == 12
    assert all(isinstance(c, Circle) for c in out)
    assert out[-1].fill.color == WHITE
    assert len({c.r for c in out}) == 1


def test_orb_trail_collinear_draws_nothing():
    assert run("orbTrail", Dimensions(1200, 1200), curvature=0) == []


def test_orb_trail_curved_on_square():
    assert len(run("orbTrail", Dimensions(1200, 1200), curvature=0.2)) == 7


def test_orb_trail_manual_start():
    out = run("orbTrail", Dimensions(1200, 1600), manual_start=True, start_x=0.1, start_y=0.5)
    assert len(out) == 7


def test_circle_from_collinear_points():
    assert circle_from_3_points((0, 0), (50, 0), (100, 0)) is None


def test_circle_from_3_points():
    cx, cy, r = circle_from_3_points((0, 0), (10, 0), (5, 5))
    assert (cx, cy) == pytest.approx((5, 0))
    assert r == pytest.approx(5)


def test_ribbon_taper_range():
    assert ribbon_taper(0) == pytest.approx(1.0)
    assert ribbon_taper(0.5) == pytest.approx(0.55)
    assert ribbon_taper(1) == pytest.approx(1.0)


def test_attention_diagonal_strong():
    m = attention_weights(rng_from_seed("att"), 14)
    assert len(m) == 14 and all(len(row) == 14 for row in m)
    assert all(0.7 <= m[i][i] <= 1.0 for i in range(14))
    assert all(0.0 <= v < 1.0 for row in m for v in row)


def test_cube_faces_order():
    top, left, right = cube_faces(50, 50, 40, 20, 30, ("#FF0000", "#00FF00", "#0000FF"), False)
    assert top.fill.color.hex() == "#FF0000"
    assert left.fill.color.hex() == "#00FF00"
    assert right.fill.color.hex() == "#0000FF"
    assert top.points[2] == left.points[1] == right.points[0]


@pytest.mark.parametrize("style", ["isoCubes", "rhombusWeave", "chevron"])
def test_faces_come_in_threes(style, small_dims):
    out = run(style, small_dims)
    assert len(out) % 3 == 0
    assert all(isinstance(p, Polygon) for p in out)


def test_iso_cubes_variety_limits_bases(small_dims):
    out = run("isoCubes", small_dims, variety=1, use_gradient=False)
    tops = {p.fill.color for p in out[0::3]}
    assert len(tops) == 1


def test_iso_cubes_mixed_sides(small_dims):
    uniform = run("isoCubes", small_dims, uniform=True, use_gradient=False)
    mixed = run("isoCubes", small_dims, uniform=False, use_gradient=False)
    assert uniform[0::3] == mixed[0::3]
    assert uniform != mixed


def test_corner_steps_base_then_steps(small_dims):
    out = run("cornerSteps", small_dims, irregular=False, steps=5)
    assert all(isinstance(r, Rect) for r in out)
    assert (out[0].x, out[0].y, out[0].w, out[0].h) == (0, 0, 240, 320)
    assert len(out) <= 5
    xs = [r.x for r in out]
    assert xs == sorted(xs)


def _samples(dims, step=17.0):
    # irrational offsets keep samples off shared edges
    ox, oy = math.sqrt(2) % 1, math.sqrt(3) % 1
    y = oy
    while y < dims.height:
        x = ox
        while x < dims.width:
            yield x, y
            x += step
        y += step


@pytest.mark.parametrize("style", ["isoCubes", "rhombusWeave", "chevron", "sunburst", "bands",
                                   "cornerSteps", "latentSpace"])
def test_tilings_leave_no_gaps(style, small_dims):
    out = run(style, small_dims, seed="tile")
    missing = [(x, y) for x, y in _samples(small_dims) if not any(covers(p, x, y) for p in out)]
    assert missing == []


def test_x_overlay_depends_on_seed(small_dims):
    drawn = {repr(run("xOverlay", small_dims, seed=s)) for s in "abcdef"}
    assert len(drawn) > 1


def test_perspective_grid_ends_with_focus(small_dims):
    out = run("perspectiveGrid", small_dims)
    glow, core = out[-2], out[-1]
    assert isinstance(glow, Circle) and isinstance(core, Circle)
    assert (glow.cx, glow.cy) == (core.cx, core.cy)
    assert glow.r > core.r


def test_iso_cubes_colour_cycle_origin(small_dims):
    # top-left cell sits at row -2, col -2 of a 10-column grid
    out = run("isoCubes", small_dims, seed="cycle", use_gradient=False)
    bases = rng_from_seed("cycle").shuffle(PALETTES[0].accents)[:3]
    idx = -2 * 10 - 2 + 1000
    assert out[0].fill.color == lighten(bases[idx % 3], 0.22)
