import os

import numpy as np
import pytest

from geolab.colors import RGBA, with_alpha
from geolab.compose import Composition, GenerationRequest, compose
from geolab.palettes import Dimensions
from geolab.primitives import Circle, Rect, make_gradient, path, polygon, radial_gradient, solid
from geolab.render import export_png, generate, png_bytes, rasterize

RED = RGBA(255, 0, 0)
BLUE = RGBA(0, 0, 255)


def canvas(*prims, width=20, height=10):
    return Composition(GenerationRequest(), Dimensions(width, height), tuple(prims))


def pixels(comp, scale=1.0):
    return np.asarray(rasterize(comp, scale=scale))


def test_size_and_mode():
    img = rasterize(canvas(), scale=2.0)
    assert img.size == (40, 20)
    assert img.mode == "RGB"


def test_empty_canvas_is_black():
    assert pixels(canvas()).max() == 0


def test_solid_rect_and_far_edge():
    px = pixels(canvas(Rect(0, 0, 10, 10, solid(RED))))
    assert tuple(px[5, 5]) == (255, 0, 0)
    assert tuple(px[5, 9]) == (255, 0, 0)
    assert tuple(px[5, 10]) == (0, 0, 0)


def test_later_primitives_paint_over():
    px = pixels(canvas(Rect(0, 0, 20, 10, solid(RED)), Rect(0, 0, 20, 10, solid(BLUE))))
    assert tuple(px[3, 3]) == (0, 0, 255)


def test_layer_alpha_blends():
    px = pixels(canvas(Rect(0, 0, 20, 10, solid(RED), alpha=0.5)))
    assert tuple(px[5, 5]) == (128, 0, 0)


def test_color_alpha_blends():
    px = pixels(canvas(Rect(0, 0, 20, 10, solid(BLUE)), Rect(0, 0, 20, 10, solid(with_alpha(RED, 0.25)))))
    r, g, b = px[5, 5]
    assert r == 64 and g == 0 and b == 191


def test_linear_gradient_runs_left_to_right():
    fill = make_gradient(0, 0, 20, 0, ["#000000", "#FFFFFF"])
    px = pixels(canvas(Rect(0, 0, 20, 10, fill)))
    row = px[5, :, 0].astype(int)
    assert row[0] < 20
    assert row[-1] > 230
    assert all(b >= a for a, b in zip(row, row[1:]))


def test_radial_gradient_center_to_edge():
    fill = radial_gradient(10, 10, 0, 10, 10, 10, [(0, "#FFFFFF"), (1, "#000000")])
    px = pixels(canvas(Rect(0, 0, 20, 20, fill), height=20))
    assert px[10, 10, 0] > 220
    assert px[10, 1, 0] < 40


def test_two_circle_gradient_outside_cone_unpainted():
    # identical start and end circles paint nothing
    fill = radial_gradient(10, 10, 5, 10, 10, 5, [(0, "#FFFFFF"), (1, "#FFFFFF")])
    assert pixels(canvas(Rect(0, 0, 20, 20, fill), height=20)).max() == 0


def test_circle_and_polygon():
    px = pixels(canvas(Circle(10, 10, 6, solid(RED)),
                       polygon([(0, 0), (6, 0), (0, 6)], solid(BLUE)), height=20))
    assert tuple(px[10, 10]) == (255, 0, 0)
    assert tuple(px[1, 1]) == (0, 0, 255)
    assert tuple(px[19, 19]) == (0, 0, 0)


def test_stroked_path():
    px = pixels(canvas(path([(0, 5), (20, 5)], solid(RED), width=3)))
    assert px[5, 10, 0] == 255
    assert px[0, 10, 0] == 0


def test_offscreen_and_degenerate_skipped():
    px = pixels(canvas(Rect(50, 50, 10, 10, solid(RED)), Rect(0, 0, 0, 10, solid(RED)),
                       Circle(5, 5, 0, solid(RED)), polygon([(0, 0), (5, 5)], solid(RED))))
    assert px.max() == 0


def test_rounded_rect_corners_clear():
    px = pixels(canvas(Rect(0, 0, 20, 20, solid(RED), radius=8), height=20))
    assert tuple(px[0, 0]) == (0, 0, 0)
    assert tuple(px[10, 10]) == (255, 0, 0)


def test_png_signature():
    data = png_bytes(rasterize(canvas(Rect(0, 0, 20, 10, solid(RED)))))
    assert data[:8] == b"\x89PNG\r\n\x1a\n"


def test_full_style_renders():
    comp = compose(GenerationRequest(style="isoCubes", seed="r", aspect="square", use_vignette=True))
    img = rasterize(comp, scale=0.1)
    assert img.size == (120, 120)
    # background and tiles leave nothing unpainted
    assert np.asarray(img).sum(axis=2).min() > 0


def test_export_default_name(tmp_path):
    comp = compose(GenerationRequest(style="kites", seed="e", aspect="square"))
    out = export_png(comp, str(tmp_path), scale=0.05)
    assert out == os.path.join(str(tmp_path), "geo-kites-square-e.png")
    with open(out, "rb") as f:
        assert f.read(4) == b"\x89PNG"


def test_generate_explicit_path(tmp_path):
    target = str(tmp_path / "out.png")
    assert generate(target, style="bands", seed="g", scale=0.05) == target
    assert os.path.getsize(target) > 0


@pytest.mark.parametrize("scale", [0.5, 1.0])
def test_scale_keeps_layout(scale):
    px = pixels(canvas(Rect(0, 0, 10, 10, solid(RED)), width=20, height=20), scale=scale)
    assert px[int(5 * scale), int(5 * scale), 0] == 255
    assert px[int(15 * scale), int(15 * scale), 0] == 0
