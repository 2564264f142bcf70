"""
Styles built from sampled parametric curves: sine waves, bezier ribbons,
an orb trail along a circular arc, and confocal ellipses.
"""

import math
from typing import List

from ..colors import WHITE, lighten, pick_colors, with_alpha
from ..params import StyleParams
from ..palettes import Dimensions, Palette
from ..prng import SeededRandom
from ..primitives import (
    Circle, Primitive, circle_from_3_points, fill_or_gradient, make_gradient,
    path, polygon, solid,
)

WAVE_SAMPLE_STEP = 2            # px between wave samples
RIBBON_SAMPLES = 90
RIBBON_MIN_WIDTH = 8
ELLIPSE_SEGMENTS = 320
ELLIPSE_STROKE = 1.4


def style_waves(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Layered translucent sine waves, each filled down to the bottom edge."""
    w, h = dims
    colors = pick_colors(rng, palette, 5)
    count = 4 + rng.next_int(0, 3)

    out: List[Primitive] = []
    for i in range(count):
        amplitude = h * (0.1 + rng.next() * 0.15)
        frequency = 2 + rng.next() * 3
        phase = rng.next() * math.pi * 2
        y_off = (h / count) * i + rng.next() * (h * 0.1)
        color = colors[i % len(colors)]
        alpha = 0.6 + rng.next() * 0.4

        pts = [(0, y_off)]
        for x in range(0, int(w) + 1, WAVE_SAMPLE_STEP):
            pts.append((x, y_off + math.sin((x / w) * frequency * math.pi + phase) * amplitude))
        pts += [(w, h), (0, h)]

        if p.use_gradient:
            fill = make_gradient(0, y_off - amplitude, w, y_off + amplitude,
                                 [with_alpha(lighten(color, 0.3), 0.8), with_alpha(color, 0.9)])
        else:
            fill = solid(with_alpha(color, 0.8))
        out.append(polygon(pts, fill, alpha))
    return out


def _bezier(t, p0, p1, p2, p3):
    u = 1 - t
    return u**3 * p0 + 3 * u**2 * t * p1 + 3 * u * t**2 * p2 + t**3 * p3


def _bezier_slope(t, p0, p1, p2, p3):
    u = 1 - t
    return (-3 * u**2 * p0
            + (3 * u**2 - 6 * u * t) * p1
            + (6 * u * t - 3 * t**2) * p2
            + 3 * t**2 * p3)


def ribbon_taper(t: float) -> float:
    """Width factor along a ribbon: 1.0 at both ends, 0.55 in the middle."""
    return 0.55 + 0.45 * (1 + math.cos(2 * math.pi * t)) / 2


def style_flow_ribbons(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Thick-thin-thick ribbons along cubic beziers crossing the canvas."""
    w, h = dims
    ribbons = 3 + rng.next_int(0, 3)
    colors = pick_colors(rng, palette, min(6, ribbons + 2))

    out: List[Primitive] = []
    for i in range(ribbons):
        c = colors[i % len(colors)]
        a = i / (ribbons - 1 + 1e-6)
        y0 = h * (0.15 + 0.7 * a) + rng.next() * 20 - 10
        y1 = h * (0.15 + 0.7 * (1 - a)) + rng.next() * 20 - 10
        cp1x = w * (0.25 + 0.1 * rng.next())
        cp1y = y0 + (rng.next() - 0.5) * h * 0.3
        cp2x = w * (0.75 - 0.1 * rng.next())
        cp2y = y1 + (rng.next() - 0.5) * h * 0.3
        xs = (-w * 0.05, cp1x, cp2x, w * 1.05)
        ys = (y0, cp1y, cp2y, y1)
        base_w = max(RIBBON_MIN_WIDTH, min(w, h) * 0.06) * (0.9 + rng.next() * 0.2)

        left, right = [], []
        for s in range(RIBBON_SAMPLES + 1):
            t = s / RIBBON_SAMPLES
            x, y = _bezier(t, *xs), _bezier(t, *ys)
            dx, dy = _bezier_slope(t, *xs), _bezier_slope(t, *ys)
            length = math.hypot(dx, dy) or 1
            nx, ny = -dy / length, dx / length
            half = base_w * ribbon_taper(t) / 2
            left.append((x + nx * half, y + ny * half))
            right.append((x - nx * half, y - ny * half))

        mid = right[len(right) // 2]
        if p.use_gradient:
            fill = make_gradient(left[0][0], left[0][1], mid[0], mid[1], [lighten(c, 0.15), c])
        else:
            fill = solid(with_alpha(c, 0.9))
        out.append(polygon(left + right[::-1], fill))
    return out


def style_orb_trail(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Equal discs along the arc through a start point, a bent midpoint and an end point.

    The trail runs toward the lower right. Without a manual start, the start
    point sits trail_scale diagonals back from the end along (1, 1). When the
    three points are collinear there is no arc and nothing is drawn.
    """
    w, h = dims
    count = p["count"]
    gamma = p["gamma"]
    radius = min(w, h) * p["radius_pct"]
    end = (w * p["end_x"], h * p["end_y"])
    bend = p["curvature"] * min(w, h)

    d = math.sqrt(0.5)
    if p["manual_start"]:
        start = (w * p["start_x"], h * p["start_y"])
    else:
        trail = math.hypot(w, h) * p["trail_scale"]
        start = (end[0] - d * trail, end[1] - d * trail)
    mid = (w * 0.5 - d * bend, h * 0.5 + d * bend)

    circle = circle_from_3_points(start, mid, end)
    if circle is None:
        return []
    cx, cy, big_r = circle

    a0 = math.atan2(start[1] - cy, start[0] - cx)
    am = math.atan2(mid[1] - cy, mid[0] - cx)
    a1 = math.atan2(end[1] - cy, end[0] - cx)
    while am < a0:
        am += math.pi * 2
    while a1 < a0:
        a1 += math.pi * 2
    if am > a1:
        a1 += math.pi * 2

    base = rng.shuffle(palette.accents)
    colors = [base[i % len(base)] for i in range(count - 1)] + [WHITE]

    out: List[Primitive] = []
    for i in range(count):
        t = (i / (count - 1)) ** gamma
        ang = a0 + (a1 - a0) * t
        out.append(Circle(cx + big_r * math.cos(ang), cy + big_r * math.sin(ang), radius, solid(colors[i])))
    return out


def style_gradient_flow(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Confocal ellipse outlines, evenly spaced, alternating two colours."""
    w, h = dims
    color_a, color_b = pick_colors(rng, palette, 2)
    mid_x = w * 0.5
    mid_y = h * (0.5 + (rng.next() - 0.5) * 0.06)
    focal = min(w, h) * 0.34 * 0.5
    rings = 12 + rng.next_int(0, 6)
    a0 = focal * 1.05
    a_step = min(w, h) * 0.018

    out: List[Primitive] = []
    for k in range(rings):
        a = a0 + k * a_step
        b2 = a * a - focal * focal
        if b2 <= 0:
            continue
        b = math.sqrt(b2)
        color = color_a if k % 2 == 0 else color_b
        stroke = fill_or_gradient(p.use_gradient, with_alpha(color, 0.95), mid_x, mid_y - b, mid_x, mid_y + b,
                                  [with_alpha(lighten(color, 0.15), 0.95), with_alpha(color, 0.95)])
        pts = []
        for i in range(ELLIPSE_SEGMENTS + 1):
            t = (i / ELLIPSE_SEGMENTS) * math.pi * 2
            pts.append((mid_x + a * math.cos(t), mid_y + b * math.sin(t)))
        out.append(path(pts, stroke, width=ELLIPSE_STROKE, closed=True))
    return out
