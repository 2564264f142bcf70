"""Radial or perspective line grid around a slightly off-center focus."""

import math
from typing import List, Sequence, Tuple

from ..colors import ColorLike, lighten, pick_colors, with_alpha
from ..params import StyleParams
from ..palettes import Dimensions, Palette
from ..prng import SeededRandom
from ..primitives import (
    Circle, Fill, LinearGradient, Primitive, fill_or_gradient, path,
    radial_gradient, solid,
)

RING_SEGMENTS = 180
GLOW_RADIUS = 25
CORE_RADIUS = 8
RADIAL_REACH = 0.8              # of the longer side
EDGE_FADE = ((0, 0.3), (0.5, 0.8), (1, 0.3))


def _stroke(use_gradient: bool, color: ColorLike, x0, y0, x1, y1,
            fades: Sequence[Tuple[float, float]], flat_alpha: float) -> Fill:
    """Colour faded through (offset, alpha) stops, or a flat translucent colour."""
    if use_gradient:
        return LinearGradient(x0, y0, x1, y1, tuple((o, with_alpha(color, a)) for o, a in fades))
    return solid(with_alpha(color, flat_alpha))


def _radial_lines(w, h, cx, cy, rng, colors, use_gradient) -> List[Primitive]:
    spokes = 24 + rng.next_int(0, 16)
    rings = 12 + rng.next_int(0, 8)
    reach = max(w, h) * RADIAL_REACH

    out: List[Primitive] = []
    for i in range(spokes):
        angle = (i / spokes) * math.pi * 2
        ex, ey = cx + math.cos(angle) * reach, cy + math.sin(angle) * reach
        color = colors[i % len(colors)]
        paint = _stroke(use_gradient, color, cx, cy, ex, ey, ((0, 0.9), (0.7, 0.6), (1, 0.2)), 0.7)
        out.append(path([(cx, cy), (ex, ey)], paint, width=1 + (i % 3)))

    for ring in range(1, rings + 1):
        radius = (ring / rings) * min(w, h) * 0.4 + 20
        color = colors[(ring - 1) % len(colors)]
        pts = [(cx + math.cos(2 * math.pi * s / RING_SEGMENTS) * radius,
                cy + math.sin(2 * math.pi * s / RING_SEGMENTS) * radius) for s in range(RING_SEGMENTS)]
        out.append(path(pts, solid(with_alpha(color, 0.6 - ring * 0.03)), width=1 + ring // 4, closed=True))
    return out


def _perspective_lines(w, h, cx, cy, rng, colors, use_gradient) -> List[Primitive]:
    size = 20 + rng.next_int(0, 10)
    pull = 0.8 + rng.next() * 0.4

    out: List[Primitive] = []
    for i in range(-size, size + 1):
        if i == 0:
            continue
        t = i / size
        y = h * 0.5 + t * h * 0.4
        y += (cy - y) * pull * abs(t)
        color = colors[abs(i) % len(colors)]
        paint = _stroke(use_gradient, color, 0, y, w, y, EDGE_FADE, 0.7 - abs(t) * 0.3)
        out.append(path([(0, y), (w, y)], paint, width=1 + max(0, 3 - abs(i))))

    for i in range(-size, size + 1):
        if i == 0:
            continue
        t = i / size
        x = w * 0.5 + t * w * 0.4
        x += (cx - x) * pull * abs(t)
        color = colors[abs(i) % len(colors)]
        paint = _stroke(use_gradient, color, x, 0, x, h, EDGE_FADE, 0.7 - abs(t) * 0.3)
        out.append(path([(x, 0), (x, h)], paint, width=1 + max(0, 3 - abs(i))))
    return out


def style_perspective_grid(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    w, h = dims
    colors = pick_colors(rng, palette, 3)
    cx = w * (0.45 + rng.next() * 0.1)
    cy = h * (0.45 + rng.next() * 0.1)

    if rng.next() > 0.5:
        out = _radial_lines(w, h, cx, cy, rng, colors, p.use_gradient)
    else:
        out = _perspective_lines(w, h, cx, cy, rng, colors, p.use_gradient)

    core = colors[0]
    glow = radial_gradient(cx, cy, 0, cx, cy, GLOW_RADIUS,
                           [(0, with_alpha(core, 0.9)), (0.7, with_alpha(core, 0.4)), (1, with_alpha(core, 0))])
    out.append(Circle(cx, cy, GLOW_RADIUS, glow))
    out.append(Circle(cx, cy, CORE_RADIUS,
                      fill_or_gradient(p.use_gradient, core, cx - CORE_RADIUS, cy - CORE_RADIUS,
                                       cx + CORE_RADIUS, cy + CORE_RADIUS, [lighten(core, 0.3), core])))
    return out
