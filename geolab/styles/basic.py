"""Concentric rectangles, diamond grid, translucent orbs, horizontal bands."""

import math
from typing import List

from ..colors import BLACK, lighten, pick_colors, with_alpha
from ..params import StyleParams
from ..palettes import Dimensions, Palette
from ..prng import SeededRandom
from ..primitives import (
    Circle, Primitive, Rect, fill_or_gradient, polygon, radial_gradient,
    rotate_points, solid, translate_points,
)

CONCENTRIC_MARGIN = 160
DIAMOND_MARGIN = 60
DIAMOND_GRID_DIVISIONS = 8
BAND_MIN_FRACTION = 0.07
BAND_MAX_FRACTION = 0.22
BAND_SPACER_PROB = 0.4


def style_concentric(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Nested rectangles; each ring's inset from the edge grows with its index."""
    w, h = dims
    steps = 10 + rng.next_int(0, 6)
    margin = min(CONCENTRIC_MARGIN, min(w, h) / 4)
    colors = pick_colors(rng, palette, min(6, steps))

    out: List[Primitive] = []
    for i in range(steps):
        t = i / (steps - 1)
        x = margin + (w - margin * 2) * (t / 2)
        y = margin + (h - margin * 2) * (t / 2)
        ww = w - x * 2
        hh = h - y * 2
        c = colors[i % len(colors)]
        fill = fill_or_gradient(p.use_gradient, c, x, y, x + ww, y + hh, [c, with_alpha(c, 0.8)])
        out.append(Rect(x, y, ww, hh, fill))
    return out


def style_diamonds(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Centered grid cycling diamond, rotated square and disc."""
    w, h = dims
    colors = pick_colors(rng, palette, 6)
    grid = min(w, h) / DIAMOND_GRID_DIVISIONS
    cols = int((w - DIAMOND_MARGIN * 2) // grid)
    rows = int((h - DIAMOND_MARGIN * 2) // grid)
    off_x = (w - cols * grid) / 2
    off_y = (h - rows * grid) / 2
    size = grid * 0.35

    out: List[Primitive] = []
    for r in range(rows):
        for c in range(cols):
            x = off_x + c * grid + grid / 2
            y = off_y + r * grid + grid / 2
            color = colors[(r * cols + c) % len(colors)]
            pattern = (r + c) % 3
            if pattern == 0:
                pts = [(x, y - size), (x + size, y), (x, y + size), (x - size, y)]
                fill = fill_or_gradient(p.use_gradient, color, x - size, y - size, x + size, y + size,
                                        [color, with_alpha(color, 0.6)])
                out.append(polygon(pts, fill))
            elif pattern == 1:
                k = size * 0.7
                square = [(-k, -k), (k, -k), (k, k), (-k, k)]
                pts = translate_points(rotate_points(square, math.pi / 4), x, y)
                (gx0, gy0), (gx1, gy1) = translate_points(
                    rotate_points([(-size, -size), (size, size)], math.pi / 4), x, y)
                fill = fill_or_gradient(p.use_gradient, color, gx0, gy0, gx1, gy1, [color, lighten(color, 0.2)])
                out.append(polygon(pts, fill))
            else:
                r_disc = size * 0.8
                if p.use_gradient:
                    fill = radial_gradient(x - size * 0.3, y - size * 0.3, 0, x, y, r_disc,
                                           [(0, lighten(color, 0.3)), (1, color)])
                else:
                    fill = solid(color)
                out.append(Circle(x, y, r_disc, fill))
    return out


def style_orbs(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Overlapping translucent discs scattered around the center."""
    w, h = dims
    n = 8 + rng.next_int(0, 4)
    colors = pick_colors(rng, palette, n)
    cx, cy = w / 2, h / 2
    max_r = min(w, h) * 0.4

    out: List[Primitive] = []
    for i in range(n):
        angle = (i / n) * math.pi * 2 + rng.next() * 0.5
        distance = rng.next() * max_r * 0.6
        x = cx + math.cos(angle) * distance
        y = cy + math.sin(angle) * distance
        r = max_r * (0.15 + rng.next() * 0.25)
        c = colors[i % len(colors)]
        alpha = 0.7 + rng.next() * 0.3
        if p.use_gradient:
            fill = radial_gradient(x - r * 0.3, y - r * 0.3, r * 0.1, x, y, r,
                                   [(0, lighten(c, 0.4)), (0.7, c), (1, with_alpha(c, 0.3))])
        else:
            fill = solid(c)
        out.append(Circle(x, y, r, fill, alpha))
    return out


def style_bands(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Full-width bands of random height stacked until the canvas is filled."""
    w, h = dims
    colors = pick_colors(rng, palette, 6)
    lo = int(math.floor(h * BAND_MIN_FRACTION))
    hi = int(math.floor(h * BAND_MAX_FRACTION))
    spacer = solid(with_alpha(BLACK, 0.08))

    out: List[Primitive] = []
    y = 0
    while y < h:
        band_h = max(1, min(h - y, rng.next_int(lo, hi)))
        c1 = colors[rng.next_int(0, len(colors) - 1)]
        c2 = colors[rng.next_int(0, len(colors) - 1)]
        out.append(Rect(0, y, w, band_h, fill_or_gradient(p.use_gradient, c1, 0, y, w, y + band_h, [c1, c2])))
        if rng.next() < BAND_SPACER_PROB:
            out.append(Rect(0, y + band_h - 2, w, 2, spacer))
        y += band_h
    return out
