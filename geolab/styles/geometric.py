"""Grid, radial and fixed-partition styles."""

import math
from typing import List

from ..colors import WHITE, lighten, pick_colors, with_alpha
from ..params import StyleParams
from ..palettes import Dimensions, Palette
from ..prng import SeededRandom
from ..primitives import (
    Circle, Primitive, Rect, fill_or_gradient, make_gradient, polygon,
    rotate_about, solid,
)

GRID_MARGIN = 40
GRID_DIVISIONS = 12
SUNBURST_RADIUS = 0.65          # of the canvas diagonal
STRIPE_ANGLE = -math.pi / 4
STRIPE_FILL = 0.9               # stripe width share; the rest is a gap
KITE_DX = 0.28
KITE_DY = 0.22


def style_grid(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Checkerboard of inset squares alternating with discs or triangles."""
    w, h = dims
    colors = pick_colors(rng, palette, 8)
    g = min(w, h) / GRID_DIVISIONS
    cols = int((w - GRID_MARGIN * 2) // g)
    rows = int((h - GRID_MARGIN * 2) // g)
    off_x = (w - cols * g) / 2
    off_y = (h - rows * g) / 2
    size = g * 0.85

    out: List[Primitive] = []
    for r in range(rows):
        for c in range(cols):
            x = off_x + c * g
            y = off_y + r * g
            color = colors[(r * cols + c) % len(colors)]
            if (r + c) % 2 == 0:
                fill = fill_or_gradient(p.use_gradient, color, x, y, x + size, y + size,
                                        [color, with_alpha(color, 0.7)])
                out.append(Rect(x + g * 0.05, y + g * 0.05, size, size, fill))
                continue
            shape = rng.next_int(0, 2)
            fill = fill_or_gradient(p.use_gradient, color, x, y, x + size, y + size,
                                    [lighten(color, 0.2), color])
            if shape == 0:
                out.append(Circle(x + g / 2, y + g / 2, size / 2, fill))
            else:
                out.append(polygon([(x + g / 2, y + g * 0.1), (x + g * 0.9, y + g * 0.9),
                                    (x + g * 0.1, y + g * 0.9)], fill))
    return out


def style_sunburst(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Wedges from the center past every corner, with one random rotation."""
    w, h = dims
    cx, cy = w / 2, h / 2
    radius = math.hypot(w, h) * SUNBURST_RADIUS
    wedges = 14 + rng.next_int(0, 10)
    colors = pick_colors(rng, palette, min(6, wedges))
    rot = rng.next() * math.pi

    out: List[Primitive] = []
    for i in range(wedges):
        a0 = rot + (i / wedges) * math.pi * 2
        a1 = rot + ((i + 1) / wedges) * math.pi * 2
        am = (a0 + a1) / 2
        c = colors[i % len(colors)]
        pts = [(cx, cy),
               (cx + math.cos(a0) * radius, cy + math.sin(a0) * radius),
               (cx + math.cos(a1) * radius, cy + math.sin(a1) * radius)]
        fill = fill_or_gradient(p.use_gradient, c, cx, cy, cx + math.cos(am) * radius,
                                cy + math.sin(am) * radius, [lighten(c, 0.15), c])
        out.append(polygon(pts, fill))
    return out


def style_diag_stripes(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Stripes at -45 degrees with a thin gap after each one.

    Stripes are laid out in the rotated frame over the canvas's circumscribed
    square, so the rotation never leaves an uncovered corner.
    """
    w, h = dims
    cx, cy = w / 2, h / 2
    stripe_w = max(30, min(w, h) * 0.08)
    half = math.hypot(w, h) / 2
    first = int(math.floor((cx - half) / stripe_w)) - 1
    last = int(math.ceil((cx + half) / stripe_w)) + 1
    top, bottom = cy - half, cy + half
    colors = pick_colors(rng, palette, 6)

    out: List[Primitive] = []
    for i in range(first, last):
        x = i * stripe_w
        c = colors[i % len(colors)]
        rect = [(x, top), (x + stripe_w * STRIPE_FILL, top),
                (x + stripe_w * STRIPE_FILL, bottom), (x, bottom)]
        pts = rotate_about(rect, STRIPE_ANGLE, cx, cy)
        if p.use_gradient:
            (gx0, gy0), (gx1, gy1) = rotate_about([(x, 0), (x + stripe_w, h)], STRIPE_ANGLE, cx, cy)
            fill = make_gradient(gx0, gy0, gx1, gy1, [lighten(c, 0.1), c])
        else:
            fill = solid(c)
        out.append(polygon(pts, fill))
    return out


def style_concentric_diamonds(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Diamonds shrinking toward the center, largest first."""
    w, h = dims
    cx, cy = w / 2, h / 2
    steps = 10 + rng.next_int(0, 8)
    colors = pick_colors(rng, palette, min(6, steps))

    out: List[Primitive] = []
    for i in range(steps, 0, -1):
        t = i / steps
        dx = (w * 0.45) * t
        dy = (h * 0.35) * t
        c = colors[(steps - i) % len(colors)]
        fill = fill_or_gradient(p.use_gradient, c, cx - dx, cy - dy, cx + dx, cy + dy, [lighten(c, 0.08), c])
        out.append(polygon([(cx - dx, cy), (cx, cy - dy), (cx + dx, cy), (cx, cy + dy)], fill))
    return out


def style_kites(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Four corner wedges around a central white diamond."""
    w, h = dims
    cx, cy = w / 2, h / 2
    dx, dy = w * KITE_DX, h * KITE_DY
    colors = pick_colors(rng, palette, 4)

    def wedge(pts, corner, color):
        fill = fill_or_gradient(p.use_gradient, color, corner[0], corner[1], cx, cy,
                                [color, lighten(color, 0.15)])
        return polygon(pts, fill)

    return [
        wedge([(0, 0), (cx, cy - dy), (cx - dx, cy)], (0, 0), colors[0]),
        wedge([(0, h), (cx - dx, cy), (cx, cy + dy)], (0, h), colors[1]),
        wedge([(w, 0), (cx + dx, cy), (cx, cy - dy)], (w, 0), colors[2]),
        wedge([(w, h), (cx, cy + dy), (cx + dx, cy)], (w, h), colors[3]),
        polygon([(cx - dx, cy), (cx, cy - dy), (cx + dx, cy), (cx, cy + dy)], solid(WHITE)),
    ]


def style_x_overlay(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Six triangles meeting at the edge midpoints and quarter heights.

    Four corner triangles take one accent each, drawn from a seeded shuffle
    of the palette, so the colours change with the seed. The top and bottom
    triangles blend the two corner colours beside them. The diamond in the
    middle is left empty on purpose, so the background shows there.
    """
    w, h = dims
    cx = w / 2
    colors = pick_colors(rng, palette, 4)

    left_mid, right_mid = (0, h / 2), (w, h / 2)
    top_q, bottom_q = (cx, h / 4), (cx, 3 * h / 4)
    return [
        polygon([(0, 0), left_mid, top_q], solid(colors[0])),
        polygon([left_mid, (0, h), bottom_q], solid(colors[1])),
        polygon([(w, 0), right_mid, top_q], solid(colors[2])),
        polygon([right_mid, (w, h), bottom_q], solid(colors[3])),
        polygon([(0, 0), (w, 0), top_q], make_gradient(0, 0, w, 0, [colors[0], colors[2]])),
        polygon([(0, h), (w, h), bottom_q], make_gradient(0, h, w, h, [colors[1], colors[3]])),
    ]
