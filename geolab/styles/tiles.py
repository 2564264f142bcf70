"""
Tiling styles that leave no background showing.

Cube tilings emit three faces per cell, always top, left, right, shaded
from one per-cell base colour with lighten offsets. Index ranges start
below zero and run past the far edge so partial cells fill the borders,
and odd rows shift by half a cell.
"""

import math
from typing import List, Sequence

from ..colors import ColorLike, lighten, pick_colors
from ..params import StyleParams
from ..palettes import Dimensions, Palette
from ..prng import SeededRandom
from ..primitives import Primitive, Rect, fill_or_gradient, polygon, solid

CHEVRON_COLUMNS = 6
CHEVRON_SKEW = 0.35
CHEVRON_ROW_OVERLAP = 0.5       # rows advance by half a tile height
WEAVE_DIVISIONS = 6
SQRT3 = math.sqrt(3)
CUBE_INDEX_OFFSET = 1000       # origin of the per-cell colour cycle


def style_corner_steps(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Rectangles stepping in from the top-left corner over a full base fill."""
    w, h = dims
    steps = p["steps"]
    colors = pick_colors(rng, palette, min(steps, 6))
    base = colors[0] if colors else palette.colors[1]
    out: List[Primitive] = [Rect(0, 0, w, h, solid(base))]

    step_x = w * p["step_x"]
    step_y = h * p["step_y"]
    irregular = p["irregular"]
    jitter = p["irregular_amt"] if irregular else 0.0

    acc_x = acc_y = 0.0
    for i in range(1, steps):
        dx, dy = step_x, step_y
        if irregular:
            dx = max(0.0, step_x + (rng.next() * 2 - 1) * step_x * jitter)
            dy = max(0.0, step_y + (rng.next() * 2 - 1) * step_y * jitter)
        acc_x += dx
        acc_y += dy
        x = math.floor(acc_x + 0.5)
        y = math.floor(acc_y + 0.5)
        ww = max(0, math.ceil(w - x))
        hh = max(0, math.ceil(h - y))
        if ww == 0 or hh == 0:
            continue
        c = colors[i % len(colors)]
        out.append(Rect(x, y, ww, hh, fill_or_gradient(p.use_gradient, c, x, y, x + ww, y + hh,
                                                       [lighten(c, 0.08), c])))
    return out


def style_chevron(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Bricks of a trapezoid top and two slanted sides, rows overlapping by half."""
    w, h = dims
    cell_w = math.ceil(w / CHEVRON_COLUMNS)
    height = math.floor(cell_w + 0.5)
    row_step = height * CHEVRON_ROW_OVERLAP
    rows = math.ceil((h + height) / row_step)
    k = cell_w * CHEVRON_SKEW

    side = pick_colors(rng, palette, 1)[0]
    left_shade = lighten(side, -0.22)
    right_shade = lighten(side, -0.10)
    tops = pick_colors(rng, palette, 3)
    g = p.use_gradient

    out: List[Primitive] = []
    for r in range(-1, rows):
        y = r * row_step - math.floor(height * 0.5)
        for c in range(CHEVRON_COLUMNS):
            x = c * cell_w
            top = tops[(r + c) % len(tops)]
            out.append(polygon(
                [(x + k, y), (x + cell_w - k, y), (x + cell_w, y + height * 0.5), (x, y + height * 0.5)],
                fill_or_gradient(g, top, x, y, x + cell_w, y + height * 0.5, [top, lighten(top, 0.08)])))
            out.append(polygon(
                [(x, y + height * 0.5), (x + k, y), (x + k, y + height), (x, y + height * 1.5)],
                fill_or_gradient(g, left_shade, x, y, x + k, y + height, [left_shade, side])))
            out.append(polygon(
                [(x + cell_w, y + height * 0.5), (x + cell_w - k, y), (x + cell_w - k, y + height),
                 (x + cell_w, y + height * 1.5)],
                fill_or_gradient(g, right_shade, x + cell_w - k, y, x + cell_w, y + height, [right_shade, side])))
    return out


def cube_faces(cx: float, cy: float, width: float, top_h: float, side_h: float,
               colors: Sequence[ColorLike], use_gradient: bool) -> List[Primitive]:
    """Top rhombus, then left and right faces, sharing the top's lower edges.

    width is the rhombus's horizontal diagonal, top_h its vertical diagonal
    and side_h the vertical edge length of both side faces.
    """
    top_c, left_c, right_c = colors
    hw, hh = width / 2, top_h / 2
    return [
        polygon([(cx, cy - hh), (cx + hw, cy), (cx, cy + hh), (cx - hw, cy)],
                fill_or_gradient(use_gradient, top_c, cx - hw, cy - hh, cx + hw, cy + hh,
                                 [lighten(top_c, 0.1), top_c])),
        polygon([(cx - hw, cy), (cx, cy + hh), (cx, cy + hh + side_h), (cx - hw, cy + side_h)],
                fill_or_gradient(use_gradient, left_c, cx - hw, cy, cx, cy + hh + side_h,
                                 [lighten(left_c, 0.05), left_c])),
        polygon([(cx, cy + hh), (cx + hw, cy), (cx + hw, cy + side_h), (cx, cy + hh + side_h)],
                fill_or_gradient(use_gradient, right_c, cx, cy + hh, cx + hw, cy + hh + side_h,
                                 [right_c, lighten(right_c, -0.05)])),
    ]


def style_rhombus_weave(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Tumbling blocks: three 60-degree rhombi per cell on a hexagonal lattice."""
    w, h = dims
    cube_w = min(w, h) / WEAVE_DIVISIONS
    edge = cube_w / SQRT3
    row_step = edge * 1.5
    cols = math.ceil(w / cube_w) + 4
    rows = math.ceil(h / row_step) + 4
    bases = pick_colors(rng, palette, 4)

    out: List[Primitive] = []
    for row in range(-2, rows + 1):
        for col in range(-2, cols + 1):
            cx = col * cube_w + (row % 2) * cube_w * 0.5
            cy = row * row_step
            base = bases[(row * cols + col) % len(bases)]
            faces = (lighten(base, 0.2), lighten(base, 0.0), lighten(base, -0.3))
            out.extend(cube_faces(cx, cy, cube_w, edge, edge, faces, p.use_gradient))
    return out


def style_iso_cubes(dims: Dimensions, rng: SeededRandom, palette: Palette, p: StyleParams) -> List[Primitive]:
    """Stacked cubes; each row's tops overlap the previous row's sides."""
    w, h = dims
    width = math.ceil(w / p["cols"])
    depth = width * SQRT3 / 2
    cols = math.ceil(w / width) + 4
    rows = math.ceil(h / depth) + 4

    shade = p["shade"]
    pool = rng.shuffle(palette.accents)
    bases = pool[:min(p["variety"], len(pool))]
    uniform = p["uniform"]

    out: List[Primitive] = []
    for row in range(-2, rows + 1):
        for col in range(-2, cols + 1):
            cx = col * width + (row % 2) * width * 0.5
            cy = row * depth
            idx = row * cols + col + CUBE_INDEX_OFFSET
            base = bases[idx % len(bases)]
            side = base if uniform else bases[(idx + 1) % len(bases)]
            faces = (lighten(base, shade), lighten(side, -shade * 0.8), lighten(side, -shade * 1.4))
            out.extend(cube_faces(cx, cy, width, depth, depth, faces, p.use_gradient))
    return out
