"""
Renderer-agnostic drawables and the geometry helpers the styles share.

A primitive is a frozen dataclass in absolute pixel coordinates carrying a
fill (solid colour or gradient) and a layer alpha. Styles only ever build
these; painting them is the renderer's job.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .colors import RGBA, ColorLike, to_rgba

Point = Tuple[float, float]
Stop = Tuple[float, RGBA]


# ---------------------------- Fills -----------------------------------------

@dataclass(frozen=True)
class SolidFill:
    color: RGBA


@dataclass(frozen=True)
class LinearGradient:
    x0: float
    y0: float
    x1: float
    y1: float
    stops: Tuple[Stop, ...]


@dataclass(frozen=True)
class RadialGradient:
    """Two-circle gradient, same model as an HTML canvas radial gradient."""
    x0: float
    y0: float
    r0: float
    x1: float
    y1: float
    r1: float
    stops: Tuple[Stop, ...]


Fill = Union[SolidFill, LinearGradient, RadialGradient]


def solid(color: ColorLike) -> SolidFill:
    return SolidFill(to_rgba(color))


def make_gradient(x0: float, y0: float, x1: float, y1: float, colors: Sequence[ColorLike]) -> LinearGradient:
    """Linear gradient from (x0, y0) to (x1, y1) with evenly spaced stops."""
    step = 1.0 / (len(colors) - 1)
    stops = tuple((i * step, to_rgba(c)) for i, c in enumerate(colors))
    return LinearGradient(x0, y0, x1, y1, stops)


def radial_gradient(x0, y0, r0, x1, y1, r1, stops: Sequence[Tuple[float, ColorLike]]) -> RadialGradient:
    return RadialGradient(x0, y0, r0, x1, y1, r1, tuple((o, to_rgba(c)) for o, c in stops))


def fill_or_gradient(use_gradient: bool, color: ColorLike, x0, y0, x1, y1, colors: Sequence[ColorLike]) -> Fill:
    """Gradient over colors when use_gradient is on, otherwise solid color."""
    if use_gradient:
        return make_gradient(x0, y0, x1, y1, colors)
    return solid(color)


# ---------------------------- Shapes ----------------------------------------

@dataclass(frozen=True)
class Polygon:
    points: Tuple[Point, ...]
    fill: Fill
    alpha: float = 1.0


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: Fill
    alpha: float = 1.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float
    fill: Fill
    alpha: float = 1.0
    radius: float = 0.0


@dataclass(frozen=True)
class Path:
    """Stroked polyline; fill is the stroke paint."""
    points: Tuple[Point, ...]
    fill: Fill
    width: float = 1.0
    closed: bool = False
    alpha: float = 1.0


Primitive = Union[Polygon, Circle, Rect, Path]


def polygon(points: Sequence[Point], fill: Fill, alpha: float = 1.0) -> Polygon:
    return Polygon(tuple((float(x), float(y)) for x, y in points), fill, alpha)


def path(points: Sequence[Point], fill: Fill, width: float = 1.0, closed: bool = False, alpha: float = 1.0) -> Path:
    return Path(tuple((float(x), float(y)) for x, y in points), fill, width, closed, alpha)


def bounds(prim: Primitive) -> Tuple[float, float, float, float]:
    """Axis-aligned (x0, y0, x1, y1) of a primitive's geometry."""
    if isinstance(prim, Circle):
        return (prim.cx - prim.r, prim.cy - prim.r, prim.cx + prim.r, prim.cy + prim.r)
    if isinstance(prim, Rect):
        return (prim.x, prim.y, prim.x + prim.w, prim.y + prim.h)
    xs = [p[0] for p in prim.points]
    ys = [p[1] for p in prim.points]
    pad = prim.width / 2 if isinstance(prim, Path) else 0.0
    return (min(xs) - pad, min(ys) - pad, max(xs) + pad, max(ys) + pad)


# ---------------------------- Serialisation ---------------------------------

def _color_dict(c: RGBA) -> List[Any]:
    return [c.r, c.g, c.b, round(c.a, 6)]


def fill_to_dict(fill: Fill) -> Dict[str, Any]:
    if isinstance(fill, SolidFill):
        return {"type": "solid", "color": _color_dict(fill.color)}
    stops = [[o, _color_dict(c)] for o, c in fill.stops]
    if isinstance(fill, LinearGradient):
        return {"type": "linear", "from": [fill.x0, fill.y0], "to": [fill.x1, fill.y1], "stops": stops}
    return {
        "type": "radial",
        "from": [fill.x0, fill.y0, fill.r0],
        "to": [fill.x1, fill.y1, fill.r1],
        "stops": stops,
    }


def primitive_to_dict(prim: Primitive) -> Dict[str, Any]:
    if isinstance(prim, Circle):
        d = {"kind": "circle", "cx": prim.cx, "cy": prim.cy, "r": prim.r}
    elif isinstance(prim, Rect):
        d = {"kind": "rect", "x": prim.x, "y": prim.y, "w": prim.w, "h": prim.h, "radius": prim.radius}
    elif isinstance(prim, Path):
        d = {"kind": "path", "points": [list(p) for p in prim.points], "width": prim.width, "closed": prim.closed}
    elif isinstance(prim, Polygon):
        d = {"kind": "polygon", "points": [list(p) for p in prim.points]}
    else:
        raise ValueError(f"Unknown primitive: {prim!r}")
    d["fill"] = fill_to_dict(prim.fill)
    d["alpha"] = prim.alpha
    return d


# ---------------------------- Geometry --------------------------------------

def rotate_points(points: Sequence[Point], angle_rad: float) -> List[Point]:
    ca, sa = math.cos(angle_rad), math.sin(angle_rad)
    return [(x*ca - y*sa, x*sa + y*ca) for (x, y) in points]


def translate_points(points: Sequence[Point], dx: float, dy: float) -> List[Point]:
    return [(x+dx, y+dy) for (x, y) in points]


def rotate_about(points: Sequence[Point], angle_rad: float, cx: float, cy: float) -> List[Point]:
    return translate_points(rotate_points(translate_points(points, -cx, -cy), angle_rad), cx, cy)


def circle_from_3_points(p1: Point, p2: Point, p3: Point, eps: float = 1e-6) -> Optional[Tuple[float, float, float]]:
    """Circumcircle (cx, cy, r) through three points, or None when they are collinear."""
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    d = 2 * (x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2))
    if abs(d) < eps:
        return None
    s1 = x1*x1 + y1*y1
    s2 = x2*x2 + y2*y2
    s3 = x3*x3 + y3*y3
    cx = (s1 * (y2 - y3) + s2 * (y3 - y1) + s3 * (y1 - y2)) / d
    cy = (s1 * (x3 - x2) + s2 * (x1 - x3) + s3 * (x2 - x1)) / d
    return (cx, cy, math.hypot(cx - x1, cy - y1))


def point_in_polygon(x: float, y: float, points: Sequence[Point]) -> bool:
    """Even-odd ray cast."""
    inside = False
    n = len(points)
    j = n - 1
    for i in range(n):
        xi, yi = points[i]
        xj, yj = points[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def covers(prim: Primitive, x: float, y: float) -> bool:
    """True when the primitive's filled area contains (x, y). Paths never cover."""
    if isinstance(prim, Circle):
        return math.hypot(x - prim.cx, y - prim.cy) <= prim.r
    if isinstance(prim, Rect):
        return prim.x <= x <= prim.x + prim.w and prim.y <= y <= prim.y + prim.h
    if isinstance(prim, Polygon):
        return point_in_polygon(x, y, prim.points)
    return False
