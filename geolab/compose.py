"""
Composition pipeline: request in, ordered primitive list out.

Order is fixed: background fill, the style's primitives, then the optional
vignette. Every call starts from a fresh PRNG derived from the request, so
the same request always yields an equal Composition.
"""

import hashlib
import json
import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from .colors import BLACK, to_rgba, with_alpha
from .palettes import ASPECT_RATIOS, DEFAULT_ASPECT, PALETTES, Dimensions, Palette
from .params import StyleParams, clamp_params
from .primitives import Primitive, Rect, primitive_to_dict, radial_gradient, solid
from .prng import DEFAULT_SEED, rng_from_seed
from .registry import GENERATORS, ConfigurationError, Style, resolve_style

log = logging.getLogger(__name__)

LIGHT_BACKGROUND = "#FFFFFF"
VIGNETTE_INNER = 0.2            # of the shorter side: fully clear inside
VIGNETTE_OUTER = 0.75           # of the longer side: peak darkness
VIGNETTE_ALPHA = 0.18


def _js_bool(flag: bool) -> str:
    return "true" if flag else "false"


@dataclass(frozen=True)
class GenerationRequest:
    style: str = Style.ISO_CUBES.value
    palette_index: int = 0
    seed: str = DEFAULT_SEED
    aspect: str = DEFAULT_ASPECT
    use_gradient: bool = True
    dark_background: bool = True
    use_vignette: bool = False
    style_params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "style", str(self.style))
        object.__setattr__(self, "seed", str(self.seed or DEFAULT_SEED))
        object.__setattr__(self, "style_params", dict(self.style_params or {}))

    @property
    def palette(self) -> Palette:
        try:
            index = operator.index(self.palette_index)
        except TypeError:
            index = None
        if index is None or not 0 <= index < len(PALETTES):
            raise ConfigurationError(
                f"Unknown palette index: {self.palette_index!r}. Choose 0..{len(PALETTES) - 1}")
        return PALETTES[index]

    @property
    def dimensions(self) -> Dimensions:
        preset = ASPECT_RATIOS.get(self.aspect)
        if preset is None:
            raise ConfigurationError(f"Unknown aspect: {self.aspect!r}. Choose from {list(ASPECT_RATIOS)}")
        return preset.dimensions

    def rng_key(self) -> str:
        """Text the PRNG is seeded with; the seed plus every setting that changes the look."""
        return "-".join([self.style, self.palette.name, self.seed,
                         _js_bool(self.use_gradient), _js_bool(self.dark_background), self.aspect])

    def export_filename(self) -> str:
        return f"geo-{self.style}-{self.aspect}-{self.seed}.png"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationRequest":
        """Build a request from JSON-style data; camelCase keys are accepted."""
        aliases = {
            "paletteIndex": "palette_index",
            "useGradient": "use_gradient",
            "darkBackground": "dark_background",
            "darkBg": "dark_background",
            "useVignette": "use_vignette",
            "styleParams": "style_params",
            "aspectRatio": "aspect",
        }
        known = set(cls.__dataclass_fields__)
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name not in known:
                log.debug("Ignoring unknown request field %r", key)
                continue
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class Composition:
    request: GenerationRequest
    dimensions: Dimensions
    primitives: Tuple[Primitive, ...]

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height

    def __len__(self) -> int:
        return len(self.primitives)

    def to_dict(self) -> Dict[str, Any]:
        r = self.request
        return {
            "style": r.style,
            "palette": r.palette.name,
            "seed": r.seed,
            "aspect": r.aspect,
            "width": self.width,
            "height": self.height,
            "primitives": [primitive_to_dict(p) for p in self.primitives],
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, **kwargs)

    def digest(self) -> str:
        """Stable fingerprint of the full primitive list."""
        return hashlib.sha1(self.to_json().encode()).hexdigest()


def background(dims: Dimensions, palette: Palette, dark: bool) -> Rect:
    color = palette.background if dark else LIGHT_BACKGROUND
    return Rect(0, 0, dims.width, dims.height, solid(to_rgba(color)))


def vignette(dims: Dimensions, alpha: float = VIGNETTE_ALPHA) -> Rect:
    """Full-canvas radial darkening: clear near the center, alpha at the far edge."""
    w, h = dims
    fill = radial_gradient(w / 2, h / 2, min(w, h) * VIGNETTE_INNER,
                           w / 2, h / 2, max(w, h) * VIGNETTE_OUTER,
                           [(0, with_alpha(BLACK, 0)), (1, with_alpha(BLACK, alpha))])
    return Rect(0, 0, w, h, fill)


def compose(request: GenerationRequest) -> Composition:
    """Run the full pipeline for one request."""
    style = resolve_style(request.style)
    palette = request.palette
    dims = request.dimensions

    rng = rng_from_seed(request.rng_key())
    params = StyleParams(use_gradient=request.use_gradient,
                         values=clamp_params(style, request.style_params))

    primitives = [background(dims, palette, request.dark_background)]
    drawn = GENERATORS[style](dims, rng, palette, params)
    if not drawn:
        log.info("Style %s produced no primitives for seed %r", style, request.seed)
    primitives.extend(drawn)
    if request.use_vignette:
        primitives.append(vignette(dims))

    log.debug("Composed %s/%s seed=%r: %d primitives", style, request.aspect, request.seed, len(primitives))
    return Composition(request, dims, tuple(primitives))
