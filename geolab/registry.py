"""
Closed registry of style identifiers.

Adding a style means adding a `Style` member and its generator below;
unknown identifiers are a configuration error, never silently replaced.
"""

from enum import Enum
from typing import Callable, Dict, List, Tuple, Union

from .palettes import Dimensions, Palette
from .params import StyleParams
from .primitives import Primitive
from .prng import SeededRandom
from .styles import basic, curves, geometric, ml, perspective, tiles

Generator = Callable[[Dimensions, SeededRandom, Palette, StyleParams], List[Primitive]]


class ConfigurationError(ValueError):
    """A request names something that does not exist (style, aspect, palette)."""


class Style(str, Enum):
    CONCENTRIC = "concentric"
    DIAMONDS = "diamonds"
    ORBS = "orbs"
    BANDS = "bands"
    GRID = "grid"
    WAVES = "waves"
    KITES = "kites"
    CORNER_STEPS = "cornerSteps"
    ORB_TRAIL = "orbTrail"
    CHEVRON = "chevron"
    RHOMBUS_WEAVE = "rhombusWeave"
    ISO_CUBES = "isoCubes"
    X_OVERLAY = "xOverlay"
    FLOW_RIBBONS = "flowRibbons"
    SUNBURST = "sunburst"
    DIAG_STRIPES = "diagStripes"
    CONCENTRIC_DIAMONDS = "concentricDiamonds"
    TRANSFORMER_ATTENTION = "transformerAttention"
    LATENT_SPACE = "latentSpace"
    GRADIENT_FLOW = "gradientFlow"
    PERSPECTIVE_GRID = "perspectiveGrid"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[Style, str] = {
    Style.CONCENTRIC: "Concentric",
    Style.DIAMONDS: "Diamonds",
    Style.ORBS: "Orbs",
    Style.BANDS: "Bands",
    Style.GRID: "Grid",
    Style.WAVES: "Waves",
    Style.KITES: "Kites",
    Style.CORNER_STEPS: "Corner Steps",
    Style.ORB_TRAIL: "Orb Trail",
    Style.CHEVRON: "Chevron",
    Style.RHOMBUS_WEAVE: "Rhombus Weave",
    Style.ISO_CUBES: "Iso Cubes",
    Style.X_OVERLAY: "X Overlay",
    Style.FLOW_RIBBONS: "Flow Ribbons",
    Style.SUNBURST: "Sunburst",
    Style.DIAG_STRIPES: "Diag Stripes",
    Style.CONCENTRIC_DIAMONDS: "Concentric Diamonds",
    Style.TRANSFORMER_ATTENTION: "Transformer Attention",
    Style.LATENT_SPACE: "Latent Space",
    Style.GRADIENT_FLOW: "Gradient Flow",
    Style.PERSPECTIVE_GRID: "Perspective Grid",
}

GENERATORS: Dict[Style, Generator] = {
    Style.CONCENTRIC: basic.style_concentric,
    Style.DIAMONDS: basic.style_diamonds,
    Style.ORBS: basic.style_orbs,
    Style.BANDS: basic.style_bands,
    Style.GRID: geometric.style_grid,
    Style.WAVES: curves.style_waves,
    Style.KITES: geometric.style_kites,
    Style.CORNER_STEPS: tiles.style_corner_steps,
    Style.ORB_TRAIL: curves.style_orb_trail,
    Style.CHEVRON: tiles.style_chevron,
    Style.RHOMBUS_WEAVE: tiles.style_rhombus_weave,
    Style.ISO_CUBES: tiles.style_iso_cubes,
    Style.X_OVERLAY: geometric.style_x_overlay,
    Style.FLOW_RIBBONS: curves.style_flow_ribbons,
    Style.SUNBURST: geometric.style_sunburst,
    Style.DIAG_STRIPES: geometric.style_diag_stripes,
    Style.CONCENTRIC_DIAMONDS: geometric.style_concentric_diamonds,
    Style.TRANSFORMER_ATTENTION: ml.style_transformer_attention,
    Style.LATENT_SPACE: ml.style_latent_space,
    Style.GRADIENT_FLOW: curves.style_gradient_flow,
    Style.PERSPECTIVE_GRID: perspective.style_perspective_grid,
}

STYLE_OPTIONS: List[Tuple[str, str]] = [(s.value, s.label) for s in Style]


def resolve_style(style: Union[str, Style]) -> Style:
    try:
        return Style(style)
    except ValueError:
        raise ConfigurationError(
            f"Unknown style: {style!r}. Choose from {[s.value for s in Style]}") from None


def get_generator(style: Union[str, Style]) -> Generator:
    return GENERATORS[resolve_style(style)]
