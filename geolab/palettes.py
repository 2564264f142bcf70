"""Curated palettes and canvas aspect presets."""

from dataclasses import dataclass
from typing import Dict, NamedTuple, Tuple

PALETTE_SIZE = 6


@dataclass(frozen=True)
class Palette:
    """Six hex colours. Index 0 is the background reference, 1..5 are accents."""
    name: str
    colors: Tuple[str, ...]

    def __post_init__(self):
        if len(self.colors) != PALETTE_SIZE:
            raise ValueError(f"Palette {self.name!r} needs {PALETTE_SIZE} colors, got {len(self.colors)}")

    @property
    def background(self) -> str:
        return self.colors[0]

    @property
    def accents(self) -> Tuple[str, ...]:
        return self.colors[1:]


class Dimensions(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True)
class AspectRatio:
    id: str
    label: str
    width: int
    height: int

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)


PALETTES: Tuple[Palette, ...] = (
    Palette("Deep Navy Pop", ("#0A0B1A", "#1F3BFF", "#F43F5E", "#FF8A00", "#19E1FF", "#FFFFFF")),
    Palette("ICLR Classic", ("#0B1026", "#2B3AF6", "#EE3E7A", "#F7B500", "#FF6A00", "#FFFFFF")),
    Palette("Sunset Blocks", ("#0F0F10", "#2E3192", "#F2467D", "#FF6A00", "#FFB36B", "#FFFFFF")),
    Palette("Pastel Steps", ("#FFFFFF", "#EAC6D8", "#D9B8A8", "#B69E86", "#8FA5C2", "#E9C2B2")),
    Palette("Electric", ("#101010", "#0072F5", "#00E7F0", "#FF4ECD", "#FF8C00", "#F5F5F7")),
    Palette("Citrus", ("#10131B", "#2A6CF6", "#FF3366", "#FFB100", "#00D48A", "#FFFFFF")),
    Palette("Bauhaus Primary", ("#0D0D0D", "#0057FF", "#FF2B00", "#FFB400", "#00B050", "#FFFFFF")),
    Palette("Midnight Neon", ("#0B0B1E", "#00E5FF", "#6C63FF", "#FF3EA5", "#FFB800", "#FFFFFF")),
    Palette("Vaporwave", ("#0F1026", "#7A77FF", "#FF68C6", "#FFA54B", "#4DE6FF", "#FFFFFF")),
    Palette("Nordic Calm", ("#FFFFFF", "#CFE6FF", "#C9E4D8", "#F9D6D1", "#E5D6FF", "#A8B6C6")),
    Palette("Retro Pop", ("#111111", "#00C2A8", "#FF4E4E", "#FFC542", "#3D6BFF", "#FFFFFF")),
    Palette("Aurora", ("#0B1022", "#57D2FF", "#4DE38A", "#FFD166", "#C77DFF", "#FFFFFF")),
    Palette("Desert Dusk", ("#0E0C0A", "#F2994A", "#F2C94C", "#EB5757", "#6FCF97", "#FFFFFF")),
    Palette("Moss Forest", ("#0C0F0C", "#6EE7B7", "#34D399", "#93C5FD", "#FBBF24", "#FFFFFF")),
    Palette("Mono Blues", ("#070B1A", "#143DFF", "#386BFF", "#71A1FF", "#AFC6FF", "#FFFFFF")),
)

ASPECT_RATIOS: Dict[str, AspectRatio] = {
    a.id: a for a in (
        AspectRatio("square", "1:1", 1200, 1200),
        AspectRatio("landscape", "16:9", 1920, 1080),
        AspectRatio("portrait", "3:4", 1200, 1600),
    )
}
DEFAULT_ASPECT = "portrait"
