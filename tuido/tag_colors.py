"""Per-run tag color assignment.

Every tag occurrence gets an evenly spaced hue slot around the HCL color wheel,
starting from a random offset, so colors change between runs but stay distinct
within one. The random source is always passed in by the caller.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass

from .model import Item

TAG_CHROMA = 0.9
TAG_LIGHTNESS = 0.85

# D65 reference white.
_WHITE_X = 0.95047
_WHITE_Y = 1.00000
_WHITE_Z = 1.08883


@dataclass(frozen=True)
class TagColor:
    """Hue in degrees plus its clamped sRGB rendering."""

    hue: float
    hex: str

    @property
    def rgb(self) -> tuple[int, int, int]:
        return int(self.hex[1:3], 16), int(self.hex[3:5], 16), int(self.hex[5:7], 16)


def _lab_finv(t: float) -> float:
    if t > 6.0 / 29.0:
        return t * t * t
    return 3.0 * (6.0 / 29.0) * (6.0 / 29.0) * (t - 4.0 / 29.0)


def _delinearize(v: float) -> float:
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * math.pow(v, 1.0 / 2.4) - 0.055


def hcl_to_rgb(hue: float, chroma: float, lightness: float) -> tuple[float, float, float]:
    """Convert HCL (L*C*h with L in ``0..1``) to unclamped sRGB floats."""
    h = math.radians(hue)
    a = chroma * math.cos(h)
    b = chroma * math.sin(h)

    l2 = (lightness + 0.16) / 1.16
    x = _WHITE_X * _lab_finv(l2 + a / 5.0)
    y = _WHITE_Y * _lab_finv(l2)
    z = _WHITE_Z * _lab_finv(l2 - b / 2.0)

    r = 3.2409699419045214 * x - 1.5373831775700935 * y - 0.49861076029300328 * z
    g = -0.96924363628087983 * x + 1.8759675015077207 * y + 0.041555057407175613 * z
    bl = 0.055630079696993609 * x - 0.20397695888897657 * y + 1.0569715142428786 * z
    return _delinearize(r), _delinearize(g), _delinearize(bl)


def hcl_hex(hue: float, chroma: float, lightness: float) -> str:
    """Return ``#rrggbb`` for an HCL color clamped into the sRGB gamut."""
    channels = (max(0.0, min(1.0, c)) for c in hcl_to_rgb(hue, chroma, lightness))
    r, g, b = (int(c * 255.0 + 0.5) for c in channels)
    return f"#{r:02x}{g:02x}{b:02x}"


def assign_tag_colors(items: Iterable[Item], rng: random.Random) -> dict[str, TagColor]:
    """Map every tag present in ``items`` to a color.

    Occurrences are not deduplicated: each one takes a hue slot, and a
    repeated tag ends up with the hue of its last occurrence.
    """
    tags = [tag for item in items for tag in item.tags]
    if not tags:
        return {}

    interval = 360.0 / len(tags)
    offset = rng.random() * 360.0
    colors: dict[str, TagColor] = {}
    for idx, tag in enumerate(tags):
        hue = (offset + idx * interval) % 360.0
        colors[tag] = TagColor(hue=hue, hex=hcl_hex(hue, TAG_CHROMA, TAG_LIGHTNESS))
    return colors


def tag_color_sgr(color: TagColor) -> str:
    """Return the truecolor foreground escape for ``color``."""
    r, g, b = color.rgb
    return f"\033[38;2;{r};{g};{b}m"


__all__ = [
    "TagColor",
    "TAG_CHROMA",
    "TAG_LIGHTNESS",
    "assign_tag_colors",
    "hcl_hex",
    "hcl_to_rgb",
    "tag_color_sgr",
]
