"""Color conversion and distance helpers shared by the quantizer.

AIDEV-NOTE: The distance metric is a cheap weighted-RGB approximation
("redmean"). It is intentionally not a perceptual (LAB) metric.
"""

import math
import re
from typing import TYPE_CHECKING, Sequence

import numpy as np

from bead_pattern.models import AUTO, WHITE_HEX

if TYPE_CHECKING:
    from bead_pattern.models import ColorEntry, HeightSpec

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(hex_color: str) -> "tuple[int, int, int]":
    """Convert "#RRGGBB" (leading # optional) to an RGB tuple.

    Unparseable strings map to black, matching how palette data has
    always been read.
    """
    match = _HEX_RE.match(hex_color.strip())
    if match is None:
        return (0, 0, 0)
    return (
        int(match.group(1), 16),
        int(match.group(2), 16),
        int(match.group(3), 16),
    )


def rgb_to_hex(rgb: "tuple[int, int, int]") -> str:
    """Convert an RGB tuple to "#RRGGBB"."""
    r, g, b = (max(0, min(255, int(c))) for c in rgb[:3])
    return f"#{r:02X}{g:02X}{b:02X}"


def color_distance_sq(
    c1: "tuple[int, int, int]", c2: "tuple[int, int, int]"
) -> int:
    """Squared weighted-RGB distance between two colors.

    Red and blue terms are floored after dividing by 256 (a right shift of
    the weighted value). rmean = (r1 + r2) / 2 is folded into the
    numerator so everything stays in integers:
    (512 + rmean) * dr^2 / 256 == (1024 + r1 + r2) * dr^2 / 512.
    """
    r_sum = c1[0] + c2[0]
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]
    return (
        ((1024 + r_sum) * dr * dr) // 512
        + 4 * dg * dg
        + ((1534 - r_sum) * db * db) // 512
    )


def color_distance(
    c1: "tuple[int, int, int]", c2: "tuple[int, int, int]"
) -> float:
    """Weighted-RGB distance between two colors."""
    return math.sqrt(color_distance_sq(c1, c2))


def distance_sq_matrix(pixels: np.ndarray, palette_rgb: np.ndarray) -> np.ndarray:
    """Squared distances between every pixel and every palette color.

    Args:
        pixels: (N, 3) integer array of RGB values
        palette_rgb: (P, 3) integer array of palette RGB values

    Returns:
        (N, P) int64 array, same values as color_distance_sq
    """
    px = pixels.astype(np.int64)[:, np.newaxis, :]
    pal = palette_rgb.astype(np.int64)[np.newaxis, :, :]

    r_sum = px[..., 0] + pal[..., 0]
    dr = px[..., 0] - pal[..., 0]
    dg = px[..., 1] - pal[..., 1]
    db = px[..., 2] - pal[..., 2]

    return (
        ((1024 + r_sum) * dr * dr) // 512
        + 4 * dg * dg
        + ((1534 - r_sum) * db * db) // 512
    )


def build_palette_lookup(
    palette: "Sequence[ColorEntry]",
) -> "tuple[list[ColorEntry], np.ndarray]":
    """Per-call RGB lookup table for a palette.

    Returns:
        Tuple of (palette entries in order, (P, 3) uint8 RGB array) where
        row i of the array is the color of entry i.

    AIDEV-NOTE: Keeps derived RGB out of ColorEntry itself.
    """
    entries = list(palette)
    rgb = np.array([hex_to_rgb(entry.hex) for entry in entries], dtype=np.uint8)
    return entries, rgb.reshape(-1, 3)


def background_index(palette: "Sequence[ColorEntry]") -> int:
    """Index of the entry used for transparent pixels.

    White (case-insensitive #FFFFFF) if present, otherwise the first entry.
    """
    for i, entry in enumerate(palette):
        if entry.hex.strip().upper() == WHITE_HEX:
            return i
    return 0


def resolve_height(
    target_width: int,
    target_height: "HeightSpec",
    source_size: "tuple[int, int]",
) -> int:
    """Resolve the grid height, deriving it from the aspect ratio for "auto".

    Args:
        target_width: Grid columns
        target_height: Grid rows or "auto"
        source_size: (width, height) of the source image in pixels

    Returns:
        Grid height (auto heights are floored at 1)
    """
    if target_height != AUTO:
        return int(target_height)

    source_width, source_height = source_size
    # Round half up (not Python's banker's rounding)
    return max(1, math.floor(target_width * source_height / source_width + 0.5))
