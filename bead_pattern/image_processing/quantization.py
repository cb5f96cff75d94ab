"""Nearest palette color search.

AIDEV-NOTE: Maps RGBA pixels onto a fixed bead palette. Distances are
computed for all pixels at once with numpy; np.argmin returns the first
minimum so ties always resolve to the earlier palette entry.
"""

from typing import TYPE_CHECKING, Sequence

import numpy as np

from bead_pattern.errors import EmptyPaletteError
from bead_pattern.models import ALPHA_THRESHOLD

from .utils import (
    background_index,
    build_palette_lookup,
    color_distance_sq,
    distance_sq_matrix,
    hex_to_rgb,
)

if TYPE_CHECKING:
    from bead_pattern.models import ColorEntry


def find_closest_color(
    rgb: "tuple[int, int, int]",
    palette: "Sequence[ColorEntry]",
) -> "ColorEntry":
    """Find the palette entry closest to a single RGB color.

    Args:
        rgb: RGB tuple (0-255 each channel)
        palette: Ordered palette entries

    Returns:
        Closest entry, earliest in palette order on ties

    Raises:
        EmptyPaletteError: If palette has no entries
    """
    if len(palette) == 0:
        raise EmptyPaletteError()

    best = None
    best_distance = None
    for entry in palette:
        distance = color_distance_sq(rgb, hex_to_rgb(entry.hex))
        # Strict comparison keeps the first minimum
        if best_distance is None or distance < best_distance:
            best = entry
            best_distance = distance
    return best


def nearest_palette_indices(
    rgba: np.ndarray,
    palette: "Sequence[ColorEntry]",
) -> np.ndarray:
    """Assign every pixel of an RGBA array to a palette index.

    Args:
        rgba: (H, W, 4) uint8 array
        palette: Ordered palette entries (non-empty)

    Returns:
        (H, W) array of indices into ``palette``

    AIDEV-NOTE: Pixels with alpha < ALPHA_THRESHOLD are background and go
    to the white entry if the palette has one, else to entry 0.
    """
    if len(palette) == 0:
        raise EmptyPaletteError()

    height, width = rgba.shape[:2]
    _, palette_rgb = build_palette_lookup(palette)

    pixels = rgba[..., :3].reshape(-1, 3)
    alpha = rgba[..., 3].reshape(-1)

    # Chunked so the (N, P) distance matrix stays small for large grids
    indices = np.empty(pixels.shape[0], dtype=np.intp)
    chunk = 65536
    for start in range(0, pixels.shape[0], chunk):
        distances = distance_sq_matrix(pixels[start : start + chunk], palette_rgb)
        indices[start : start + chunk] = np.argmin(distances, axis=1)

    indices[alpha < ALPHA_THRESHOLD] = background_index(palette)
    return indices.reshape(height, width)
