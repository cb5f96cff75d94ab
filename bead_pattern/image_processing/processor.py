"""Image-to-pattern quantizer.

AIDEV-NOTE: Pipeline is decode -> RGBA -> resample to the grid size ->
nearest palette color per pixel. quantize() is pure: same inputs, same
grid, nothing printed or stored. PatternProcessor wraps it with config
defaults and progress output for whole-file runs.
"""

import io
from pathlib import Path
from typing import IO, Sequence, Union

import numpy as np
from PIL import Image

from bead_pattern.errors import DecodeError, EmptyPaletteError
from bead_pattern.models import (
    AUTO,
    ColorEntry,
    HeightSpec,
    Palette,
    Pattern,
    PatternConfig,
)
from bead_pattern.palettes import DEFAULT_PALETTE

from .editing import material_list
from .quantization import nearest_palette_indices
from .utils import build_palette_lookup, resolve_height

ImageSource = Union[Image.Image, bytes, bytearray, str, Path, IO[bytes]]

# AIDEV-NOTE: Any reasonable downsampling filter is acceptable here
RESAMPLE_FILTER = Image.Resampling.BILINEAR


def decode_image(source: ImageSource) -> Image.Image:
    """Decode an image source into an RGBA PIL image.

    Args:
        source: PIL image, raw encoded bytes, file path or binary file object

    Returns:
        PIL Image in RGBA mode

    Raises:
        DecodeError: If the source cannot be read as an image
    """
    try:
        if isinstance(source, Image.Image):
            image = source
        else:
            if isinstance(source, (bytes, bytearray)):
                source = io.BytesIO(source)
            image = Image.open(source)
            # Image.open is lazy, force the full decode here
            image.load()
        return _to_rgba(image)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e


def _to_rgba(image: Image.Image) -> Image.Image:
    """Convert any Pillow mode to 8-bit RGBA.

    AIDEV-NOTE: convert("RGBA") clips I/I;16 samples instead of scaling
    them, so 16-bit data is shifted down to 8 bits first. F images in
    0-1 are stretched to 0-255, anything else is clipped.
    """
    if image.mode.startswith("I"):
        data = np.asarray(image).astype(np.int64) >> 8
        image = Image.fromarray(np.clip(data, 0, 255).astype(np.uint8))
    elif image.mode == "F":
        data = np.nan_to_num(np.asarray(image, dtype=np.float64))
        if data.size and data.max() <= 1.0:
            data = data * 255.0
        image = Image.fromarray(np.clip(np.rint(data), 0, 255).astype(np.uint8))

    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return image


def quantize(
    image: ImageSource,
    target_width: int,
    target_height: HeightSpec,
    palette: "Sequence[ColorEntry] | Palette",
) -> Pattern:
    """Convert an image into a bead pattern.

    Args:
        image: Source image (any format Pillow can decode)
        target_width: Grid columns (> 0)
        target_height: Grid rows (> 0) or "auto" to keep the aspect ratio
        palette: Ordered, non-empty palette

    Returns:
        Pattern of exactly target_width x resolved height cells

    Raises:
        EmptyPaletteError: If palette is empty
        ValueError: If the width or resolved height is not positive
        DecodeError: If the image cannot be decoded
    """
    entries, _ = build_palette_lookup(palette)
    if not entries:
        raise EmptyPaletteError()
    if target_width <= 0:
        raise ValueError(f"Grid width must be positive, got {target_width}")
    if target_height != AUTO and target_height <= 0:
        raise ValueError(f"Grid height must be positive, got {target_height}")

    rgba_image = decode_image(image)
    final_height = resolve_height(target_width, target_height, rgba_image.size)
    if final_height <= 0:
        raise ValueError(f"Grid height must be positive, got {final_height}")

    resized = rgba_image.resize((target_width, final_height), RESAMPLE_FILTER)
    rgba = np.asarray(resized, dtype=np.uint8)
    indices = nearest_palette_indices(rgba, entries)

    grid = []
    counts: "dict[str, int]" = {}
    for index_row in indices.tolist():
        row = []
        for index in index_row:
            bead = entries[index]
            row.append(bead)
            counts[bead.id] = counts.get(bead.id, 0) + 1
        grid.append(tuple(row))

    return Pattern(
        width=target_width,
        height=final_height,
        grid=tuple(grid),
        counts=counts,
    )


class PatternProcessor:
    """Turns image files into bead patterns using saved settings."""

    def __init__(
        self,
        config: PatternConfig | None = None,
        palette: Palette | None = None,
    ):
        self.config = config or PatternConfig()
        self.palette = palette if palette is not None else DEFAULT_PALETTE

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load and validate an image file.

        Args:
            file_path: Path to image file (PNG, JPG, etc.)

        Returns:
            PIL Image in RGBA mode

        Raises:
            DecodeError: If file cannot be loaded or is invalid
        """
        return decode_image(file_path)

    def quantize(
        self,
        image: ImageSource,
        width: int | None = None,
        height: HeightSpec | None = None,
    ) -> Pattern:
        """Quantize with this processor's palette.

        Args:
            image: Source image
            width: Grid columns, uses config default if None
            height: Grid rows or "auto", uses config default if None
        """
        width = self.config.grid_width if width is None else width
        height = self.config.grid_height if height is None else height
        return quantize(image, width, height, self.palette)

    def process(self, file_path: str | Path) -> Pattern:
        """Execute the complete file-to-pattern pipeline.

        Args:
            file_path: Path to input image

        Returns:
            Quantized Pattern
        """
        print("Starting bead pattern pipeline...")

        print("Loading image...")
        image = self.load_image(file_path)
        orig_width, orig_height = image.size
        print(f"Loaded image with size: {orig_width}x{orig_height} pixels.")

        print(f"Quantizing to palette '{self.palette.name}' ({len(self.palette)} colors)...")
        pattern = self.quantize(image)

        print("Pattern generation complete.")
        print(f"Grid size: {pattern.width}x{pattern.height} ({pattern.total_beads} beads)")
        print(f"Colors used: {len(material_list(pattern))}")
        return pattern
