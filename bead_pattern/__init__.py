"""Fuse-bead pattern generator: image quantization and pattern editing."""

from bead_pattern.analysis import analyze_image
from bead_pattern.errors import DecodeError, EmptyPaletteError, OutOfBoundsError
from bead_pattern.image_processing import (
    apply_edit,
    quantize,
    replace_global,
    replace_single,
)
from bead_pattern.models import (
    AUTO,
    ColorEntry,
    GlobalReplace,
    Palette,
    Pattern,
    SingleReplace,
)
from bead_pattern.palettes import DEFAULT_PALETTE

__all__ = [
    "AUTO",
    "ColorEntry",
    "DEFAULT_PALETTE",
    "DecodeError",
    "EmptyPaletteError",
    "GlobalReplace",
    "OutOfBoundsError",
    "Palette",
    "Pattern",
    "SingleReplace",
    "analyze_image",
    "apply_edit",
    "quantize",
    "replace_global",
    "replace_single",
]
