"""Image-to-bead-pattern pipeline.

AIDEV-NOTE: This package handles the complete pipeline from source image
to editable bead pattern. Organized into modular components:
- processor: decoding, resampling and the quantize() entry point
- quantization: nearest palette color search
- editing: single-cell / global color replacement and recounting
- rendering: preview and annotated export images
- utils: hex conversion, color distance, auto-height
"""

from .editing import apply_edit, material_list, replace_global, replace_single
from .processor import PatternProcessor, quantize
from .rendering import export_filename, export_pattern, render_pattern, save_pattern

__all__ = [
    "PatternProcessor",
    "apply_edit",
    "export_filename",
    "export_pattern",
    "material_list",
    "quantize",
    "render_pattern",
    "replace_global",
    "replace_single",
    "save_pattern",
]
