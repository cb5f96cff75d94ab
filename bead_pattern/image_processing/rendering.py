"""Rendering bead patterns to raster images.

AIDEV-NOTE: render_pattern draws the plain preview (one circle or square
per bead). export_pattern adds a margin with row/column numbers every
5th bead and gridlines, heavier every 10th bead, for printing.
"""

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from bead_pattern.models import Pattern, RenderStyle

from .utils import hex_to_rgb

BACKGROUND_COLOR = (224, 229, 236)  # #E0E5EC
GRID_COLOR = (190, 196, 206)
MAJOR_GRID_COLOR = (70, 74, 82)
LABEL_COLOR = (40, 40, 40)

LABEL_EVERY = 5
MAJOR_GRID_EVERY = 10


def export_filename(pattern: Pattern) -> str:
    """Download filename encoding the grid size."""
    return f"perler-pattern-{pattern.width}x{pattern.height}.png"


def label_margin(cell_size: int, show_labels: bool = True) -> int:
    """Width of the border reserved for row/column labels, in pixels."""
    if not show_labels:
        return 0
    return max(24, cell_size * 2)


def _draw_bead(
    draw: ImageDraw.ImageDraw,
    left: int,
    top: int,
    cell_size: int,
    color: "tuple[int, int, int]",
    style: RenderStyle,
) -> None:
    if style == RenderStyle.CIRCLES:
        radius = max(1, cell_size // 2 - 1)
        cx = left + cell_size / 2
        cy = top + cell_size / 2
        draw.ellipse(
            (cx - radius, cy - radius, cx + radius, cy + radius),
            fill=color,
        )
    else:
        draw.rectangle(
            (left, top, left + cell_size - 1, top + cell_size - 1),
            fill=color,
        )


def render_pattern(
    pattern: Pattern,
    cell_size: int = 12,
    style: RenderStyle = RenderStyle.CIRCLES,
) -> Image.Image:
    """Draw one bead per grid cell.

    Args:
        pattern: Pattern to draw
        cell_size: Pixels per bead
        style: Circles (bead look) or filled squares

    Returns:
        RGB image of (width * cell_size, height * cell_size) pixels
    """
    if cell_size <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_size}")

    image = Image.new(
        "RGB",
        (pattern.width * cell_size, pattern.height * cell_size),
        BACKGROUND_COLOR,
    )
    draw = ImageDraw.Draw(image)

    # Hex parsing is cached per color id, grids reuse few colors
    rgb_cache: "dict[str, tuple[int, int, int]]" = {}
    for y, row in enumerate(pattern.grid):
        for x, bead in enumerate(row):
            rgb = rgb_cache.get(bead.id)
            if rgb is None:
                rgb = rgb_cache[bead.id] = hex_to_rgb(bead.hex)
            _draw_bead(draw, x * cell_size, y * cell_size, cell_size, rgb, style)

    return image


def _draw_gridlines(
    draw: ImageDraw.ImageDraw,
    pattern: Pattern,
    offset: int,
    cell_size: int,
) -> None:
    right = offset + pattern.width * cell_size
    bottom = offset + pattern.height * cell_size

    # Minor lines first so major lines are drawn on top
    for major in (False, True):
        color = MAJOR_GRID_COLOR if major else GRID_COLOR
        line_width = 2 if major else 1
        for x in range(pattern.width + 1):
            if (x % MAJOR_GRID_EVERY == 0) == major:
                px = offset + x * cell_size
                draw.line((px, offset, px, bottom), fill=color, width=line_width)
        for y in range(pattern.height + 1):
            if (y % MAJOR_GRID_EVERY == 0) == major:
                py = offset + y * cell_size
                draw.line((offset, py, right, py), fill=color, width=line_width)


def _draw_labels(
    draw: ImageDraw.ImageDraw,
    pattern: Pattern,
    offset: int,
    cell_size: int,
) -> None:
    font = ImageFont.load_default()

    def centered_text(cx: float, cy: float, text: str) -> None:
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        draw.text(
            (cx - (right - left) / 2, cy - (bottom - top) / 2 - top),
            text,
            fill=LABEL_COLOR,
            font=font,
        )

    # 1-based numbers on every 5th column / row, centered on that bead
    for n in range(LABEL_EVERY, pattern.width + 1, LABEL_EVERY):
        centered_text(offset + (n - 0.5) * cell_size, offset / 2, str(n))
    for n in range(LABEL_EVERY, pattern.height + 1, LABEL_EVERY):
        centered_text(offset / 2, offset + (n - 0.5) * cell_size, str(n))


def export_pattern(
    pattern: Pattern,
    cell_size: int = 12,
    style: RenderStyle = RenderStyle.CIRCLES,
    show_labels: bool = True,
) -> Image.Image:
    """Render a printable pattern sheet with gridlines and labels.

    Returns:
        RGB image of the pattern surrounded by a label margin on every side
    """
    body = render_pattern(pattern, cell_size, style)
    margin = label_margin(cell_size, show_labels)

    sheet = Image.new(
        "RGB",
        (body.width + 2 * margin, body.height + 2 * margin),
        (255, 255, 255),
    )
    sheet.paste(body, (margin, margin))

    draw = ImageDraw.Draw(sheet)
    _draw_gridlines(draw, pattern, margin, cell_size)
    if show_labels:
        _draw_labels(draw, pattern, margin, cell_size)

    return sheet


def save_pattern(
    pattern: Pattern,
    directory: "str | Path" = ".",
    cell_size: int = 12,
    style: RenderStyle = RenderStyle.CIRCLES,
    show_labels: bool = True,
) -> Path:
    """Export a pattern as PNG into ``directory``.

    Returns:
        Path of the written file
    """
    output_path = Path(directory) / export_filename(pattern)
    sheet = export_pattern(pattern, cell_size, style, show_labels)
    sheet.save(output_path, format="PNG")
    return output_path
