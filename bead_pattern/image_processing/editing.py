"""Post-quantization pattern edits.

AIDEV-NOTE: Every edit returns a brand new Pattern and recounts colors
from the resulting grid. Counts are never patched incrementally, so a
Pattern's grid and counts cannot disagree.
"""

from typing import Iterable, Sequence

from bead_pattern.errors import OutOfBoundsError
from bead_pattern.models import (
    ColorEntry,
    EditRequest,
    GlobalReplace,
    Pattern,
    SingleReplace,
)


def count_colors(grid: "Iterable[Iterable[ColorEntry]]") -> "dict[str, int]":
    """Count cells per color id, in row-major first-appearance order."""
    counts: "dict[str, int]" = {}
    for row in grid:
        for color in row:
            counts[color.id] = counts.get(color.id, 0) + 1
    return counts


def replace_global(
    pattern: Pattern, target_color_id: str, replacement: ColorEntry
) -> Pattern:
    """Replace every cell whose color id is ``target_color_id``.

    Args:
        pattern: Source pattern (left untouched)
        target_color_id: Color id to replace
        replacement: New color for matching cells

    Returns:
        New Pattern. If nothing matches it is equal to, but not the same
        object as, the input.
    """
    grid = tuple(
        tuple(replacement if color.id == target_color_id else color for color in row)
        for row in pattern.grid
    )
    return Pattern(
        width=pattern.width,
        height=pattern.height,
        grid=grid,
        counts=count_colors(grid),
    )


def replace_single(
    pattern: Pattern, x: int, y: int, replacement: ColorEntry
) -> Pattern:
    """Replace the color of exactly one cell.

    Raises:
        OutOfBoundsError: If (x, y) is outside the grid
    """
    if not (0 <= x < pattern.width and 0 <= y < pattern.height):
        raise OutOfBoundsError(x, y, pattern.width, pattern.height)

    row = pattern.grid[y]
    new_row = row[:x] + (replacement,) + row[x + 1 :]
    grid = pattern.grid[:y] + (new_row,) + pattern.grid[y + 1 :]
    return Pattern(
        width=pattern.width,
        height=pattern.height,
        grid=grid,
        counts=count_colors(grid),
    )


def apply_edit(pattern: Pattern, request: EditRequest) -> Pattern:
    """Apply a GlobalReplace or SingleReplace request."""
    if isinstance(request, GlobalReplace):
        return replace_global(pattern, request.target_color_id, request.replacement)
    elif isinstance(request, SingleReplace):
        return replace_single(pattern, request.x, request.y, request.replacement)
    else:
        raise TypeError(f"Unsupported edit request: {request!r}")


def material_list(
    pattern: Pattern, palette: "Sequence[ColorEntry] | None" = None
) -> "list[tuple[ColorEntry, int]]":
    """Colors used by a pattern with their bead counts.

    Sorted by count (most used first). Equal counts keep palette order,
    or first-appearance order when no palette is given. Colors in the
    pattern but missing from ``palette`` are appended in appearance order.
    """
    used = pattern.colors()
    if palette is not None:
        order = {entry.id: i for i, entry in enumerate(palette)}
        used.sort(key=lambda c: order.get(c.id, len(order)))

    # sort() is stable, so ties stay in the order established above
    used.sort(key=lambda c: pattern.count(c.id), reverse=True)
    return [(color, pattern.count(color.id)) for color in used]
