"""Data models and constants for the bead pattern generator."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Literal, Mapping, Union

# AIDEV-NOTE: Pixels with alpha below this are treated as background
ALPHA_THRESHOLD = 128  # 0-255
WHITE_HEX = "#FFFFFF"

# Sentinel for "derive grid height from the source aspect ratio"
AUTO = "auto"

# Configuration file path
CONFIG_FILE = Path.home() / ".bead_pattern_config.json"

HeightSpec = Union[int, Literal["auto"]]


class RenderStyle(Enum):
    """How each bead cell is drawn.

    AIDEV-NOTE: CIRCLES mirrors the "grid lines on" preview, SQUARES the
    plain filled-cell view.
    """

    CIRCLES = "circles"  # One filled circle per cell (looks like beads)
    SQUARES = "squares"  # One filled square per cell


@dataclass(frozen=True)
class ColorEntry:
    """A single bead color in a palette.

    AIDEV-NOTE: Identity is ``id``. Derived RGB values are never stored
    here, quantization builds its own lookup table per call.
    """

    id: str
    name: str
    hex: str  # "#RRGGBB"


@dataclass(frozen=True)
class Palette:
    """Ordered, closed set of bead colors."""

    id: str
    name: str
    colors: "tuple[ColorEntry, ...]" = ()

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "colors", tuple(self.colors))
        seen = set()
        for color in self.colors:
            if color.id in seen:
                raise ValueError(
                    f"Duplicate color id {color.id!r} in palette {self.id!r}"
                )
            seen.add(color.id)

    def __iter__(self):
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def get(self, color_id: str) -> "ColorEntry | None":
        """Look up a color by id, None if it is not part of this palette."""
        for color in self.colors:
            if color.id == color_id:
                return color
        return None


@dataclass(frozen=True)
class Pattern:
    """A quantized bead grid plus per-color counts.

    AIDEV-NOTE: Treat as an immutable value. Edits produce a new Pattern
    (see image_processing.editing) so grid and counts never drift apart.
    ``grid[y][x]`` is column x of row y. ``counts`` is a read-only view.
    """

    width: int
    height: int
    grid: "tuple[tuple[ColorEntry, ...], ...]"
    counts: "Mapping[str, int]" = field(default_factory=dict)

    # counts is a mapping, so patterns are compared but never hashed
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    def cell(self, x: int, y: int) -> ColorEntry:
        """Get the color at column x, row y."""
        return self.grid[y][x]

    def count(self, color_id: str) -> int:
        """Number of cells using ``color_id`` (0 if unused)."""
        return self.counts.get(color_id, 0)

    @property
    def total_beads(self) -> int:
        return self.width * self.height

    def colors(self) -> "list[ColorEntry]":
        """Distinct colors used, in order of first appearance (row-major)."""
        seen: "dict[str, ColorEntry]" = {}
        for row in self.grid:
            for color in row:
                if color.id not in seen:
                    seen[color.id] = color
        return list(seen.values())

    def to_dict(self) -> dict:
        """JSON-friendly representation (grid stored as color ids)."""
        return {
            "width": self.width,
            "height": self.height,
            "colors": [
                {"id": c.id, "name": c.name, "hex": c.hex} for c in self.colors()
            ],
            "grid": [[color.id for color in row] for row in self.grid],
            "counts": dict(self.counts),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Pattern":
        """Rebuild a Pattern from ``to_dict`` output, recounting cells."""
        from bead_pattern.image_processing.editing import count_colors

        lookup = {
            c["id"]: ColorEntry(id=c["id"], name=c["name"], hex=c["hex"])
            for c in data["colors"]
        }
        grid = tuple(tuple(lookup[cid] for cid in row) for row in data["grid"])
        return cls(
            width=data["width"],
            height=data["height"],
            grid=grid,
            counts=count_colors(grid),
        )


@dataclass(frozen=True)
class GlobalReplace:
    """Replace every cell of one color with another."""

    target_color_id: str
    replacement: ColorEntry


@dataclass(frozen=True)
class SingleReplace:
    """Replace the single cell at (x, y)."""

    x: int
    y: int
    replacement: ColorEntry


EditRequest = Union[GlobalReplace, SingleReplace]


@dataclass
class PatternConfig:
    """Persisted pattern generation and export settings."""

    # Grid dimensions in beads
    grid_width: int = 29
    grid_height: HeightSpec = AUTO  # int or "auto" (keep aspect ratio)

    # Rendering
    cell_size: int = 12  # pixels per bead in rendered output
    render_style: RenderStyle = RenderStyle.CIRCLES
    show_labels: bool = True  # row/column labels on exported image

    # Optional JSON palette file, default bead palette when unset
    palette_file: "str | None" = None


@dataclass
class AIAnalysis:
    """Free-text commentary about an image's suitability as a bead project."""

    title: str
    description: str
    difficulty: str  # e.g. "Easy", "Medium", "Hard"
    suggested_usage: str
