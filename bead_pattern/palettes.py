"""Bead palettes and palette (de)serialization."""

import json
from pathlib import Path

from bead_pattern.models import ColorEntry, Palette

# A subset of popular Perler bead colors
DEFAULT_PALETTE = Palette(
    id="perler-basic",
    name="Perler Basic",
    colors=(
        ColorEntry("P01", "Black", "#2E2E2E"),
        ColorEntry("P02", "White", "#FFFFFF"),
        ColorEntry("P03", "Red", "#C62933"),
        ColorEntry("P04", "Orange", "#EF7D26"),
        ColorEntry("P05", "Yellow", "#FBD822"),
        ColorEntry("P06", "Dark Green", "#0B6841"),
        ColorEntry("P07", "Dark Blue", "#213B8B"),
        ColorEntry("P08", "Purple", "#583688"),
        ColorEntry("P09", "Pink", "#DB5F89"),
        ColorEntry("P10", "Grey", "#87888A"),
        ColorEntry("P11", "Brown", "#5A3D31"),
        ColorEntry("P12", "Light Blue", "#3E91C9"),
        ColorEntry("P13", "Light Green", "#6BCB77"),
        ColorEntry("P14", "Tan", "#D6A681"),
        ColorEntry("P15", "Peach", "#F5C6A5"),
        ColorEntry("P16", "Cream", "#F0EAD6"),
        ColorEntry("P17", "Magenta", "#B22E68"),
        ColorEntry("P18", "Turquoise", "#008C95"),
        ColorEntry("P19", "Rust", "#8A3222"),
        ColorEntry("P20", "Cheddar", "#F6A024"),
        ColorEntry("P21", "Butterscotch", "#D58C46"),
        ColorEntry("P22", "Parrot Green", "#00904B"),
        ColorEntry("P23", "Dark Grey", "#48494B"),
        ColorEntry("P24", "Toothpaste", "#94D6D6"),
        ColorEntry("P25", "Hot Coral", "#FF5C5C"),
        ColorEntry("P26", "Plum", "#7A3575"),
        ColorEntry("P27", "Kiwi Lime", "#7BC744"),
        ColorEntry("P28", "Blush", "#FF9796"),
    ),
)


def palette_to_dict(palette: Palette) -> dict:
    return {
        "id": palette.id,
        "name": palette.name,
        "colors": [
            {"id": c.id, "name": c.name, "hex": c.hex} for c in palette.colors
        ],
    }


def palette_from_dict(data: dict) -> Palette:
    """Build a Palette from its JSON form.

    Raises:
        ValueError: If required keys are missing or color ids repeat
    """
    try:
        colors = [
            ColorEntry(id=str(c["id"]), name=str(c["name"]), hex=str(c["hex"]))
            for c in data["colors"]
        ]
        return Palette(id=str(data["id"]), name=str(data["name"]), colors=colors)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid palette data: {e}") from e


def load_palette(path: "str | Path") -> Palette:
    """Load a palette from a JSON file."""
    with open(path, "r") as f:
        return palette_from_dict(json.load(f))


def save_palette(palette: Palette, path: "str | Path") -> None:
    with open(path, "w") as f:
        json.dump(palette_to_dict(palette), f, indent=2)
