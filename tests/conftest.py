import io

import numpy as np
import pytest
from PIL import Image

from bead_pattern.image_processing.editing import count_colors
from bead_pattern.models import ColorEntry, Palette, Pattern

BLACK = ColorEntry("K", "Black", "#000000")
WHITE = ColorEntry("W", "White", "#FFFFFF")
RED = ColorEntry("R", "Red", "#FF0000")
GREEN = ColorEntry("G", "Green", "#00FF00")
BLUE = ColorEntry("B", "Blue", "#0000FF")


def make_pattern(rows) -> Pattern:
    grid = tuple(tuple(row) for row in rows)
    return Pattern(
        width=len(grid[0]),
        height=len(grid),
        grid=grid,
        counts=count_colors(grid),
    )


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def rgb_palette():
    return Palette(id="test", name="Test", colors=(BLACK, WHITE, RED, GREEN, BLUE))


@pytest.fixture
def noise_image():
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(30, 40, 4), dtype=np.uint8)
    pixels[..., 3] = 255
    return Image.fromarray(pixels)


@pytest.fixture
def small_pattern():
    return make_pattern(
        [
            [RED, RED, BLUE],
            [GREEN, RED, BLUE],
        ]
    )
