import pytest
from PIL import Image

from bead_pattern.image_processing.rendering import (
    BACKGROUND_COLOR,
    GRID_COLOR,
    MAJOR_GRID_COLOR,
    export_filename,
    export_pattern,
    label_margin,
    render_pattern,
    save_pattern,
)
from bead_pattern.models import RenderStyle

from conftest import BLUE, GREEN, RED, make_pattern


def test_export_filename_encodes_size(small_pattern):
    assert export_filename(small_pattern) == "perler-pattern-3x2.png"


def test_render_size(small_pattern):
    image = render_pattern(small_pattern, cell_size=10)
    assert image.size == (30, 20)
    assert image.mode == "RGB"


def test_render_circles_fill_cell_centres(small_pattern):
    image = render_pattern(small_pattern, cell_size=12, style=RenderStyle.CIRCLES)

    assert image.getpixel((6, 6)) == (255, 0, 0)
    assert image.getpixel((2 * 12 + 6, 6)) == (0, 0, 255)
    assert image.getpixel((6, 12 + 6)) == (0, 255, 0)
    # corners stay background
    assert image.getpixel((0, 0)) == BACKGROUND_COLOR


def test_render_squares_fill_whole_cell(small_pattern):
    image = render_pattern(small_pattern, cell_size=8, style=RenderStyle.SQUARES)

    assert image.getpixel((0, 0)) == (255, 0, 0)
    assert image.getpixel((7, 7)) == (255, 0, 0)
    assert image.getpixel((16, 15)) == (0, 0, 255)


def test_render_rejects_bad_cell_size(small_pattern):
    with pytest.raises(ValueError):
        render_pattern(small_pattern, cell_size=0)


def test_export_adds_label_margin(small_pattern):
    margin = label_margin(12)
    sheet = export_pattern(small_pattern, cell_size=12)

    assert margin > 0
    assert sheet.size == (36 + 2 * margin, 24 + 2 * margin)


def test_export_without_labels_has_no_margin(small_pattern):
    sheet = export_pattern(small_pattern, cell_size=12, show_labels=False)
    assert sheet.size == (36, 24)


def test_export_draws_major_gridlines():
    pattern = make_pattern([[RED] * 12 for _ in range(12)])
    cell = 10
    margin = label_margin(cell)
    sheet = export_pattern(pattern, cell_size=cell, style=RenderStyle.SQUARES)

    # column 10 is a major line, column 5 a minor one
    major_x = margin + 10 * cell
    row_y = margin + 5 * cell + 5
    major = {sheet.getpixel((major_x + d, row_y)) for d in (-1, 0, 1)}
    minor = sheet.getpixel((margin + 5 * cell, margin + 2 * cell + 5))
    inside = sheet.getpixel((margin + 3 * cell + 5, margin + 3 * cell + 5))

    assert inside == (255, 0, 0)
    assert minor == GRID_COLOR
    assert MAJOR_GRID_COLOR in major


def test_export_labels_draw_in_margin():
    pattern = make_pattern([[GREEN, BLUE] * 5 for _ in range(5)])
    sheet = export_pattern(pattern, cell_size=12)
    margin = label_margin(12)

    top_strip = sheet.crop((margin, 0, sheet.width - margin, margin))
    colors = top_strip.getcolors(maxcolors=1 << 16)
    assert len(colors) > 1

    plain = export_pattern(pattern, cell_size=12, show_labels=False)
    assert plain.size == (120, 60)


def test_save_pattern_writes_png(tmp_path, small_pattern):
    path = save_pattern(small_pattern, tmp_path, cell_size=6, show_labels=False)

    assert path == tmp_path / "perler-pattern-3x2.png"
    with Image.open(path) as saved:
        assert saved.format == "PNG"
        assert saved.size == (18, 12)
