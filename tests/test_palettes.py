import pytest

from bead_pattern.image_processing.utils import background_index
from bead_pattern.palettes import (
    DEFAULT_PALETTE,
    load_palette,
    palette_from_dict,
    palette_to_dict,
    save_palette,
)


def test_default_palette_contents():
    assert len(DEFAULT_PALETTE) == 28
    assert DEFAULT_PALETTE.colors[0].name == "Black"
    assert DEFAULT_PALETTE.get("P28").hex == "#FF9796"
    assert DEFAULT_PALETTE.get("nope") is None


def test_default_palette_has_white_background():
    white = DEFAULT_PALETTE.colors[background_index(DEFAULT_PALETTE)]
    assert white.id == "P02"


def test_file_round_trip(tmp_path):
    path = tmp_path / "perler.json"
    save_palette(DEFAULT_PALETTE, path)

    assert load_palette(path) == DEFAULT_PALETTE


def test_dict_round_trip_keeps_order():
    data = palette_to_dict(DEFAULT_PALETTE)
    assert [c["id"] for c in data["colors"]][:3] == ["P01", "P02", "P03"]
    assert palette_from_dict(data) == DEFAULT_PALETTE


@pytest.mark.parametrize(
    "data",
    [
        {"name": "no id", "colors": []},
        {"id": "x", "name": "bad color", "colors": [{"id": "a", "name": "A"}]},
        {
            "id": "x",
            "name": "dupes",
            "colors": [
                {"id": "a", "name": "A", "hex": "#000000"},
                {"id": "a", "name": "B", "hex": "#FFFFFF"},
            ],
        },
    ],
)
def test_invalid_palette_data(data):
    with pytest.raises(ValueError):
        palette_from_dict(data)
