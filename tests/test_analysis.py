from PIL import Image

from bead_pattern.analysis import FALLBACK_TITLE, analyze_image
from bead_pattern.models import AIAnalysis


def _image():
    return Image.new("RGB", (8, 8), (255, 0, 0))


def test_no_analyzer_returns_fallback():
    result = analyze_image(_image())

    assert result.title == FALLBACK_TITLE
    assert result.difficulty == "Medium"


def test_analyzer_result_is_used():
    seen = []

    def analyzer(image):
        seen.append(image.size)
        return {
            "title": "Red Square",
            "description": "A bold block of red.",
            "difficulty": "Easy",
            "suggestedUsage": "Coaster",
        }

    result = analyze_image(_image(), analyzer)

    assert seen == [(8, 8)]
    assert result == AIAnalysis("Red Square", "A bold block of red.", "Easy", "Coaster")


def test_snake_case_usage_key_is_accepted():
    result = analyze_image(
        _image(),
        lambda image: {
            "title": "T",
            "description": "D",
            "difficulty": "Hard",
            "suggested_usage": "Keychain",
        },
    )
    assert result.suggested_usage == "Keychain"


def test_failing_analyzer_is_contained(capsys):
    def analyzer(image):
        raise RuntimeError("service down")

    result = analyze_image(_image(), analyzer)

    assert result.title == FALLBACK_TITLE
    assert result.difficulty == "Unknown"
    assert "service down" in capsys.readouterr().out


def test_incomplete_response_falls_back():
    result = analyze_image(_image(), lambda image: {"title": "Only a title"})
    assert result.title == FALLBACK_TITLE


def test_analyze_image_is_exported_from_package():
    import bead_pattern

    assert bead_pattern.analyze_image is analyze_image
