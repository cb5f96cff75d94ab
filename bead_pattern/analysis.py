"""Free-text commentary about a source image as a bead project.

AIDEV-NOTE: The actual model call is an injected callable (image -> dict
with title/description/difficulty/suggestedUsage). Any failure is
contained here and replaced by a fixed fallback; it never affects pattern
generation or editing.
"""

from typing import Any, Callable, Mapping, Optional

from PIL import Image

from bead_pattern.models import AIAnalysis

Analyzer = Callable[[Image.Image], Mapping[str, Any]]

FALLBACK_TITLE = "Analysis unavailable"
FALLBACK_DESCRIPTION = "Could not generate a description for this image."
FALLBACK_USAGE = "Decoration"

_REQUIRED_KEYS = ("title", "description", "difficulty")


def fallback_analysis(difficulty: str = "Medium") -> AIAnalysis:
    return AIAnalysis(
        title=FALLBACK_TITLE,
        description=FALLBACK_DESCRIPTION,
        difficulty=difficulty,
        suggested_usage=FALLBACK_USAGE,
    )


def analyze_image(image: Image.Image, analyzer: Optional[Analyzer] = None) -> AIAnalysis:
    """Ask an analyzer for commentary, falling back on any failure.

    Args:
        image: Source image
        analyzer: Callable returning a mapping with title, description,
            difficulty and suggestedUsage (or suggested_usage)

    Returns:
        AIAnalysis from the analyzer, or the fallback value
    """
    if analyzer is None:
        print("Warning: No image analyzer configured")
        return fallback_analysis()

    try:
        result = analyzer(image)
        missing = [key for key in _REQUIRED_KEYS if not result.get(key)]
        usage = result.get("suggestedUsage", result.get("suggested_usage"))
        if missing or not usage:
            raise ValueError(f"Incomplete analysis, missing {missing or ['suggestedUsage']}")
        return AIAnalysis(
            title=str(result["title"]),
            description=str(result["description"]),
            difficulty=str(result["difficulty"]),
            suggested_usage=str(usage),
        )
    except Exception as e:
        print(f"Image analysis failed: {e}")
        return fallback_analysis(difficulty="Unknown")
