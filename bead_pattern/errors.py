"""Exceptions raised by the quantizer and pattern editor."""


class PatternError(Exception):
    """Base class for bead pattern errors."""


class DecodeError(PatternError, ValueError):
    """The source image could not be read or decoded."""


class EmptyPaletteError(PatternError, ValueError):
    """A palette with no colors was supplied."""

    def __init__(self, message: str = "Palette must contain at least one color"):
        super().__init__(message)


class OutOfBoundsError(PatternError, IndexError):
    """A cell coordinate lies outside the pattern grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"Cell ({x}, {y}) is outside the {width}x{height} pattern"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height
