"""Common type aliases and enumerations.

``Grid`` is the persistent 5x5 occupancy matrix shared between the pattern
deriver and the rasterizer; ``RGB`` is a plain 8-bit color triple.
"""

from enum import StrEnum, auto
from typing import Tuple

from pyrsistent.typing import PVector

Identifier = int
Digest = bytes
RGB = Tuple[int, int, int]

# grid[row][col]; True marks a foreground cell
Grid = PVector[PVector[bool]]

GRID_SIZE = 5


class ImageFormat(StrEnum):
    """Raster encodings supported by the encoder layer."""

    PNG = auto()
    JPEG = auto()
    GIF = auto()
