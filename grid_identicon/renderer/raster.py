"""Grid to pixel rasterization.

The canvas is a ``(height, width, 3)`` ``uint8`` NumPy array filled with the
layout background, onto which every foreground cell is painted as a solid
``cell_size`` square offset by the margin. The finished buffer is marked
read-only before it is returned, so a ``Canvas`` can be handed to an encoder
(or shared) without copying.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt
from PIL import Image

from grid_identicon.layout import LayoutConfig, validate_layout
from grid_identicon.pattern import IdenticonDescriptor
from grid_identicon.utils.logging import get_logger

LOGGER = get_logger(__name__)

UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True, eq=False)
class Canvas:
    """Raw RGB pixel buffer.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
        pixels: Read-only ``(height, width, 3)`` uint8 array, row-major.
    """

    width: int
    height: int
    pixels: UInt8Array

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = (int(v) for v in self.pixels[y, x])
        return (r, g, b)

    def tobytes(self) -> bytes:
        """Row-major RGB byte sequence, ``width * height * 3`` bytes long."""
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)


def rasterize(
    descriptor: IdenticonDescriptor, layout: Optional[LayoutConfig] = None
) -> Canvas:
    """Paint ``descriptor`` onto a fresh canvas sized by ``layout``.

    Raises:
        InvalidConfig: If ``layout`` violates its constraints.
    """
    if layout is None:
        layout = LayoutConfig()
    validate_layout(layout)

    size = layout.canvas_size
    cell = layout.cell_size
    pixels: UInt8Array = np.empty((size, size, 3), dtype=np.uint8)
    pixels[...] = layout.background

    foreground = np.asarray(descriptor.color, dtype=np.uint8)
    cells = descriptor.foreground_cells()
    for row, col in cells:
        y0 = (layout.margin + row) * cell
        x0 = (layout.margin + col) * cell
        pixels[y0 : y0 + cell, x0 : x0 + cell] = foreground

    pixels.setflags(write=False)
    LOGGER.debug("Rasterized %d cells onto %dx%d canvas", len(cells), size, size)
    return Canvas(width=size, height=size, pixels=pixels)


__all__ = ["Canvas", "rasterize"]
