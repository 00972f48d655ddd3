"""Raster layout configuration.

``LayoutConfig`` replaces process-wide size and color constants with an
explicit value passed to the rasterizer. Invalid values are rejected at
construction so no raster work starts on a bad config.
"""

from dataclasses import dataclass

from grid_identicon.errors import InvalidConfig
from grid_identicon.types import GRID_SIZE, RGB
from grid_identicon.utils.color import validate_rgb

DEFAULT_CELL_SIZE = 50
DEFAULT_MARGIN = 2
DEFAULT_BACKGROUND: RGB = (240, 240, 240)


@dataclass(frozen=True)
class LayoutConfig:
    """Pixel layout of a rendered identicon.

    Attributes:
        cell_size: Edge length in pixels of one grid cell. Must be positive.
        margin: Border width on every side, in cells. May be zero.
        background: Color of the margin and of every background cell.
    """

    cell_size: int = DEFAULT_CELL_SIZE
    margin: int = DEFAULT_MARGIN
    background: RGB = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        validate_layout(self)
        # lists are accepted; store a hashable tuple
        object.__setattr__(self, "background", tuple(self.background))

    @property
    def cells_per_side(self) -> int:
        return GRID_SIZE + 2 * self.margin

    @property
    def canvas_size(self) -> int:
        """Edge length in pixels of the square canvas."""
        return self.cells_per_side * self.cell_size


def validate_layout(layout: LayoutConfig) -> None:
    """Raise :class:`InvalidConfig` if ``layout`` violates its constraints."""
    cell_size = layout.cell_size
    margin = layout.margin
    if isinstance(cell_size, bool) or not isinstance(cell_size, int):
        raise InvalidConfig(f"cell_size must be an integer, got {cell_size!r}")
    if cell_size <= 0:
        raise InvalidConfig(f"cell_size must be positive, got {cell_size}")
    if isinstance(margin, bool) or not isinstance(margin, int):
        raise InvalidConfig(f"margin must be an integer, got {margin!r}")
    if margin < 0:
        raise InvalidConfig(f"margin must be non-negative, got {margin}")
    validate_rgb(layout.background, "background")


__all__ = [
    "DEFAULT_CELL_SIZE",
    "DEFAULT_MARGIN",
    "DEFAULT_BACKGROUND",
    "LayoutConfig",
    "validate_layout",
]
