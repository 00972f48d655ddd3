"""Digest to descriptor derivation.

An :class:`IdenticonDescriptor` fully determines the visual content of an
identicon before rasterization:

* ``color`` is the first three digest bytes taken as R, G, B.
* ``grid`` is a 5x5 occupancy matrix. Only the 15 independent cells
    (columns 0..2) are read from the digest; columns 3 and 4 are copies of
    columns 1 and 0, so left-right symmetry holds by construction.

Pattern bits come from a :class:`~grid_identicon.utils.bits.BitReader`
starting at byte 3 and are assigned column-major: column 0 rows 0..4, then
column 1, then column 2. A set bit marks a foreground cell.
"""

from dataclasses import dataclass
from typing import List

from pyrsistent import pvector

from grid_identicon.errors import InvalidInput
from grid_identicon.types import GRID_SIZE, RGB, Digest, Grid
from grid_identicon.utils.bits import BitReader
from grid_identicon.utils.logging import get_logger

LOGGER = get_logger(__name__)

COLOR_BYTES = 3
PATTERN_OFFSET = COLOR_BYTES
# columns 0..2 are independent, 3..4 mirror them
INDEPENDENT_COLUMNS = (GRID_SIZE + 1) // 2
INDEPENDENT_CELLS = INDEPENDENT_COLUMNS * GRID_SIZE
MIN_DIGEST_SIZE = COLOR_BYTES + 1


@dataclass(frozen=True)
class IdenticonDescriptor:
    """Color plus symmetric occupancy grid.

    Attributes:
        color: Foreground color.
        grid: ``grid[row][col]`` is True for foreground cells.
    """

    color: RGB
    grid: Grid

    def foreground_cells(self) -> List[tuple[int, int]]:
        """Return ``(row, col)`` pairs of all foreground cells, row-major."""
        return [
            (row, col)
            for row in range(GRID_SIZE)
            for col in range(GRID_SIZE)
            if self.grid[row][col]
        ]

    def ascii(self, on: str = "#", off: str = ".") -> str:
        """Text rendering of the grid, one line per row."""
        return "\n".join(
            " ".join(on if cell else off for cell in row) for row in self.grid
        )


def extract_color(digest: Digest) -> RGB:
    r, g, b = digest[0], digest[1], digest[2]
    return (r, g, b)


def extract_grid(digest: Digest) -> Grid:
    """Build the symmetric grid from the pattern bits of ``digest``."""
    reader = BitReader(digest, offset=PATTERN_OFFSET)
    rows = [[False] * GRID_SIZE for _ in range(GRID_SIZE)]
    for col in range(INDEPENDENT_COLUMNS):
        mirror = GRID_SIZE - 1 - col
        for row in range(GRID_SIZE):
            paint = reader.next_bit() == 1
            rows[row][col] = paint
            rows[row][mirror] = paint
    return pvector(pvector(row) for row in rows)


def derive(digest: Digest) -> IdenticonDescriptor:
    """Derive the descriptor for ``digest``.

    Digests too short for the 15 pattern bits wrap back to byte 0 (see
    :class:`BitReader`); a 16-byte MD5 digest only uses bytes 0..4.

    Raises:
        InvalidInput: If the digest is shorter than ``MIN_DIGEST_SIZE``.
    """
    if len(digest) < MIN_DIGEST_SIZE:
        raise InvalidInput(
            f"Digest must be at least {MIN_DIGEST_SIZE} bytes, got {len(digest)}"
        )
    descriptor = IdenticonDescriptor(
        color=extract_color(digest), grid=extract_grid(digest)
    )
    LOGGER.debug(
        "Derived color=%s cells=%d from digest %s",
        descriptor.color,
        len(descriptor.foreground_cells()),
        digest.hex(),
    )
    return descriptor


__all__ = [
    "IdenticonDescriptor",
    "MIN_DIGEST_SIZE",
    "INDEPENDENT_CELLS",
    "extract_color",
    "extract_grid",
    "derive",
]
