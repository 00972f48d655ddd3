import pytest

from grid_identicon.errors import InvalidInput
from grid_identicon.hasher import hash_identifier
from grid_identicon.pattern import (
    INDEPENDENT_CELLS,
    MIN_DIGEST_SIZE,
    IdenticonDescriptor,
    derive,
    extract_color,
    extract_grid,
)
from grid_identicon.pipeline import describe
from grid_identicon.types import GRID_SIZE
from tests.test_utils import (
    GOLDEN_ZERO_COLOR,
    GOLDEN_ZERO_ROWS,
    grid_to_rows,
    is_mirror_symmetric,
)


def test_golden_descriptor_for_zero() -> None:
    descriptor = derive(hash_identifier(0))
    assert descriptor.color == GOLDEN_ZERO_COLOR
    assert grid_to_rows(descriptor.grid) == GOLDEN_ZERO_ROWS


def test_color_is_first_three_digest_bytes() -> None:
    digest = bytes([0x12, 0xAB, 0xFF]) + bytes(13)
    assert extract_color(digest) == (0x12, 0xAB, 0xFF)
    assert derive(digest).color == (0x12, 0xAB, 0xFF)


def test_pattern_traversal_is_column_major_from_byte_three() -> None:
    """Bit i of the pattern stream lands in column i // 5, row i % 5."""
    for i in range(INDEPENDENT_CELLS):
        stream = 1 << i
        digest = bytes(3) + stream.to_bytes(2, "little") + bytes(11)
        grid = extract_grid(digest)
        col, row = divmod(i, GRID_SIZE)
        on = [(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE) if grid[r][c]]
        expected = {(row, col), (row, GRID_SIZE - 1 - col)}
        assert set(on) == expected


def test_color_bytes_do_not_affect_pattern() -> None:
    tail = bytes([0x84, 0x95]) + bytes(11)
    a = extract_grid(bytes([0, 0, 0]) + tail)
    b = extract_grid(bytes([255, 255, 255]) + tail)
    assert a == b


def test_short_digest_wraps_to_first_byte() -> None:
    """A 4-byte digest runs out after 8 pattern bits and continues at byte 0."""
    descriptor = derive(bytes([0x01, 0x02, 0x03, 0xAA]))
    assert descriptor.color == (1, 2, 3)
    assert grid_to_rows(descriptor.grid) == [
        ".#.#.",
        "#...#",
        ".#.#.",
        "##.##",
        ".....",
    ]


@pytest.mark.parametrize("size", range(MIN_DIGEST_SIZE))
def test_too_short_digest_is_rejected(size: int) -> None:
    with pytest.raises(InvalidInput):
        derive(bytes(size))


def test_all_zero_and_all_one_patterns() -> None:
    empty = derive(bytes(16))
    full = derive(bytes([0xFF] * 16))
    assert empty.foreground_cells() == []
    assert len(full.foreground_cells()) == GRID_SIZE * GRID_SIZE


def test_descriptor_is_deterministic() -> None:
    for identifier in (0, 1, 21012146, 2**64 - 1):
        first = describe(identifier)
        second = describe(identifier)
        assert first == second
        assert hash(first) == hash(second)


def test_grid_is_symmetric_and_colors_in_range() -> None:
    for identifier in range(2000):
        descriptor = describe(identifier)
        assert is_mirror_symmetric(descriptor.grid)
        assert len(descriptor.grid) == GRID_SIZE
        assert all(len(row) == GRID_SIZE for row in descriptor.grid)
        assert all(0 <= c <= 255 for c in descriptor.color)


def test_low_collision_rate_over_sample() -> None:
    descriptors = {describe(identifier) for identifier in range(10000)}
    assert len(descriptors) >= 9990


def test_descriptor_is_immutable() -> None:
    descriptor = describe(7)
    with pytest.raises(AttributeError):
        descriptor.color = (0, 0, 0)  # type: ignore[misc]
    with pytest.raises(TypeError):
        descriptor.grid[0][0] = True  # type: ignore[index]


def test_ascii_rendering() -> None:
    descriptor = derive(hash_identifier(0))
    assert descriptor.ascii() == "\n".join(" ".join(row) for row in GOLDEN_ZERO_ROWS)
    assert isinstance(descriptor, IdenticonDescriptor)
