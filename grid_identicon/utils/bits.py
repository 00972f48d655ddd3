"""Sequential bit reader over a byte string.

Bits are consumed least-significant first within each byte, bytes in
ascending order. Reading past the end wraps around to byte 0, so a reader
never runs dry as long as ``data`` is non-empty.
"""


class BitReader:
    """Cursor yielding successive bits of ``data`` starting at byte ``offset``.

    Attributes:
        position: Number of bits consumed so far plus ``offset * 8``. The
            value is not reduced by wrapping; ``position // 8 % len(data)``
            is the byte currently being read.
    """

    def __init__(self, data: bytes, offset: int = 0):
        if len(data) == 0:
            raise ValueError("BitReader requires non-empty data")
        if offset < 0:
            raise ValueError(f"Offset must be non-negative, got {offset}")
        self._data = bytes(data)
        self.position = offset * 8

    def next_bit(self) -> int:
        """Return the next bit (0 or 1) and advance by one."""
        byte_index, bit_index = divmod(self.position, 8)
        byte = self._data[byte_index % len(self._data)]
        self.position += 1
        return (byte >> bit_index) & 1

    def next_bits(self, k: int) -> int:
        """Return the next ``k`` bits packed into an int.

        The first bit read becomes the least significant bit of the result.
        """
        if k < 0:
            raise ValueError(f"Bit count must be non-negative, got {k}")
        value = 0
        for i in range(k):
            value |= self.next_bit() << i
        return value


__all__ = ["BitReader"]
