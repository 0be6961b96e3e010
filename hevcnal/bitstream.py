"""Bit-level reading of H.265 RBSP data."""

from __future__ import annotations

_EMULATION_PREVENTION = b"\x00\x00\x03"
_MAX_GOLOMB_LEADING_ZEROS = 31


class ParseError(ValueError):
    """Raised when a bitstream cannot be parsed."""


def unescape_rbsp(data: bytes) -> bytes:
    """Remove emulation prevention bytes (the 0x03 in 00 00 03) from a NAL unit."""
    return bytes(data).replace(_EMULATION_PREVENTION, b"\x00\x00")


class BitReader:
    """Reads big-endian bit fields from a byte buffer.

    A read that fails raises ParseError and leaves the position unchanged.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def remaining_bits(self) -> int:
        """Number of bits not yet consumed."""
        return len(self._data) * 8 - self._pos

    def read_bits(self, count: int) -> int:
        """Read ``count`` bits as an unsigned integer."""
        if count < 0:
            raise ValueError(f"bit count must not be negative: {count}")
        if count > self.remaining_bits():
            raise ParseError(
                f"cannot read {count} bits, {self.remaining_bits()} remaining"
            )
        if count == 0:
            return 0
        start = self._pos // 8
        end_bit = self._pos + count
        end = (end_bit + 7) // 8
        value = int.from_bytes(self._data[start:end], "big")
        value >>= end * 8 - end_bit
        self._pos = end_bit
        return value & ((1 << count) - 1)

    def read_uint8(self) -> int:
        """Read one byte-sized field."""
        return self.read_bits(8)

    def read_exp_golomb(self) -> int:
        """Read an unsigned Exp-Golomb code, ue(v)."""
        start = self._pos
        try:
            zeros = 0
            while self.read_bits(1) == 0:
                zeros += 1
                if zeros > _MAX_GOLOMB_LEADING_ZEROS:
                    raise ParseError("Exp-Golomb code too long")
            return ((1 << zeros) | self.read_bits(zeros)) - 1
        except ParseError:
            self._pos = start
            raise

    def read_signed_exp_golomb(self) -> int:
        """Read a signed Exp-Golomb code, se(v)."""
        value = self.read_exp_golomb()
        if value & 1:
            return (value + 1) // 2
        return -(value // 2)