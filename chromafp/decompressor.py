"""Decoding of compressed fingerprints."""

from __future__ import annotations

_NORMAL_BITS = 3
_EXCEPTION_BITS = 5
_MAX_NORMAL_VALUE = 7
_HEADER_SIZE = 4


class DecompressionError(ValueError):
    """Raised when compressed fingerprint data is malformed."""


def _packed_size(count: int, width: int) -> int:
    return (count * width + 7) // 8


def _unpack_bits(data: bytes, width: int) -> list[int]:
    """Unpack a little-endian bit stream into ``len(data) * 8 // width`` values."""
    mask = (1 << width) - 1
    values: list[int] = []
    acc = 0
    nbits = 0
    for byte in data:
        acc |= byte << nbits
        nbits += 8
        while nbits >= width:
            values.append(acc & mask)
            acc >>= width
            nbits -= width
    return values


class FingerprintDecompressor:
    """Decodes the compressed fingerprint format back into 32-bit items."""

    def __init__(self) -> None:
        self.output: list[int] = []
        self.size = 0
        self.algorithm = -1

    def decompress_header(self, data: bytes) -> tuple[int, int]:
        """Read the header; return ``(size, algorithm)``."""
        data = bytes(data)
        if len(data) < _HEADER_SIZE:
            raise DecompressionError("invalid fingerprint (shorter than 4 bytes)")
        self.algorithm = data[0]
        self.size = (data[1] << 16) | (data[2] << 8) | data[3]
        return self.size, self.algorithm

    def decompress(self, data: bytes) -> list[int]:
        """Decode ``data`` fully; return the list of sub-fingerprints."""
        data = bytes(data)
        self.decompress_header(data)

        offset = _HEADER_SIZE
        bits = _unpack_bits(data[offset:], _NORMAL_BITS)

        found_values = 0
        num_exceptional = 0
        for index, bit in enumerate(bits):
            if bit == 0:
                found_values += 1
                if found_values == self.size:
                    del bits[index + 1:]
                    break
            elif bit == _MAX_NORMAL_VALUE:
                num_exceptional += 1

        if found_values != self.size:
            raise DecompressionError(
                "invalid fingerprint (too short, not enough input for normal bits)"
            )

        offset += _packed_size(len(bits), _NORMAL_BITS)
        if len(data) < offset + _packed_size(num_exceptional, _EXCEPTION_BITS):
            raise DecompressionError(
                "invalid fingerprint (too short, not enough input for exceptional bits)"
            )

        if num_exceptional:
            exceptional = iter(_unpack_bits(data[offset:], _EXCEPTION_BITS))
            bits = [
                bit + next(exceptional) if bit == _MAX_NORMAL_VALUE else bit
                for bit in bits
            ]

        self.output = self._unpack_items(bits)
        return list(self.output)

    @staticmethod
    def _unpack_items(bits: list[int]) -> list[int]:
        items: list[int] = []
        value = 0
        last_bit = 0
        for bit in bits:
            if bit == 0:
                items.append(value)
                last_bit = 0
            else:
                last_bit += bit
                value = (value ^ (1 << (last_bit - 1))) & 0xFFFFFFFF
        return items


def decompress_fingerprint(data: bytes) -> tuple[list[int], int]:
    """Decode ``data``; return ``(fingerprint, algorithm)``."""
    decompressor = FingerprintDecompressor()
    fingerprint = decompressor.decompress(data)
    return fingerprint, decompressor.algorithm


def decompress_fingerprint_header(data: bytes) -> tuple[int, int]:
    """Read only the header of ``data``; return ``(size, algorithm)``."""
    return FingerprintDecompressor().decompress_header(data)