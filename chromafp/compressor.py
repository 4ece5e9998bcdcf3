"""Compact binary encoding of raw fingerprints."""

from __future__ import annotations

from typing import Iterable, Sequence

_NORMAL_BITS = 3
_EXCEPTION_BITS = 5
_MAX_NORMAL_VALUE = (1 << _NORMAL_BITS) - 1


def _pack_bits(values: Iterable[int], width: int) -> bytes:
    """Pack small integers into a little-endian bit stream, ``width`` bits each."""
    mask = (1 << width) - 1
    out = bytearray()
    acc = 0
    nbits = 0
    for value in values:
        acc |= (value & mask) << nbits
        nbits += width
        while nbits >= 8:
            out.append(acc & 0xFF)
            acc >>= 8
            nbits -= 8
    if nbits:
        out.append(acc & 0xFF)
    return bytes(out)


class FingerprintCompressor:
    """Encodes a sequence of 32-bit sub-fingerprints into the compressed format.

    The output is a 4-byte header (algorithm, then the number of items as a
    24-bit big-endian integer) followed by the delta-encoded bit positions,
    packed as 3-bit values, and the overflow values, packed as 5-bit values.
    """

    def compress(self, fingerprint: Sequence[int], algorithm: int = 0) -> bytes:
        """Return the compressed form of ``fingerprint``."""
        normal_bits: list[int] = []
        exceptional_bits: list[int] = []

        previous = 0
        for index, item in enumerate(fingerprint):
            item &= 0xFFFFFFFF
            delta = item if index == 0 else item ^ previous
            self._process_subfingerprint(delta, normal_bits, exceptional_bits)
            previous = item

        size = len(fingerprint)
        header = bytes(
            (
                algorithm & 0xFF,
                (size >> 16) & 0xFF,
                (size >> 8) & 0xFF,
                size & 0xFF,
            )
        )
        return (
            header
            + _pack_bits(normal_bits, _NORMAL_BITS)
            + _pack_bits(exceptional_bits, _EXCEPTION_BITS)
        )

    @staticmethod
    def _process_subfingerprint(
        x: int, normal_bits: list[int], exceptional_bits: list[int]
    ) -> None:
        bit = 1
        last_bit = 0
        while x:
            if x & 1:
                value = bit - last_bit
                if value >= _MAX_NORMAL_VALUE:
                    normal_bits.append(_MAX_NORMAL_VALUE)
                    exceptional_bits.append(value - _MAX_NORMAL_VALUE)
                else:
                    normal_bits.append(value)
                last_bit = bit
            x >>= 1
            bit += 1
        normal_bits.append(0)


def compress_fingerprint(fingerprint: Sequence[int], algorithm: int = 0) -> bytes:
    """Return the compressed form of ``fingerprint`` tagged with ``algorithm``."""
    return FingerprintCompressor().compress(fingerprint, algorithm)