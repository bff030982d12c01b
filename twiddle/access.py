"""Single-bit and masked get/set/toggle, plus bit and field swaps.

Bit indexes are reduced modulo the width (``i & 31`` / ``i & 63``), the same
way a native shift instruction treats its count.
"""

from __future__ import annotations

from .constants import MASK_32, MASK_64


def get32(x: int, i: int) -> int:
    return ((x & MASK_32) >> (i & 31)) & 1


def get64(x: int, i: int) -> int:
    return ((x & MASK_64) >> (i & 63)) & 1


def get_masked32(x: int, mask: int) -> int:
    return x & mask & MASK_32


def get_masked64(x: int, mask: int) -> int:
    return x & mask & MASK_64


def set32(x: int, i: int, bit: int) -> int:
    """Force bit ``i`` to ``bit``. ``bit`` must be 0 or 1; it is not checked."""
    i &= 31
    return ((x & ~(1 << i)) | (bit << i)) & MASK_32


def set64(x: int, i: int, bit: int) -> int:
    """Force bit ``i`` to ``bit``. ``bit`` must be 0 or 1; it is not checked."""
    i &= 63
    return ((x & ~(1 << i)) | (bit << i)) & MASK_64


def set_masked32(x: int, mask: int, bit: int) -> int:
    # -bit broadcasts 1 to all ones and 0 to all zeros.
    return ((x & ~mask) | (-bit & mask)) & MASK_32


def set_masked64(x: int, mask: int, bit: int) -> int:
    return ((x & ~mask) | (-bit & mask)) & MASK_64


def toggle32(x: int, i: int) -> int:
    return (x ^ (1 << (i & 31))) & MASK_32


def toggle64(x: int, i: int) -> int:
    return (x ^ (1 << (i & 63))) & MASK_64


def toggle_masked32(x: int, mask: int) -> int:
    return (x ^ mask) & MASK_32


def toggle_masked64(x: int, mask: int) -> int:
    return (x ^ mask) & MASK_64


def swap32(x: int, i: int, j: int) -> int:
    x &= MASK_32
    i &= 31
    j &= 31
    t = ((x >> i) ^ (x >> j)) & 1
    return (x ^ ((t << i) | (t << j))) & MASK_32


def swap64(x: int, i: int, j: int) -> int:
    x &= MASK_64
    i &= 63
    j &= 63
    t = ((x >> i) ^ (x >> j)) & 1
    return (x ^ ((t << i) | (t << j))) & MASK_64


def swap_field32(x: int, i: int, j: int, n: int) -> int:
    """
    Exchange the ``n``-bit fields starting at bits ``i`` and ``j``.

    The fields ``[i, i+n)`` and ``[j, j+n)`` must not overlap; overlapping
    fields give an unspecified bit pattern.
    """
    x &= MASK_32
    i &= 31
    j &= 31
    t = ((x >> i) ^ (x >> j)) & (MASK_32 >> ((32 - n) & 31))
    return (x ^ ((t << i) | (t << j))) & MASK_32


def swap_field64(x: int, i: int, j: int, n: int) -> int:
    x &= MASK_64
    i &= 63
    j &= 63
    t = ((x >> i) ^ (x >> j)) & (MASK_64 >> ((64 - n) & 63))
    return (x ^ ((t << i) | (t << j))) & MASK_64
