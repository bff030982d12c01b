"""Population count, parity and bit scans."""

from __future__ import annotations

from .constants import DEBRUIJN_32, DEBRUIJN_POS32, MASK_32, MASK_64, MOD37_POS32


def count32(x: int) -> int:
    x &= MASK_32
    x = x - ((x >> 1) & 0x55555555)
    x = (x & 0x33333333) + ((x >> 2) & 0x33333333)
    x = (x + (x >> 4)) & 0x0F0F0F0F
    return ((x * 0x01010101) & MASK_32) >> 24


def count64(x: int) -> int:
    x &= MASK_64
    x = x - ((x >> 1) & 0x5555555555555555)
    x = (x & 0x3333333333333333) + ((x >> 2) & 0x3333333333333333)
    x = (x + (x >> 4)) & 0x0F0F0F0F0F0F0F0F
    return ((x * 0x0101010101010101) & MASK_64) >> 56


def parity32(x: int) -> int:
    x &= MASK_32
    x ^= x >> 16
    x ^= x >> 8
    x ^= x >> 4
    x &= 0xF
    # 0x6996 is the parity of every nibble, indexed by the nibble.
    return (0x6996 >> x) & 1


def parity64(x: int) -> int:
    x &= MASK_64
    x ^= x >> 32
    x ^= x >> 16
    x ^= x >> 8
    x ^= x >> 4
    x &= 0xF
    return (0x6996 >> x) & 1


def parity_n32(x: int, n: int) -> int:
    """
    Xor together the consecutive ``n``-bit groups of ``x``, LSB first.

    A group width of ``n >= 32`` is one group holding the whole word; ``n < 1``
    has no groups and gives 0.
    """
    if n == 1:
        return parity32(x)
    return _fold_groups(x & MASK_32, n)


def parity_n64(x: int, n: int) -> int:
    if n == 1:
        return parity64(x)
    return _fold_groups(x & MASK_64, n)


def _fold_groups(x: int, n: int) -> int:
    if n < 1:
        return 0
    # x is already reduced to its width, so a wide group keeps all of it.
    m = (1 << min(n, 64)) - 1
    acc = 0
    while x:
        acc ^= x & m
        x >>= n
    return acc


def scan32(x: int) -> int:
    """Index of the lowest set bit, or 32 when ``x`` is zero."""
    x &= MASK_32
    return MOD37_POS32[(x & -x) % 37]


def scan64(x: int) -> int:
    """Index of the lowest set bit, or 64 when ``x`` is zero."""
    x &= MASK_64
    low = scan32(x)
    return low if low != 32 else scan32(x >> 32) + 32


def scan_reverse32(x: int) -> int:
    """
    Index of the highest set bit.

    Zero has no highest bit; it lands on ``DEBRUIJN_POS32[0]`` and so returns 0.
    """
    x &= MASK_32
    x |= x >> 1
    x |= x >> 2
    x |= x >> 4
    x |= x >> 8
    x |= x >> 16
    return DEBRUIJN_POS32[((x * DEBRUIJN_32) & MASK_32) >> 27]


def scan_reverse64(x: int) -> int:
    x &= MASK_64
    high = x >> 32
    if high:
        return scan_reverse32(high) + 32
    return scan_reverse32(x)
