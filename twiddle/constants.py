"""Word widths, masks, lookup tables and signed/unsigned views."""

from __future__ import annotations

WIDTH_32 = 32
WIDTH_64 = 64
WIDTHS = (WIDTH_32, WIDTH_64)

MASK_32 = (1 << 32) - 1
MASK_64 = (1 << 64) - 1

DEBRUIJN_32 = 0x07C4ACDD

# Top five bits of (spread(x) * DEBRUIJN_32) -> index of the highest set bit.
DEBRUIJN_POS32 = (
    0, 9, 1, 10, 13, 21, 2, 29, 11, 14, 16, 18, 22, 25, 3, 30,
    8, 12, 20, 28, 15, 17, 24, 7, 19, 27, 23, 6, 26, 5, 4, 31,
)

# (x & -x) % 37 -> index of the lowest set bit. Slot 0 is the empty-word sentinel.
MOD37_POS32 = (
    32, 0, 1, 26, 2, 23, 27, 0, 3, 16, 24, 30, 28, 11, 0, 13, 4, 7, 17, 0,
    25, 22, 31, 15, 29, 10, 12, 6, 0, 21, 14, 9, 5, 20, 8, 19, 18,
)


def mask_for(width: int) -> int:
    if width == WIDTH_32:
        return MASK_32
    if width == WIDTH_64:
        return MASK_64
    raise ValueError(f"Unsupported width: {width}")


def to_unsigned32(x: int) -> int:
    return x & MASK_32


def to_unsigned64(x: int) -> int:
    return x & MASK_64


def to_signed32(x: int) -> int:
    x &= MASK_32
    return x - (1 << 32) if x >> 31 else x


def to_signed64(x: int) -> int:
    x &= MASK_64
    return x - (1 << 64) if x >> 63 else x
