"""Merge, Morton interleave, rotation, reversal and sign extension."""

from __future__ import annotations

from .constants import MASK_32, MASK_64, to_signed32, to_signed64


def merge32(x: int, y: int, mask: int) -> int:
    """Take bits set in ``mask`` from ``y`` and the rest from ``x``."""
    return (x ^ ((x ^ y) & mask)) & MASK_32


def merge64(x: int, y: int, mask: int) -> int:
    return (x ^ ((x ^ y) & mask)) & MASK_64


def interleave32(x: int, y: int) -> int:
    """
    Morton-encode the low 16 bits of ``x`` and ``y`` into a 32-bit word.

    Bits of ``y`` land on even positions and bits of ``x`` on odd positions.
    """
    return _spread16(y) | (_spread16(x) << 1)


def interleave64(x: int, y: int) -> int:
    """Morton-encode the low 32 bits of ``x`` and ``y`` into a 64-bit word."""
    return _spread32(y) | (_spread32(x) << 1)


def _spread16(x: int) -> int:
    x &= 0xFFFF
    x = (x | (x << 8)) & 0x00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F
    x = (x | (x << 2)) & 0x33333333
    x = (x | (x << 1)) & 0x55555555
    return x


def _spread32(x: int) -> int:
    x &= MASK_32
    x = (x | (x << 16)) & 0x0000FFFF0000FFFF
    x = (x | (x << 8)) & 0x00FF00FF00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F0F0F0F0F
    x = (x | (x << 2)) & 0x3333333333333333
    x = (x | (x << 1)) & 0x5555555555555555
    return x


def rotate32(x: int, n: int) -> int:
    """Rotate left by ``n`` (right when negative). ``n`` is taken modulo 32."""
    x &= MASK_32
    # A right rotation by k is a left rotation by 32 - k.
    n &= 31
    return ((x << n) | (x >> (32 - n))) & MASK_32


def rotate64(x: int, n: int) -> int:
    """Rotate left by ``n`` (right when negative). ``n`` is taken modulo 64."""
    x &= MASK_64
    n &= 63
    return ((x << n) | (x >> (64 - n))) & MASK_64


def reverse32(x: int) -> int:
    x &= MASK_32
    x = ((x >> 1) & 0x55555555) | ((x & 0x55555555) << 1)
    x = ((x >> 2) & 0x33333333) | ((x & 0x33333333) << 2)
    x = ((x >> 4) & 0x0F0F0F0F) | ((x & 0x0F0F0F0F) << 4)
    x = ((x >> 8) & 0x00FF00FF) | ((x & 0x00FF00FF) << 8)
    return ((x >> 16) | (x << 16)) & MASK_32


def reverse64(x: int) -> int:
    x &= MASK_64
    x = ((x >> 1) & 0x5555555555555555) | ((x & 0x5555555555555555) << 1)
    x = ((x >> 2) & 0x3333333333333333) | ((x & 0x3333333333333333) << 2)
    x = ((x >> 4) & 0x0F0F0F0F0F0F0F0F) | ((x & 0x0F0F0F0F0F0F0F0F) << 4)
    x = ((x >> 8) & 0x00FF00FF00FF00FF) | ((x & 0x00FF00FF00FF00FF) << 8)
    x = ((x >> 16) & 0x0000FFFF0000FFFF) | ((x & 0x0000FFFF0000FFFF) << 16)
    return ((x >> 32) | (x << 32)) & MASK_64


def sign_extend32(x: int, w: int) -> int:
    """
    Read the low ``w`` bits of ``x`` as a signed value, for ``1 <= w <= 32``.

    Returns a signed int, e.g. ``sign_extend32(0b1111, 4) == -1``.
    """
    shift = (32 - w) & 31
    return to_signed32(x << shift) >> shift


def sign_extend64(x: int, w: int) -> int:
    shift = (64 - w) & 63
    return to_signed64(x << shift) >> shift
