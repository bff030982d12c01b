"""Fixed-width 32-bit and 64-bit bit manipulation primitives."""

from .access import (
    get32,
    get64,
    get_masked32,
    get_masked64,
    set32,
    set64,
    set_masked32,
    set_masked64,
    swap32,
    swap64,
    swap_field32,
    swap_field64,
    toggle32,
    toggle64,
    toggle_masked32,
    toggle_masked64,
)
from .constants import MASK_32, MASK_64, to_signed32, to_signed64, to_unsigned32, to_unsigned64
from .counting import (
    count32,
    count64,
    parity32,
    parity64,
    parity_n32,
    parity_n64,
    scan32,
    scan64,
    scan_reverse32,
    scan_reverse64,
)
from .family import BITOPS_32, BITOPS_64, BitOps, apply, bitops_for
from .transform import (
    interleave32,
    interleave64,
    merge32,
    merge64,
    reverse32,
    reverse64,
    rotate32,
    rotate64,
    sign_extend32,
    sign_extend64,
)

__all__ = [
    "BITOPS_32",
    "BITOPS_64",
    "BitOps",
    "MASK_32",
    "MASK_64",
    "apply",
    "bitops_for",
    "count32",
    "count64",
    "get32",
    "get64",
    "get_masked32",
    "get_masked64",
    "interleave32",
    "interleave64",
    "merge32",
    "merge64",
    "parity32",
    "parity64",
    "parity_n32",
    "parity_n64",
    "reverse32",
    "reverse64",
    "rotate32",
    "rotate64",
    "scan32",
    "scan64",
    "scan_reverse32",
    "scan_reverse64",
    "set32",
    "set64",
    "set_masked32",
    "set_masked64",
    "sign_extend32",
    "sign_extend64",
    "swap32",
    "swap64",
    "swap_field32",
    "swap_field64",
    "to_signed32",
    "to_signed64",
    "to_unsigned32",
    "to_unsigned64",
    "toggle32",
    "toggle64",
    "toggle_masked32",
    "toggle_masked64",
]
