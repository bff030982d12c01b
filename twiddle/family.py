"""Width-generic view over the 32-bit and 64-bit operation families."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from . import access, counting, transform
from .constants import MASK_32, MASK_64, WIDTH_32, WIDTH_64

OPERATION_ARGS: dict[str, tuple[str, ...]] = {
    "get": ("x", "i"),
    "get_masked": ("x", "mask"),
    "set": ("x", "i", "bit"),
    "set_masked": ("x", "mask", "bit"),
    "toggle": ("x", "i"),
    "toggle_masked": ("x", "mask"),
    "swap": ("x", "i", "j"),
    "swap_field": ("x", "i", "j", "n"),
    "count": ("x",),
    "parity": ("x",),
    "parity_n": ("x", "n"),
    "scan": ("x",),
    "scan_reverse": ("x",),
    "merge": ("x", "y", "mask"),
    "interleave": ("x", "y"),
    "rotate": ("x", "n"),
    "reverse": ("x",),
    "sign_extend": ("x", "w"),
}

# Operations whose result is a full-width word rather than a count, index or bit.
WORD_RESULTS = frozenset(
    {
        "get_masked",
        "set",
        "set_masked",
        "toggle",
        "toggle_masked",
        "swap",
        "swap_field",
        "merge",
        "interleave",
        "rotate",
        "reverse",
        "sign_extend",
    }
)


@dataclass(frozen=True, slots=True)
class BitOps:
    width: int
    mask: int
    get: Callable[[int, int], int]
    get_masked: Callable[[int, int], int]
    set: Callable[[int, int, int], int]
    set_masked: Callable[[int, int, int], int]
    toggle: Callable[[int, int], int]
    toggle_masked: Callable[[int, int], int]
    swap: Callable[[int, int, int], int]
    swap_field: Callable[[int, int, int, int], int]
    count: Callable[[int], int]
    parity: Callable[[int], int]
    parity_n: Callable[[int, int], int]
    scan: Callable[[int], int]
    scan_reverse: Callable[[int], int]
    merge: Callable[[int, int, int], int]
    interleave: Callable[[int, int], int]
    rotate: Callable[[int, int], int]
    reverse: Callable[[int], int]
    sign_extend: Callable[[int, int], int]

    def operation(self, name: str) -> Callable[..., int]:
        if name not in OPERATION_ARGS:
            raise ValueError(f"Unknown operation: {name}")
        return getattr(self, name)


def _build(width: int, mask: int) -> BitOps:
    suffix = str(width)
    modules = (access, counting, transform)
    functions = {}
    for name in OPERATION_ARGS:
        for module in modules:
            fn = getattr(module, f"{name}{suffix}", None)
            if fn is not None:
                functions[name] = fn
                break
    return BitOps(width=width, mask=mask, **functions)


BITOPS_32 = _build(WIDTH_32, MASK_32)
BITOPS_64 = _build(WIDTH_64, MASK_64)


def bitops_for(width: int) -> BitOps:
    if width == WIDTH_32:
        return BITOPS_32
    if width == WIDTH_64:
        return BITOPS_64
    raise ValueError(f"Unsupported width: {width}")


def arg_bounds(name: str, arg_name: str, width: int) -> tuple[int, int] | None:
    """Inclusive range accepted for a shift-like argument, or None for words."""
    if arg_name in ("i", "j"):
        return 0, width - 1
    if arg_name == "w":
        return 1, width
    if arg_name == "n":
        if name == "rotate":
            return -(width - 1), width - 1
        return 1, width
    return None


def check_args(width: int, name: str, args: Sequence[int]) -> None:
    expected = OPERATION_ARGS[name]
    if len(args) != len(expected):
        raise ValueError(
            f"{name} takes {len(expected)} argument(s) ({', '.join(expected)}), got {len(args)}"
        )
    for arg_name, value in zip(expected, args):
        bounds = arg_bounds(name, arg_name, width)
        if bounds is None:
            continue
        low, high = bounds
        if not low <= value <= high:
            raise ValueError(f"{name}: {arg_name}={value} is outside [{low}, {high}] for width {width}")


def apply(width: int, name: str, args: Sequence[int]) -> int:
    """
    Evaluate one operation by name.

    The width, the operation name, the argument count and the range of every
    bit index, shift count and field width are checked. Bit values and field
    overlap are passed through as-is.
    """
    fn = bitops_for(width).operation(name)
    check_args(width, name, args)
    return fn(*args)
