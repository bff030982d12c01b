"""Command-line utilities for the bit manipulation library."""

from __future__ import annotations

import argparse

from twiddle.constants import WIDTHS, to_signed32, to_signed64
from twiddle.family import OPERATION_ARGS, WORD_RESULTS, apply


def parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid integer: {text}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bit manipulation utilities")
    parser.add_argument("--width", type=int, choices=WIDTHS, default=32, help="Word width in bits")
    parser.add_argument("--signed", action="store_true", help="Print word results as signed values")

    subparsers = parser.add_subparsers(dest="command", required=False)
    subparsers.add_parser("list", help="List operations and their arguments")

    for name, arg_names in OPERATION_ARGS.items():
        op_parser = subparsers.add_parser(name, help=f"Evaluate {name}({', '.join(arg_names)})")
        for arg_name in arg_names:
            op_parser.add_argument(arg_name, type=parse_int, help="Integer (0x, 0b, 0o prefixes accepted)")

    return parser


def format_result(name: str, result: int, width: int, signed: bool = False) -> str:
    if name not in WORD_RESULTS:
        return str(result)
    pattern = result & ((1 << width) - 1)
    if signed or name == "sign_extend":
        value = to_signed32(pattern) if width == 32 else to_signed64(pattern)
    else:
        value = pattern
    digits = width // 4
    return f"{value} 0x{pattern:0{digits}x} 0b{pattern:0{width}b}"


def run(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None or args.command == "list":
        for name, arg_names in OPERATION_ARGS.items():
            print(f"{name}({', '.join(arg_names)})")
        return

    values = [getattr(args, arg_name) for arg_name in OPERATION_ARGS[args.command]]
    try:
        result = apply(args.width, args.command, values)
    except ValueError as exc:
        parser.error(str(exc))
    print(format_result(args.command, result, args.width, args.signed))


if __name__ == "__main__":
    run()
