import random

import pytest

from twiddle.constants import MASK_32, MASK_64
from twiddle.counting import (
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

RNG = random.Random(11)
WORDS_32 = [0, 1, MASK_32, 0x80000000, 0x55555555, 0xAAAAAAAA] + [RNG.getrandbits(32) for _ in range(200)]
WORDS_64 = [0, 1, MASK_64, 1 << 63, 1 << 32, MASK_32] + [RNG.getrandbits(64) for _ in range(200)]


def _naive_count(x: int) -> int:
    total = 0
    while x:
        total += x & 1
        x >>= 1
    return total


def _naive_group_parity(x: int, n: int) -> int:
    acc = 0
    while x:
        acc ^= x & ((1 << n) - 1)
        x >>= n
    return acc


def test_count_edge_values() -> None:
    assert count32(0) == 0
    assert count32(-1) == 32
    assert count32(MASK_32) == 32
    assert count64(0) == 0
    assert count64(MASK_32) == 32
    assert count64(-1) == 64


def test_count_matches_naive_count() -> None:
    for x in WORDS_32:
        assert count32(x) == _naive_count(x)
    for x in WORDS_64:
        assert count64(x) == _naive_count(x)


def test_count_every_single_bit_and_prefix() -> None:
    for i in range(64):
        assert count64(1 << i) == 1
        assert count64((1 << (i + 1)) - 1) == i + 1
    for i in range(32):
        assert count32((1 << (i + 1)) - 1) == i + 1


def test_parity_matches_count_mod_two() -> None:
    for x in WORDS_32:
        assert parity32(x) == count32(x) % 2
    for x in WORDS_64:
        assert parity64(x) == count64(x) % 2


def test_parity_of_upper_half_bits_64() -> None:
    assert parity64(1 << 63) == 1
    assert parity64((1 << 63) | (1 << 32)) == 0


@pytest.mark.parametrize("n", [2, 3, 4, 5, 8, 16])
def test_parity_n_xors_groups(n: int) -> None:
    for x in WORDS_32[:50]:
        assert parity_n32(x, n) == _naive_group_parity(x, n)
    for x in WORDS_64[:50]:
        assert parity_n64(x, n) == _naive_group_parity(x, n)


def test_parity_n_of_one_is_parity() -> None:
    for x in WORDS_32[:50]:
        assert parity_n32(x, 1) == parity32(x)
    for x in WORDS_64[:50]:
        assert parity_n64(x, 1) == parity64(x)


def test_parity_n_known_values() -> None:
    assert parity_n32(0, 4) == 0
    assert parity_n32(0x12345678, 8) == 0x12 ^ 0x34 ^ 0x56 ^ 0x78
    assert parity_n32(0xFFFF0000, 16) == 0xFFFF
    assert parity_n64(0xFFFFFFFF00000000, 32) == 0xFFFFFFFF
    assert parity_n32(-1, 16) == 0


def test_scan_finds_lowest_set_bit() -> None:
    assert scan32(0b1000) == 3
    assert scan32(1) == 0
    assert scan32(0x80000000) == 31
    assert scan32(0b10110000) == 4
    for i in range(32):
        assert scan32(1 << i) == i
        assert scan32(MASK_32 << i) == i
    for i in range(64):
        assert scan64(1 << i) == i


def test_scan_zero_reports_width() -> None:
    assert scan32(0) == 32
    assert scan64(0) == 64


def test_scan_64_upper_half() -> None:
    assert scan64(1 << 32) == 32
    assert scan64((1 << 63) | (1 << 40)) == 40
    assert scan64((1 << 63) | 0b100) == 2


def test_scan_reverse_finds_highest_set_bit() -> None:
    assert scan_reverse32(0b1000) == 3
    assert scan_reverse32(1) == 0
    assert scan_reverse32(MASK_32) == 31
    for i in range(32):
        assert scan_reverse32(1 << i) == i
        assert scan_reverse32((1 << i) | 1) == i
    for i in range(64):
        assert scan_reverse64(1 << i) == i
        assert scan_reverse64((1 << i) | 1) == i


def test_scan_reverse_matches_bit_length() -> None:
    for x in WORDS_32:
        if x:
            assert scan_reverse32(x) == x.bit_length() - 1
    for x in WORDS_64:
        if x:
            assert scan_reverse64(x) == x.bit_length() - 1


def test_scan_reverse_zero_fallback() -> None:
    assert scan_reverse32(0) == 0
    assert scan_reverse64(0) == 0


def test_widths_agree_on_32_bit_values() -> None:
    for x in WORDS_32:
        assert count64(x) == count32(x)
        assert parity64(x) == parity32(x)
        assert scan_reverse64(x) == scan_reverse32(x)
        if x:
            assert scan64(x) == scan32(x)


def test_parity_n_degenerate_group_widths() -> None:
    assert parity_n32(5, 0) == 0
    assert parity_n64(5, -3) == 0
    assert parity_n32(0x12345678, 32) == 0x12345678
    assert parity_n32(0x12345678, 1 << 40) == 0x12345678
    assert parity_n64(MASK_64, 64) == MASK_64
