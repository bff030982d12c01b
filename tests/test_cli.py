import pytest

from main import format_result, run


def test_count_default_width(capsys: pytest.CaptureFixture[str]) -> None:
    run(["count", "0xFF"])
    assert capsys.readouterr().out.strip() == "8"


def test_word_result_prints_hex_and_binary(capsys: pytest.CaptureFixture[str]) -> None:
    run(["reverse", "1"])
    out = capsys.readouterr().out.strip()
    assert out == f"2147483648 0x80000000 0b1{'0' * 31}"


def test_width_and_signed_flags(capsys: pytest.CaptureFixture[str]) -> None:
    run(["--width", "64", "--signed", "toggle", "0", "63"])
    out = capsys.readouterr().out.split()
    assert out[0] == str(-(1 << 63))
    assert out[1] == "0x8000000000000000"


def test_negative_argument_is_all_ones(capsys: pytest.CaptureFixture[str]) -> None:
    run(["count", "-1"])
    assert capsys.readouterr().out.strip() == "32"


def test_list_prints_operations(capsys: pytest.CaptureFixture[str]) -> None:
    run(["list"])
    out = capsys.readouterr().out
    assert "swap_field(x, i, j, n)" in out
    assert "sign_extend(x, w)" in out


def test_invalid_integer_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["count", "twelve"])
    assert excinfo.value.code == 2


def test_out_of_range_index_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["get", "1", "-1"])
    assert excinfo.value.code == 2
    assert "i=-1" in capsys.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        run(["toggle", "0", str(1 << 30)])
    assert excinfo.value.code == 2


def test_zero_group_width_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["parity_n", "5", "0"])
    assert excinfo.value.code == 2
    assert "n=0" in capsys.readouterr().err


def test_full_width_group_parity(capsys: pytest.CaptureFixture[str]) -> None:
    run(["parity_n", "0x12345678", "32"])
    assert capsys.readouterr().out.strip() == str(0x12345678)


def test_format_result_sign_extend_is_signed() -> None:
    assert format_result("sign_extend", -1, 32).startswith("-1 0xffffffff")
    assert format_result("scan", 32, 32) == "32"
