import pytest

from zedlib.numbers import DEFAULT_PRECISION, format_float, format_integer, format_precision


def test_hex_uses_uppercase_digits():
    assert format_integer(255, 16) == "FF"


@pytest.mark.parametrize("value", [0, 1, 7, 42, 1000, 123456789, -5, -99999])
@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
def test_integer_round_trip(value, base):
    assert int(format_integer(value, base), base) == value


def test_invalid_base_falls_back_to_ten():
    assert format_integer(123, 99) == format_integer(123)
    assert format_integer(123, 1) == str(123)


def test_padding():
    padded = format_integer(5, 10, 4)
    assert len(padded) == 4
    assert padded.lstrip("0") == format_integer(5)
    negative = format_integer(-5, 10, 4)
    assert len(negative) == 4
    assert negative.startswith("-")
    assert int(negative) == -5


def test_padding_never_truncates():
    assert format_integer(123456, 10, 2) == str(123456)


def test_simple_float():
    assert format_float(0.5) == "0.5"


@pytest.mark.parametrize("value", [3.25, -1.75, 100.0, 0.125, 2.0])
def test_float_round_trip_exact(value):
    assert float(format_float(value)) == value


@pytest.mark.parametrize("value", [3.14159265, -2.718281828, 1e-3, 12345.678901])
def test_float_default_precision_close(value):
    text = format_float(value)
    assert abs(float(text) - value) <= 0.5 * 10 ** -DEFAULT_PRECISION + 1e-12
    if "." in text:
        assert len(text.split(".")[1]) <= DEFAULT_PRECISION


def test_whole_number_has_no_point():
    assert "." not in format_float(7.0)
    assert int(format_float(7.0)) == 7


def test_precision_rounds_and_limits_digits():
    text = format_float(1.23456, 10, 2)
    assert float(text) == pytest.approx(1.23)
    assert len(text.split(".")[1]) <= 2


def test_rounding_carries_into_integer_part():
    assert float(format_float(9.9999999)) == 10.0


def test_format_precision_forces_digits():
    text = format_precision(2.0, 3)
    whole, frac = text.split(".")
    assert len(frac) == 3
    assert set(frac) == {"0"}
    assert float(text) == 2.0


def test_format_precision_matches_python_for_clear_cases():
    for value in (1.5, 10.25, 3.0):
        assert format_precision(value, 2) == f"{value:.2f}"


def test_no_negative_zero():
    assert not format_float(-0.0000001, 10, 2).startswith("-")


def test_float_in_binary_round_trip():
    text = format_float(5.5, 2)
    whole, frac = text.split(".")
    assert int(whole, 2) + int(frac, 2) / 2 ** len(frac) == 5.5


def test_special_values():
    assert format_float(float("inf")).endswith("inf")
    assert format_float(float("-inf")).startswith("-")
    assert format_float(float("nan")).lower() == str(float("nan"))