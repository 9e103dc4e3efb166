import pytest

from zedlib import chars


def test_alpha_classification():
    assert chars.is_upper_alpha("A") is True
    assert chars.is_upper_alpha("a") is False
    assert chars.is_lower_alpha(ord("z")) is True
    assert chars.is_lower_alpha("Z") is False
    assert chars.is_alpha("q") is True
    assert chars.is_alpha("5") is False


def test_is_upper_and_lower():
    assert chars.is_upper("A") is True
    assert chars.is_lower("a") is True
    assert chars.is_upper("1") is False
    assert chars.is_lower("1") is False


@pytest.mark.parametrize("ch", list("ABCXYZÉÖØÞАБЯ"))
def test_to_lower_matches_str_lower(ch):
    assert chars.to_lower(ch) == ch.lower()


@pytest.mark.parametrize("ch", list("ABCXYZÉÖØÞАБЯ"))
def test_case_round_trip(ch):
    assert chars.to_upper(chars.to_lower(ch)) == ch


def test_return_type_follows_argument():
    assert chars.to_upper(ord("a")) == ord("A")
    assert chars.to_upper("a") == "A"


def test_sigma_alternate():
    assert chars.to_lower("Σ") == "σ"
    assert chars.to_lower("Σ", alternate=True) == "ς"
    assert chars.to_upper("ς") == "Σ"


def test_camel_conversions():
    assert chars.to_upper("ǆ") == "Ǆ"
    assert chars.to_upper("ǆ", camel=True) == "ǅ"
    assert chars.to_lower("ǅ") == "ǆ"
    assert chars.to_lower("Ǆ") == "ǆ"


def test_non_letters_unchanged():
    assert chars.to_upper("?") == "?"
    assert chars.to_lower("7") == "7"


def test_numeral_value():
    assert chars.numeral_value("0") == 0
    assert chars.numeral_value("9") == 9
    assert chars.numeral_value("a") == chars.numeral_value("A")
    assert chars.numeral_value("-") == -1


def test_numeral_bounds():
    assert chars.numeral(0) == "0"
    assert chars.numeral(37) == "0"
    assert chars.numeral(5) == "5"


@pytest.mark.parametrize("value", range(1, 36))
def test_numeral_round_trip(value):
    assert chars.numeral_value(chars.numeral(value)) == value


def test_is_numeric():
    assert chars.is_numeric("9") is True
    assert chars.is_numeric("F", 16) is True
    assert chars.is_numeric("G", 16) is False
    assert chars.is_numeric("A") is False
    assert chars.is_alpha_numeric("x") is True
    assert chars.is_alpha_numeric("_") is False


def test_white_space():
    assert all(chars.is_white_space(c) for c in "\t\n\r \f\v\0")
    assert chars.is_white_space("a") is False


def test_bad_character_argument():
    with pytest.raises(ValueError):
        chars.to_upper("ab")


@pytest.mark.parametrize("ch", ["A", "é", "€", "😀"])
def test_utf8_encode_matches_codec(ch):
    assert chars.to_utf8(ch) == ch.encode("utf-8")
    assert chars.len_to_utf8(ch) == len(ch.encode("utf-8"))


@pytest.mark.parametrize("ch", ["A", "é", "€", "😀"])
def test_utf8_decode_round_trip(ch):
    encoded = chars.to_utf8(ch)
    assert chars.from_utf8(encoded) == ord(ch)
    assert chars.len_from_utf8(encoded) == len(encoded)


def test_from_utf8_invalid():
    assert chars.from_utf8(b"\x80") == ord("?")
    assert chars.from_utf8(b"\xc3") == ord("?")
    assert chars.from_utf8(b"") == 0
    assert chars.from_utf8(None) == 0


def test_len_from_utf8_continuation_byte():
    assert chars.len_from_utf8(b"\x80") == 0
    assert chars.len_from_utf8(b"") == 0


def test_is_utf8():
    assert chars.is_utf8(b"A") is True
    assert chars.is_utf8(b"\x80") is False
    assert chars.is_utf8(b"") is False
    assert chars.is_utf8(b"\xc3") is False


def test_iter_utf8():
    text = "héllo €😀"
    assert list(chars.iter_utf8(text.encode("utf-8"))) == [ord(c) for c in text]