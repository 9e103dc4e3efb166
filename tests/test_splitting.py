import pytest

from zedlib.splitting import split


def test_empty_delimiter_gives_characters():
    assert split("abc") == ["a", "b", "c"]


def test_empty_input_empty_delimiter():
    assert split("", "") == []


def test_empty_input_with_delimiter():
    assert split("", ",") == [""]


@pytest.mark.parametrize(
    "text,delim",
    [("a,b,c", ","), ("a,,b", ","), (",a,", ","), ("one--two--three", "--"), ("aaa", "aa")],
)
def test_matches_str_split(text, delim):
    assert split(text, delim) == text.split(delim)


@pytest.mark.parametrize("text,delim", [("x;y;z", ";"), ("no delim here", "|"), ("a::b", "::")])
def test_join_round_trip(text, delim):
    assert delim.join(split(text, delim)) == text


def test_item_count_is_occurrences_plus_one():
    text = "1 2 3 4"
    assert len(split(text, " ")) == text.count(" ") + 1