"""Case conversion, character filtering and character substitution on strings.

Functions that take a callable hand it each character as an integer code
point, the same form the functions in :mod:`zedlib.chars` accept.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Union

from .chars import is_alpha_numeric, is_lower, is_upper, to_lower, to_upper

Bound = Union[int, str]
CharRange = tuple[Bound, Bound]


def _code(value: Bound) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return int(value)


def _ranges(ranges: Union[CharRange, Iterable[CharRange]]) -> list[tuple[int, int]]:
    """Normalise a single (first, last) pair or a collection of them."""
    if isinstance(ranges, tuple) and len(ranges) == 2 and not isinstance(ranges[0], tuple):
        ranges = [ranges]  # a single pair
    normalised = []
    for pair in ranges:
        first, last = pair
        normalised.append((_code(first), _code(last)))
    return normalised


def _in_ranges(cp: int, ranges: list[tuple[int, int]]) -> bool:
    return any(first <= cp <= last for first, last in ranges)


def upper(text: str) -> str:
    """A copy of ``text`` with every character converted to uppercase."""
    return "".join(to_upper(ch) for ch in text)


def lower(text: str) -> str:
    """A copy of ``text`` with every character converted to lowercase."""
    return "".join(to_lower(ch) for ch in text)


def _is_word_char(ch: str) -> bool:
    return is_alpha_numeric(ch) or is_upper(ch) or is_lower(ch)


def camel(text: str) -> str:
    """A copy of ``text`` with each word capitalised and the rest lowercased.

    The first character of every word takes its title-case form, so
    characters such as ``ǆ`` become ``ǅ`` rather than ``Ǆ``.
    """
    result = []
    word_start = True
    for ch in text:
        if _is_word_char(ch):
            result.append(to_upper(ch, True) if word_start else to_lower(ch))
            word_start = False
        else:
            result.append(ch)
            word_start = True
    return "".join(result)


def filter_ranges(
    text: str, ranges: Union[CharRange, Iterable[CharRange]], invert: bool = False
) -> str:
    """Keep only characters inside any of the inclusive ranges.

    ``ranges`` is one ``(first, last)`` pair or a collection of them.  With
    ``invert`` the characters inside the ranges are removed instead.
    """
    bounds = _ranges(ranges)
    return "".join(ch for ch in text if _in_ranges(ord(ch), bounds) != invert)


def filter_chars(text: str, chars: str, invert: bool = False) -> str:
    """Keep only characters that appear in ``chars`` (or, inverted, those that do not)."""
    allowed = set(chars)
    return "".join(ch for ch in text if (ch in allowed) != invert)


def filter_by(text: str, predicate: Callable[[int], bool]) -> str:
    """Keep the characters whose code point the predicate accepts."""
    return "".join(ch for ch in text if predicate(ord(ch)))


def _contains(text: str, matches: Callable[[str], bool], exclusive: bool) -> bool:
    for ch in text:
        if matches(ch):
            if not exclusive:
                return True
        elif exclusive:
            return False
    return exclusive


def contains_ranges(
    text: str, ranges: Union[CharRange, Iterable[CharRange]], exclusive: bool = False
) -> bool:
    """Whether any character lies in the ranges; with ``exclusive``, whether all do."""
    bounds = _ranges(ranges)
    return _contains(text, lambda ch: _in_ranges(ord(ch), bounds), exclusive)


def contains_chars(text: str, chars: str, exclusive: bool = False) -> bool:
    """Whether any character is in ``chars``; with ``exclusive``, whether all are."""
    allowed = set(chars)
    return _contains(text, lambda ch: ch in allowed, exclusive)


def cipher(text: str, keys: str, values: str) -> str:
    """Replace each character found in ``keys`` with the one at the same place in ``values``.

    Keys without a counterpart in ``values`` are left unchanged; the first
    occurrence of a repeated key decides its replacement.
    """
    table: dict[str, str] = {}
    for key, value in zip(keys, values):
        table.setdefault(key, value)
    return "".join(table.get(ch, ch) for ch in text)


def cipher_by(text: str, func: Callable[[int], Union[int, str]]) -> str:
    """Replace each character by ``func`` applied to its code point.

    ``func`` may return either a code point or a one-character string.
    """
    result = []
    for ch in text:
        out = func(ord(ch))
        result.append(out if isinstance(out, str) else chr(out))
    return "".join(result)