"""Editing operations on strings addressed by character index."""

from __future__ import annotations

from collections.abc import Iterator

from .chars import is_white_space
from .search import find_after, found_at, found_end_at


def _span(text: str, index: int, count: int) -> tuple[int, int]:
    """Clamp the run of ``count`` characters at ``index`` to the text.

    A negative count covers the characters just before ``index``.
    """
    if count >= 0:
        start, stop = index, index + count
    else:
        start, stop = index + count, index
    start = min(max(start, 0), len(text))
    stop = min(max(stop, start), len(text))
    return start, stop


def _occurrences(text: str, sub: str) -> Iterator[int]:
    """Positions of non-overlapping occurrences of ``sub``, left to right."""
    if not sub:
        return
    position = find_after(text, sub, 0)
    while position >= 0:
        yield position
        position = find_after(text, sub, position + len(sub))


def _substitute(text: str, sub: str, repl: str, occurrence: int) -> str:
    if occurrence < 0 or not sub:
        return text
    pieces: list[str] = []
    last = 0
    for number, position in enumerate(_occurrences(text, sub), start=1):
        if occurrence and number != occurrence:
            continue
        pieces.append(text[last:position])
        pieces.append(repl)
        last = position + len(sub)
        if occurrence:
            break
    pieces.append(text[last:])
    return "".join(pieces)


def _fill(pad: str, size: int, length: int) -> str:
    missing = size - length
    if missing <= 0 or not pad:
        return ""
    return (pad * (missing // len(pad) + 1))[:missing]


def insert(text: str, other: str, index: int) -> str:
    """Insert ``other`` before the character at ``index``."""
    index = min(max(index, 0), len(text))
    return text[:index] + other + text[index:]


def remove_at(text: str, index: int, count: int) -> str:
    """Remove ``count`` characters at ``index``; a negative count removes those before it."""
    if count == 0:
        return text
    start, stop = _span(text, index, count)
    return text[:start] + text[stop:]


def remove(text: str, sub: str, occurrence: int = 0) -> str:
    """Remove occurrences of ``sub``.

    An occurrence of 0 removes all of them, a negative one removes none,
    otherwise only that occurrence (counting from 1) is removed.
    """
    return _substitute(text, sub, "", occurrence)


def truncate(text: str, index: int) -> str:
    """Drop every character from ``index`` onward."""
    return text[: max(index, 0)]


def replace(text: str, find: str, repl: str, occurrence: int = 0) -> str:
    """Replace occurrences of ``find`` with ``repl``.

    An occurrence of 0 replaces all of them, a negative one replaces none,
    otherwise only that occurrence (counting from 1) is replaced.
    """
    return _substitute(text, find, repl, occurrence)


def replace_at(text: str, index: int, count: int, other: str) -> str:
    """Replace ``count`` characters at ``index`` with ``other``.

    A negative count covers the characters just before ``index``; the
    replacement is inserted in forward order either way.  A zero count
    leaves the text unchanged.
    """
    if count == 0:
        return text
    start, stop = _span(text, index, count)
    return text[:start] + other + text[stop:]


def pad_left(text: str, pad: str, size: int) -> str:
    """Left-pad ``text`` with repetitions of ``pad`` up to ``size`` characters."""
    return _fill(pad, size, len(text)) + text


def pad_right(text: str, pad: str, size: int) -> str:
    """Right-pad ``text`` with repetitions of ``pad`` up to ``size`` characters."""
    return text + _fill(pad, size, len(text))


def repeat(text: str, count: int) -> str:
    """Concatenate ``count`` copies of ``text``."""
    return text * max(count, 0)


def trim_left(text: str, pad: str = "") -> str:
    """Strip leading copies of ``pad``, or leading white space if ``pad`` is empty."""
    if len(text) < len(pad) or not text:
        return text
    index = 0
    if pad:
        while found_at(text, pad, index):
            index += len(pad)
    else:
        while index < len(text) and is_white_space(text[index]):
            index += 1
    return text[index:]


def trim_right(text: str, pad: str = "") -> str:
    """Strip trailing copies of ``pad``, or trailing white space if ``pad`` is empty."""
    if len(text) < len(pad) or not text:
        return text
    index = len(text) - 1
    if pad:
        while index >= 0 and found_end_at(text, pad, index):
            index -= len(pad)
    else:
        while index >= 0 and is_white_space(text[index]):
            index -= 1
    return text[: index + 1]


def trim(text: str, pad: str = "") -> str:
    """Strip ``pad`` (or white space) from both ends."""
    return trim_right(trim_left(text, pad), pad)


def cut_duplicates(text: str, sub: str) -> str:
    """Collapse each run of consecutive ``sub`` occurrences into one."""
    if not sub:
        return text
    pieces: list[str] = []
    index = 0
    while index < len(text):
        if found_at(text, sub, index):
            pieces.append(sub)
            index += len(sub)
            while found_at(text, sub, index):
                index += len(sub)
        else:
            pieces.append(text[index])
            index += 1
    return "".join(pieces)