"""Substring extraction and searching by character index."""

from __future__ import annotations


def substr(text: str, index: int, count: int) -> str:
    """Take ``count`` characters starting at ``index``.

    A negative ``count`` takes the characters before ``index`` in reverse
    order, so ``substr("example", 5, -3)`` gives ``"pma"``.  A zero count
    gives an empty string.  Out-of-range parts are dropped.
    """
    length = len(text)
    if count > 0:
        start = max(index, 0)
        stop = min(max(index + count, 0), length)
        return text[start:stop] if start < stop else ""
    if count < 0:
        top = min(index, length)
        bottom = max(index + count, 0)
        return text[bottom:top][::-1] if bottom < top else ""
    return ""


def found_at(text: str, sub: str, index: int) -> bool:
    """True if ``sub`` occurs in ``text`` starting exactly at ``index``."""
    if index < 0 or index + len(sub) > len(text):
        return False
    return text.startswith(sub, index)


def found_end_at(text: str, sub: str, index: int) -> bool:
    """True if ``sub`` occurs in ``text`` ending exactly at ``index`` (inclusive)."""
    start = index - len(sub) + 1
    if start < 0 or start + len(sub) > len(text):
        return False
    return text.startswith(sub, start)


def find_after(text: str, sub: str, index: int) -> int:
    """Index of the first occurrence at or after ``index``, or -1."""
    for position in range(max(index, 0), len(text)):
        if found_at(text, sub, position):
            return position
    return -1


def find_before(text: str, sub: str, index: int) -> int:
    """Index of the last occurrence starting at or before ``index``, or -1."""
    for position in range(min(index, len(text) - 1), -1, -1):
        if found_at(text, sub, position):
            return position
    return -1


def find(text: str, sub: str) -> int:
    """Index of the first occurrence of ``sub``, or -1."""
    return find_after(text, sub, 0)


def find_last(text: str, sub: str) -> int:
    """Index of the last occurrence of ``sub``, or -1."""
    return find_before(text, sub, len(text))


def count(text: str, sub: str) -> int:
    """Number of non-overlapping occurrences of ``sub``; 0 for an empty ``sub``."""
    if not sub:
        return 0
    total = 0
    position = find_after(text, sub, 0)
    while position >= 0:
        total += 1
        position = find_after(text, sub, position + len(sub))
    return total


def begins_with(text: str, sub: str) -> bool:
    """True if ``text`` starts with ``sub``."""
    return found_at(text, sub, 0)


def ends_with(text: str, sub: str) -> bool:
    """True if ``text`` ends with ``sub``."""
    return found_end_at(text, sub, len(text) - 1)