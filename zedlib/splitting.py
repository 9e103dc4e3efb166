"""Splitting strings on a delimiter."""

from __future__ import annotations

from .search import find_after, substr


def split(text: str, delim: str = "") -> list[str]:
    """Split ``text`` on every occurrence of ``delim``.

    With an empty delimiter each character becomes its own item.  An empty
    input with a non-empty delimiter yields a single empty item.
    """
    if not delim:
        return list(text)

    parts: list[str] = []
    begin = 0
    end = find_after(text, delim, begin)
    while end >= 0:
        parts.append(substr(text, begin, end - begin))
        begin = end + len(delim)
        end = find_after(text, delim, begin)
    parts.append(substr(text, begin, len(text) - begin))
    return parts