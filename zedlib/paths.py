"""Pure string manipulation of file paths."""

from __future__ import annotations

from .editing import cut_duplicates, remove_at, replace, replace_at, trim_right, truncate
from .search import ends_with, find, find_after, find_before, find_last


def _normalised(path: str) -> str:
    return trim_right(replace(path, "\\", "/"), "/")


def basename(path: str) -> str:
    """The last component of a path; ``"/"`` for the root or an empty path."""
    trimmed = _normalised(path)
    slash = find_last(trimmed, "/")
    if slash > -1:
        return trimmed[slash + 1 :]
    return trimmed or "/"


def dirname(path: str) -> str:
    """The directory part of a path; ``"/"`` when nothing would be left.

    A path without any slash is returned unchanged (after trailing
    slashes are removed).
    """
    trimmed = _normalised(path)
    if not trimmed:
        return "/"
    slash = find_last(trimmed, "/")
    if slash > -1:
        trimmed = truncate(trimmed, slash)
    return trimmed or "/"


def shorten(path: str) -> str:
    """Remove redundant parts of a path.

    Backslashes become slashes, repeated slashes collapse, ``/./`` is
    dropped and ``dir/../`` backtracking is folded away, so
    ``"C:/a1/b1/../b2/foo.bar"`` becomes ``"C:/a1/b2/foo.bar"``.
    """
    output = replace(path, "\\", "/")
    output = cut_duplicates(output, "/")
    output = replace(output, "/./", "/")

    parent = "/../"
    index = find(output, parent)
    while index >= 0:
        if index:
            last = find_before(output, "/", index - 1)
            span = index - last + len(parent)
            if last < 0:
                output = replace_at(output, 0, span, "./")
            else:
                output = replace_at(output, last, span, "/")
        index = find_after(output, parent, index + 1)

    tail = "/.."
    if len(output) > len(tail) and ends_with(output, tail):
        last = find_before(output, "/", len(output) - len(tail) - 1)
        if last < 0:
            output = "."
        else:
            output = remove_at(output, last, index - last + len(tail))

    return output