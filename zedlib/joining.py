"""Joining sequences of values into a single string."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def join(items: Iterable[Any], delim: str) -> str:
    """Concatenate the string forms of ``items``, separated by ``delim``.

    A delimiter is added only once the result is non-empty, so leading
    empty items leave no delimiter behind.
    """
    result = ""
    for item in items:
        if result:
            result += delim
        result += str(item)
    return result


def join_deref(items: Iterable[Callable[[], Any]], delim: str) -> str:
    """Join the values that the references in ``items`` point to.

    Each item is a reference such as a :class:`weakref.ref` or any other
    zero-argument callable; calling it yields the value to join.
    """
    result = ""
    for item in items:
        if not callable(item):
            raise TypeError(f"expected a reference, got {type(item).__name__}")
        if result:
            result += delim
        result += str(item())
    return result