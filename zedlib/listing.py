"""Listing the files and sub-directories of a directory."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Union

PathArg = Union[str, "os.PathLike[str]"]


def _search_path(directory: PathArg) -> str:
    text = os.fspath(directory)
    return "./" if not text else text + "/"


def _entries(directory: PathArg) -> Iterator[os.DirEntry]:
    try:
        with os.scandir(_search_path(directory)) as scan:
            yield from scan
    except OSError:
        return


def list_files(directory: PathArg, file_type: str = "*", show_all: bool = True) -> Iterator[str]:
    """Yield names of the non-directory entries in ``directory``.

    An empty ``directory`` means the working directory.  ``file_type`` is an
    extension without its leading period, or ``"*"`` for any.  Names
    starting with a period are left out unless ``show_all`` is set.  A
    directory that cannot be opened yields nothing.
    """
    suffix = "." + file_type
    for entry in _entries(directory):
        if entry.is_dir(follow_symlinks=False):
            continue
        name = entry.name
        if file_type != "*" and not name.endswith(suffix):
            continue
        if not show_all and name.startswith("."):
            continue
        yield name


def list_dirs(directory: PathArg, show_all: bool = False) -> Iterator[str]:
    """Yield names of the sub-directories in ``directory``.

    An empty ``directory`` means the working directory.  Names starting
    with a period, including ``.`` and ``..``, appear only when
    ``show_all`` is set.  A directory that cannot be opened yields nothing.
    """
    if not os.path.isdir(_search_path(directory)):
        return
    if show_all:
        yield "."
        yield ".."
    for entry in _entries(directory):
        if not entry.is_dir(follow_symlinks=False):
            continue
        name = entry.name
        if not show_all and name.startswith("."):
            continue
        yield name