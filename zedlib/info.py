"""Platform-independent information about a file-system object."""

from __future__ import annotations

import os
import stat
from typing import Optional, Union

PathArg = Union[str, "os.PathLike[str]"]


def _stat(path: PathArg, follow: bool) -> Optional[os.stat_result]:
    try:
        return os.stat(path) if follow else os.lstat(path)
    except (OSError, ValueError):
        return None


class FileInfo:
    """The most common details of a file: existence, times, size and kind.

    Every query on a path that does not exist (or cannot be accessed)
    returns 0 or False.
    """

    def __init__(self, path: PathArg) -> None:
        self.path = os.fspath(path)
        self._info = _stat(path, follow=True)
        self._link = _stat(path, follow=False)

    def exists(self) -> bool:
        """True if the object exists and can be accessed."""
        return self._info is not None

    def accessed(self) -> int:
        """Time of last access, in whole seconds since the epoch; 0 if missing."""
        return int(self._info.st_atime) if self._info else 0

    def modified(self) -> int:
        """Time of last modification, in whole seconds since the epoch; 0 if missing."""
        return int(self._info.st_mtime) if self._info else 0

    def changed(self) -> int:
        """Time of last status change, in whole seconds since the epoch; 0 if missing."""
        return int(self._info.st_ctime) if self._info else 0

    def size(self) -> int:
        """Size in bytes; 0 if missing."""
        return self._info.st_size if self._info else 0

    def device(self) -> int:
        """Number of the device holding the object; 0 if missing."""
        return self._info.st_dev if self._info else 0

    def mode(self) -> int:
        """Mode bits (type and permissions); 0 if missing."""
        return self._info.st_mode if self._info else 0

    def directory(self) -> bool:
        """True if the object is a directory."""
        return bool(self._info) and stat.S_ISDIR(self._info.st_mode)

    def symlink(self) -> bool:
        """True if the path itself is a symbolic link."""
        return bool(self._link) and stat.S_ISLNK(self._link.st_mode)

    def regular(self) -> bool:
        """True if the object is a regular file."""
        return bool(self._info) and stat.S_ISREG(self._info.st_mode)