"""Local-disk implementation of the :class:`FileSystem` protocol."""

from __future__ import annotations

import fnmatch
import os
from typing import BinaryIO

from scriptfolders.core.protocols import StrPath


class LocalFileSystem:
    """Reads version folders from the host filesystem.

    Listings come straight from ``os.scandir`` and keep its order; nothing is
    sorted. ``pattern`` is matched with :func:`fnmatch.fnmatch`, which
    normalizes case the way the host does (case-insensitive on Windows,
    case-sensitive elsewhere). OSErrors propagate to the caller.
    """

    def list_subdirectories(self, path: StrPath) -> list[str]:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries if entry.is_dir()]

    def list_files(self, path: StrPath, pattern: str) -> list[str]:
        with os.scandir(path) as entries:
            return [
                entry.name
                for entry in entries
                if entry.is_file() and fnmatch.fnmatch(entry.name, pattern)
            ]

    def open_for_read(self, path: StrPath) -> BinaryIO:
        return open(path, "rb")


__all__ = ["LocalFileSystem"]
