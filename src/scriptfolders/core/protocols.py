"""
Canonical protocol definitions for scriptfolders.

The resolver never touches ``os`` or ``pathlib`` directly; it talks to a
``FileSystem``. Any object with the three methods below satisfies the
contract, so tests and hosts can hand in in-memory or remote trees.

Architecture:
    ::

        FileSystem Protocol:
        ┌──────────────────────────────────────────────────────────┐
        │ list_subdirectories(path)  → names of immediate subdirs   │
        │ list_files(path, pattern)  → names of matching files      │
        │ open_for_read(path)        → binary stream (closeable)    │
        └──────────────────────────────────────────────────────────┘

        Implementations:
        ┌──────────────────────────────────────────────────────────┐
        │ LocalFileSystem  → os.scandir + open(..., "rb")           │
        │ tests/_support   → InMemoryFileSystem with read faults    │
        └──────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: Return full paths from the listing methods
    ✅ DO: Return bare names in enumeration order; the resolver joins paths

    ❌ DON'T: Catch OSError inside an implementation
    ✅ DO: Let it propagate; the resolver wraps it in ScriptIOError

Tags:
    protocol, filesystem, contracts, scriptfolders
"""

from __future__ import annotations

import os
from typing import BinaryIO, Protocol, Union, runtime_checkable

StrPath = Union[str, "os.PathLike[str]"]


@runtime_checkable
class FileSystem(Protocol):
    """Directory enumeration and file access used by the folder resolver."""

    def list_subdirectories(self, path: StrPath) -> list[str]:
        """Names of the immediate subdirectories of ``path``, in enumeration order."""
        ...

    def list_files(self, path: StrPath, pattern: str) -> list[str]:
        """Names of files directly under ``path`` matching glob ``pattern``."""
        ...

    def open_for_read(self, path: StrPath) -> BinaryIO:
        """Open ``path`` for binary reading. The caller closes the stream."""
        ...


__all__ = ["FileSystem", "StrPath"]
