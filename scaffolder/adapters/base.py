"""
File-system protocol — the contract between the writer and storage.

The scaffold writer only talks to storage through this protocol,
never directly to ``os`` or ``pathlib``.  Two implementations ship
with the project:

    - DiskFileSystem    (adapters/shell/filesystem.py) — real files
    - MemoryFileSystem  (adapters/mock.py)             — in-memory, for tests

Any object exposing the same six operations is substitutable; there
is no base class to inherit from.
"""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import Protocol, Union, runtime_checkable

PathLike = Union[str, os.PathLike]


@runtime_checkable
class FileSystem(Protocol):
    """Minimal file-system capability set.

    Relative paths resolve against the current directory of the
    implementation, which ``chdir`` changes for the duration of a
    ``with`` block.

    Errors are the standard ``OSError`` family (``FileNotFoundError``,
    ``IsADirectoryError``, ``NotADirectoryError``, ``PermissionError``).
    """

    def exists(self, path: PathLike) -> bool:
        """True if a file or directory exists at ``path``."""
        ...

    def read(self, path: PathLike) -> str:
        """Return the full text content of the file at ``path``."""
        ...

    def write(self, path: PathLike, *content: str) -> None:
        """Create or overwrite ``path`` with the concatenated fragments.

        Missing parent directories are created.
        """
        ...

    def delete(self, path: PathLike) -> None:
        """Remove the file at ``path``."""
        ...

    def mkdir(self, path: PathLike) -> None:
        """Create ``path`` and any missing parents. Existing is fine."""
        ...

    def chdir(self, path: PathLike) -> AbstractContextManager[None]:
        """Scope relative path resolution to ``path`` inside a ``with`` block."""
        ...
