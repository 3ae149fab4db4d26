"""
Memory file system — in-memory test double for the ``FileSystem`` protocol.

Used by tests (and anywhere a dry run is wanted) to exercise the
scaffold writer without touching disk.  Every operation is recorded
in ``call_log`` so tests can assert on what was attempted.
"""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Iterator
from contextlib import contextmanager

from scaffolder.adapters.base import PathLike

logger = logging.getLogger(__name__)


class MemoryFileSystem:
    """Dictionary-backed file system rooted at ``/``.

    Files live in ``_files`` keyed by normalized absolute POSIX path;
    directories live in ``_dirs``.  Parent directories of a written
    file are created implicitly, as on disk.
    """

    def __init__(self) -> None:
        self._files: dict[str, str] = {}
        self._dirs: set[str] = {"/"}
        self._cwd = "/"
        self._call_log: list[tuple[str, str]] = []

    @property
    def cwd(self) -> str:
        return self._cwd

    @property
    def call_log(self) -> list[tuple[str, str]]:
        """All ``(operation, path)`` pairs this file system has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def reset(self) -> None:
        """Clear the call log. Stored files are kept."""
        self._call_log.clear()

    def files(self) -> list[str]:
        """Sorted absolute paths of every stored file."""
        return sorted(self._files)

    def _resolve(self, path: PathLike) -> str:
        raw = os.fspath(path)
        if not raw:
            raise FileNotFoundError("empty path")
        return posixpath.normpath(posixpath.join(self._cwd, raw))

    def _record(self, operation: str, path: PathLike) -> str:
        self._call_log.append((operation, os.fspath(path)))
        return self._resolve(path)

    def _ensure_dirs(self, directory: str) -> None:
        current = directory
        while current not in self._dirs:
            if current in self._files:
                raise NotADirectoryError(f"Not a directory: '{current}'")
            self._dirs.add(current)
            current = posixpath.dirname(current)

    def exists(self, path: PathLike) -> bool:
        target = self._record("exists", path)
        return target in self._files or target in self._dirs

    def read(self, path: PathLike) -> str:
        target = self._record("read", path)
        if target in self._dirs:
            raise IsADirectoryError(f"Is a directory: '{target}'")
        try:
            return self._files[target]
        except KeyError:
            raise FileNotFoundError(f"No such file: '{target}'") from None

    def write(self, path: PathLike, *content: str) -> None:
        target = self._record("write", path)
        if target in self._dirs:
            raise IsADirectoryError(f"Is a directory: '{target}'")
        self._ensure_dirs(posixpath.dirname(target))
        self._files[target] = "".join(content)
        logger.debug("[memory] wrote %s", target)

    def delete(self, path: PathLike) -> None:
        target = self._record("delete", path)
        if target in self._dirs:
            raise IsADirectoryError(f"Is a directory: '{target}'")
        if self._files.pop(target, None) is None:
            raise FileNotFoundError(f"No such file: '{target}'")
        logger.debug("[memory] deleted %s", target)

    def mkdir(self, path: PathLike) -> None:
        target = self._record("mkdir", path)
        if target in self._files:
            raise FileExistsError(f"File exists: '{target}'")
        self._ensure_dirs(target)
        logger.debug("[memory] mkdir %s", target)

    @contextmanager
    def chdir(self, path: PathLike) -> Iterator[None]:
        target = self._record("chdir", path)
        if target in self._files:
            raise NotADirectoryError(f"Not a directory: '{target}'")
        if target not in self._dirs:
            raise FileNotFoundError(f"No such directory: '{target}'")

        previous = self._cwd
        self._cwd = target
        try:
            yield
        finally:
            self._cwd = previous

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} files={len(self._files)} cwd={self._cwd!r}>"
