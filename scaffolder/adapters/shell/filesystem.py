"""
Disk file system — real file and directory operations.

Relative paths resolve against an instance-level current directory
that starts at ``root``.  ``chdir`` moves that directory for the
duration of a ``with`` block; the process working directory
(``os.chdir``) is never touched.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from scaffolder.adapters.base import PathLike

logger = logging.getLogger(__name__)


class DiskFileSystem:
    """Disk-backed implementation of the ``FileSystem`` protocol.

    Args:
        root: Directory relative paths start from (default: cwd at
            construction time).
        encoding: Text encoding for reads and writes.
    """

    def __init__(self, root: PathLike | None = None, encoding: str = "utf-8"):
        self._root = Path(root).resolve() if root is not None else Path.cwd()
        self._cwd = self._root
        self._encoding = encoding

    @property
    def root(self) -> Path:
        return self._root

    @property
    def cwd(self) -> Path:
        """Directory relative paths currently resolve against."""
        return self._cwd

    def _resolve(self, path: PathLike) -> Path:
        target = Path(path)
        if not target.is_absolute():
            target = self._cwd / target
        return target

    def exists(self, path: PathLike) -> bool:
        return self._resolve(path).exists()

    def read(self, path: PathLike) -> str:
        target = self._resolve(path)
        logger.debug("read %s", target)
        return target.read_text(encoding=self._encoding)

    def write(self, path: PathLike, *content: str) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        data = "".join(content)
        # newline="" keeps line endings exactly as given
        with target.open("w", encoding=self._encoding, newline="") as fh:
            fh.write(data)
        logger.debug("wrote %d chars to %s", len(data), target)

    def delete(self, path: PathLike) -> None:
        target = self._resolve(path)
        if target.is_dir():
            raise IsADirectoryError(f"Is a directory: '{target}'")
        target.unlink()
        logger.debug("deleted %s", target)

    def mkdir(self, path: PathLike) -> None:
        target = self._resolve(path)
        target.mkdir(parents=True, exist_ok=True)
        logger.debug("mkdir %s", target)

    @contextmanager
    def chdir(self, path: PathLike) -> Iterator[None]:
        target = self._resolve(path)
        if not target.exists():
            raise FileNotFoundError(f"No such directory: '{target}'")
        if not target.is_dir():
            raise NotADirectoryError(f"Not a directory: '{target}'")

        previous = self._cwd
        self._cwd = target
        logger.debug("chdir %s", target)
        try:
            yield
        finally:
            self._cwd = previous
            logger.debug("chdir %s (restored)", previous)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} root={os.fspath(self._root)!r}>"
