"""
Scaffold file writer — conflict-safe file creation for generators.

Every file a generator produces goes through ``ScaffoldFileWriter``:

    - ``create`` asks before overwriting an existing file
    - ``write`` removes ``.keep`` placeholders from the new file's
      parent directories
    - each change prints a progress line to the output stream

Progress lines (exact text, one per line):

    Created <path>
    Updated <path>
    -> Within <path>/
    The file `<path>` already exists. Would you like to overwrite it? [y/N]

The overwrite prompt reads one line from the input stream and blocks
until it arrives; there is no timeout.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import PurePath
from typing import IO

import click

from scaffolder.adapters.base import FileSystem, PathLike
from scaffolder.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

POSITIVE_ANSWERS = ("yes", "y")
KEEP_FILE = ".keep"
SEPARATOR = "/"


class FileAlreadyExistsError(FileExistsError):
    """Raised when ``create`` hits an existing file and the user declines."""

    def __init__(self, path: PathLike):
        self.path = os.fspath(path)
        super().__init__(f"File already exists: `{self.path}`")


def _chomp(line: str) -> str:
    """Drop one trailing line ending, nothing else."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


class ScaffoldFileWriter:
    """Writes generated files through a ``FileSystem``.

    Args:
        fs: File system to write to (default: disk, rooted at cwd).
        out: Stream for progress lines (default: stdout at call time).
        input: Stream the overwrite answer is read from
            (default: stdin at call time).
        keep_file: Placeholder file name to clean up.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        out: IO[str] | None = None,
        input: IO[str] | None = None,
        keep_file: str = KEEP_FILE,
    ):
        if fs is None:
            from scaffolder.adapters.shell.filesystem import DiskFileSystem

            fs = DiskFileSystem()
        self._fs = fs
        self._out = out
        self._input = input
        self._keep_file = keep_file

    @property
    def fs(self) -> FileSystem:
        return self._fs

    # ── Pass-through ────────────────────────────────────────────

    def exists(self, path: PathLike) -> bool:
        return self._fs.exists(path)

    def read(self, path: PathLike) -> str:
        return self._fs.read(path)

    def delete(self, path: PathLike) -> None:
        self._fs.delete(path)

    # ── Reporting writes ────────────────────────────────────────

    def create(self, path: PathLike, *content: str) -> None:
        """Write ``path``, asking first if it already exists.

        Raises:
            FileAlreadyExistsError: The file exists and the answer
                was not ``y``/``yes``. Nothing is written.
        """
        if self._fs.exists(path):
            self._handle_file_conflict(path, *content)
        else:
            self.write(path, *content)

    def write(self, path: PathLike, *content: str) -> None:
        """Write ``path`` unconditionally and report it.

        A previously missing file is reported as ``Created`` and clears
        placeholders above it; an existing one is reported as ``Updated``.
        """
        already_exists = self._fs.exists(path)

        self._fs.write(path, *content)

        if already_exists:
            self._say(f"Updated {os.fspath(path)}")
        else:
            self._delete_keepfiles(path)
            self._say(f"Created {os.fspath(path)}")

    def mkdir(self, path: PathLike) -> None:
        """Create a directory; silent no-op if ``path`` already exists."""
        if self._fs.exists(path):
            return

        self._fs.mkdir(path)
        self._say(f"Created {_dir(path)}")

    @contextmanager
    def chdir(self, path: PathLike) -> Iterator[None]:
        """Run the ``with`` block inside ``path``, restoring afterwards."""
        self._say(f"-> Within {_dir(path)}")
        with self._fs.chdir(path):
            yield

    def apply(self, files: Iterable[GeneratedFile]) -> None:
        """Write a batch of generated files in order.

        ``overwrite=True`` entries are written directly, the rest go
        through ``create``. The first error stops the batch; files
        already written stay written.
        """
        for generated in files:
            logger.debug("apply %s (%s)", generated.path, generated.reason or "no reason")
            if generated.overwrite:
                self.write(generated.path, generated.content)
            else:
                self.create(generated.path, generated.content)

    # ── Internals ───────────────────────────────────────────────

    def _say(self, message: str) -> None:
        click.echo(message, file=self._out if self._out is not None else sys.stdout)

    def _ask(self) -> str:
        stream = self._input if self._input is not None else sys.stdin
        return _chomp(stream.readline()).lower()

    def _handle_file_conflict(self, path: PathLike, *content: str) -> None:
        self._say(
            f"The file `{os.fspath(path)}` already exists. "
            "Would you like to overwrite it? [y/N]"
        )
        response = self._ask()

        if response in POSITIVE_ANSWERS:
            self.write(path, *content)
        else:
            logger.info("Not overwriting %s (answer: %r)", os.fspath(path), response)
            raise FileAlreadyExistsError(path)

    def _delete_keepfiles(self, path: PathLike) -> None:
        """Remove placeholder files from the directories leading to ``path``.

        Skipped when ``path`` is a placeholder itself, or absolute:
        ascending an absolute path could reach directories outside
        the project.  The project root (``.``) is never cleaned.
        """
        target = PurePath(path)

        if target.is_absolute():
            return
        if target.name == self._keep_file:
            return

        for part in [target.parent, *target.parent.parents]:
            if part == PurePath("."):
                continue
            keepfile = part / self._keep_file
            if self._fs.exists(keepfile):
                self._fs.delete(keepfile)
                logger.debug("Removed placeholder %s", keepfile)


def _dir(path: PathLike) -> str:
    return os.fspath(path) + SEPARATOR
