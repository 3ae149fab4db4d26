"""Adapters — file-system backends for the scaffold writer.

Public re-exports for convenient access.
"""

from scaffolder.adapters.base import FileSystem
from scaffolder.adapters.mock import MemoryFileSystem
from scaffolder.adapters.shell.filesystem import DiskFileSystem

__all__ = [
    "DiskFileSystem",
    "FileSystem",
    "MemoryFileSystem",
]
