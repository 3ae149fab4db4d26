"""
Shared test fixtures and configuration.
"""

import io

import pytest

from scaffolder.adapters.mock import MemoryFileSystem
from scaffolder.core.files import ScaffoldFileWriter


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Return an empty in-memory file system."""
    return MemoryFileSystem()


@pytest.fixture
def out() -> io.StringIO:
    """Capture stream for progress lines."""
    return io.StringIO()


@pytest.fixture
def make_writer(memory_fs: MemoryFileSystem, out: io.StringIO):
    """Build a writer over ``memory_fs`` whose prompt answer is ``answer``."""

    def _make(answer: str = "") -> ScaffoldFileWriter:
        return ScaffoldFileWriter(fs=memory_fs, out=out, input=io.StringIO(answer))

    return _make
