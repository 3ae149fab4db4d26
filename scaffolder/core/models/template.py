"""
Generated file model — what a generator hands to the scaffold writer.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratedFile(BaseModel):
    """A file produced by a generator, ready to be written.

    Attributes:
        path:      Path relative to the project root (or absolute).
        content:   Full file content.
        overwrite: Write without asking if the file already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str = ""
    overwrite: bool = False
    reason: str = ""


class Manifest(BaseModel):
    """A batch of generated files, loaded from a YAML manifest."""

    files: list[GeneratedFile] = Field(default_factory=list)
