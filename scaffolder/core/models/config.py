"""
Scaffold configuration model — loaded from scaffold.yml.

The file's directory is the project root; everything here is
optional and falls back to the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ScaffoldConfig(BaseModel):
    """Project-level settings for the scaffold writer."""

    version: int = 1

    # Name of the directory placeholder removed once real files appear
    keep_file: str = ".keep"
    encoding: str = "utf-8"

    @field_validator("keep_file")
    @classmethod
    def _plain_name(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"keep_file must be a plain file name, got {v!r}")
        return v
