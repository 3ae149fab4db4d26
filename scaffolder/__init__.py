"""Scaffolder — conflict-safe file creation for code generators."""

__version__ = "0.1.0"
