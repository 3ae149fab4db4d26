"""
Configuration loader — reads scaffold.yml and file manifests.

It reads YAML, validates against Pydantic schemas, and returns
typed models.  A missing scaffold.yml is not an error for callers
that go through ``load_config(None)``: defaults apply.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from scaffolder.core.models.config import ScaffoldConfig
from scaffolder.core.models.template import GeneratedFile, Manifest

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "scaffold.yml"


class ConfigError(Exception):
    """Raised when configuration or a manifest is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for scaffold.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to scaffold.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _read_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigError(f"File not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: Path | None = None) -> ScaffoldConfig:
    """Load and validate scaffold configuration.

    Args:
        path: Explicit path to scaffold.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Raises:
        ConfigError: If the file is unreadable or invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return ScaffoldConfig()

    logger.debug("Loading scaffold config from %s", path)
    data = _read_yaml(path)

    # An empty file means "all defaults"
    if data is None:
        return ScaffoldConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "scaffold" key or be flat
    section = data.get("scaffold", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'scaffold' to be a mapping in {path}")

    try:
        config = ScaffoldConfig.model_validate(section)
    except Exception as e:
        raise ConfigError(f"Invalid scaffold configuration: {e}") from e

    logger.info("Loaded scaffold config from %s", path)
    return config


def load_manifest(path: Path) -> list[GeneratedFile]:
    """Load a YAML manifest of generated files.

    Expected shape::

        files:
          - path: app/relations/books.rb
            content: |
              ...
            overwrite: false

    Raises:
        ConfigError: If the manifest is missing or invalid.
    """
    data = _read_yaml(path)

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        manifest = Manifest.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid manifest {path}: {e}") from e

    logger.info("Loaded manifest %s with %d files", path, len(manifest.files))
    return manifest.files


def project_root(config_path: Path) -> Path:
    """Get the project root directory from a config file path."""
    return config_path.parent.resolve()
