"""
Domain models — Pydantic types for the scaffolder.

All models are re-exported here for convenient access:

    from scaffolder.core.models import GeneratedFile, Manifest, ScaffoldConfig
"""

from scaffolder.core.models.config import ScaffoldConfig
from scaffolder.core.models.template import GeneratedFile, Manifest

__all__ = [
    # template.py
    "GeneratedFile",
    "Manifest",
    # config.py
    "ScaffoldConfig",
]
