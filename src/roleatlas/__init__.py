"""
roleatlas - AI-era role catalogs for content and front office pipelines.

A read-only catalog of organizational roles, each describing how its work
changes from pre-AI through AI agents to AI agentic operation, linked to
the steps, gates, agents and inputs of a pipeline graph.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import CatalogError, DuplicateRoleIdError, GraphError, RoleAtlasError

__version__ = get_version()

__all__ = [
    "__version__",
    "RoleAtlasError",
    "CatalogError",
    "DuplicateRoleIdError",
    "GraphError",
]
