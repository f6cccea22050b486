"""
Pipeline graph loading.

Reads a graph export ({"nodes": [...], "links": [...]}) from JSON or YAML.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from roleatlas.core.errors import GraphError

from .ir import GraphData

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = {".json"}
_YAML_SUFFIXES = {".yaml", ".yml"}


def load_graph(path: Path) -> GraphData:
    """Load a pipeline graph from a JSON or YAML file.

    Args:
        path: Graph file. The suffix selects the parser.

    Returns:
        GraphData instance.

    Raises:
        GraphError: If the file is missing, has an unsupported suffix, or
            contains invalid JSON/YAML or schema.
    """
    if not path.exists():
        raise GraphError(f"Graph not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in _JSON_SUFFIXES | _YAML_SUFFIXES:
        raise GraphError(f"Unsupported graph format '{suffix}': {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data: Any = json.loads(content) if suffix in _JSON_SUFFIXES else yaml.safe_load(content)
    except (OSError, UnicodeDecodeError) as e:
        raise GraphError(f"Cannot read graph {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise GraphError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise GraphError(f"Invalid YAML in {path}: {e}") from e

    if not data or not isinstance(data, dict):
        raise GraphError(f"Empty or invalid graph in {path}")

    try:
        graph = GraphData.model_validate(data)
    except ValidationError as e:
        raise GraphError(f"Invalid graph schema in {path}: {e}") from e

    logger.debug(f"Loaded graph from {path}: {len(graph.nodes)} nodes, {len(graph.links)} links")
    return graph
