"""
Role catalog persistence for roleatlas.

Handles reading and writing role catalogs as YAML. Built-in catalogs ship
inside the package under roles/data/.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import yaml
from pydantic import ValidationError

from roleatlas.core.environment import CatalogName
from roleatlas.core.errors import CatalogError
from roleatlas.graph.ir import GraphData

from .ir import RoleCatalog

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def get_builtin_catalog_path(name: CatalogName) -> Path:
    """Get the packaged YAML file for a built-in catalog."""
    return DATA_DIR / f"{name.value.replace('-', '_')}.yaml"


def load_builtin_catalog(name: CatalogName) -> RoleCatalog:
    """Load one of the catalogs shipped with the package."""
    return load_catalog(get_builtin_catalog_path(name))


def load_catalog(path: Path) -> RoleCatalog:
    """Load a RoleCatalog from a YAML file.

    Args:
        path: Catalog file.

    Returns:
        RoleCatalog instance.

    Raises:
        CatalogError: If the file doesn't exist or contains invalid YAML/schema.
    """
    if not path.exists():
        raise CatalogError(f"Catalog not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)

        if not data or not isinstance(data, dict):
            raise CatalogError(f"Empty or invalid YAML in {path}")

        catalog = RoleCatalog.model_validate(data)

    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from e
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog schema in {path}: {e}") from e

    logger.debug(f"Loaded catalog '{catalog.name}' from {path}: {len(catalog.roles)} roles")
    return catalog


def save_catalog(path: Path, catalog: RoleCatalog) -> Path:
    """Save a RoleCatalog as YAML.

    Args:
        path: Destination file. Parent directories are created.
        catalog: Catalog to save.

    Returns:
        Path to the saved file.
    """
    data = catalog.model_dump(mode="json", exclude_none=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved catalog '{catalog.name}' to {path}")
    return path


class CatalogValidationResult:
    """Result of catalog validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


def validate_catalog(
    catalog: RoleCatalog,
    graph: GraphData | None = None,
) -> CatalogValidationResult:
    """Validate a RoleCatalog for consistency and completeness.

    Schema-level guarantees (three stages per journey, all five categories,
    hex accent colors) are enforced when the catalog is parsed. This checks
    what the schema cannot:
        - Role ids are unique
        - Every category has at least one role
        - Every role references at least one node
        - Every role has narrative node journeys
        - Referenced node ids exist in the graph, if one is given

    Returns:
        CatalogValidationResult with errors and warnings.
    """
    result = CatalogValidationResult()

    counts = Counter(role.id for role in catalog.roles)
    for role_id, count in counts.items():
        if count > 1:
            result.add_error(f"Roles: id '{role_id}' is defined {count} times")

    used = {role.category for role in catalog.roles}
    for category, info in catalog.categories.items():
        if category not in used:
            result.add_warning(f"Categories: '{category.value}' ({info.label}) has no roles")

    graph_ids = graph.node_ids() if graph is not None else None

    for role in catalog.roles:
        refs = {
            "owned_steps": role.owned_steps,
            "reviewed_gates": role.reviewed_gates,
            "related_agents": role.related_agents,
            "related_inputs": role.related_inputs,
        }
        if not any(refs.values()):
            result.add_warning(f"Role '{role.id}': references no graph nodes")

        if not role.narrative.node_journeys:
            result.add_warning(f"Role '{role.id}': has no node journeys")

        if graph_ids is not None:
            for field_name, node_ids in refs.items():
                for node_id in node_ids:
                    if node_id not in graph_ids:
                        result.add_warning(
                            f"Role '{role.id}': {field_name} references unknown node '{node_id}'"
                        )

    logger.debug(
        f"Validated catalog '{catalog.name}': "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result
