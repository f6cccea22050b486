"""
Content production role catalog.

Roles are derived from the content production graph's gate reviewers and
step owners. Each role maps to specific nodes and carries narrative insight.

Everything here is built once at import from the packaged catalog and is
read-only afterwards.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from roleatlas.core.environment import CatalogName
from roleatlas.core.errors import DuplicateRoleIdError

from .ir import CategoryInfo, RoleCatalog, RoleCategory, RoleDefinition, RoleStats
from .loader import load_builtin_catalog


def build_role_map(roles: Iterable[RoleDefinition]) -> Mapping[str, RoleDefinition]:
    """Index roles by id.

    Raises:
        DuplicateRoleIdError: If two roles share an id.
    """
    index: dict[str, RoleDefinition] = {}
    for role in roles:
        if role.id in index:
            raise DuplicateRoleIdError(role.id)
        index[role.id] = role
    return MappingProxyType(index)


def build_category_table(catalog: RoleCatalog) -> Mapping[RoleCategory, CategoryInfo]:
    """Category display records in RoleCategory order."""
    return MappingProxyType({c: catalog.categories[c] for c in RoleCategory})


def get_role_node_ids(role: RoleDefinition) -> list[str]:
    """All node ids associated with a role: steps, gates, agents, then inputs.

    Duplicates across the four lists are kept.
    """
    return [
        *role.owned_steps,
        *role.reviewed_gates,
        *role.related_agents,
        *role.related_inputs,
    ]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_role_stats(role: RoleDefinition, total_graph_nodes: int) -> RoleStats:
    """Count a role's node references and its coverage of the graph.

    coverage_pct is total / total_graph_nodes as a percentage, rounded half
    up. It can exceed 100 since role references are not checked against the
    graph. An empty graph (total_graph_nodes == 0) gives a coverage of 0.
    """
    steps = len(role.owned_steps)
    gates = len(role.reviewed_gates)
    total = steps + gates + len(role.related_agents) + len(role.related_inputs)

    if total_graph_nodes == 0:
        coverage_pct = 0
    else:
        coverage_pct = _round_half_up((total / total_graph_nodes) * 100)

    return RoleStats(steps=steps, gates=gates, total=total, coverage_pct=coverage_pct)


ROLE_CATALOG: RoleCatalog = load_builtin_catalog(CatalogName.CONTENT_PRODUCTION)

ROLE_CATEGORIES: Mapping[RoleCategory, CategoryInfo] = build_category_table(ROLE_CATALOG)

ROLE_DEFINITIONS: tuple[RoleDefinition, ...] = ROLE_CATALOG.roles

# Quick lookup by role id
ROLE_MAP: Mapping[str, RoleDefinition] = build_role_map(ROLE_DEFINITIONS)
