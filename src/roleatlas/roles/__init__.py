"""
Role catalogs.

Organizational roles annotated with how AI adoption changes their work,
plus references into the pipeline graph the roles operate on.
"""

from .catalog import (
    ROLE_CATALOG,
    ROLE_CATEGORIES,
    ROLE_DEFINITIONS,
    ROLE_MAP,
    build_role_map,
    compute_role_stats,
    get_role_node_ids,
)
from .ir import (
    CategoryInfo,
    JourneyStage,
    MaturityStage,
    NodeJourney,
    RoleCatalog,
    RoleCategory,
    RoleDefinition,
    RoleNarrative,
    RoleStats,
    StageOverview,
    StageOverviews,
)

__all__ = [
    "ROLE_CATALOG",
    "ROLE_CATEGORIES",
    "ROLE_DEFINITIONS",
    "ROLE_MAP",
    "build_role_map",
    "compute_role_stats",
    "get_role_node_ids",
    "CategoryInfo",
    "JourneyStage",
    "MaturityStage",
    "NodeJourney",
    "RoleCatalog",
    "RoleCategory",
    "RoleDefinition",
    "RoleNarrative",
    "RoleStats",
    "StageOverview",
    "StageOverviews",
]
