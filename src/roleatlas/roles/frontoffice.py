"""
Front office role catalog.

Covers marketing, sales, service, customer success, RevOps, and governance
across customer-facing operations: 18 roles in the same five categories,
relabelled Strategy, Revenue, Governance, Operations and Growth.
"""

from __future__ import annotations

from collections.abc import Mapping

from roleatlas.core.environment import CatalogName

from .catalog import build_category_table, build_role_map, compute_role_stats, get_role_node_ids
from .ir import CategoryInfo, RoleCatalog, RoleCategory, RoleDefinition
from .loader import load_builtin_catalog

ROLE_CATALOG_FRONTOFFICE: RoleCatalog = load_builtin_catalog(CatalogName.FRONT_OFFICE)

ROLE_CATEGORIES_FRONTOFFICE: Mapping[RoleCategory, CategoryInfo] = build_category_table(
    ROLE_CATALOG_FRONTOFFICE
)

ROLE_DEFINITIONS_FRONTOFFICE: tuple[RoleDefinition, ...] = ROLE_CATALOG_FRONTOFFICE.roles

ROLE_MAP_FRONTOFFICE: Mapping[str, RoleDefinition] = build_role_map(ROLE_DEFINITIONS_FRONTOFFICE)

__all__ = [
    "ROLE_CATALOG_FRONTOFFICE",
    "ROLE_CATEGORIES_FRONTOFFICE",
    "ROLE_DEFINITIONS_FRONTOFFICE",
    "ROLE_MAP_FRONTOFFICE",
    "compute_role_stats",
    "get_role_node_ids",
]
