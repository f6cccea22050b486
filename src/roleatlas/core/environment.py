"""
Environment configuration for roleatlas.

Environment variables:
    ROLEATLAS_CATALOG: Built-in catalog used when none is given explicitly.
        Values: content-production (default), front-office.
    ROLEATLAS_LOG_LEVEL: Logging level for the CLI (default: WARNING).

Usage:
    from roleatlas.core.environment import get_default_catalog

    name = get_default_catalog()  # CatalogName.CONTENT_PRODUCTION
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

logger = logging.getLogger(__name__)


class CatalogName(StrEnum):
    """Built-in role catalogs."""

    CONTENT_PRODUCTION = "content-production"
    FRONT_OFFICE = "front-office"


CATALOG_ENV_VAR = "ROLEATLAS_CATALOG"
LOG_LEVEL_ENV_VAR = "ROLEATLAS_LOG_LEVEL"

_DEFAULT_CATALOG = CatalogName.CONTENT_PRODUCTION
_DEFAULT_LOG_LEVEL = "WARNING"

_CATALOG_ALIASES = {
    "content-production": CatalogName.CONTENT_PRODUCTION,
    "content_production": CatalogName.CONTENT_PRODUCTION,
    "content": CatalogName.CONTENT_PRODUCTION,
    "front-office": CatalogName.FRONT_OFFICE,
    "front_office": CatalogName.FRONT_OFFICE,
    "frontoffice": CatalogName.FRONT_OFFICE,
    "front": CatalogName.FRONT_OFFICE,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_catalog_name(value: str) -> CatalogName | None:
    """Resolve a catalog name or alias. Returns None if unknown."""
    return _CATALOG_ALIASES.get(value.lower().strip())


def get_default_catalog() -> CatalogName:
    """Get the default built-in catalog from ROLEATLAS_CATALOG.

    Returns:
        CatalogName: The configured catalog. Defaults to content-production
        if the variable is unset or holds an unknown value.
    """
    env_value = os.environ.get(CATALOG_ENV_VAR, "").strip()
    if not env_value:
        return _DEFAULT_CATALOG

    name = parse_catalog_name(env_value)
    if name is None:
        logger.warning(
            "Unknown %s value '%s'. Defaulting to '%s'.",
            CATALOG_ENV_VAR,
            env_value,
            _DEFAULT_CATALOG.value,
        )
        return _DEFAULT_CATALOG
    return name


def get_log_level() -> str:
    """Get the logging level name from ROLEATLAS_LOG_LEVEL."""
    level = os.environ.get(LOG_LEVEL_ENV_VAR, _DEFAULT_LOG_LEVEL).upper().strip()
    if level not in logging.getLevelNamesMapping():
        return _DEFAULT_LOG_LEVEL
    return level


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for command-line use."""
    levels = logging.getLevelNamesMapping()
    level_name = (level or get_log_level()).upper().strip()
    logging.basicConfig(
        level=levels.get(level_name, levels[_DEFAULT_LOG_LEVEL]),
        format=LOG_FORMAT,
    )
