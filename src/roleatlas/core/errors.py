"""
Error types for roleatlas catalog and graph loading.
"""


class RoleAtlasError(Exception):
    """Base exception for all roleatlas errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CatalogError(RoleAtlasError):
    """
    Raised when a role catalog cannot be loaded.

    Examples:
    - Missing or empty catalog file
    - Invalid YAML
    - Content that does not match the role schema
    """

    pass


class DuplicateRoleIdError(CatalogError):
    """Raised when two role definitions share the same id."""

    def __init__(self, role_id: str):
        self.role_id = role_id
        super().__init__(f"Duplicate role id: '{role_id}'")


class GraphError(RoleAtlasError):
    """
    Raised when a pipeline graph file cannot be loaded.

    Examples:
    - Missing file or unsupported suffix
    - Invalid JSON/YAML
    - Nodes or links that do not match the graph schema
    """

    pass
