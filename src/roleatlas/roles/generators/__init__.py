"""Output generators for role catalogs."""
