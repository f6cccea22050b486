"""Core utilities shared across roleatlas: errors and environment configuration."""
