"""CLI commands package."""

# Import all command modules to make them available
from . import cache, catalog, models

__all__ = ["catalog", "cache", "models"]
