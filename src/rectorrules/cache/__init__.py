"""Process-lifetime cache of the rules catalog."""

from .catalog import CacheError, CacheStatus, CatalogCache, CatalogSnapshot

__all__ = ["CacheError", "CacheStatus", "CatalogCache", "CatalogSnapshot"]
