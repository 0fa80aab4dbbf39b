"""
Product services module.

All services are exported from this module to maintain backward compatibility.
"""
from .catalog_service import CatalogService

__all__ = [
    'CatalogService',
]
