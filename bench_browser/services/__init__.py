"""
Service layer: loading the record source and owning the session catalog.
"""

from .catalog_service import CatalogService
from .source_loader import load_records

__all__ = ["CatalogService", "load_records"]
