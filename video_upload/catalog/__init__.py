"""
Catalog Package

Static lookup tables loaded from JSON resources.
"""

from video_upload.catalog.category_catalog import (
    Category,
    CategoryCatalog,
    clear_catalog_cache,
    get_category_catalog,
)

__all__ = [
    "Category",
    "CategoryCatalog",
    "clear_catalog_cache",
    "get_category_catalog",
]
