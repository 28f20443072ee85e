"""
Services Package

Data access for the library catalog.

- catalog.py: BookCatalog, parameterized SQL over the book table
- errors.py: Tagged errors raised by the catalog
"""

from library_api.services.catalog import BookCatalog
from library_api.services.errors import (
    BookNotFoundError,
    CatalogError,
    DatabaseUnavailableError,
    StoreError,
)

__all__ = [
    "BookCatalog",
    "CatalogError",
    "BookNotFoundError",
    "StoreError",
    "DatabaseUnavailableError",
]
