"""
SQLAlchemy Models Package

The catalog stores everything in a single table, `book`. Authors are not
a table of their own: they are derived with SELECT DISTINCT over the
author column.

Usage:
    from library_api.models import book_table, metadata
"""

from library_api.models.book import book_table, metadata

__all__ = [
    "book_table",
    "metadata",
]
