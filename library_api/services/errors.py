"""
Catalog Errors

Every error raised by the data access layer is a CatalogError carrying the
name of the operation that failed. Callers tell the cases apart by type:

- BookNotFoundError: a point lookup matched zero rows
- StoreError: the statement itself failed (connection lost, constraint
  violated, undecodable row, ...)
- DatabaseUnavailableError: the startup connection or liveness check failed
"""


class CatalogError(Exception):
    """Base class for catalog failures."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


class BookNotFoundError(CatalogError):
    """Raised when no book matches the requested ISBN."""

    def __init__(self, isbn: str) -> None:
        self.isbn = isbn
        super().__init__("get_book", f"no book with ISBN {isbn!r}")


class StoreError(CatalogError):
    """Raised when the database rejects or fails a statement."""


class DatabaseUnavailableError(CatalogError):
    """Raised when the database cannot be reached at startup."""
