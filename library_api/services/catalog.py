"""
Book Catalog

CRUD over the `book` table.

Every operation is one statement built with SQLAlchemy Core, so every
caller-supplied value travels as a bound parameter and is never pasted
into SQL text. Multi-row reads walk the result one row at a time and map
each row into a Book schema.

Failures are re-raised as catalog errors tagged with the operation name:
BookNotFoundError for an empty point lookup, StoreError for anything the
database itself reports.
"""

import logging
from collections.abc import Iterable

from pydantic import ValidationError
from sqlalchemy import Engine, Row, delete, insert, select, text
from sqlalchemy.exc import SQLAlchemyError

from library_api.models import book_table
from library_api.schemas import Book
from library_api.services.errors import BookNotFoundError, StoreError

logger = logging.getLogger(__name__)


def _to_book(row: Row) -> Book:
    return Book.model_validate(row._asdict())


def _to_books(operation: str, rows: Iterable[Row]) -> list[Book]:
    books = []
    for row in rows:
        try:
            books.append(_to_book(row))
        except ValidationError as exc:
            raise StoreError(operation, f"cannot decode row: {exc}") from exc
    return books


class BookCatalog:
    """
    Typed access to the book table.

    The catalog owns the Engine it is built with. The engine's pool is
    thread-safe, so one catalog serves all concurrent requests.

    Example:
        catalog = BookCatalog(engine)
        catalog.add_book(Book(isbn="123", title="T", author="A",
                              summary="S", pub_year=2020))
        catalog.get_book("123")
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def ping(self) -> None:
        """
        Check that the database answers.

        Raises:
            StoreError: If no connection can be made
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StoreError("ping", str(exc)) from exc

    def list_books(self) -> list[Book]:
        """Return every book, in the order the database yields them."""
        stmt = select(book_table)
        try:
            with self._engine.connect() as conn:
                return _to_books("list_books", conn.execute(stmt))
        except SQLAlchemyError as exc:
            raise StoreError("list_books", str(exc)) from exc

    def get_book(self, isbn: str) -> Book:
        """
        Fetch one book by ISBN.

        Raises:
            BookNotFoundError: If no row has this ISBN
            StoreError: If the query fails
        """
        stmt = select(book_table).where(book_table.c.isbn == isbn)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(stmt).first()
        except SQLAlchemyError as exc:
            raise StoreError("get_book", f"{isbn!r}: {exc}") from exc

        if row is None:
            raise BookNotFoundError(isbn)

        try:
            return _to_book(row)
        except ValidationError as exc:
            raise StoreError("get_book", f"{isbn!r}: cannot decode row: {exc}") from exc

    def add_book(self, book: Book) -> int:
        """
        Insert a book.

        ISBN uniqueness is left to the primary key: inserting an ISBN that
        already exists fails with StoreError and leaves the stored row as is.

        Returns:
            The row id reported by the database for the insert

        Raises:
            StoreError: If the insert is rejected or the database fails
        """
        stmt = insert(book_table).values(**book.model_dump())
        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError("add_book", str(exc)) from exc

        return result.lastrowid or 0

    def delete_book(self, isbn: str) -> int:
        """
        Delete the book with this ISBN.

        Deleting an ISBN that is not stored is not an error.

        Returns:
            Number of rows removed (0 or 1)

        Raises:
            StoreError: If the DELETE statement fails
        """
        stmt = delete(book_table).where(book_table.c.isbn == isbn)
        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError("delete_book", f"{isbn!r}: {exc}") from exc

        return result.rowcount

    def list_authors(self) -> list[str]:
        """Return each distinct author name once."""
        stmt = select(book_table.c.author).distinct()
        try:
            with self._engine.connect() as conn:
                return [author for author in conn.execute(stmt).scalars()]
        except SQLAlchemyError as exc:
            raise StoreError("list_authors", str(exc)) from exc

    def list_books_by_author(self, name: str) -> list[Book]:
        """
        Return the books whose author is exactly `name`.

        Case sensitivity follows the column collation of the database.
        """
        stmt = select(book_table).where(book_table.c.author == name)
        try:
            with self._engine.connect() as conn:
                return _to_books("list_books_by_author", conn.execute(stmt))
        except SQLAlchemyError as exc:
            raise StoreError("list_books_by_author", f"{name!r}: {exc}") from exc
