"""
Books Router

CRUD endpoints for books, keyed by ISBN.

Status mapping:
- GET /books: 200 with the list, 404 when the catalog is empty,
  500 when the store fails
- GET /books/{isbn}: 200 with the book, 404 on any error
- POST /books: 201 echoing the body, 400 when the store rejects it
  (body validation failures are turned into 400 in main.py)
- DELETE /books/{isbn}: 204 whether or not the ISBN existed,
  400 when the store fails

Error bodies are {"message": ...}; see the HTTPException handler in main.py.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from library_api.dependencies import Catalog
from library_api.schemas import Book, BookCreate, Message
from library_api.services import BookNotFoundError, CatalogError, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/books",
    tags=["Books"],
)


@router.get(
    "",
    response_model=list[Book],
    summary="List all books",
    responses={
        404: {"model": Message, "description": "No books are stored"},
        500: {"model": Message, "description": "The database failed"},
    },
)
def list_books(catalog: Catalog) -> list[Book]:
    """List every book in the catalog."""
    try:
        books = catalog.list_books()
    except StoreError as exc:
        logger.error(f"Error retrieving books: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving data",
        ) from exc

    if not books:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="no books are stored",
        )
    return books


@router.get(
    "/{isbn}",
    response_model=Book,
    summary="Get a book by ISBN",
    responses={404: {"model": Message, "description": "Book not found"}},
)
def get_book(isbn: str, catalog: Catalog) -> Book:
    """
    Get a single book by ISBN.

    A missing ISBN and a failing store both answer 404; only the log
    tells them apart.
    """
    try:
        return catalog.get_book(isbn)
    except BookNotFoundError as exc:
        logger.info(str(exc))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="There is no book with this ISBN",
        ) from exc
    except StoreError as exc:
        logger.error(f"Error retrieving book: {exc}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="There is no book with this ISBN",
        ) from exc


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
    responses={400: {"model": Message, "description": "Invalid body or duplicate ISBN"}},
)
def create_book(book: BookCreate, catalog: Catalog) -> Book:
    """
    Add a book to the catalog and echo it back.

    There is no existence check before the insert: a duplicate ISBN is
    rejected by the primary key and reported as 400.
    """
    try:
        row_id = catalog.add_book(book)
    except CatalogError as exc:
        logger.warning(f"Book {book.isbn!r} not stored: {exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Duplicate entry",
        ) from exc

    logger.debug(f"Inserted book {book.isbn!r} (row id {row_id})")
    return book


@router.delete(
    "/{isbn}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses={400: {"model": Message, "description": "The delete failed"}},
)
def delete_book(isbn: str, catalog: Catalog) -> None:
    """Delete a book by ISBN. Deleting an unknown ISBN is a no-op."""
    try:
        deleted = catalog.delete_book(isbn)
    except CatalogError as exc:
        logger.error(f"Error deleting book: {exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No entity",
        ) from exc

    logger.debug(f"Deleted {deleted} row(s) for ISBN {isbn!r}")
