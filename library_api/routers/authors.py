"""
Authors Router

Authors are not stored on their own: the list is the distinct values of
the book author column, and an author's page is the books with that exact
author name.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from library_api.dependencies import Catalog
from library_api.schemas import Book, Message
from library_api.services import StoreError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
)


@router.get(
    "",
    response_model=list[str],
    summary="List all authors",
    responses={
        404: {"model": Message, "description": "No authors are stored"},
        500: {"model": Message, "description": "The database failed"},
    },
)
def list_authors(catalog: Catalog) -> list[str]:
    """List each author name once."""
    try:
        authors = catalog.list_authors()
    except StoreError as exc:
        logger.error(f"Error retrieving authors: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving data",
        ) from exc

    if not authors:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="no authors are stored",
        )
    return authors


@router.get(
    "/{name}",
    response_model=list[Book],
    summary="Get books by author",
    responses={404: {"model": Message, "description": "No book by this author"}},
)
def get_author_books(name: str, catalog: Catalog) -> list[Book]:
    """Get every book whose author matches `name` exactly."""
    try:
        books = catalog.list_books_by_author(name)
    except StoreError as exc:
        logger.error(f"Error retrieving books by author: {exc}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="There is no book by this author",
        ) from exc

    if not books:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="There is no book by this author",
        )
    return books
