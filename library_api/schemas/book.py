"""
Book Pydantic Schemas

The JSON shape is the same in and out:

    {"isbn": "...", "title": "...", "author": "...", "summary": "...", "pub_year": 2020}

Schema Naming Convention:
- Book: a stored row, as returned by the catalog and every response. It
  accepts whatever the table holds.
- BookCreate: the POST /books body. All five fields are required, strings
  must not be empty, and pub_year must be a JSON integer ("2020" and
  2020.5 are rejected rather than coerced).
"""

from pydantic import BaseModel, ConfigDict, Field

BOOK_EXAMPLE = {
    "isbn": "9780451524935",
    "title": "1984",
    "author": "George Orwell",
    "summary": "A dystopian novel set in a totalitarian society.",
    "pub_year": 1949,
}


class Book(BaseModel):
    """A catalogued book, identified by its ISBN."""

    model_config = ConfigDict(json_schema_extra={"examples": [BOOK_EXAMPLE]})

    isbn: str = Field(..., description="International Standard Book Number (primary key)")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name, free text")
    summary: str = Field(..., description="Short description of the book")
    pub_year: int = Field(..., description="Year of publication")


class BookCreate(Book):
    """
    Schema for adding a book.

    Only presence and type are checked; length limits are left to the
    database.
    """

    isbn: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    pub_year: int = Field(..., strict=True)
