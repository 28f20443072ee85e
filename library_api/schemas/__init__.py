"""
Pydantic Schemas Package

Request/response models for the API.

- book.py: Book (stored row, every response) and BookCreate (POST body)
- message.py: Message, the body of every error response
"""

from library_api.schemas.book import Book, BookCreate
from library_api.schemas.message import Message

__all__ = [
    "Book",
    "BookCreate",
    "Message",
]
