"""
pytest Fixtures for the Library Catalog API Tests

The application under test is built with create_app(catalog=...), so the
lifespan never tries to reach MySQL: each test gets its own in-memory
SQLite database with the `book` table created from the table metadata.

StaticPool keeps the single in-memory connection alive for the whole test.
Without it, every new connection would see an empty database.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

from library_api.main import create_app
from library_api.models import metadata
from library_api.schemas import Book
from library_api.services import BookCatalog


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create a SQLite in-memory engine with the book table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(bind=engine)

    yield engine

    metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def catalog(engine: Engine) -> BookCatalog:
    """Catalog over the test database."""
    return BookCatalog(engine)


@pytest.fixture
def client(catalog: BookCatalog) -> Generator[TestClient, None, None]:
    """
    Create a test client serving the test catalog.

    Entering the TestClient context runs the application lifespan.
    """
    app = create_app(catalog=catalog)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_store(engine: Engine) -> None:
    """Drop the book table so every catalog statement fails."""
    metadata.drop_all(bind=engine)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_book(catalog: BookCatalog) -> Book:
    """Store a sample book."""
    book = Book(
        isbn="9780451524935",
        title="1984",
        author="George Orwell",
        summary="A dystopian novel set in a totalitarian society.",
        pub_year=1949,
    )
    catalog.add_book(book)
    return book


@pytest.fixture
def multiple_books(catalog: BookCatalog) -> list[Book]:
    """Store three books by two authors."""
    books = [
        Book(
            isbn="9780451524935",
            title="1984",
            author="George Orwell",
            summary="A dystopian novel set in a totalitarian society.",
            pub_year=1949,
        ),
        Book(
            isbn="9780451526342",
            title="Animal Farm",
            author="George Orwell",
            summary="A farm is taken over by its overworked animals.",
            pub_year=1945,
        ),
        Book(
            isbn="9780141439518",
            title="Pride and Prejudice",
            author="Jane Austen",
            summary="Elizabeth Bennet and Mr. Darcy.",
            pub_year=1813,
        ),
    ]
    for book in books:
        catalog.add_book(book)
    return books
