"""
Test Suite for the Library Catalog API

Test Organization:
- conftest.py: Shared fixtures (SQLite engine, catalog, client, sample data)
- test_catalog.py: BookCatalog against a real (SQLite) database
- test_books.py: Tests for /books endpoints
- test_authors.py: Tests for /authors endpoints
- test_app.py: Lifespan, health check and error rendering
- test_config.py: Settings and database configuration

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
