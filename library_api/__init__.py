"""
Library Catalog API Package

A small REST service over a single `book` table: list, fetch, create and
delete books, list authors and fetch the books written by an author.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Engine creation and the fail-fast startup connection
- main.py: FastAPI application factory and lifespan
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy Core table definitions
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Data access (the book catalog)
"""

__version__ = "0.1.0"
