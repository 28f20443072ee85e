"""
FastAPI Dependencies Module

The catalog is created once in the application lifespan and stored on
app.state. Routes receive it through dependency injection instead of a
module-level global, which keeps the handle's lifecycle tied to the
application and lets tests inject a catalog over SQLite.

Usage in routes:
    @router.get("/books")
    def list_books(catalog: Catalog):
        return catalog.list_books()
"""

from typing import Annotated

from fastapi import Depends, Request

from library_api.services import BookCatalog


def get_catalog(request: Request) -> BookCatalog:
    """Return the catalog owned by the running application."""
    return request.app.state.catalog


Catalog = Annotated[BookCatalog, Depends(get_catalog)]
