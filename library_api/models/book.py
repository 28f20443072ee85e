"""
Book Table

The `book` table holds one row per catalogued book, keyed by ISBN.

WHY a Core Table instead of an ORM class?
=========================================
The data access layer issues one statement per operation and maps rows
straight into Pydantic schemas. There are no relationships, no identity
map and no unit of work to manage, so a plain Table is all that is needed
to build parameterized INSERT/SELECT/DELETE statements.

The schema itself is assumed to exist in production. The definition below
is also used by the test suite to create the table on SQLite.
"""

from sqlalchemy import Column, Integer, MetaData, String, Table, Text

metadata = MetaData()

book_table = Table(
    "book",
    metadata,
    Column("isbn", String(20), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("author", String(255), nullable=False, index=True),
    Column("summary", Text, nullable=False),
    Column("pub_year", Integer, nullable=False),
    comment="Books in the library catalog, keyed by ISBN",
)
