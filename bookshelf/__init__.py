"""
Bookshelf GraphQL Application Package

A small GraphQL API over two in-memory record sets: authors and books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- store.py: In-memory record store (the only data source)
- seed.py: Initial authors and books loaded at startup
- main.py: FastAPI application factory and configuration
- models/: Author and Book record types
- schemas/: Pydantic argument records for GraphQL operations
- graphql/: Strawberry schema, types, queries and mutations
"""

__version__ = "0.1.0"
