"""
Argument Schemas Package

Pydantic models describing the arguments of each GraphQL operation.

Strawberry hands resolvers loose keyword arguments; resolvers parse them
into these records so the store only ever sees typed values.
"""

from bookshelf.schemas.author import AuthorCreate, AuthorLookup
from bookshelf.schemas.book import BookCreate, BookLookup

__all__ = [
    "AuthorCreate",
    "AuthorLookup",
    "BookCreate",
    "BookLookup",
]
