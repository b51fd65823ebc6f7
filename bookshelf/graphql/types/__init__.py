"""
GraphQL Types Package

Type definitions for the records in the store, written with Strawberry's
decorator syntax.

Types defined here:
- BookType: GraphQL type "books", with its author
- AuthorType: GraphQL type "author", with their books
"""

from bookshelf.graphql.types.author import AuthorType, author_to_graphql
from bookshelf.graphql.types.book import BookType, book_to_graphql

__all__ = [
    "AuthorType",
    "author_to_graphql",
    "BookType",
    "book_to_graphql",
]
