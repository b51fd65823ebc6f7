"""
GraphQL Book Type

Defines the "books" type for GraphQL queries.
"""

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.types.author import AuthorType, author_to_graphql
from bookshelf.models import Book


@strawberry.type(name="books", description="this represents book by an author")
class BookType:
    """
    GraphQL type representing a book.

    Maps to the Book record. author is resolved on demand from the store.
    """

    id: int
    name: str
    author_id: int

    @strawberry.field
    def author(self, info: Info[GraphQLContext, None]) -> AuthorType | None:
        """The author referenced by authorId, or null for a dangling id."""
        author = info.context.store.get_author(self.author_id)
        if author is None:
            return None
        return author_to_graphql(author)


def book_to_graphql(book: Book) -> BookType:
    """Convert a Book record to GraphQL BookType."""
    return BookType(id=book.id, name=book.name, author_id=book.author_id)
