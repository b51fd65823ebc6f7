"""
GraphQL Author Type

Defines the "author" type for GraphQL queries.

BookType is referenced lazily because the book module imports this one.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.models import Author

if TYPE_CHECKING:
    from bookshelf.graphql.types.book import BookType


@strawberry.type(name="author", description="this represents author of a book")
class AuthorType:
    """
    GraphQL type representing a book author.

    Maps to the Author record. books is resolved on demand from the store.
    """

    id: int
    name: str

    @strawberry.field
    def books(
        self,
        info: Info[GraphQLContext, None],
    ) -> list[
        Annotated["BookType", strawberry.lazy("bookshelf.graphql.types.book")] | None
    ] | None:
        """Books whose authorId is this author's id; empty when none match."""
        from bookshelf.graphql.types.book import book_to_graphql

        return [
            book_to_graphql(b)
            for b in info.context.store.books_by_author(self.id)
        ]


def author_to_graphql(author: Author) -> AuthorType:
    """Convert an Author record to GraphQL AuthorType."""
    return AuthorType(id=author.id, name=author.name)
