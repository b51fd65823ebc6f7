"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Each resolver reads from the record store found on the context.
"""

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.types.author import AuthorType, author_to_graphql
from bookshelf.graphql.types.book import BookType, book_to_graphql
from bookshelf.schemas import AuthorLookup, BookLookup


def unset_to_none(value: int | None) -> int | None:
    """Map an argument the client left out (UNSET) to None."""
    return None if value is strawberry.UNSET else value


@strawberry.type(name="Query", description="root query")
class Query:
    """
    GraphQL Query type containing all read operations.

    The id arguments default to UNSET so the schema declares them as
    optional without a default value. A query without an id returns null.
    """

    @strawberry.field(description="a single book")
    def book(
        self,
        info: Info[GraphQLContext, None],
        id: int | None = strawberry.UNSET,
    ) -> BookType | None:
        """
        Get a single book by its ID.

        Args:
            id: Book ID

        Returns:
            Book if found, None otherwise
        """
        args = BookLookup(id=unset_to_none(id))
        book = info.context.store.get_book(args.id)
        if book is None:
            return None
        return book_to_graphql(book)

    @strawberry.field(description="list of all books")
    def books(self, info: Info[GraphQLContext, None]) -> list[BookType | None] | None:
        """Get every book in insertion order."""
        return [book_to_graphql(b) for b in info.context.store.books]

    @strawberry.field(description="a single author")
    def author(
        self,
        info: Info[GraphQLContext, None],
        id: int | None = strawberry.UNSET,
    ) -> AuthorType | None:
        """
        Get a single author by their ID.

        Args:
            id: Author ID

        Returns:
            Author if found, None otherwise
        """
        args = AuthorLookup(id=unset_to_none(id))
        author = info.context.store.get_author(args.id)
        if author is None:
            return None
        return author_to_graphql(author)

    @strawberry.field(description="list of all authors")
    def authors(
        self, info: Info[GraphQLContext, None]
    ) -> list[AuthorType | None] | None:
        """Get every author in insertion order."""
        return [author_to_graphql(a) for a in info.context.store.authors]
