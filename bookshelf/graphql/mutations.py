"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.

Both mutations append to the application's record store, so their effects
are visible to every later request until the process exits. Missing
required arguments are rejected by schema validation before a resolver
runs; the resolvers themselves cannot fail.
"""

import logging

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import GraphQLContext
from bookshelf.graphql.types.author import AuthorType, author_to_graphql
from bookshelf.graphql.types.book import BookType, book_to_graphql
from bookshelf.schemas import AuthorCreate, BookCreate

logger = logging.getLogger(__name__)


@strawberry.type(name="mutation", description="root mutation")
class Mutation:
    """
    GraphQL Mutation type containing all write operations.
    """

    @strawberry.mutation(description="add a book")
    def add_book(
        self,
        info: Info[GraphQLContext, None],
        name: str,
        author_id: int,
    ) -> BookType | None:
        """
        Create a new book.

        author_id is stored as given, even when no such author exists.
        """
        data = BookCreate(name=name, author_id=author_id)
        book = info.context.store.add_book(**data.model_dump())
        logger.info(f"Book created: id={book.id}")
        return book_to_graphql(book)

    @strawberry.mutation(description="add an author")
    def add_author(
        self,
        info: Info[GraphQLContext, None],
        name: str,
    ) -> AuthorType | None:
        """Create a new author."""
        data = AuthorCreate(name=name)
        author = info.context.store.add_author(**data.model_dump())
        logger.info(f"Author created: id={author.id}")
        return author_to_graphql(author)
