"""
Book Argument Schemas

Argument records for the book(id) query and the addBook mutation.
"""

from pydantic import BaseModel, Field


class BookLookup(BaseModel):
    """
    Arguments of the book(id: Int) query.

    id is optional in the GraphQL schema; a missing id matches nothing.
    """

    id: int | None = Field(
        default=None,
        description="Book ID to look up",
    )


class BookCreate(BaseModel):
    """
    Arguments of the addBook(name: String!, authorId: Int!) mutation.

    author_id is not checked against the existing authors.
    """

    name: str = Field(
        ...,
        description="Book title",
        examples=["The Two Towers"],
    )
    author_id: int = Field(
        ...,
        description="ID of the book's author",
    )
