"""
Author Argument Schemas

Argument records for the author(id) query and the addAuthor mutation.
"""

from pydantic import BaseModel, Field


class AuthorLookup(BaseModel):
    """
    Arguments of the author(id: Int) query.

    id is optional in the GraphQL schema; a missing id matches nothing.
    """

    id: int | None = Field(
        default=None,
        description="Author ID to look up",
    )


class AuthorCreate(BaseModel):
    """
    Arguments of the addAuthor(name: String!) mutation.

    Usage in a resolver:
        data = AuthorCreate(name=name)
        author = store.add_author(**data.model_dump())
    """

    name: str = Field(
        ...,
        description="Author's full name",
        examples=["J. K. Rowling"],
    )
