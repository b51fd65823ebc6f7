"""
Book Model

Represents a book held by the record store.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """
    Book record.

    author_id is a plain reference into the author sequence. It is not
    checked on creation, so it may point at an author that does not exist.

    Attributes:
        id: Sequential identifier, unique among books
        name: Book title
        author_id: Id of the book's author
    """

    id: int
    name: str
    author_id: int
