"""
Author Model

Represents an author held by the record store.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """
    Author record.

    Records are immutable: once appended to the store an author is never
    updated or removed.

    Attributes:
        id: Sequential identifier, unique among authors
        name: Author's full name
    """

    id: int
    name: str
