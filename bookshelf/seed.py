"""
Seed Data

The authors and books every seeded store starts with.

The ids are written out explicitly and are sequential, so records appended
later continue the numbering (the next author is 4, the next book is 9).
"""

from bookshelf.models import Author, Book

AUTHORS_DATA = [
    {"id": 1, "name": "J. K. Rowling"},
    {"id": 2, "name": "J. R. R. Tolkien"},
    {"id": 3, "name": "Brent Weeks"},
]

BOOKS_DATA = [
    {"id": 1, "name": "Harry Potter and the Chamber of Secrets", "author_id": 1},
    {"id": 2, "name": "Harry Potter and the Prisoner of Azkaban", "author_id": 1},
    {"id": 3, "name": "Harry Potter and the Goblet of Fire", "author_id": 1},
    {"id": 4, "name": "The Fellowship of the Ring", "author_id": 2},
    {"id": 5, "name": "The Two Towers", "author_id": 2},
    {"id": 6, "name": "The Return of the King", "author_id": 2},
    {"id": 7, "name": "The Way of Shadows", "author_id": 3},
    {"id": 8, "name": "Beyond the Shadows", "author_id": 3},
]


def seed_authors() -> list[Author]:
    """Create the sample authors."""
    return [Author(**data) for data in AUTHORS_DATA]


def seed_books() -> list[Book]:
    """Create the sample books."""
    return [Book(**data) for data in BOOKS_DATA]
